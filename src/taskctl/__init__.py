"""taskctl: a small local task tracker with a JSON-backed store."""

__version__ = "1.1.0"
