"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority) and input validation helpers
- errors.py: exception hierarchy shared by the store and the front-end
- task_store.py: JSON-file-backed ordered store (load/save + mutations)
- task_views.py: pure sorting helpers used by list views
"""
