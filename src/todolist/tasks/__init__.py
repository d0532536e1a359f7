"""
Task subsystem.

Components:
- task_models.py: data structures (Task, ServerTask, ServerTasks)
- task_store.py: SQLite-backed storage with an async facade
- fetch_status.py: persisted "initial sync done" flag
- interactor.py: mediator between sources, store and the presenter
"""
