"""
todolist: to-do list tasks interactor.

Components:
- core/: ports (Protocols) and the error hierarchy
- tasks/: task models, SQLite store, fetch-status flag, the interactor
- remote/: HTTP and offline remote task sources
- cli/: console presenter and composition root
"""
