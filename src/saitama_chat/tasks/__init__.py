"""
Task subsystem.

Components:
- task_models.py: task variants (Todo, Deadline, Event) and TaskKind
- task_store.py: SQLite-backed storage of the ordered task list
"""
