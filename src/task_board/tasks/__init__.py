"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskList) + startup seed
- task_errors.py: rejection types raised by writes
- task_validator.py: rules a candidate must pass before it overwrites a task
- task_store.py: in-memory collection with read / update / batch_update
- task_api.py: async facade for callers that expect awaitables
"""
