"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskCounts)
- task_store.py: in-memory task list mirrored to a key-value store snapshot
"""
