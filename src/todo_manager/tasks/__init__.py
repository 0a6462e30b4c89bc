"""
Task subsystem.

Components:
- task_models.py: data structures (BasicTask, ImportantTask) and rendering
- task_codec.py: flat text file persistence (one task per line)
- task_store.py: ordered in-memory store with index-based mutation
"""
