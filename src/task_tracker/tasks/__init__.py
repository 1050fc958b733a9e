"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskId)
- task_errors.py: error taxonomy (CapacityExceeded, NotFound, Forbidden)
- task_registry.py: bounded in-memory registry
- task_api.py: contract-style helpers returning {"value": ...} / {"error": code}
"""
