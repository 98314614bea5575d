"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskPriority)
- seed.py: default task list used at startup
- task_store.py: in-memory ordered store (append-only)
- task_report.py: pure aggregations (counts by status, high-priority checks)
- task_api.py: async creation helpers ("append, then report")
"""
