"""
Task subsystem.

Components:
- task_models.py: data structures (Task, ListOrder)
- task_store.py: JSON-backed storage + query/update helpers
- undo_buffer.py: single-slot buffer for the last removed task
- matching.py: Levenshtein closest-match lookup used by done/edit
- task_api.py: done/undo transitions spanning store and buffer
"""
