"""Domain layer for maid.

Pure task-forest logic with no I/O:

- shared: Result monad used by the service layer
- task: forest model, priority resolution, weighted roll, reorder
"""
