"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskList, actions, filter/sort enums)
- reducer.py: pure reducer producing the next TaskList for each action
- views.py: derived view (sort, filter, items-left counter)
- task_store.py: TodoStore, the stateful owner that hydrates and flushes
"""
