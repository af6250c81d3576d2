"""todostore — in-memory todo collection with create, read, update and delete.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import todostore

    store = todostore.TodoStore()
    todo = store.add(todostore.TodoData(content="Buy milk", tags=("home",)))
    todo.category
    '미분류'

    store.delete_tag_by_id(todo.id, ["home", "work"])
    Traceback (most recent call last):
    ...
    todostore.core.errors.TagNotFoundError: Todo 1 has no tag(s) 'work'.

    todostore.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from todostore.core.errors import (
    InvalidTodoError,
    TagNotFoundError,
    TodoNotFoundError,
    TodoStoreError,
)
from todostore.core.models import DEFAULT_CATEGORY, Todo, TodoData
from todostore.core.store import TodoStore

__all__ = [
    "__version__",
    "DEFAULT_CATEGORY",
    "Todo",
    "TodoData",
    "TodoStore",
    "TodoStoreError",
    "TodoNotFoundError",
    "TagNotFoundError",
    "InvalidTodoError",
]
