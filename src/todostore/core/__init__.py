"""Core domain logic: the todo record, its input type, errors and the store.

Submodules in core/ should not import from serializer/, script/ or cli/.
"""
from __future__ import annotations

from todostore.core.errors import (
    InvalidTodoError,
    TagNotFoundError,
    TodoNotFoundError,
    TodoStoreError,
)
from todostore.core.models import DEFAULT_CATEGORY, Todo, TodoData
from todostore.core.store import TodoStore

__all__ = [
    "DEFAULT_CATEGORY",
    "Todo",
    "TodoData",
    "TodoStore",
    "TodoStoreError",
    "TodoNotFoundError",
    "TagNotFoundError",
    "InvalidTodoError",
]
