"""Error types raised by the todo store.

Every error carries the offending values as attributes so that outer
layers (the script runner, the CLI) can report them without parsing
the message text.
"""
from __future__ import annotations

from collections.abc import Iterable


class TodoStoreError(Exception):
    """Base class for all errors raised by ``TodoStore``."""


class TodoNotFoundError(TodoStoreError, KeyError):
    """Raised when an operation references an id absent from the store.

    Parameters
    ----------
    todo_id:
        The id that was looked up.
    """

    def __init__(self, todo_id: int) -> None:
        self.todo_id = todo_id
        super().__init__(f"No todo with id {todo_id!r} exists in the store.")

    # KeyError.__str__ would quote the message; keep it readable.
    def __str__(self) -> str:
        return str(self.args[0])


class TagNotFoundError(TodoStoreError, LookupError):
    """Raised when tags named by a tag operation are absent from a todo.

    Parameters
    ----------
    todo_id:
        The id of the todo whose tag set was searched.
    tags:
        The tag names that were not found, in the order they were
        requested.
    """

    def __init__(self, todo_id: int, tags: Iterable[str]) -> None:
        self.todo_id = todo_id
        self.tags: tuple[str, ...] = tuple(tags)
        missing = ", ".join(repr(tag) for tag in self.tags)
        super().__init__(f"Todo {todo_id!r} has no tag(s) {missing}.")


class InvalidTodoError(TodoStoreError, ValueError):
    """Raised when todo input is missing a required value or is malformed.

    Parameters
    ----------
    field:
        Name of the offending input field, e.g. ``"content"``.
    reason:
        Human-readable description of the problem.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")
