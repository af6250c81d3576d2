"""Data model for todo records.

``TodoData`` is the caller-supplied input: a frozen value describing
what a todo should contain. ``Todo`` is the stored record built from it
by the store, which is the only place ids are assigned.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Final

from todostore.core.errors import InvalidTodoError

DEFAULT_CATEGORY: Final[str] = "미분류"


def validate_tag(tag: Any) -> None:
    """Raise ``InvalidTodoError`` unless ``tag`` is a string."""
    if not isinstance(tag, str):
        raise InvalidTodoError("tags", f"tag {tag!r} is not a string")


def validate_tags(tags: Any) -> None:
    """Raise ``InvalidTodoError`` unless ``tags`` is a collection of strings."""
    # A bare string is iterable but would be split into characters.
    if isinstance(tags, (str, bytes)) or not isinstance(tags, Iterable):
        raise InvalidTodoError("tags", f"expected a collection of strings, got {type(tags).__name__}")
    for tag in tags:
        validate_tag(tag)


@dataclass(frozen=True)
class TodoData:
    """Input used to create or fully replace a todo.

    Parameters
    ----------
    content:
        The task description. Required and must not be blank.
    complete:
        Whether the task is done.
    category:
        Grouping label. ``None`` or an empty string selects the store's
        default category.
    tags:
        Tag names. Duplicates collapse once stored.
    """

    content: str
    complete: bool = False
    category: str | None = None
    tags: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any iterable of tags but keep the frozen value hashable.
        tags = self.tags
        if isinstance(tags, Iterable) and not isinstance(tags, (tuple, str, bytes)):
            object.__setattr__(self, "tags", tuple(tags))

    def validate(self) -> None:
        """Check that the data can be turned into a todo.

        Raises
        ------
        InvalidTodoError
            If ``content`` is missing or blank, or any field has the
            wrong type.
        """
        if not isinstance(self.content, str):
            raise InvalidTodoError("content", f"expected a string, got {type(self.content).__name__}")
        if not self.content.strip():
            raise InvalidTodoError("content", "must not be empty")
        if not isinstance(self.complete, bool):
            raise InvalidTodoError("complete", f"expected a bool, got {type(self.complete).__name__}")
        if self.category is not None and not isinstance(self.category, str):
            raise InvalidTodoError("category", f"expected a string, got {type(self.category).__name__}")
        validate_tags(self.tags)


@dataclass
class Todo:
    """A stored task record.

    Fields other than ``id`` are mutable; the store changes them in place
    for tag operations. ``id`` cannot be reassigned once set.
    """

    id: int
    content: str
    complete: bool = False
    category: str = DEFAULT_CATEGORY
    tags: set[str] = field(default_factory=set)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Todo.id is read-only once assigned")
        object.__setattr__(self, name, value)

    @classmethod
    def from_data(
        cls,
        todo_id: int,
        data: TodoData,
        default_category: str = DEFAULT_CATEGORY,
    ) -> "Todo":
        """Build a record from ``data`` applying the defaulting rules.

        An absent or empty category becomes ``default_category`` and tags
        are copied into a fresh set.
        """
        return cls(
            id=todo_id,
            content=data.content,
            complete=data.complete,
            category=data.category or default_category,
            tags=set(data.tags),
        )
