"""In-memory todo collection with CRUD operations.

``TodoStore`` owns a mapping from integer id to ``Todo`` and the counter
used to allocate ids. Ids start at 1, only increase, and are never
reissued, not even after ``delete_all``.

Example
-------
::

    from todostore import TodoData, TodoStore

    store = TodoStore()
    todo = store.add(TodoData(content="Write report", tags=("work",)))
    store.update_tag_by_id(todo.id, "work", "urgent")
    store.find_by_id(todo.id).tags
    {'urgent'}
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from todostore.core.errors import TagNotFoundError, TodoNotFoundError
from todostore.core.models import DEFAULT_CATEGORY, Todo, TodoData, validate_tag, validate_tags

logger = logging.getLogger(__name__)


class TodoStore:
    """Collection of todo records keyed by store-assigned id.

    Parameters
    ----------
    default_category:
        Category given to todos created or replaced without one.
    """

    def __init__(self, default_category: str = DEFAULT_CATEGORY) -> None:
        self._default_category = default_category
        self._items: dict[int, Todo] = {}
        self._last_id = 0

    @property
    def last_id(self) -> int:
        """The most recently issued id, or ``0`` if none was issued yet."""
        return self._last_id

    @property
    def default_category(self) -> str:
        """Category assigned when input data leaves it absent or empty."""
        return self._default_category

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def add(self, data: TodoData) -> Todo:
        """Create a todo from ``data`` and store it under a fresh id.

        Parameters
        ----------
        data:
            Content and optional state of the new todo.

        Returns
        -------
        Todo
            The stored record. Its ``id`` is the newly issued id.

        Raises
        ------
        InvalidTodoError
            If ``data`` has blank content or malformed fields. No id is
            consumed in that case.
        """
        data.validate()
        self._last_id += 1
        todo = Todo.from_data(self._last_id, data, self._default_category)
        self._items[todo.id] = todo
        logger.debug("Added todo %r in category %r", todo.id, todo.category)
        return todo

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def find_all(self) -> list[Todo]:
        """Return every stored todo in insertion order."""
        return list(self._items.values())

    def find_by_id(self, todo_id: int) -> Todo:
        """Return the todo stored under ``todo_id``.

        Raises
        ------
        TodoNotFoundError
            If no todo has that id.
        """
        try:
            return self._items[todo_id]
        except KeyError:
            raise TodoNotFoundError(todo_id) from None

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update(self, todo_id: int, data: TodoData) -> Todo:
        """Replace the todo stored under ``todo_id`` with one built from ``data``.

        Every field is replaced, defaults included; nothing is merged from
        the previous record. The id counter is not touched.

        Raises
        ------
        TodoNotFoundError
            If no todo has that id. Missing ids are never inserted.
        InvalidTodoError
            If ``data`` has blank content or malformed fields.
        """
        if todo_id not in self._items:
            raise TodoNotFoundError(todo_id)
        data.validate()
        todo = Todo.from_data(todo_id, data, self._default_category)
        self._items[todo_id] = todo
        logger.debug("Replaced todo %r", todo_id)
        return todo

    def update_tag_by_id(self, todo_id: int, before_tag: str, after_tag: str) -> Todo:
        """Rename ``before_tag`` to ``after_tag`` on the todo ``todo_id``.

        If ``after_tag`` is already present the set keeps a single copy.

        Raises
        ------
        TodoNotFoundError
            If no todo has that id.
        TagNotFoundError
            If ``before_tag`` is not one of the todo's tags.
        InvalidTodoError
            If either tag is not a string. The todo is left unchanged.
        """
        validate_tag(before_tag)
        validate_tag(after_tag)
        todo = self.find_by_id(todo_id)
        if before_tag not in todo.tags:
            raise TagNotFoundError(todo_id, [before_tag])
        todo.tags.discard(before_tag)
        todo.tags.add(after_tag)
        logger.debug("Renamed tag %r -> %r on todo %r", before_tag, after_tag, todo_id)
        return todo

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete_all(self) -> None:
        """Remove every todo. Issued ids stay retired."""
        count = len(self._items)
        self._items.clear()
        logger.debug("Deleted all %d todo(s)", count)

    def delete_by_id(self, todo_id: int) -> bool:
        """Remove the todo stored under ``todo_id``.

        Deleting an absent id is a no-op rather than an error.

        Returns
        -------
        bool
            ``True`` if a todo was removed, ``False`` if none had that id.
        """
        if todo_id not in self._items:
            logger.debug("Delete of absent todo %r ignored", todo_id)
            return False
        del self._items[todo_id]
        logger.debug("Deleted todo %r", todo_id)
        return True

    def delete_tag_by_id(self, todo_id: int, target_tags: Iterable[str]) -> Todo:
        """Remove each of ``target_tags`` from the todo ``todo_id``.

        Tags that are present are removed even when others are missing;
        the removal is not rolled back when the error is raised.

        Raises
        ------
        TodoNotFoundError
            If no todo has that id.
        TagNotFoundError
            Listing every requested tag that was not present, in request
            order. A tag repeated in ``target_tags`` is considered once.
        InvalidTodoError
            If ``target_tags`` is a single string instead of a collection,
            or holds a non-string item. No tag is removed in that case.
        """
        if isinstance(target_tags, Iterable) and not isinstance(target_tags, (str, bytes)):
            target_tags = tuple(target_tags)
        validate_tags(target_tags)
        todo = self.find_by_id(todo_id)
        missing: list[str] = []
        for tag in dict.fromkeys(target_tags):
            if tag in todo.tags:
                todo.tags.remove(tag)
            else:
                missing.append(tag)
        if missing:
            logger.debug("Todo %r is missing tag(s) %r", todo_id, missing)
            raise TagNotFoundError(todo_id, missing)
        logger.debug("Removed tag(s) from todo %r", todo_id)
        return todo

    def delete_all_tags_by_id(self, todo_id: int) -> Todo:
        """Clear the tag set of the todo ``todo_id``.

        Raises
        ------
        TodoNotFoundError
            If no todo has that id.
        """
        todo = self.find_by_id(todo_id)
        todo.tags.clear()
        logger.debug("Cleared tags of todo %r", todo_id)
        return todo

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __contains__(self, todo_id: object) -> bool:
        """Support ``todo_id in store`` membership test."""
        return todo_id in self._items

    def __len__(self) -> int:
        """Return the number of stored todos."""
        return len(self._items)

    def __iter__(self) -> Iterator[Todo]:
        return iter(self.find_all())

    def __repr__(self) -> str:
        return f"TodoStore(size={len(self._items)}, last_id={self._last_id})"
