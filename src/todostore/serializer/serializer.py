"""Serialization of todos to and from JSON and YAML.

The serialized form of a todo is a plain dict that maps naturally to
both formats. Tags are emitted as a sorted list because set iteration
order is unspecified.

Usage
-----
::

    from todostore.serializer import TodoSerializer

    serializer = TodoSerializer()
    data = serializer.data_from_dict({"content": "Buy milk", "tags": ["home"]})
    todo = store.add(data)
    print(serializer.to_json(todo))
"""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

import yaml

from todostore.core.errors import InvalidTodoError
from todostore.core.models import Todo, TodoData

_DATA_FIELDS: frozenset[str] = frozenset({"content", "complete", "category", "tags"})
_TODO_FIELDS: frozenset[str] = _DATA_FIELDS | {"id"}


class TodoSerializer:
    """Converts between todo objects and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (Todo → dict)
    # ------------------------------------------------------------------

    def to_dict(self, todo: Todo) -> dict[str, object]:
        """Serialize a ``Todo`` to a JSON-compatible dict."""
        return {
            "id": todo.id,
            "complete": todo.complete,
            "content": todo.content,
            "category": todo.category,
            "tags": sorted(todo.tags),
        }

    def _to_plain(self, todos: Todo | Sequence[Todo]) -> object:
        if isinstance(todos, Todo):
            return self.to_dict(todos)
        return [self.to_dict(t) for t in todos]

    # ------------------------------------------------------------------
    # Deserialization (dict → TodoData / Todo)
    # ------------------------------------------------------------------

    def data_from_dict(self, data: Mapping[str, Any]) -> TodoData:
        """Build a validated ``TodoData`` from a mapping.

        Raises
        ------
        InvalidTodoError
            If ``data`` is not a mapping, has unknown keys, lacks
            ``content``, or holds malformed values.
        """
        self._check_keys(data, _DATA_FIELDS)
        if "content" not in data:
            raise InvalidTodoError("content", "is required")
        todo_data = TodoData(
            content=data["content"],
            complete=False if data.get("complete") is None else data["complete"],
            category=data.get("category"),
            tags=self._tags_from(data.get("tags")),
        )
        todo_data.validate()
        return todo_data

    def todo_from_dict(self, data: Mapping[str, Any]) -> Todo:
        """Rebuild a ``Todo`` (including its id) from a mapping."""
        self._check_keys(data, _TODO_FIELDS)
        todo_id = data.get("id")
        if isinstance(todo_id, bool) or not isinstance(todo_id, int) or todo_id < 1:
            raise InvalidTodoError("id", f"expected a positive integer, got {todo_id!r}")
        fields = {k: v for k, v in data.items() if k != "id"}
        return Todo.from_data(todo_id, self.data_from_dict(fields))

    def _check_keys(self, data: object, allowed: frozenset[str]) -> None:
        if not isinstance(data, Mapping):
            raise InvalidTodoError("data", f"expected a mapping, got {type(data).__name__}")
        unknown = sorted(str(k) for k in data if k not in allowed)
        if unknown:
            raise InvalidTodoError("data", f"unknown field(s) {', '.join(unknown)}")

    def _tags_from(self, value: object) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, (list, tuple, set, frozenset)):
            return tuple(value)
        raise InvalidTodoError("tags", f"expected a list of strings, got {type(value).__name__}")

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, todos: Todo | Sequence[Todo], indent: int = 2) -> str:
        """Serialize one todo or a list of todos to a JSON string."""
        return json.dumps(self._to_plain(todos), indent=indent, ensure_ascii=False)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, todos: Todo | Sequence[Todo]) -> str:
        """Serialize one todo or a list of todos to a YAML string."""
        return yaml.dump(
            self._to_plain(todos), default_flow_style=False, allow_unicode=True, sort_keys=False
        )

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def load_document(self, text: str, fmt: str = "yaml") -> Any:
        """Parse JSON or YAML text into plain Python data.

        Parameters
        ----------
        text:
            The document source.
        fmt:
            ``"json"`` or ``"yaml"``. YAML is a superset of JSON, so
            ``"yaml"`` also accepts JSON documents.

        Raises
        ------
        ValueError
            If ``fmt`` is unknown. Parse failures propagate as
            ``json.JSONDecodeError`` or ``yaml.YAMLError``.
        """
        if fmt == "json":
            return json.loads(text)
        if fmt == "yaml":
            return yaml.safe_load(text)
        raise ValueError(f"Unsupported document format: {fmt!r}")
