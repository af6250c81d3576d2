"""Script runner: applies a list of operation steps to a ``TodoStore``.

A script is plain data (typically loaded from YAML or JSON) so that the
store can be driven from the command line without a long-lived
process. Each step is a mapping with an ``op`` key and the arguments of
that operation::

    - op: add
      data: {content: "Buy milk", tags: [home]}
    - op: update_tag
      id: 1
      before: home
      after: errand
    - op: find_all

Store errors raised by a step are captured in its ``StepResult``;
malformed steps raise ``ScriptError`` because they indicate a broken
script rather than a failed operation.

Usage
-----
::

    from todostore import TodoStore
    from todostore.script import ScriptRunner

    runner = ScriptRunner(TodoStore())
    results = runner.run(steps)
    failed = [r for r in results if not r.ok]
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Final

from todostore.core.errors import (
    InvalidTodoError,
    TagNotFoundError,
    TodoNotFoundError,
    TodoStoreError,
)
from todostore.core.store import TodoStore
from todostore.serializer.serializer import TodoSerializer

logger = logging.getLogger(__name__)

# Ordered most-specific first; the first matching class wins.
ERROR_STATUS: Final[tuple[tuple[type[TodoStoreError], str], ...]] = (
    (TodoNotFoundError, "not-found"),
    (TagNotFoundError, "tag-not-found"),
    (InvalidTodoError, "invalid-argument"),
)

DEMO_STEPS: Final[list[dict[str, Any]]] = [
    {"op": "add", "data": {"content": "장보기", "tags": ["home", "weekly"]}},
    {"op": "add", "data": {"content": "Write the quarterly report", "category": "work", "tags": ["work"]}},
    {"op": "add", "data": {"content": "Call the plumber", "complete": True}},
    {"op": "find_all"},
    {"op": "update_tag", "id": 2, "before": "work", "after": "urgent"},
    {"op": "update_tag", "id": 2, "before": "work", "after": "later"},
    {"op": "delete_tags", "id": 1, "tags": ["weekly", "garden"]},
    {"op": "update", "id": 3, "data": {"content": "Call the plumber again"}},
    {"op": "delete_by_id", "id": 3},
    {"op": "add", "data": {"content": "Water the plants", "tags": ["home"]}},
    {"op": "find_by_id", "id": 3},
    {"op": "delete_all_tags", "id": 1},
    {"op": "find_all"},
]


class ScriptError(ValueError):
    """Raised when a script step is malformed.

    Parameters
    ----------
    index:
        0-based position of the offending step.
    message:
        Human-readable description of the problem.
    """

    def __init__(self, index: int, message: str) -> None:
        self.index = index
        self.script_message = message
        super().__init__(f"Step {index}: {message}")


@dataclass(frozen=True)
class StepResult:
    """Outcome of a single script step.

    Parameters
    ----------
    index:
        0-based position of the step in the script.
    op:
        The operation name.
    value:
        What the store operation returned (a ``Todo``, a list of todos,
        a bool, or ``None``).
    error:
        The store error raised by the step, if any.
    """

    index: int
    op: str
    value: Any = field(default=None)
    error: TodoStoreError | None = field(default=None)

    @property
    def ok(self) -> bool:
        """Return True if the step completed without a store error."""
        return self.error is None

    @property
    def status(self) -> str:
        """Short machine-readable outcome: ``"ok"`` or an error status word."""
        if self.error is None:
            return "ok"
        for error_type, status in ERROR_STATUS:
            if isinstance(self.error, error_type):
                return status
        return "error"


class ScriptRunner:
    """Runs operation steps against a store.

    Parameters
    ----------
    store:
        The store the steps operate on. It is mutated in place.
    stop_on_error:
        When ``True``, the run ends after the first step that raised a
        store error.
    """

    def __init__(self, store: TodoStore, stop_on_error: bool = False) -> None:
        self._store = store
        self._stop_on_error = stop_on_error
        self._serializer = TodoSerializer()
        self._ops: dict[str, Callable[[int, Mapping[str, Any]], Any]] = {
            "add": self._add,
            "find_all": self._find_all,
            "find_by_id": self._find_by_id,
            "update": self._update,
            "update_tag": self._update_tag,
            "delete_all": self._delete_all,
            "delete_by_id": self._delete_by_id,
            "delete_tags": self._delete_tags,
            "delete_all_tags": self._delete_all_tags,
        }

    @property
    def store(self) -> TodoStore:
        """The store the steps are applied to."""
        return self._store

    @property
    def operations(self) -> list[str]:
        """Return the supported operation names."""
        return list(self._ops)

    def run(self, steps: Sequence[Mapping[str, Any]]) -> list[StepResult]:
        """Apply ``steps`` in order and return one result per executed step.

        Raises
        ------
        ScriptError
            If ``steps`` is not a list, or a step is not a mapping, names
            an unknown operation, or lacks a required argument. Steps
            before the malformed one have already been applied.
        """
        if not isinstance(steps, Sequence) or isinstance(steps, (str, bytes)):
            raise ScriptError(0, f"script must be a list of steps, got {type(steps).__name__}")
        results: list[StepResult] = []
        for index, step in enumerate(steps):
            result = self.run_step(index, step)
            results.append(result)
            if not result.ok and self._stop_on_error:
                logger.debug("Stopping script after failed step %d", index)
                break
        return results

    def run_step(self, index: int, step: Mapping[str, Any]) -> StepResult:
        """Apply a single step and capture its outcome."""
        if not isinstance(step, Mapping):
            raise ScriptError(index, f"expected a mapping, got {type(step).__name__}")
        op = step.get("op")
        handler = self._ops.get(op) if isinstance(op, str) else None
        if handler is None:
            raise ScriptError(
                index, f"unknown op {op!r}; expected one of {', '.join(self._ops)}"
            )
        try:
            value = handler(index, step)
        except TodoStoreError as exc:
            logger.debug("Step %d (%s) failed: %s", index, op, exc)
            return StepResult(index=index, op=op, error=exc)
        return StepResult(index=index, op=op, value=value)

    # ------------------------------------------------------------------
    # Argument helpers
    # ------------------------------------------------------------------

    def _arg(self, index: int, step: Mapping[str, Any], name: str) -> Any:
        if name not in step:
            raise ScriptError(index, f"op {step['op']!r} requires argument {name!r}")
        return step[name]

    def _id(self, index: int, step: Mapping[str, Any]) -> int:
        value = self._arg(index, step, "id")
        if isinstance(value, bool) or not isinstance(value, int):
            raise ScriptError(index, f"argument 'id' must be an integer, got {value!r}")
        return value

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def _add(self, index: int, step: Mapping[str, Any]) -> Any:
        data = self._serializer.data_from_dict(self._arg(index, step, "data"))
        return self._store.add(data)

    def _find_all(self, index: int, step: Mapping[str, Any]) -> Any:
        return self._store.find_all()

    def _find_by_id(self, index: int, step: Mapping[str, Any]) -> Any:
        return self._store.find_by_id(self._id(index, step))

    def _update(self, index: int, step: Mapping[str, Any]) -> Any:
        todo_id = self._id(index, step)
        data = self._serializer.data_from_dict(self._arg(index, step, "data"))
        return self._store.update(todo_id, data)

    def _update_tag(self, index: int, step: Mapping[str, Any]) -> Any:
        return self._store.update_tag_by_id(
            self._id(index, step),
            self._arg(index, step, "before"),
            self._arg(index, step, "after"),
        )

    def _delete_all(self, index: int, step: Mapping[str, Any]) -> Any:
        self._store.delete_all()

    def _delete_by_id(self, index: int, step: Mapping[str, Any]) -> Any:
        return self._store.delete_by_id(self._id(index, step))

    def _delete_tags(self, index: int, step: Mapping[str, Any]) -> Any:
        tags = self._arg(index, step, "tags")
        if not isinstance(tags, list):
            raise ScriptError(index, f"argument 'tags' must be a list, got {type(tags).__name__}")
        return self._store.delete_tag_by_id(self._id(index, step), tags)

    def _delete_all_tags(self, index: int, step: Mapping[str, Any]) -> Any:
        return self._store.delete_all_tags_by_id(self._id(index, step))
