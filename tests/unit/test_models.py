"""Unit tests for todostore.core.models — TodoData validation and Todo
construction and defaulting rules.
"""
from __future__ import annotations

import pytest

from todostore.core.errors import InvalidTodoError
from todostore.core.models import DEFAULT_CATEGORY, Todo, TodoData


# ===========================================================================
# TodoData
# ===========================================================================


class TestTodoData:
    def test_defaults(self) -> None:
        data = TodoData(content="Buy milk")
        assert data.complete is False
        assert data.category is None
        assert data.tags == ()

    def test_frozen_dataclass(self) -> None:
        data = TodoData(content="Buy milk")
        with pytest.raises((AttributeError, TypeError)):
            data.content = "Other"  # type: ignore[misc]

    def test_list_tags_are_converted_to_tuple(self) -> None:
        data = TodoData(content="x", tags=["a", "b"])  # type: ignore[arg-type]
        assert data.tags == ("a", "b")

    def test_set_tags_are_converted_to_tuple(self) -> None:
        data = TodoData(content="x", tags={"a"})  # type: ignore[arg-type]
        assert data.tags == ("a",)

    def test_is_hashable(self) -> None:
        assert hash(TodoData(content="x", tags=["a"])) == hash(TodoData(content="x", tags=("a",)))  # type: ignore[arg-type]

    def test_validate_accepts_complete_input(self) -> None:
        TodoData(content="x", complete=True, category="work", tags=("a",)).validate()

    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    def test_validate_rejects_blank_content(self, content: str) -> None:
        with pytest.raises(InvalidTodoError) as exc_info:
            TodoData(content=content).validate()
        assert exc_info.value.field == "content"

    def test_validate_rejects_non_string_content(self) -> None:
        with pytest.raises(InvalidTodoError) as exc_info:
            TodoData(content=None).validate()  # type: ignore[arg-type]
        assert exc_info.value.field == "content"

    def test_validate_rejects_non_bool_complete(self) -> None:
        with pytest.raises(InvalidTodoError) as exc_info:
            TodoData(content="x", complete="yes").validate()  # type: ignore[arg-type]
        assert exc_info.value.field == "complete"

    def test_validate_rejects_non_string_category(self) -> None:
        with pytest.raises(InvalidTodoError) as exc_info:
            TodoData(content="x", category=3).validate()  # type: ignore[arg-type]
        assert exc_info.value.field == "category"

    def test_validate_rejects_bare_string_tags(self) -> None:
        with pytest.raises(InvalidTodoError) as exc_info:
            TodoData(content="x", tags="home").validate()  # type: ignore[arg-type]
        assert exc_info.value.field == "tags"

    def test_validate_rejects_non_string_tag(self) -> None:
        with pytest.raises(InvalidTodoError):
            TodoData(content="x", tags=("ok", 5)).validate()  # type: ignore[arg-type]


# ===========================================================================
# Todo
# ===========================================================================


class TestTodo:
    def test_from_data_applies_defaults(self) -> None:
        todo = Todo.from_data(1, TodoData(content="Buy milk"))
        assert todo == Todo(id=1, content="Buy milk", complete=False, category=DEFAULT_CATEGORY, tags=set())

    def test_default_category_is_uncategorized_label(self) -> None:
        assert DEFAULT_CATEGORY == "미분류"

    def test_empty_category_falls_back_to_default(self) -> None:
        todo = Todo.from_data(1, TodoData(content="x", category=""))
        assert todo.category == DEFAULT_CATEGORY

    def test_custom_default_category(self) -> None:
        todo = Todo.from_data(1, TodoData(content="x"), default_category="inbox")
        assert todo.category == "inbox"

    def test_explicit_category_is_kept(self) -> None:
        todo = Todo.from_data(1, TodoData(content="x", category="work"))
        assert todo.category == "work"

    def test_duplicate_tags_collapse(self) -> None:
        todo = Todo.from_data(1, TodoData(content="x", tags=("a", "a", "b")))
        assert todo.tags == {"a", "b"}

    def test_tags_are_a_fresh_set(self) -> None:
        data = TodoData(content="x", tags=("a",))
        first = Todo.from_data(1, data)
        second = Todo.from_data(2, data)
        first.tags.add("b")
        assert second.tags == {"a"}

    def test_id_is_read_only(self) -> None:
        todo = Todo.from_data(1, TodoData(content="x"))
        with pytest.raises(AttributeError):
            todo.id = 2  # type: ignore[misc]
        assert todo.id == 1

    def test_other_fields_are_mutable(self) -> None:
        todo = Todo.from_data(1, TodoData(content="x"))
        todo.complete = True
        todo.content = "y"
        assert todo.complete is True
        assert todo.content == "y"
