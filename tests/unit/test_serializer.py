"""Unit tests for todostore.serializer — dict, JSON and YAML conversion."""
from __future__ import annotations

import json

import pytest
import yaml

from todostore.core.errors import InvalidTodoError
from todostore.core.models import DEFAULT_CATEGORY, Todo, TodoData
from todostore.serializer import TodoSerializer


@pytest.fixture()
def serializer() -> TodoSerializer:
    return TodoSerializer()


def _todo() -> Todo:
    return Todo(id=3, content="장보기", complete=True, category="home", tags={"b", "a"})


# ===========================================================================
# to_dict / to_json / to_yaml
# ===========================================================================


class TestSerialization:
    def test_to_dict(self, serializer: TodoSerializer) -> None:
        assert serializer.to_dict(_todo()) == {
            "id": 3,
            "complete": True,
            "content": "장보기",
            "category": "home",
            "tags": ["a", "b"],
        }

    def test_to_json_single(self, serializer: TodoSerializer) -> None:
        text = serializer.to_json(_todo())
        assert json.loads(text)["id"] == 3
        assert "장보기" in text

    def test_to_json_list(self, serializer: TodoSerializer) -> None:
        data = json.loads(serializer.to_json([_todo(), _todo()]))
        assert isinstance(data, list)
        assert len(data) == 2

    def test_to_yaml_keeps_field_order(self, serializer: TodoSerializer) -> None:
        text = serializer.to_yaml(_todo())
        assert text.index("id:") < text.index("content:")
        assert yaml.safe_load(text)["tags"] == ["a", "b"]

    def test_to_yaml_unicode(self, serializer: TodoSerializer) -> None:
        assert "장보기" in serializer.to_yaml([_todo()])


# ===========================================================================
# data_from_dict / todo_from_dict
# ===========================================================================


class TestDeserialization:
    def test_data_from_dict_minimal(self, serializer: TodoSerializer) -> None:
        assert serializer.data_from_dict({"content": "x"}) == TodoData(content="x")

    def test_data_from_dict_full(self, serializer: TodoSerializer) -> None:
        data = serializer.data_from_dict(
            {"content": "x", "complete": True, "category": "work", "tags": ["a"]}
        )
        assert data == TodoData(content="x", complete=True, category="work", tags=("a",))

    def test_missing_content(self, serializer: TodoSerializer) -> None:
        with pytest.raises(InvalidTodoError) as exc_info:
            serializer.data_from_dict({"tags": ["a"]})
        assert exc_info.value.field == "content"

    def test_unknown_field(self, serializer: TodoSerializer) -> None:
        with pytest.raises(InvalidTodoError, match="priority"):
            serializer.data_from_dict({"content": "x", "priority": 1})

    def test_not_a_mapping(self, serializer: TodoSerializer) -> None:
        with pytest.raises(InvalidTodoError):
            serializer.data_from_dict(["content"])  # type: ignore[arg-type]

    def test_string_tags_rejected(self, serializer: TodoSerializer) -> None:
        with pytest.raises(InvalidTodoError) as exc_info:
            serializer.data_from_dict({"content": "x", "tags": "a"})
        assert exc_info.value.field == "tags"

    def test_null_complete_means_false(self, serializer: TodoSerializer) -> None:
        assert serializer.data_from_dict({"content": "x", "complete": None}).complete is False

    def test_null_category_means_default(self, serializer: TodoSerializer) -> None:
        assert serializer.data_from_dict({"content": "x", "category": None}).category is None

    def test_null_tags_mean_none(self, serializer: TodoSerializer) -> None:
        assert serializer.data_from_dict({"content": "x", "tags": None}).tags == ()

    def test_todo_from_dict(self, serializer: TodoSerializer) -> None:
        todo = serializer.todo_from_dict({"id": 3, "content": "x", "tags": ["a"]})
        assert todo == Todo(id=3, content="x", category=DEFAULT_CATEGORY, tags={"a"})

    def test_todo_from_dict_inverts_to_dict(self, serializer: TodoSerializer) -> None:
        assert serializer.todo_from_dict(serializer.to_dict(_todo())) == _todo()

    @pytest.mark.parametrize("bad_id", [None, 0, -2, "3", True])
    def test_todo_from_dict_bad_id(self, serializer: TodoSerializer, bad_id: object) -> None:
        with pytest.raises(InvalidTodoError) as exc_info:
            serializer.todo_from_dict({"id": bad_id, "content": "x"})
        assert exc_info.value.field == "id"


# ===========================================================================
# load_document
# ===========================================================================


class TestLoadDocument:
    def test_json(self, serializer: TodoSerializer) -> None:
        assert serializer.load_document('[{"op": "find_all"}]', "json") == [{"op": "find_all"}]

    def test_yaml(self, serializer: TodoSerializer) -> None:
        assert serializer.load_document("- op: find_all\n", "yaml") == [{"op": "find_all"}]

    def test_invalid_json_propagates(self, serializer: TodoSerializer) -> None:
        with pytest.raises(json.JSONDecodeError):
            serializer.load_document("[", "json")

    def test_unknown_format(self, serializer: TodoSerializer) -> None:
        with pytest.raises(ValueError, match="toml"):
            serializer.load_document("", "toml")
