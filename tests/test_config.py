import importlib

import pytest

from json_schema_builder import config
from json_schema_builder.nodes import FieldKind, FieldNode
from json_schema_builder.serializer import to_json


def test_unknown_default_kind_is_rejected_at_import(monkeypatch):
    monkeypatch.setenv("SCHEMA_BUILDER_DEFAULT_KIND", "boolean")
    with pytest.raises(ValueError):
        importlib.reload(config)
    monkeypatch.delenv("SCHEMA_BUILDER_DEFAULT_KIND")
    importlib.reload(config)
    assert config.DEFAULT_KIND == "number"


def test_json_indent_ignores_environment(monkeypatch):
    monkeypatch.setenv("SCHEMA_BUILDER_JSON_INDENT", "8")
    importlib.reload(config)
    assert config.JSON_INDENT == 2
    monkeypatch.delenv("SCHEMA_BUILDER_JSON_INDENT")
    importlib.reload(config)


def test_document_uses_two_space_indent():
    forest = [FieldNode(key=0, name="age", kind=FieldKind.NUMBER)]
    assert to_json(forest) == '{\n  "age": "number"\n}'


def test_is_nested_follows_kind():
    node = FieldNode(key=0, name="user", kind=FieldKind.NESTED)
    assert node.is_nested
    node.kind = FieldKind.STRING
    assert not node.is_nested
