"""Tests for the -tag definition mini-language."""

from __future__ import annotations

import pytest

from xmldoclet.taglets import CustomTag, CustomTagDefinition, parse_tag_definition
from xmldoclet.taglets.base import ALL_SCOPES


@pytest.mark.parametrize(
    "text, expected",
    [
        ("see", CustomTagDefinition("see")),
        ("see:type", CustomTagDefinition("see", "type")),
        ("see:type:See Also", CustomTagDefinition("see", "type", "See Also")),
        ("todo:a:To do: later", CustomTagDefinition("todo", "a", "To do: later")),
        ("todo::Later", CustomTagDefinition("todo", "", "Later")),
        ("todo:", CustomTagDefinition("todo", "")),
    ],
)
def test_parse_tag_definition(text: str, expected: CustomTagDefinition) -> None:
    assert parse_tag_definition(text) == expected


def test_custom_tag_from_definition_keeps_fields() -> None:
    definition = parse_tag_definition("todo:m:To Do")
    tag = CustomTag.from_definition(definition)

    assert tag.name == "todo"
    assert tag.enabled is False
    assert tag.scope == "m"
    assert tag.title == "To Do"
    assert tag.registry_key == "todo"


@pytest.mark.parametrize(
    "scope, allowed, denied",
    [
        (None, ALL_SCOPES, ()),
        ("a", ALL_SCOPES, ()),
        ("X", (), ALL_SCOPES),
        ("cm", ("constructors", "methods"), ("fields", "types")),
        ("fields", ("fields",), ("methods",)),
    ],
)
def test_custom_tag_scope(scope, allowed, denied) -> None:
    tag = CustomTag("todo", scope=scope)

    assert all(tag.in_scope(name) for name in allowed)
    assert not any(tag.in_scope(name) for name in denied)
