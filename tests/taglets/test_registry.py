"""Tests for the taglet registry."""

from __future__ import annotations

import pytest

from xmldoclet.taglets import BLOCK_TAGS, INLINE_TAGS, BlockTag, CustomTag, InlineTag, TagletRegistry


def test_registry_seeded_with_builtin_tags() -> None:
    registry = TagletRegistry()

    assert len(registry) == len(BLOCK_TAGS) + len(INLINE_TAGS)
    assert isinstance(registry.taglet_for_name("param"), BlockTag)
    assert isinstance(registry.taglet_for_name("@inheritDoc"), InlineTag)
    assert registry.taglet_for_name("inheritDoc") is None
    assert registry.taglet_for_name("@param") is None


def test_registry_accepts_explicit_builtins() -> None:
    registry = TagletRegistry([BlockTag("since"), InlineTag("code")])

    assert sorted(registry) == ["@code", "since"]


def test_registry_overwrites_existing_entries() -> None:
    registry = TagletRegistry([])
    first = CustomTag("todo", enabled=True, title="First")
    second = CustomTag("todo", enabled=True, title="Second")

    registry.register(first)
    registry["todo"] = second

    assert len(registry) == 1
    assert registry.taglet_for_name("todo") is second


def test_registry_lookup_is_exact() -> None:
    registry = TagletRegistry()

    assert registry.get("Param") is None
    assert "see" in registry
    with pytest.raises(KeyError):
        registry["missing"]


def test_registry_rejects_non_taglets() -> None:
    registry = TagletRegistry([])

    with pytest.raises(TypeError):
        registry["todo"] = "not a taglet"  # type: ignore[assignment]


def test_builtin_scopes() -> None:
    registry = TagletRegistry()

    assert registry["return"].in_scope("methods")
    assert not registry["return"].in_scope("fields")
    assert registry["see"].in_scope("overview")
    assert registry["@link"].in_scope("fields")
    assert registry["@link"].is_inline_tag()


def test_frozen_registry_is_read_only() -> None:
    registry = TagletRegistry()
    registry["todo"] = CustomTag("todo", enabled=True)
    registry.freeze()

    with pytest.raises(TypeError):
        registry["todo"] = CustomTag("todo", enabled=True, title="Later")
    with pytest.raises(TypeError):
        del registry["see"]
    assert registry.taglet_for_name("todo") == CustomTag("todo", enabled=True)
    assert "see" in registry
