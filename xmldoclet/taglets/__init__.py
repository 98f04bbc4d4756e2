"""Taglet handlers, the taglet registry and dynamic taglet loading."""

from __future__ import annotations

from .base import ALL_SCOPES, Taglet, parse_scopes
from .builtin import BLOCK_TAGS, INLINE_TAGS, BlockTag, InlineTag
from .custom import CustomTag, CustomTagDefinition, parse_tag_definition
from .loader import TagletLoadError, load_taglet_class, register_taglets
from .registry import TagletRegistry, default_taglets

__all__ = [
    "ALL_SCOPES",
    "BLOCK_TAGS",
    "BlockTag",
    "CustomTag",
    "CustomTagDefinition",
    "INLINE_TAGS",
    "InlineTag",
    "Taglet",
    "TagletLoadError",
    "TagletRegistry",
    "default_taglets",
    "load_taglet_class",
    "parse_scopes",
    "parse_tag_definition",
    "register_taglets",
]
