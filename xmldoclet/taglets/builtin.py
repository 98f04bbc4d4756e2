"""Standard javadoc block and inline taglets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from .base import (
    ALL_SCOPES,
    CONSTRUCTORS,
    FIELDS,
    METHODS,
    OVERVIEW,
    PACKAGES,
    TYPES,
    Taglet,
    scope_set,
)


@dataclass(frozen=True)
class BlockTag(Taglet):
    """A standard block tag such as ``@param`` or ``@since``."""

    tag: str
    scopes: FrozenSet[str] = field(default=ALL_SCOPES)

    @property
    def name(self) -> str:
        return self.tag

    def in_scope(self, scope: str) -> bool:
        return scope in self.scopes


@dataclass(frozen=True)
class InlineTag(Taglet):
    """A standard inline tag such as ``{@link}``; allowed everywhere."""

    tag: str

    @property
    def name(self) -> str:
        return self.tag

    def is_inline_tag(self) -> bool:
        return True

    def in_scope(self, scope: str) -> bool:
        return scope in ALL_SCOPES


BLOCK_TAGS: Tuple[BlockTag, ...] = (
    BlockTag("author", scope_set((OVERVIEW, PACKAGES, TYPES))),
    BlockTag("deprecated", scope_set((TYPES, CONSTRUCTORS, METHODS, FIELDS))),
    BlockTag("exception", scope_set((CONSTRUCTORS, METHODS))),
    BlockTag("param", scope_set((TYPES, CONSTRUCTORS, METHODS))),
    BlockTag("return", scope_set((METHODS,))),
    BlockTag("see"),
    BlockTag("serial", scope_set((PACKAGES, TYPES, FIELDS))),
    BlockTag("serialData", scope_set((METHODS,))),
    BlockTag("serialField", scope_set((FIELDS,))),
    BlockTag("since"),
    BlockTag("throws", scope_set((CONSTRUCTORS, METHODS))),
    BlockTag("version", scope_set((OVERVIEW, PACKAGES, TYPES))),
)

INLINE_TAGS: Tuple[InlineTag, ...] = (
    InlineTag("code"),
    InlineTag("docRoot"),
    InlineTag("inheritDoc"),
    InlineTag("link"),
    InlineTag("linkplain"),
    InlineTag("literal"),
    InlineTag("value"),
)


__all__ = ["BLOCK_TAGS", "BlockTag", "INLINE_TAGS", "InlineTag"]
