"""Custom tags defined on the command line with ``-tag name[:scope[:title]]``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .base import Taglet, parse_scopes


@dataclass(frozen=True)
class CustomTagDefinition:
    """Parsed form of a single ``-tag`` argument."""

    name: str
    scope: Optional[str] = None
    title: Optional[str] = None


def parse_tag_definition(text: str) -> CustomTagDefinition:
    """Parse ``name[:scope[:title]]``.

    Only the first two colons are significant, so a title may itself
    contain colons: ``"todo:a:To do: later"`` has the title ``"To do: later"``.
    """
    name, colon, rest = text.partition(":")
    if not colon:
        return CustomTagDefinition(name=name)
    scope, colon, title = rest.partition(":")
    return CustomTagDefinition(name=name, scope=scope, title=title if colon else None)


@dataclass(frozen=True)
class CustomTag(Taglet):
    """Generic block tag handler for user-defined tags.

    ``enabled`` is True for handlers registered from ``-tag`` and False for
    definitions that were only parsed.
    """

    tag: str
    enabled: bool = False
    scope: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_definition(cls, definition: CustomTagDefinition, *, enabled: bool = False) -> "CustomTag":
        """Build a handler that keeps the definition's scope and title.

        For host tools that render custom tags themselves; ``-tag`` handling
        in the configuration builder registers the bare tag name only.
        """
        return cls(definition.name, enabled, definition.scope, definition.title)

    @property
    def name(self) -> str:
        return self.tag

    def in_scope(self, scope: str) -> bool:
        return scope in parse_scopes(self.scope)


__all__ = ["CustomTag", "CustomTagDefinition", "parse_tag_definition"]
