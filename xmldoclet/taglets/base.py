"""Base classes for taglet handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable, Optional

OVERVIEW = "overview"
PACKAGES = "packages"
TYPES = "types"
CONSTRUCTORS = "constructors"
METHODS = "methods"
FIELDS = "fields"

ALL_SCOPES: FrozenSet[str] = frozenset(
    (OVERVIEW, PACKAGES, TYPES, CONSTRUCTORS, METHODS, FIELDS)
)

# javadoc's single-letter placement codes, as used by `-tag name:scope`
_SCOPE_CODES = {
    "o": OVERVIEW,
    "p": PACKAGES,
    "t": TYPES,
    "c": CONSTRUCTORS,
    "m": METHODS,
    "f": FIELDS,
}


class Taglet(ABC):
    """Contract for handlers that recognise a documentation tag.

    Block taglets are registered under their bare name; inline taglets are
    registered under ``"@" + name``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Tag name without the leading ``@``."""

    def is_inline_tag(self) -> bool:
        return False

    @abstractmethod
    def in_scope(self, scope: str) -> bool:
        """Return True when the tag may appear in ``scope``."""

    @property
    def registry_key(self) -> str:
        return f"@{self.name}" if self.is_inline_tag() else self.name


def parse_scopes(text: Optional[str]) -> FrozenSet[str]:
    """Translate a scope expression into scope names.

    Accepts a single scope name (``"methods"``) or javadoc letter codes
    (``"tcm"``, ``"a"`` for all, ``"X"`` for disabled). ``None`` and the
    empty string mean every scope.
    """
    if not text:
        return ALL_SCOPES
    if text in ALL_SCOPES:
        return frozenset((text,))
    if "X" in text:
        return frozenset()
    if "a" in text:
        return ALL_SCOPES
    return frozenset(_SCOPE_CODES[code] for code in text if code in _SCOPE_CODES)


def scope_set(scopes: Iterable[str]) -> FrozenSet[str]:
    unknown = set(scopes) - ALL_SCOPES
    if unknown:
        raise ValueError(f"Unknown taglet scopes: {', '.join(sorted(unknown))}")
    return frozenset(scopes)
