"""Registry mapping tag names to taglet handlers."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Dict, Iterable, Iterator, List, Optional

from .base import Taglet
from .builtin import BLOCK_TAGS, INLINE_TAGS


def default_taglets() -> List[Taglet]:
    """Return the standard block and inline taglets."""
    return [*BLOCK_TAGS, *INLINE_TAGS]


class TagletRegistry(MutableMapping):
    """Name-keyed taglet handlers.

    Keys follow the javadoc convention: block tags use the bare tag name and
    inline tags use ``"@" + name``. Inserting an existing key replaces the
    previous handler. Once ``freeze`` has been called, insertions and
    deletions raise ``TypeError``.
    """

    def __init__(self, builtins: Iterable[Taglet] | None = None) -> None:
        self._taglets: Dict[str, Taglet] = {}
        self._frozen = False
        for taglet in default_taglets() if builtins is None else builtins:
            self.register(taglet)

    def register(self, taglet: Taglet) -> None:
        """Insert ``taglet`` under the key derived from its name and kind."""
        self[taglet.registry_key] = taglet

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def taglet_for_name(self, name: str) -> Optional[Taglet]:
        return self._taglets.get(name)

    def __getitem__(self, name: str) -> Taglet:
        return self._taglets[name]

    def __setitem__(self, name: str, taglet: Taglet) -> None:
        self._check_writable(name)
        if not isinstance(taglet, Taglet):
            raise TypeError(f"Cannot register {taglet!r} as taglet '{name}'")
        self._taglets[name] = taglet

    def __delitem__(self, name: str) -> None:
        self._check_writable(name)
        del self._taglets[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._taglets)

    def __len__(self) -> int:
        return len(self._taglets)

    def _check_writable(self, name: str) -> None:
        if self._frozen:
            raise TypeError(f"Cannot change taglet '{name}': registry is frozen")

    def __repr__(self) -> str:
        return f"TagletRegistry({sorted(self._taglets)!r})"


__all__ = ["TagletRegistry", "default_taglets"]
