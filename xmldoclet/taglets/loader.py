"""Dynamic loading of taglet classes named with ``-taglet``."""

from __future__ import annotations

import importlib
from importlib import metadata
from typing import Iterable, List, Optional, Type

from ..logging import get_logger
from ..reporting import DiagnosticSink
from .base import Taglet
from .registry import TagletRegistry

_ENTRY_POINT_GROUP = "xmldoclet.taglets"

logger = get_logger("taglets")


class TagletLoadError(RuntimeError):
    """Raised when a taglet class cannot be resolved or registered."""


def load_taglet_class(name: str) -> Type[Taglet]:
    """Resolve ``name`` to a Taglet subclass.

    Entry points in the ``xmldoclet.taglets`` group take precedence; any
    other name is treated as a dotted ``module.Class`` path.
    """
    target = _load_entry_point(name)
    if target is None:
        target = _import_dotted(name)
    if not isinstance(target, type) or not issubclass(target, Taglet):
        raise TagletLoadError(f"{name} is not a Taglet subclass")
    return target


def register_taglet_class(taglet_class: Type[Taglet], registry: TagletRegistry) -> None:
    """Invoke the class-level ``register(registry)`` entry point."""
    # ABCMeta.register is not a taglet entry point; only look in the class hierarchy
    register = None
    if any("register" in vars(klass) for klass in taglet_class.__mro__):
        register = getattr(taglet_class, "register")
    if not callable(register):
        raise TagletLoadError(f"{_qualified_name(taglet_class)} has no register(registry) method")
    try:
        register(registry)
    except Exception as exc:
        raise TagletLoadError(
            f"{_qualified_name(taglet_class)}.register failed: {exc}"
        ) from exc


def register_taglets(
    names: Iterable[str], registry: TagletRegistry, reporter: DiagnosticSink
) -> List[Type[Taglet]]:
    """Load and register each named taglet class, reporting failures per name."""
    loaded: List[Type[Taglet]] = []
    for name in names:
        try:
            taglet_class = load_taglet_class(name)
            register_taglet_class(taglet_class, registry)
        except TagletLoadError as exc:
            reporter.error(f"'-taglet' option reported error - :{exc}")
            continue
        loaded.append(taglet_class)
        reporter.notice(f"Using Taglet {_qualified_name(taglet_class)}")
    return loaded


def _import_dotted(name: str) -> object:
    module_name, dot, attribute = name.rpartition(".")
    if not dot or not module_name or not attribute:
        raise TagletLoadError(f"Class not found: {name}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise TagletLoadError(f"Class not found: {name}") from exc
    except Exception as exc:
        raise TagletLoadError(f"Failed to import {module_name}: {exc}") from exc
    try:
        return getattr(module, attribute)
    except AttributeError as exc:
        raise TagletLoadError(f"Class not found: {name}") from exc


def _load_entry_point(name: str) -> Optional[object]:
    for entry in _iter_entry_points():
        if entry.name != name:
            continue
        logger.debug("Resolving taglet %s through entry point %s", name, entry.value)
        try:
            return entry.load()
        except Exception as exc:
            raise TagletLoadError(f"Failed to load taglet entry point '{name}': {exc}") from exc
    return None


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points(group=_ENTRY_POINT_GROUP)


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


__all__ = [
    "TagletLoadError",
    "load_taglet_class",
    "register_taglet_class",
    "register_taglets",
]
