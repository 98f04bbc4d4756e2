"""Documentation model protocols consumed by class filters.

The host tool owns the real documentation model. Filters only rely on the
small read-only surface described by ``ClassDoc`` and ``AnnotationDesc``;
``ClassModel`` and ``AnnotationModel`` are plain implementations used by the
CLI (via ``load_model``) and by tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

import yaml


class ModelError(RuntimeError):
    """Raised when a class listing cannot be read."""


class AnnotationTypeDoc(Protocol):
    def qualified_name(self) -> str:
        ...


class AnnotationDesc(Protocol):
    def annotation_type(self) -> AnnotationTypeDoc:
        ...


class ClassDoc(Protocol):
    """Read-only view of a documented class.

    ``str(doc)`` must return the qualified class name.
    """

    def superclass(self) -> Optional["ClassDoc"]:
        ...

    def interfaces(self) -> Sequence["ClassDoc"]:
        ...

    def annotations(self) -> Sequence[AnnotationDesc]:
        ...


@dataclass
class ClassModel:
    """Minimal class descriptor implementing ``ClassDoc``."""

    name: str
    parent: Optional["ClassModel"] = field(default=None, repr=False)
    implements: Tuple["ClassModel", ...] = ()
    annotated: Tuple["AnnotationModel", ...] = ()

    def superclass(self) -> Optional["ClassModel"]:
        return self.parent

    def interfaces(self) -> Tuple["ClassModel", ...]:
        return self.implements

    def annotations(self) -> Tuple["AnnotationModel", ...]:
        return self.annotated

    def qualified_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass
class AnnotationModel:
    """Annotation instance implementing ``AnnotationDesc``."""

    type: ClassModel

    def annotation_type(self) -> ClassModel:
        return self.type


def load_model(path: Path) -> List[ClassModel]:
    """Load a YAML class listing.

    Expected layout::

        classes:
          - name: com.example.Widget
            extends: com.example.Base
            implements: [java.io.Serializable]
            annotations: [javax.annotation.Generated]

    Type names that refer to another entry of the listing resolve to that
    entry, so superclass chains can be described. Other names become bare
    descriptors.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ModelError(f"Failed to read {path}: {exc}") from exc

    entries = _as_list(_as_dict(data).get("classes"))
    known: Dict[str, ClassModel] = {}
    for entry in entries:
        name = _as_str(_as_dict(entry).get("name"))
        if not name:
            raise ModelError(f"{path.name}: every class entry needs a name")
        if name in known:
            raise ModelError(f"{path.name}: duplicate class {name}")
        known[name] = ClassModel(name)

    def _resolve(type_name: str) -> ClassModel:
        return known.get(type_name) or ClassModel(type_name)

    for entry in entries:
        mapping = _as_dict(entry)
        model = known[str(mapping["name"])]
        superclass = _as_str(mapping.get("extends"))
        if superclass:
            model.parent = _resolve(superclass)
        model.implements = tuple(_resolve(name) for name in _as_str_list(mapping.get("implements")))
        model.annotated = tuple(
            AnnotationModel(_resolve(name)) for name in _as_str_list(mapping.get("annotations"))
        )

    for model in known.values():
        _check_acyclic(model)
    return list(known.values())


def _check_acyclic(model: ClassModel) -> None:
    seen = {model.name}
    current = model.parent
    while current is not None:
        if current.name in seen:
            raise ModelError(f"Cyclic inheritance involving {model.name}")
        seen.add(current.name)
        current = current.parent


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "AnnotationDesc",
    "AnnotationModel",
    "AnnotationTypeDoc",
    "ClassDoc",
    "ClassModel",
    "ModelError",
    "load_model",
]
