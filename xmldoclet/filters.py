"""Class inclusion filters for the ``-extends``, ``-implements`` and ``-annotated`` options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import ClassDoc


@dataclass(frozen=True)
class ClassFilter:
    """Conjunction of the configured filter dimensions.

    Each target is compared to qualified names by exact string equality.
    Only the direct superclass and directly implemented interfaces are
    considered; ancestry is not followed.
    """

    extends: Optional[str] = None
    implements: Optional[str] = None
    annotated: Optional[str] = None

    def has_filter(self) -> bool:
        return self.extends is not None or self.implements is not None or self.annotated is not None

    def should_include(self, doc: ClassDoc) -> bool:
        if self.extends is not None and not filter_extends(doc, self.extends):
            return False
        if self.implements is not None and not filter_implements(doc, self.implements):
            return False
        if self.annotated is not None and not filter_annotated(doc, self.annotated):
            return False
        return True


def filter_extends(doc: ClassDoc, base: str) -> bool:
    superclass = doc.superclass()
    return superclass is not None and str(superclass) == base


def filter_implements(doc: ClassDoc, interface: str) -> bool:
    return any(str(item) == interface for item in doc.interfaces() or ())


def filter_annotated(doc: ClassDoc, annotation: str) -> bool:
    return any(
        item.annotation_type().qualified_name() == annotation for item in doc.annotations() or ()
    )


__all__ = ["ClassFilter", "filter_annotated", "filter_extends", "filter_implements"]
