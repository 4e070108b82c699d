"""
Relation vocabulary shared by the translator and the constraint engine.

A Relation is a request of the shape

    subject <kind> reference × multiplier + constant

handed to the external engine. This module defines the request only; how the
engine resolves it is not its concern.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Attribute(str, Enum):
    """Layout attributes every view exposes."""

    WIDTH = "width"
    HEIGHT = "height"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class RelationKind(str, Enum):
    """Comparison used between the two sides of a relation."""

    EQUAL = "=="
    LESS_OR_EQUAL = "<="
    GREATER_OR_EQUAL = ">="

    def inverted(self) -> RelationKind:
        """Swap the inequalities; EQUAL is its own inverse."""
        if self is RelationKind.LESS_OR_EQUAL:
            return RelationKind.GREATER_OR_EQUAL
        if self is RelationKind.GREATER_OR_EQUAL:
            return RelationKind.LESS_OR_EQUAL
        return self


@dataclass(frozen=True)
class AttributeRef:
    """Opaque handle naming one attribute of one view."""

    view: Any
    attribute: Attribute

    def __str__(self) -> str:
        return f"{getattr(self.view, 'name', self.view)!s}.{self.attribute.value}"


@dataclass(frozen=True)
class Relation:
    """
    A single linear constraint request.

    reference is None for constant-only relations (e.g. ``width == 100``);
    multiplier is then ignored by the engine.
    """

    subject: AttributeRef
    kind: RelationKind
    reference: Optional[AttributeRef]
    multiplier: float = 1.0
    constant: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.kind, RelationKind):
            raise TypeError(f"kind must be a RelationKind, got {self.kind!r}")

    def __str__(self) -> str:
        if self.reference is None:
            return f"{self.subject} {self.kind.value} {self.constant:g}"
        rhs = f"{self.reference} * {self.multiplier:g}"
        if self.constant > 0:
            rhs += f" + {self.constant:g}"
        elif self.constant < 0:
            rhs += f" - {-self.constant:g}"
        return f"{self.subject} {self.kind.value} {rhs}"
