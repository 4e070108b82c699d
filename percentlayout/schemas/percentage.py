"""
Operand types for layout intents.

Percentage marks a number as a fraction of the container's matching
dimension; Flexible marks an absolute number as an inequality bound. A plain
number passed to an intent is an absolute equality. The three call shapes are
told apart by type alone, so no intent has to guess what a number means.
"""

from __future__ import annotations

from dataclasses import dataclass

from .relation import RelationKind


@dataclass(frozen=True)
class Percentage:
    """
    A fraction of a reference dimension that is not known yet.

    value is in percent (50 means half). It is not range-checked: negative
    values and values above 100 scale below or beyond the reference. The
    reference dimension is resolved only when an intent is translated against
    a container.
    """

    value: float


@dataclass(frozen=True)
class Flexible:
    """An absolute operand that bounds an attribute instead of fixing it."""

    kind: RelationKind
    value: float


def as_percentage(n: float) -> Percentage:
    """Wrap *n* as a Percentage. Lossless: ``as_percentage(n).value == n``."""
    return Percentage(value=n)


def at_most(n: float) -> Flexible:
    """Absolute operand meaning "no more than *n*"."""
    return Flexible(kind=RelationKind.LESS_OR_EQUAL, value=n)


def at_least(n: float) -> Flexible:
    """Absolute operand meaning "no less than *n*"."""
    return Flexible(kind=RelationKind.GREATER_OR_EQUAL, value=n)
