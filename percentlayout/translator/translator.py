"""
Constraint translator: layout intent + operand → one relation per attribute.

Each intent function takes a view, an operand and an optional engine, asks
the engine for the relation(s) the intent's rule prescribes, and returns the
view unchanged so calls can be chained.

Operands
--------
Percentage   fraction of the container's reference attribute
Flexible     absolute inequality bound (at_most / at_least)
int | float  absolute equality

A view without a container is not an error: intents may be declared before
the view is attached, and anything that needs the container is skipped.
Numeric values are never range-checked; what a negative or >100% layout means
is left to the engine.
"""

from __future__ import annotations

import logging
from numbers import Number
from typing import TYPE_CHECKING, Optional, Union

from percentlayout.engine.module import ConstraintEngine, get_engine
from percentlayout.intents.registry import get_registry
from percentlayout.intents.types import IntentRule, LayoutIntent
from percentlayout.schemas.percentage import Flexible, Percentage
from percentlayout.schemas.relation import Attribute, AttributeRef, Relation, RelationKind

if TYPE_CHECKING:
    from percentlayout.views.view import ViewLike

logger = logging.getLogger(__name__)

Operand = Union[Percentage, Flexible, float]

_FULL: float = 100.0


def translate(
    view: ViewLike,
    intent: LayoutIntent,
    value: Operand,
    engine: Optional[ConstraintEngine] = None,
) -> ViewLike:
    """
    Issue the relation(s) for *intent* on *view* and return *view*.

    Raises
    ------
    TypeError
        If *value* is not a Percentage, Flexible or number, or wraps a
        bool, complex or non-numeric value.
    """
    is_percentage = isinstance(value, Percentage)
    kind = value.kind if isinstance(value, Flexible) else RelationKind.EQUAL
    amount = _number(value.value if isinstance(value, (Percentage, Flexible)) else value)
    engine = engine if engine is not None else get_engine()
    for rule in get_registry().expand(intent):
        if is_percentage:
            _apply_percentage(view, rule, amount, engine)
        else:
            _apply_absolute(view, rule, kind, amount, engine)
    return view


def size(view: ViewLike, value: Operand, engine: Optional[ConstraintEngine] = None) -> ViewLike:
    """Constrain width then height with the same operand."""
    return translate(view, LayoutIntent.SIZE, value, engine)


def width(view: ViewLike, value: Operand, engine: Optional[ConstraintEngine] = None) -> ViewLike:
    """``width(v, as_percentage(50))`` → ``v.width == container.width * 0.5``."""
    return translate(view, LayoutIntent.WIDTH, value, engine)


def height(view: ViewLike, value: Operand, engine: Optional[ConstraintEngine] = None) -> ViewLike:
    """``height(v, as_percentage(50))`` → ``v.height == container.height * 0.5``."""
    return translate(view, LayoutIntent.HEIGHT, value, engine)


def top_margin(
    view: ViewLike, value: Operand, engine: Optional[ConstraintEngine] = None
) -> ViewLike:
    """``top_margin(v, as_percentage(20))`` → ``v.top == container.bottom * 0.2``.

    Absolute: ``top_margin(v, 20)`` → ``v.top == container.top + 20``.
    """
    return translate(view, LayoutIntent.TOP_MARGIN, value, engine)


def left_margin(
    view: ViewLike, value: Operand, engine: Optional[ConstraintEngine] = None
) -> ViewLike:
    """``left_margin(v, as_percentage(20))`` → ``v.left == container.right * 0.2``.

    Absolute: ``left_margin(v, 20)`` → ``v.left == container.left + 20``.
    """
    return translate(view, LayoutIntent.LEFT_MARGIN, value, engine)


def right_margin(
    view: ViewLike, value: Operand, engine: Optional[ConstraintEngine] = None
) -> ViewLike:
    """``right_margin(v, as_percentage(20))`` → ``v.right == container.right * 0.8``.

    At exactly 100% the view is pinned flush left instead:
    ``v.right == container.left``.

    Absolute: ``right_margin(v, 20)`` → ``v.right == container.right - 20``;
    ``right_margin(v, at_most(20))`` → ``v.right >= container.right - 20``.
    """
    return translate(view, LayoutIntent.RIGHT_MARGIN, value, engine)


def bottom_margin(
    view: ViewLike, value: Operand, engine: Optional[ConstraintEngine] = None
) -> ViewLike:
    """``bottom_margin(v, as_percentage(20))`` → ``v.bottom == container.bottom * 0.8``.

    At exactly 100% the view is pinned flush top instead:
    ``v.bottom == container.top``.
    """
    return translate(view, LayoutIntent.BOTTOM_MARGIN, value, engine)


# ── Rule application ───────────────────────────────────────────────────────────


def _number(value: object) -> float:
    """Normalise any non-complex number (int, float, Decimal, Fraction) to float."""
    if isinstance(value, (bool, complex)) or not isinstance(value, Number):
        raise TypeError(
            f"layout operand must be a Percentage, Flexible or number, got {type(value).__name__}"
        )
    return float(value)  # type: ignore[arg-type]


def _apply_percentage(
    view: ViewLike, rule: IntentRule, percent: float, engine: ConstraintEngine
) -> None:
    container = view.container
    if container is None:
        logger.debug("%s has no container; skipping %s", view, rule.id.value)
        return
    subject = _required(rule.subject, "subject", rule)
    if rule.complement and percent == _FULL:
        _issue(
            engine,
            view.anchor(subject),
            RelationKind.EQUAL,
            container.anchor(_required(rule.flush_reference, "flush_reference", rule)),
            1.0,
            0.0,
        )
        return
    fraction = _FULL - percent if rule.complement else percent
    _issue(
        engine,
        view.anchor(subject),
        RelationKind.EQUAL,
        container.anchor(_required(rule.percent_reference, "percent_reference", rule)),
        fraction / _FULL,
        0.0,
    )


def _apply_absolute(
    view: ViewLike,
    rule: IntentRule,
    kind: RelationKind,
    value: float,
    engine: ConstraintEngine,
) -> None:
    subject = view.anchor(_required(rule.subject, "subject", rule))
    if rule.absolute_reference is None:
        _issue(engine, subject, kind, None, 1.0, value)
        return
    container = view.container
    if container is None:
        logger.debug("%s has no container; skipping %s", view, rule.id.value)
        return
    if rule.inset:
        kind, value = kind.inverted(), -value
    _issue(engine, subject, kind, container.anchor(rule.absolute_reference), 1.0, value)


def _issue(
    engine: ConstraintEngine,
    subject: AttributeRef,
    kind: RelationKind,
    reference: Optional[AttributeRef],
    multiplier: float,
    constant: float,
) -> Relation:
    relation = engine.create_relation(subject, kind, reference, multiplier, constant)
    logger.debug("Requested relation %s", relation)
    return relation


def _required(attribute: Optional[Attribute], field: str, rule: IntentRule) -> Attribute:
    if attribute is None:
        raise ValueError(f"intent {rule.id.value!r}: {field} is not set")
    return attribute
