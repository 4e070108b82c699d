"""
Constraint engine boundary.

The solver that activates and resolves relations lives outside this package.
Anything that satisfies ConstraintEngine can receive the relations the
translator requests.

RecordingEngine
---------------
Keeps every requested relation, in request order, without solving anything.
It is the default engine, so intents declared without an explicit engine are
still observable, and it is what the tests inspect.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from percentlayout.schemas.relation import AttributeRef, Relation, RelationKind

logger = logging.getLogger(__name__)


@runtime_checkable
class ConstraintEngine(Protocol):
    """Protocol that every constraint engine adapter must satisfy."""

    def create_relation(
        self,
        subject: AttributeRef,
        kind: RelationKind,
        reference: Optional[AttributeRef],
        multiplier: float,
        constant: float,
    ) -> Relation:
        """Create (and, for a live engine, activate) one relation."""
        ...


class RecordingEngine:
    """Engine that records relations instead of solving them."""

    def __init__(self) -> None:
        self.relations: list[Relation] = []

    def create_relation(
        self,
        subject: AttributeRef,
        kind: RelationKind,
        reference: Optional[AttributeRef],
        multiplier: float,
        constant: float,
    ) -> Relation:
        relation = Relation(
            subject=subject,
            kind=kind,
            reference=reference,
            multiplier=multiplier,
            constant=constant,
        )
        self.relations.append(relation)
        return relation

    def clear(self) -> None:
        """Forget every recorded relation."""
        self.relations.clear()


# ── Module-level default ───────────────────────────────────────────────────────

_engine: ConstraintEngine = RecordingEngine()


def get_engine() -> ConstraintEngine:
    """Return the engine used when an intent is called without one."""
    return _engine


def set_engine(engine: ConstraintEngine) -> ConstraintEngine:
    """Replace the default engine and return the previous one.

    Raises
    ------
    TypeError
        If *engine* does not satisfy ConstraintEngine.
    """
    global _engine
    if not isinstance(engine, ConstraintEngine):
        raise TypeError(f"engine must provide create_relation(), got {type(engine).__name__}")
    previous = _engine
    _engine = engine
    logger.debug("Default constraint engine set to %s", type(engine).__name__)
    return previous
