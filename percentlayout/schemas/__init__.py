"""
Value types for percentlayout.

Provides the operand types callers pass to layout intents (Percentage,
Flexible) and the relation vocabulary handed to the constraint engine.
"""

from .percentage import Flexible, Percentage, as_percentage, at_least, at_most
from .relation import Attribute, AttributeRef, Relation, RelationKind

__all__ = [
    # percentage
    "Percentage",
    "Flexible",
    "as_percentage",
    "at_most",
    "at_least",
    # relation
    "Attribute",
    "RelationKind",
    "AttributeRef",
    "Relation",
]
