"""
percentlayout: layout constraints expressed as percentages of a container.

Translates layout intents (size, width, height and the four margins) into
linear relations for an external constraint engine. Percentages are resolved
against the view's immediate container; absolute operands are supported too.
"""

from .engine import ConstraintEngine, RecordingEngine, get_engine, set_engine
from .intents import IntentRegistry, IntentRule, LayoutIntent, get_registry
from .schemas import (
    Attribute,
    AttributeRef,
    Flexible,
    Percentage,
    Relation,
    RelationKind,
    as_percentage,
    at_least,
    at_most,
)
from .translator import (
    bottom_margin,
    height,
    left_margin,
    right_margin,
    size,
    top_margin,
    translate,
    width,
)
from .views import LayoutView, ViewLike

__all__ = [
    # operands
    "Percentage",
    "Flexible",
    "as_percentage",
    "at_most",
    "at_least",
    # relations
    "Attribute",
    "RelationKind",
    "AttributeRef",
    "Relation",
    # engine
    "ConstraintEngine",
    "RecordingEngine",
    "get_engine",
    "set_engine",
    # intents
    "LayoutIntent",
    "IntentRule",
    "IntentRegistry",
    "get_registry",
    # views
    "ViewLike",
    "LayoutView",
    # translator
    "translate",
    "size",
    "width",
    "height",
    "top_margin",
    "left_margin",
    "right_margin",
    "bottom_margin",
]
