"""
Layout intent vocabulary and the frozen rule entries loaded from YAML.

An IntentRule tells the translator which subject attribute an intent pins and
which container attribute it is measured against, for both percentage and
absolute operands. Rules are read-only after the registry is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from percentlayout.schemas.relation import Attribute


class LayoutIntent(str, Enum):
    SIZE = "size"
    WIDTH = "width"
    HEIGHT = "height"
    TOP_MARGIN = "top_margin"
    LEFT_MARGIN = "left_margin"
    RIGHT_MARGIN = "right_margin"
    BOTTOM_MARGIN = "bottom_margin"


@dataclass(frozen=True)
class IntentRule:
    """
    Translation rule for one layout intent.

    Attributes:
        id: The intent this rule translates.
        subject: Attribute pinned on the view. None for composite intents.
        percent_reference: Container attribute a percentage scales.
        complement: Scale by (100 - value) instead of value.
        flush_reference: Container attribute the subject is set equal to when
            a complement rule receives exactly 100%.
        absolute_reference: Container attribute an absolute operand is offset
            from. None means the operand is a plain constant.
        inset: The absolute offset is measured inward from the far edge, so
            the constant is negated and inequalities are inverted.
        expands_to: Intents a composite intent applies in order.
    """

    id: LayoutIntent
    subject: Optional[Attribute] = None
    percent_reference: Optional[Attribute] = None
    complement: bool = False
    flush_reference: Optional[Attribute] = None
    absolute_reference: Optional[Attribute] = None
    inset: bool = False
    expands_to: tuple[LayoutIntent, ...] = ()

    @property
    def is_composite(self) -> bool:
        return bool(self.expands_to)
