"""
View adapter: the minimal surface the translator needs from a host view.

Host toolkits own their views; ViewLike names the two things read from them
(the immediate container and per-attribute handles). LayoutView is a local
implementation of that surface with the layout intents as chainable methods,
so callers can write::

    label.width(as_percentage(50)).top_margin(as_percentage(20))
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from percentlayout.engine.module import ConstraintEngine
from percentlayout.schemas.relation import Attribute, AttributeRef
from percentlayout.translator import translator
from percentlayout.translator.translator import Operand


@runtime_checkable
class ViewLike(Protocol):
    """Protocol that any view passed to the translator must satisfy."""

    @property
    def container(self) -> Optional[ViewLike]:
        """The immediate containing view, or None when detached."""
        ...

    def anchor(self, attribute: Attribute) -> AttributeRef:
        """Return the handle for one of this view's layout attributes."""
        ...


class LayoutView:
    """
    A named node in a view tree.

    container may be assigned after construction; until then percentage and
    margin intents are silent no-ops. The view never owns its container and
    the intent methods never take ownership of the view: each returns self.
    """

    def __init__(self, name: str, container: Optional[ViewLike] = None) -> None:
        self.name = name
        self.container = container

    def __repr__(self) -> str:
        return f"LayoutView({self.name!r})"

    def anchor(self, attribute: Attribute) -> AttributeRef:
        return AttributeRef(view=self, attribute=Attribute(attribute))

    # ── Layout intents ─────────────────────────────────────────────────────────

    def size(self, value: Operand, engine: Optional[ConstraintEngine] = None) -> LayoutView:
        translator.size(self, value, engine)
        return self

    def width(self, value: Operand, engine: Optional[ConstraintEngine] = None) -> LayoutView:
        translator.width(self, value, engine)
        return self

    def height(self, value: Operand, engine: Optional[ConstraintEngine] = None) -> LayoutView:
        translator.height(self, value, engine)
        return self

    def top_margin(self, value: Operand, engine: Optional[ConstraintEngine] = None) -> LayoutView:
        translator.top_margin(self, value, engine)
        return self

    def left_margin(self, value: Operand, engine: Optional[ConstraintEngine] = None) -> LayoutView:
        translator.left_margin(self, value, engine)
        return self

    def right_margin(
        self, value: Operand, engine: Optional[ConstraintEngine] = None
    ) -> LayoutView:
        translator.right_margin(self, value, engine)
        return self

    def bottom_margin(
        self, value: Operand, engine: Optional[ConstraintEngine] = None
    ) -> LayoutView:
        translator.bottom_margin(self, value, engine)
        return self
