from .translator import (
    Operand,
    bottom_margin,
    height,
    left_margin,
    right_margin,
    size,
    top_margin,
    translate,
    width,
)

__all__ = [
    "Operand",
    "translate",
    "size",
    "width",
    "height",
    "top_margin",
    "left_margin",
    "right_margin",
    "bottom_margin",
]
