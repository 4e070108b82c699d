from .view import LayoutView, ViewLike

__all__ = [
    "ViewLike",
    "LayoutView",
]
