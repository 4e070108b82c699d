from .registry import IntentRegistry, get_registry
from .types import IntentRule, LayoutIntent

__all__ = [
    "LayoutIntent",
    "IntentRule",
    "IntentRegistry",
    "get_registry",
]
