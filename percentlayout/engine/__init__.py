from .module import ConstraintEngine, RecordingEngine, get_engine, set_engine

__all__ = [
    "ConstraintEngine",
    "RecordingEngine",
    "get_engine",
    "set_engine",
]
