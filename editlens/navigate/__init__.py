from .navigator import (
    Direction,
    HunkNavigator,
    Viewport,
    anchors_from_hunks,
    anchors_from_markers,
    suggest_viewport,
)

__all__ = [
    "Direction",
    "HunkNavigator",
    "Viewport",
    "anchors_from_hunks",
    "anchors_from_markers",
    "suggest_viewport",
]
