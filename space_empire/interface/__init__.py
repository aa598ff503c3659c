"""Display collaborators for Space Empire."""

from .display import DisplayManager
from .renderer import MapRenderer
from .schemas import Frame, LineShape, RectShape

__all__ = [
    "DisplayManager",
    "Frame",
    "LineShape",
    "MapRenderer",
    "RectShape",
]
