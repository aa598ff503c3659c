"""Utility constants for Space Empire."""

from .constants import (
    BACKGROUND_COLOR,
    CELL_SPACING,
    GRID_X,
    GRID_Y,
    HOMEWORLD_SYSTEMS,
    LINK_COLOR,
    MARKER_SIZE,
    NUM_PLAYERS,
    NUM_SYSTEMS,
    SYSTEM_COLOR,
    SYSTEM_LINKS,
)

__all__ = [
    "BACKGROUND_COLOR",
    "CELL_SPACING",
    "GRID_X",
    "GRID_Y",
    "HOMEWORLD_SYSTEMS",
    "LINK_COLOR",
    "MARKER_SIZE",
    "NUM_PLAYERS",
    "NUM_SYSTEMS",
    "SYSTEM_COLOR",
    "SYSTEM_LINKS",
]
