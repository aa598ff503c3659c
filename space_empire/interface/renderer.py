"""Starmap rendering.

Two views of the same read-only starmap: a Frame of shapes for a
graphical toolkit, and an ASCII grid for terminal displays.
"""

from typing import Tuple

from ..models.building import BuildingClass
from ..models.solar_system import SolarSystem
from ..models.starmap import Starmap
from ..utils import (
    BACKGROUND_COLOR,
    CELL_SPACING,
    GRID_X,
    GRID_Y,
    LINK_COLOR,
    MARKER_SIZE,
    SYSTEM_COLOR,
)
from .schemas import Frame, LineShape, RectShape

BUILDING_MARKERS = {
    BuildingClass.FARM: "F",
    BuildingClass.LABORATORY: "L",
    BuildingClass.GOLD_MINE: "G",
}


class MapRenderer:
    """Renders the starmap without touching it."""

    def marker_origin(self, system: SolarSystem) -> Tuple[int, int]:
        """Top-left pixel of a system's marker."""
        x, y = system.location
        return x * CELL_SPACING, y * CELL_SPACING

    def marker_center(self, system: SolarSystem) -> Tuple[int, int]:
        """Centre pixel of a system's marker."""
        x, y = self.marker_origin(system)
        half = MARKER_SIZE // 2
        return x + half, y + half

    def render_frame(self, starmap: Starmap) -> Frame:
        """Build the shapes for one frame.

        One 50x50 rectangle per system at location * 80, and one line per
        undirected link between the two marker centres.

        Args:
            starmap: Map to draw

        Returns:
            Frame with rects in system id order and lines in link order
        """
        rects = []
        for system in starmap.systems:
            x, y = self.marker_origin(system)
            rects.append(
                RectShape(
                    system_id=system.id,
                    x=x,
                    y=y,
                    width=MARKER_SIZE,
                    height=MARKER_SIZE,
                    color=SYSTEM_COLOR,
                )
            )

        lines = []
        for a, b in starmap.neighbour_pairs:
            # Each link is stored both ways; draw it once
            if a > b:
                continue
            lines.append(
                LineShape(
                    a=a,
                    b=b,
                    start=self.marker_center(starmap.get_system(a)),
                    end=self.marker_center(starmap.get_system(b)),
                    color=LINK_COLOR,
                )
            )

        return Frame(background=BACKGROUND_COLOR, rects=rects, lines=lines)

    def render(self, starmap: Starmap) -> str:
        """Render the starmap as an ASCII grid.

        Output format (3x3 grid, 3 chars per cell):
        P0G ... ...
        ... ... ...
        ... ... P1G

        Legend:
        - '...' = unclaimed system with no building
        - 'P<n>' = system owned by player n
        - trailing 'F'/'L'/'G' = farm, laboratory or gold mine
        - '.' in the building slot = nothing built

        Args:
            starmap: Map to render

        Returns:
            Multi-line ASCII string, one line per grid row
        """
        grid = [["   "] * GRID_X for _ in range(GRID_Y)]

        for system in starmap.systems:
            x, y = system.location
            grid[y][x] = self._render_system_cell(system)

        return "\n".join(" ".join(row) for row in grid)

    def _render_system_cell(self, system: SolarSystem) -> str:
        owner = f"P{system.owner}" if system.owner is not None else ".."
        building = BUILDING_MARKERS[system.building.building_class] if system.building else "."
        return f"{owner}{building}"
