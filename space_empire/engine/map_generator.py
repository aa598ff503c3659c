"""Universe generation.

The universe is a fixed 3x3 grid of nine systems. Ids run row by row so
that system n sits at (n % 3, n // 3):

    0   1   2
    3   4   5
    6   7   8

The links between them are the constant SYSTEM_LINKS list. Generation
is deterministic: every call yields the same nodes and edges.
"""

from ..models.solar_system import SolarSystem
from ..models.starmap import Starmap
from ..utils import GRID_X, NUM_SYSTEMS, SYSTEM_LINKS


def generate_universe() -> Starmap:
    """Build the fixed nine-system starmap.

    Returns:
        Starmap with systems 0..8, no owners, and every link stored in both
        directions
    """
    starmap = Starmap()

    for n in range(NUM_SYSTEMS):
        starmap.add_system(SolarSystem(id=n, location=(n % GRID_X, n // GRID_X)))

    for a, b in SYSTEM_LINKS:
        starmap.connect(a, b)

    return starmap
