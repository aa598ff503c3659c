"""Solar system data model."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .building import Building, BuildingClass
from .fleet import Fleet


@dataclass
class SolarSystem:
    """One node of the starmap.

    A system may have an owner, a building and a stationed fleet. None of
    these depend on each other: a building can exist without an owner and
    an owner can hold a system with nothing built on it.
    """

    id: int  # Unique system id
    location: Tuple[int, int] = (0, 0)  # Grid cell (x, y)
    owner: Optional[int] = None  # Owning player id, None if unclaimed
    building: Optional[Building] = None
    fleet: Optional[Fleet] = None

    def __post_init__(self):
        """Validate system data after initialization."""
        if self.id < 0:
            raise ValueError(f"Invalid system id: {self.id} (must be >= 0)")
        x, y = self.location
        if x < 0 or y < 0:
            raise ValueError(f"Invalid location: {self.location} (must be >= 0)")

    def set_homeworld(self, player_id: int) -> None:
        """Make this system a player's homeworld with a starting gold mine."""
        self.owner = player_id
        self.build(BuildingClass.GOLD_MINE)

    def build(self, building_class: BuildingClass) -> None:
        """Replace the current building with a new one of the given class."""
        self.building = Building(building_class)

    def clear(self) -> None:
        """Drop owner, building and fleet."""
        self.building = None
        self.owner = None
        self.fleet = None

    def station(self, fleet: Fleet) -> None:
        """Take the ships of a fleet into this system's fleet.

        The ships move into a fleet owned by this system and the argument is
        left empty, so the same Fleet object never ends up on two systems.
        """
        if self.fleet is None:
            self.fleet = Fleet(location=fleet.location)
        self.fleet.merge(fleet)
