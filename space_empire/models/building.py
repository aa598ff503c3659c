"""Building data model."""

import enum
from dataclasses import dataclass, field

from .resources import Resources


class BuildingClass(enum.Enum):
    """Kinds of production buildings."""

    FARM = "farm"
    LABORATORY = "laboratory"
    GOLD_MINE = "gold_mine"


# Production per gathering pass, keyed by building class
BUILDING_PRODUCTION = {
    BuildingClass.FARM: Resources(food=5, technology=0, gold=0),
    BuildingClass.LABORATORY: Resources(food=0, technology=2, gold=0),
    BuildingClass.GOLD_MINE: Resources(food=0, technology=0, gold=8),
}


@dataclass(frozen=True)
class Building:
    """A production building on a solar system.

    Production is looked up from BUILDING_PRODUCTION when the building is
    constructed and never changes afterwards.
    """

    building_class: BuildingClass
    production: Resources = field(init=False)

    def __post_init__(self):
        """Resolve production from the class table."""
        if not isinstance(self.building_class, BuildingClass):
            raise ValueError(f"Invalid building class: {self.building_class!r}")
        object.__setattr__(self, "production", BUILDING_PRODUCTION[self.building_class])

    def produce(self) -> Resources:
        """Return the resources this building yields per gathering pass."""
        return self.production
