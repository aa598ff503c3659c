"""Ship data model."""

import enum
from dataclasses import dataclass, field


class ShipClass(enum.Enum):
    """Kinds of ships a fleet can hold."""

    COLONY = "colony"
    SCOUT = "scout"
    FIGHTER = "fighter"


# (health, speed, damage) keyed by ship class
SHIP_STATS = {
    ShipClass.COLONY: (100, 10, 10),
    ShipClass.SCOUT: (50, 30, 5),
    ShipClass.FIGHTER: (150, 10, 100),
}


@dataclass(frozen=True)
class Ship:
    """A single ship.

    Stats come from SHIP_STATS. They are carried as data only; no combat
    is resolved against them.
    """

    ship_class: ShipClass
    health: int = field(init=False)
    speed: int = field(init=False)
    damage: int = field(init=False)

    def __post_init__(self):
        """Resolve stats from the class table."""
        if not isinstance(self.ship_class, ShipClass):
            raise ValueError(f"Invalid ship class: {self.ship_class!r}")
        health, speed, damage = SHIP_STATS[self.ship_class]
        object.__setattr__(self, "health", health)
        object.__setattr__(self, "speed", speed)
        object.__setattr__(self, "damage", damage)
