"""Fleet data model for groups of ships stationed together."""

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from .errors import InsufficientShipsError
from .ship import Ship, ShipClass

logger = logging.getLogger(__name__)


class FleetLocation(enum.Enum):
    """Where a fleet currently is.

    MOVING is reserved for fleets in transit between systems. Nothing
    puts a fleet into that state yet.
    """

    SOMEWHERE = "somewhere"
    MOVING = "moving"


@dataclass
class Fleet:
    """A bag of ships grouped by class.

    Each class keeps its ships in insertion order and behaves as a stack:
    the most recently added ship of a class is the first one to leave on
    a transfer.
    """

    ships: Dict[ShipClass, List[Ship]] = field(default_factory=dict)
    location: FleetLocation = FleetLocation.SOMEWHERE

    def add(self, ship: Ship) -> None:
        """Add a ship on top of its class stack."""
        self.ships.setdefault(ship.ship_class, []).append(ship)

    def merge(self, other: "Fleet") -> None:
        """Move every ship of another fleet into this one.

        Ships keep the other fleet's per-class order. The other fleet is
        left empty.

        Args:
            other: Fleet to absorb
        """
        if other is self:
            return
        for ships in other.ships.values():
            for ship in ships:
                self.add(ship)
        other.ships.clear()

    def size(self) -> int:
        """Return the total number of ships across all classes."""
        return sum(len(ships) for ships in self.ships.values())

    def count(self, ship_class: ShipClass) -> int:
        """Return the number of ships of one class (0 if none were ever added)."""
        return len(self.ships.get(ship_class, ()))

    def ships_of(self, ship_class: ShipClass) -> Tuple[Ship, ...]:
        """Return the ships of one class, oldest first."""
        return tuple(self.ships.get(ship_class, ()))

    def move_to(self, destination: "Fleet", number: int, ship_class: ShipClass) -> None:
        """Transfer ships of one class to another fleet.

        The transfer is all-or-nothing: availability is checked before any
        ship moves. Ships leave last-added first and are appended to the
        destination through its add().

        Args:
            destination: Fleet receiving the ships
            number: How many ships to transfer
            ship_class: Class of ships to transfer

        Raises:
            ValueError: If number is negative
            InsufficientShipsError: If fewer than number ships of that class
                are present
        """
        if number < 0:
            raise ValueError(f"Invalid number of ships: {number} (must be >= 0)")

        available = self.count(ship_class)
        if number > available:
            raise InsufficientShipsError(ship_class, number, available)

        if number == 0:
            return

        stack = self.ships[ship_class]
        for _ in range(number):
            destination.add(stack.pop())

        logger.debug(
            "Moved %d %s ship(s), %d left in source fleet",
            number,
            ship_class.value,
            len(stack),
        )

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Ship]:
        for ships in self.ships.values():
            yield from ships
