"""Player data model and resource gathering."""

import enum
from dataclasses import dataclass, field
from typing import List

from .resources import Resources
from .starmap import Starmap


class GatheringPolicy(enum.Enum):
    """How a gathering pass combines production with the current stock.

    RESET replaces the stock with this pass's production, so repeated
    passes over unchanged ownership give the same total. ACCUMULATE adds
    the production onto the existing stock every pass.
    """

    RESET = "reset"
    ACCUMULATE = "accumulate"


@dataclass(eq=False)
class Player:
    """A player and their resource stock.

    Players are identified by id alone: two Player objects with the same
    id compare equal whatever their resources.
    """

    id: int  # Player id (0, 1, ...)
    resources: Resources = field(default_factory=Resources.zero)

    def __post_init__(self):
        """Validate player data after initialization."""
        if self.id < 0:
            raise ValueError(f"Invalid player id: {self.id} (must be >= 0)")

    def gather_resources(
        self, starmap: Starmap, policy: GatheringPolicy = GatheringPolicy.RESET
    ) -> Resources:
        """Recompute resources from every built system this player owns.

        Args:
            starmap: Map to read ownership and buildings from (not modified)
            policy: Whether to replace or add onto the current stock

        Returns:
            The updated resources
        """
        production = starmap.production_for(self.id)
        if policy is GatheringPolicy.ACCUMULATE:
            self.resources = self.resources + production
        else:
            self.resources = production
        return self.resources

    @staticmethod
    def create_players(count: int) -> List["Player"]:
        """Create players with ids 0..count-1 and empty stock."""
        if count < 0:
            raise ValueError(f"Invalid player count: {count} (must be >= 0)")
        return [Player(id=i) for i in range(count)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
