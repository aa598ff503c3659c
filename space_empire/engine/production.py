"""Gathering pass: resource production for every player.

Each player recomputes their stock from the buildings on the systems
they own. The starmap is only read, so every player in one pass sees
the same ownership snapshot.
"""

from dataclasses import dataclass
from typing import Iterable, List

from ..models.player import GatheringPolicy, Player
from ..models.resources import Resources
from ..models.starmap import Starmap


@dataclass
class GatheringEvent:
    """Record of one player's gathering pass.

    Attributes:
        player_id: Player who gathered
        before: Stock before the pass
        after: Stock after the pass
        producing_systems: Ids of owned systems that have a building
    """

    player_id: int
    before: Resources
    after: Resources
    producing_systems: List[int]


def process_gathering(
    starmap: Starmap,
    players: Iterable[Player],
    policy: GatheringPolicy = GatheringPolicy.RESET,
) -> List[GatheringEvent]:
    """Run one gathering pass for every player.

    Args:
        starmap: Current map (not modified)
        players: Players to gather for, in order
        policy: Whether production replaces or adds onto each stock

    Returns:
        One GatheringEvent per player, in the order given
    """
    events = []
    for player in players:
        before = player.resources
        after = player.gather_resources(starmap, policy)
        producing = [s.id for s in starmap.owned_by(player.id) if s.building is not None]
        events.append(
            GatheringEvent(
                player_id=player.id,
                before=before,
                after=after,
                producing_systems=producing,
            )
        )
    return events
