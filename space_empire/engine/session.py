"""Game session: one starmap and its players."""

import logging
from typing import List

from ..models.player import GatheringPolicy, Player
from ..models.starmap import Starmap
from ..utils import NUM_PLAYERS
from .map_generator import generate_universe
from .production import GatheringEvent, process_gathering

logger = logging.getLogger(__name__)


class SpaceEmpire:
    """Owns the starmap and players of a session and drives its steps.

    This is the only object the display and input loops talk to: they
    call step() once per player action and read starmap/players to
    draw. Homeworlds are not assigned on construction; call
    set_homeworlds() for that.
    """

    def __init__(
        self,
        num_players: int = NUM_PLAYERS,
        policy: GatheringPolicy = GatheringPolicy.RESET,
    ):
        """Create a session on a freshly generated universe.

        Args:
            num_players: Number of players to create (ids 0..num_players-1)
            policy: Gathering policy used by every step
        """
        self._starmap = generate_universe()
        self._players = Player.create_players(num_players)
        self.policy = policy
        self.turn = 0

    @property
    def starmap(self) -> Starmap:
        return self._starmap

    @property
    def players(self) -> List[Player]:
        return list(self._players)

    def get_player(self, player_id: int) -> Player:
        """Look up a player by id.

        Raises:
            KeyError: If no player has that id
        """
        for player in self._players:
            if player.id == player_id:
                return player
        raise KeyError(f"Player {player_id} does not exist")

    def set_homeworlds(self) -> None:
        """Give each player of the session their homeworld.

        Raises:
            InvalidPlayerCountError: If the session does not have two players
        """
        self._starmap.set_homeworlds([p.id for p in self._players])
        logger.info("Homeworlds assigned to players %s", [p.id for p in self._players])

    def step(self) -> List[GatheringEvent]:
        """Advance the simulation by one step.

        Runs a gathering pass for every player and logs the new totals.
        Nothing else happens automatically: no building, no fleet movement.

        Returns:
            One GatheringEvent per player
        """
        events = process_gathering(self._starmap, self._players, self.policy)
        self.turn += 1
        for event in events:
            logger.info("Player %d resources: %s", event.player_id, event.after)
        return events
