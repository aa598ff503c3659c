"""Starmap: the galaxy graph of solar systems."""

import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import Dict, Iterator, List, Sequence, Set, Tuple

from ..utils.constants import HOMEWORLD_SYSTEMS
from .errors import InvalidPlayerCountError, UnknownSystemError
from .resources import Resources
from .solar_system import SolarSystem

logger = logging.getLogger(__name__)


@dataclass
class Starmap:
    """Solar systems keyed by id plus an undirected neighbour relation.

    The relation is held as a set of directed id pairs; every link is
    stored in both directions so that (a, b) present implies (b, a)
    present. Systems never hold references to each other, adjacency is
    always resolved through ids.
    """

    systems_by_id: Dict[int, SolarSystem] = field(default_factory=dict)
    neighbours: Set[Tuple[int, int]] = field(default_factory=set)

    def add_system(self, system: SolarSystem) -> None:
        """Add a system to the map.

        Raises:
            ValueError: If a system with the same id already exists
        """
        if system.id in self.systems_by_id:
            raise ValueError(f"Solar system {system.id} already exists")
        self.systems_by_id[system.id] = system

    def connect(self, a: int, b: int) -> None:
        """Link two systems in both directions.

        Raises:
            UnknownSystemError: If either id is not on the map
            ValueError: If both ids are the same system
        """
        self.get_system(a)
        self.get_system(b)
        if a == b:
            raise ValueError(f"Cannot link solar system {a} to itself")
        self.neighbours.add((a, b))
        self.neighbours.add((b, a))

    def get_system(self, system_id: int) -> SolarSystem:
        """Look up a system by id.

        Raises:
            UnknownSystemError: If the id is not on the map
        """
        try:
            return self.systems_by_id[system_id]
        except KeyError:
            raise UnknownSystemError(system_id) from None

    @property
    def systems(self) -> List[SolarSystem]:
        """All systems in id order."""
        return [self.systems_by_id[sid] for sid in sorted(self.systems_by_id)]

    @property
    def neighbour_pairs(self) -> List[Tuple[int, int]]:
        """All directed neighbour pairs in sorted order."""
        return sorted(self.neighbours)

    def neighbours_of(self, system_id: int) -> List[int]:
        """Return the ids adjacent to a system, sorted.

        Raises:
            UnknownSystemError: If the id is not on the map
        """
        self.get_system(system_id)
        return sorted(b for a, b in self.neighbours if a == system_id)

    def are_neighbours(self, a: int, b: int) -> bool:
        """Check whether two systems are linked."""
        return (a, b) in self.neighbours

    def owned_by(self, player_id: int) -> List[SolarSystem]:
        """Return the systems owned by a player, in id order."""
        return [system for system in self.systems if system.owner == player_id]

    def production_for(self, player_id: int) -> Resources:
        """Sum the building production of every system a player owns.

        Systems without a building contribute nothing.
        """
        buildings = (s.building for s in self.owned_by(player_id) if s.building is not None)
        return reduce(lambda total, b: total + b.produce(), buildings, Resources.zero())

    def set_homeworlds(self, players: Sequence[int]) -> None:
        """Assign the fixed homeworld systems to two players.

        The first player gets system 0 and the second system 8; each
        homeworld starts with a gold mine.

        Args:
            players: Exactly two player ids

        Raises:
            InvalidPlayerCountError: If players does not hold two ids
            UnknownSystemError: If a homeworld system is missing from the map
        """
        if len(players) != len(HOMEWORLD_SYSTEMS):
            raise InvalidPlayerCountError(len(players))

        homeworlds = [self.get_system(sid) for sid in HOMEWORLD_SYSTEMS]
        for player_id, system in zip(players, homeworlds):
            system.set_homeworld(player_id)
            logger.debug("Player %d homeworld set to system %d", player_id, system.id)

    def __len__(self) -> int:
        return len(self.systems_by_id)

    def __iter__(self) -> Iterator[SolarSystem]:
        return iter(self.systems)
