"""Tests for starmap queries and homeworld assignment."""

import pytest

from space_empire.engine import generate_universe
from space_empire.models import (
    BuildingClass,
    InvalidPlayerCountError,
    Resources,
    SolarSystem,
    SpaceEmpireError,
    Starmap,
    UnknownSystemError,
)


class TestSystemLookup:
    """Test get_system and iteration."""

    def test_get_existing_system(self):
        starmap = generate_universe()
        system = starmap.get_system(4)
        assert system.id == 4
        assert system.location == (1, 1)

    def test_unknown_system(self):
        starmap = generate_universe()

        with pytest.raises(UnknownSystemError, match="Solar system 42 does not exist") as exc_info:
            starmap.get_system(42)

        assert exc_info.value.system_id == 42
        assert isinstance(exc_info.value, LookupError)
        assert isinstance(exc_info.value, SpaceEmpireError)

    def test_iteration_in_id_order(self):
        starmap = generate_universe()
        assert [s.id for s in starmap] == list(range(9))


class TestNeighbours:
    """Test adjacency queries."""

    def test_neighbours_of(self):
        starmap = generate_universe()
        assert starmap.neighbours_of(2) == [0, 6, 8]
        assert starmap.neighbours_of(4) == []

    def test_neighbours_of_unknown_system(self):
        starmap = generate_universe()
        with pytest.raises(UnknownSystemError):
            starmap.neighbours_of(9)

    def test_are_neighbours(self):
        starmap = generate_universe()
        assert starmap.are_neighbours(7, 5)
        assert starmap.are_neighbours(5, 7)
        assert not starmap.are_neighbours(0, 1)

    def test_connect_stores_both_directions(self):
        starmap = Starmap()
        starmap.add_system(SolarSystem(id=0))
        starmap.add_system(SolarSystem(id=1, location=(1, 0)))

        starmap.connect(0, 1)

        assert starmap.neighbour_pairs == [(0, 1), (1, 0)]

    def test_connect_unknown_system(self):
        starmap = Starmap()
        starmap.add_system(SolarSystem(id=0))
        with pytest.raises(UnknownSystemError):
            starmap.connect(0, 5)
        assert starmap.neighbours == set()

    def test_connect_self_loop_rejected(self):
        starmap = Starmap()
        starmap.add_system(SolarSystem(id=0))
        with pytest.raises(ValueError, match="to itself"):
            starmap.connect(0, 0)

    def test_duplicate_system_rejected(self):
        starmap = Starmap()
        starmap.add_system(SolarSystem(id=0))
        with pytest.raises(ValueError, match="already exists"):
            starmap.add_system(SolarSystem(id=0))


class TestHomeworlds:
    """Test set_homeworlds."""

    def test_assigns_fixed_systems(self):
        starmap = generate_universe()

        starmap.set_homeworlds([10, 20])

        first = starmap.get_system(0)
        second = starmap.get_system(8)
        assert first.owner == 10
        assert second.owner == 20
        assert first.building.building_class == BuildingClass.GOLD_MINE
        assert second.building.building_class == BuildingClass.GOLD_MINE

    def test_only_homeworlds_claimed(self):
        starmap = generate_universe()
        starmap.set_homeworlds((1, 2))
        claimed = [s.id for s in starmap.systems if s.owner is not None]
        assert claimed == [0, 8]

    @pytest.mark.parametrize("players", [[], [1], [1, 2, 3]])
    def test_wrong_player_count(self, players):
        starmap = generate_universe()

        with pytest.raises(InvalidPlayerCountError) as exc_info:
            starmap.set_homeworlds(players)

        assert exc_info.value.count == len(players)
        for system in starmap.systems:
            assert system.owner is None
            assert system.building is None

    def test_missing_homeworld_system_mutates_nothing(self):
        starmap = Starmap()
        starmap.add_system(SolarSystem(id=0))

        with pytest.raises(UnknownSystemError):
            starmap.set_homeworlds([1, 2])

        assert starmap.get_system(0).owner is None


class TestOwnership:
    """Test ownership and production queries."""

    def test_owned_by(self):
        starmap = generate_universe()
        starmap.set_homeworlds([0, 1])
        starmap.get_system(4).owner = 0

        assert [s.id for s in starmap.owned_by(0)] == [0, 4]
        assert [s.id for s in starmap.owned_by(1)] == [8]
        assert starmap.owned_by(7) == []

    def test_production_for_skips_unbuilt_and_foreign(self):
        starmap = generate_universe()
        starmap.set_homeworlds([0, 1])
        starmap.get_system(4).owner = 0  # owned, nothing built
        starmap.get_system(3).build(BuildingClass.FARM)  # built, unowned
        starmap.get_system(5).owner = 0
        starmap.get_system(5).build(BuildingClass.LABORATORY)

        assert starmap.production_for(0) == Resources(food=0, technology=2, gold=8)
        assert starmap.production_for(1) == Resources(gold=8)
        assert starmap.production_for(2) == Resources.zero()

    def test_player_count_fixed_by_homeworld_slots(self, monkeypatch):
        monkeypatch.setattr("space_empire.utils.constants.NUM_PLAYERS", 3)
        starmap = generate_universe()

        with pytest.raises(InvalidPlayerCountError):
            starmap.set_homeworlds([1, 2, 3])

        assert all(s.owner is None for s in starmap.systems)
