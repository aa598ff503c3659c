"""Tests for universe generation."""

from space_empire.engine import generate_universe
from space_empire.utils import NUM_SYSTEMS, SYSTEM_LINKS

EXPECTED_LINKS = {
    frozenset(link)
    for link in [(1, 3), (0, 2), (1, 5), (0, 6), (2, 6), (2, 8), (3, 7), (6, 8), (7, 5)]
}


class TestGenerateUniverse:
    """Test the fixed starmap."""

    def test_nine_systems_with_grid_locations(self):
        starmap = generate_universe()

        assert len(starmap) == NUM_SYSTEMS == 9
        assert [s.id for s in starmap.systems] == list(range(9))
        for system in starmap.systems:
            assert system.location == (system.id % 3, system.id // 3)

    def test_systems_start_unclaimed(self):
        starmap = generate_universe()
        for system in starmap.systems:
            assert system.owner is None
            assert system.building is None
            assert system.fleet is None

    def test_neighbour_relation_is_symmetric(self):
        starmap = generate_universe()
        for a, b in starmap.neighbour_pairs:
            assert (b, a) in starmap.neighbours

    def test_exact_edge_set(self):
        starmap = generate_universe()

        assert len(starmap.neighbours) == 2 * len(SYSTEM_LINKS) == 18
        assert {frozenset(pair) for pair in starmap.neighbours} == EXPECTED_LINKS

    def test_no_self_loops_and_known_ids(self):
        starmap = generate_universe()
        for a, b in starmap.neighbours:
            assert a != b
            assert a in starmap.systems_by_id
            assert b in starmap.systems_by_id

    def test_deterministic(self):
        first = generate_universe()
        second = generate_universe()

        assert first.neighbours == second.neighbours
        assert [s.location for s in first.systems] == [s.location for s in second.systems]

    def test_generated_maps_are_independent(self):
        first = generate_universe()
        second = generate_universe()

        first.get_system(0).set_homeworld(0)

        assert second.get_system(0).owner is None
