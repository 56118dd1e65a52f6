"""
Tests for league standings.
"""

from fantasy_f1.features.races import Selection
from fantasy_f1.features.scoring import ScoredRound, ScoringService, build_standings


def _scored(service, user_id, round, selection, race, race_name=None):
    return ScoredRound(
        user_id=user_id,
        round=round,
        score=service.calculate_race_points(selection, race),
        race_name=race_name,
    )


class TestBuildStandings:
    """Tests for build_standings."""

    def test_driver_and_constructor_totals(self, roster_catalog, selection, make_race):
        service = ScoringService(roster_catalog)
        u2 = Selection("L. Norris", "C. Leclerc", "McLaren")
        r1, r2 = make_race(round=1), make_race(round=2, sprint=True, sprint_order=["O. Piastri"])

        standings = build_standings([
            _scored(service, "u1", 2, selection, r2, "Miami"),
            _scored(service, "u1", 1, selection, r1, "Bahrain"),
            _scored(service, "u2", 1, u2, r1, "Bahrain"),
        ])

        drivers = standings.driver_standings
        # u1: 15 + (15 + 8 sprint reserve) = 38, u2: 25
        assert [(s.user_id, s.total_points) for s in drivers] == [("u1", 38), ("u2", 25)]
        assert [r.round for r in drivers[0].rounds] == [1, 2]
        assert drivers[0].rounds[1].reserve_points == 8
        assert drivers[0].rounds[1].race_name == "Miami"

        constructors = standings.constructor_standings
        # u1: 33 + 33, u2: 35
        assert [(s.user_id, s.total_points) for s in constructors] == [("u1", 66), ("u2", 35)]
        assert constructors[1].rounds[0].team == "McLaren"

    def test_ties_sorted_by_user(self, roster_catalog, selection, make_race):
        service = ScoringService(roster_catalog)
        race = make_race()
        standings = build_standings([
            _scored(service, "b", 1, selection, race),
            _scored(service, "a", 1, selection, race),
        ])
        assert [s.user_id for s in standings.driver_standings] == ["a", "b"]

    def test_dns_status_carried(self, roster_catalog, selection, make_race):
        service = ScoringService(roster_catalog)
        race = make_race(order=["L. Norris", "O. Piastri"])
        standings = build_standings([_scored(service, "u1", 1, selection, race)])

        entry = standings.driver_standings[0].rounds[0]
        assert entry.main_driver_status == "DNS"
        assert entry.total_points == 18

    def test_empty(self):
        standings = build_standings([])
        assert standings.to_dict() == {"driver_standings": [], "constructor_standings": []}
