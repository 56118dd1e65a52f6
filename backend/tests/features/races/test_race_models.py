"""
Tests for race result and selection dataclasses.
"""

from fantasy_f1.config import settings
from fantasy_f1.features.races import DriverResult, RaceResult, Selection, TeamResult


# =============================================================================
# Test Data
# =============================================================================

CAMEL_PAYLOAD = {
    "season": 2026,
    "round": 5,
    "isSprintWeekend": True,
    "raceName": "Miami Grand Prix",
    "results": [
        {"driver": "Max Verstappen", "position": 1, "points": 25},
        {"driver": "Lando Norris", "position": "DNF", "points": 0, "didNotFinish": True},
        {"driver": "Oscar Piastri", "didNotStart": True},
    ],
    "sprintResults": [{"driver": "Oscar Piastri", "position": 2, "points": 7}],
    "teamResults": [{"team": "McLaren", "racePoints": 0, "sprintPoints": 7, "totalPoints": 7}],
}


class TestRaceResultFromDict:
    """Tests for RaceResult.from_dict."""

    def test_camel_case_payload(self):
        race = RaceResult.from_dict(CAMEL_PAYLOAD)

        assert race.season == 2026
        assert race.round == 5
        assert race.is_sprint_weekend is True
        assert race.race_name == "Miami Grand Prix"
        assert race.results[0] == DriverResult("Max Verstappen", 1, 25)
        assert race.sprint_results[0].points == 7
        assert race.team_results == [TeamResult("McLaren", 0, 7, 7)]

    def test_status_positions_become_none(self):
        """Non-numeric positions ("DNF") are unclassified."""
        race = RaceResult.from_dict(CAMEL_PAYLOAD)
        norris = race.results[1]
        assert norris.position is None
        assert norris.did_not_finish is True

    def test_missing_fields_default(self):
        race = RaceResult.from_dict(CAMEL_PAYLOAD)
        piastri = race.results[2]
        assert piastri.points == 0
        assert piastri.position is None
        assert piastri.did_not_start is True

    def test_snake_case_payload(self):
        race = RaceResult.from_dict({"season": "2025", "round": "3", "is_sprint_weekend": False})
        assert race.season == 2025
        assert race.round == 3
        assert race.results == []

    def test_grid_size_counts_classified_only(self):
        """Norris (DNF) and Piastri (DNS) have no position."""
        race = RaceResult.from_dict(CAMEL_PAYLOAD)
        assert len(race.results) == 3
        assert race.grid_size == 1
        assert RaceResult(season=2026, round=1).grid_size == 20

    def test_grid_size_default_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "default_grid_size", 22)
        assert RaceResult(season=2026, round=1).grid_size == 22

    def test_to_dict(self):
        data = RaceResult.from_dict(CAMEL_PAYLOAD).to_dict()
        assert data["results"][0]["driver"] == "Max Verstappen"
        assert data["team_results"][0]["sprint_points"] == 7


class TestSelectionFromDict:
    """Tests for Selection.from_dict."""

    def test_camel_case(self):
        selection = Selection.from_dict({
            "mainDriver": "M. Verstappen",
            "reserveDriver": "L. Norris",
            "team": "Ferrari",
            "round": 2,
            "leagueId": "L1",
            "userId": "u1",
        })
        assert selection == Selection("M. Verstappen", "L. Norris", "Ferrari", 2, "L1", "u1")

    def test_snake_case_wins(self):
        selection = Selection.from_dict({"main_driver": "A", "mainDriver": "B", "team": None})
        assert selection.main_driver == "A"
        assert selection.reserve_driver is None
