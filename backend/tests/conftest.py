"""
Shared fixtures: real roster/card content and race result builders.
"""

import pytest

from fantasy_f1.config import CONTENT_DIR, Settings
from fantasy_f1.features.cards import CardCatalog
from fantasy_f1.features.races import DriverResult, RaceResult, ResultLookup, Selection, TeamResult
from fantasy_f1.features.roster import RosterCatalog
from fantasy_f1.shared import CardType, points_for_position


# =============================================================================
# Test Data
# =============================================================================

# 2026 finishing order used by most tests (20 classified cars)
STANDARD_ORDER = [
    "L. Norris",       # P1  25  McLaren
    "C. Leclerc",      # P2  18  Ferrari
    "L. Hamilton",     # P3  15  Ferrari
    "M. Verstappen",   # P4  12  Red Bull
    "O. Piastri",      # P5  10  McLaren
    "G. Russell",      # P6   8  Mercedes
    "K. Antonelli",    # P7   6  Mercedes
    "F. Alonso",       # P8   4  Aston Martin
    "A. Albon",        # P9   2  Williams
    "C. Sainz",        # P10  1  Williams
    "I. Hadjar",       # P11      Red Bull
    "P. Gasly",        # P12      Alpine
    "L. Lawson",       # P13      RB
    "O. Bearman",      # P14      Haas
    "E. Ocon",         # P15      Haas
    "N. Hulkenberg",   # P16      Audi
    "G. Bortoleto",    # P17      Audi
    "L. Stroll",       # P18      Aston Martin
    "S. Perez",        # P19      Cadillac
    "V. Bottas",       # P20      Cadillac
]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def roster_catalog():
    return RosterCatalog(CONTENT_DIR)


@pytest.fixture(scope="session")
def roster_2026(roster_catalog):
    return roster_catalog.for_season(2026)


@pytest.fixture
def lookup(roster_2026):
    return ResultLookup(roster_2026)


@pytest.fixture(scope="session")
def card_catalog():
    return CardCatalog(CONTENT_DIR)


@pytest.fixture
def test_settings():
    return Settings(log_level="DEBUG")


@pytest.fixture
def driver_card(card_catalog):
    """Look up a driver card by name."""
    def _get(name):
        card = card_catalog.get(CardType.DRIVER, name)
        assert card is not None, f"missing driver card {name}"
        return card
    return _get


@pytest.fixture
def team_card(card_catalog):
    """Look up a team card by name."""
    def _get(name):
        card = card_catalog.get(CardType.TEAM, name)
        assert card is not None, f"missing team card {name}"
        return card
    return _get


@pytest.fixture
def make_race(roster_2026):
    """
    Build a RaceResult from finishing orders.

    Team aggregates are summed from the driver points unless given.
    """
    def _make(
        order=None,
        season=2026,
        round=1,
        sprint=False,
        sprint_order=None,
        extra=(),
        team_results=None,
    ):
        order = STANDARD_ORDER if order is None else order
        results = [
            DriverResult(driver=d, position=i, points=points_for_position(i))
            for i, d in enumerate(order, 1)
        ]
        results.extend(extra)
        sprint_results = [
            DriverResult(driver=d, position=i, points=points_for_position(i, sprint=True))
            for i, d in enumerate(sprint_order or [], 1)
        ]

        if team_results is None:
            totals = {}
            for source, key in ((results, "race"), (sprint_results, "sprint")):
                for r in source:
                    team = roster_2026.get_driver_team(r.driver)
                    if team is None:
                        continue
                    entry = totals.setdefault(team, {"race": 0, "sprint": 0})
                    entry[key] += r.points
            team_results = [
                TeamResult(
                    team=team,
                    race_points=p["race"],
                    sprint_points=p["sprint"],
                    total_points=p["race"] + p["sprint"],
                )
                for team, p in totals.items()
            ]

        return RaceResult(
            season=season,
            round=round,
            is_sprint_weekend=sprint,
            results=results,
            sprint_results=sprint_results,
            team_results=team_results,
        )
    return _make


@pytest.fixture
def selection():
    """Default pick: Hamilton / Piastri / Ferrari."""
    return Selection(
        main_driver="L. Hamilton",
        reserve_driver="O. Piastri",
        team="Ferrari",
        round=1,
        league_id="L1",
        user_id="u1",
    )
