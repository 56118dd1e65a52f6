"""
Tests for deck building rules.
"""

import pytest

from fantasy_f1.config import Settings
from fantasy_f1.features.cards import DeckValidationError, summarize_deck, validate_deck


@pytest.fixture
def valid_deck(driver_card, team_card):
    """12 driver slots and 10 team slots with a single gold team card."""
    drivers = [
        driver_card("2× Points"),     # 3
        driver_card("Mirror"),        # 3
        driver_card("Team Orders"),   # 2
        driver_card("The lift"),      # 2
        driver_card("Top 10 Boost"),  # 1
        driver_card("+3 Points"),     # 1
    ]
    teams = [
        team_card("Podium"),    # 4 gold
        team_card("Undercut"),  # 2
        team_card("Top 10"),    # 2
        team_card("Sponsors"),  # 1
        team_card("Bottom 5"),  # 1
    ]
    return drivers, teams


class TestValidateDeck:
    """Tests for validate_deck."""

    def test_valid(self, valid_deck):
        summary = validate_deck(*valid_deck)

        assert summary.driver_slots == 12
        assert summary.team_slots == 10
        assert summary.gold_team_cards == 1

    def test_too_many_driver_slots(self, valid_deck, driver_card):
        drivers, teams = valid_deck
        with pytest.raises(DeckValidationError, match="Maximum 12 driver card slots allowed"):
            validate_deck(drivers + [driver_card("Bottom 5")], teams)

    def test_unused_driver_slots(self, valid_deck):
        drivers, teams = valid_deck
        with pytest.raises(DeckValidationError, match="You must use all 12 driver card slots"):
            validate_deck(drivers[:-1], teams)

    def test_too_many_team_slots(self, valid_deck, team_card):
        drivers, teams = valid_deck
        with pytest.raises(DeckValidationError, match="Maximum 10 team card slots allowed"):
            validate_deck(drivers, teams + [team_card("Last Place Bonus")])

    def test_unused_team_slots(self, valid_deck):
        drivers, teams = valid_deck
        with pytest.raises(DeckValidationError, match="You must use all 10 team card slots"):
            validate_deck(drivers, teams[:-1])

    def test_two_gold_team_cards(self, valid_deck, team_card):
        drivers, _ = valid_deck
        teams = [team_card("Podium"), team_card("Espionage"), team_card("Top 10")]
        with pytest.raises(DeckValidationError, match="Maximum 1 gold team card allowed"):
            validate_deck(drivers, teams)

    def test_duplicate_card(self, valid_deck, driver_card):
        drivers, teams = valid_deck
        drivers = drivers[:-1] + [driver_card("Top 10 Boost")]
        with pytest.raises(DeckValidationError, match="Duplicate driver cards not allowed"):
            validate_deck(drivers, teams)

    def test_wrong_side(self, valid_deck, team_card):
        drivers, teams = valid_deck
        with pytest.raises(DeckValidationError, match="Invalid driver card: Sponsors"):
            validate_deck(drivers[:-1] + [team_card("Sponsors")], teams)

    def test_inactive_card(self, valid_deck):
        drivers, teams = valid_deck
        retired = drivers[-1].model_copy(update={"is_active": False})
        with pytest.raises(DeckValidationError, match=r"Invalid driver card: \+3 Points"):
            validate_deck(drivers[:-1] + [retired], teams)

    def test_custom_limits(self, valid_deck):
        drivers, teams = valid_deck
        settings = Settings(driver_deck_slots=11, team_deck_slots=10)
        summary = validate_deck(drivers[:-1], teams, settings=settings)
        assert summary.driver_slots_max == 11


class TestSummarizeDeck:
    """summarize_deck never raises."""

    def test_partial_deck(self, driver_card, team_card):
        summary = summarize_deck([driver_card("Mirror")], [team_card("Podium"), team_card("Espionage")])
        assert summary.driver_slots == 3
        assert summary.team_slots == 8
        assert summary.gold_team_cards == 2
        assert summary.gold_team_cards_max == 1
