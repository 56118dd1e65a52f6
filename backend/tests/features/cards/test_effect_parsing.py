"""
Tests for parsing raw effect_type / effect_value into typed effects.
"""

import pytest
from pydantic import ValidationError

from fantasy_f1.features.cards import EffectValueError, parse_driver_effect, parse_team_effect
from fantasy_f1.features.cards.effects import (
    DriverConditionalBonusEffect,
    FlatBonusEffect,
    MultiplyEffect,
    MysteryEffect,
    PodiumEffect,
    PositionAdjustEffect,
    RandomEffect,
    TeamConditionalBonusEffect,
    UnknownDriverEffect,
    UnknownTeamEffect,
)
from fantasy_f1.shared import DriverCondition, TeamCondition


class TestParseDriverEffect:
    """Tests for parse_driver_effect."""

    def test_defaults(self):
        assert parse_driver_effect("multiply") == MultiplyEffect(factor=2)
        assert parse_driver_effect("flat_bonus") == FlatBonusEffect(bonus=3)
        assert parse_driver_effect("position_adjust") == PositionAdjustEffect(places=1)

    def test_values(self):
        assert parse_driver_effect("multiply", 3) == MultiplyEffect(factor=3)
        assert parse_driver_effect("flat_bonus", 5) == FlatBonusEffect(bonus=5)

    def test_conditional(self):
        effect = parse_driver_effect("conditional_bonus", {"condition": "top10", "bonus": 3})
        assert effect == DriverConditionalBonusEffect(condition=DriverCondition.TOP10, bonus=3)

    def test_mystery_is_a_placeholder(self):
        assert isinstance(parse_driver_effect("mystery"), MysteryEffect)

    def test_unknown_type(self):
        assert parse_driver_effect("teleport") == UnknownDriverEffect(raw_type="teleport")

    def test_team_only_type_is_unknown_on_driver_side(self):
        assert isinstance(parse_driver_effect("podium"), UnknownDriverEffect)

    def test_malformed_number(self):
        with pytest.raises(EffectValueError):
            parse_driver_effect("multiply", "double")

    def test_whole_float_accepted(self):
        assert parse_driver_effect("multiply", 3.0) == MultiplyEffect(factor=3)

    def test_fractional_number(self):
        with pytest.raises(EffectValueError):
            parse_driver_effect("flat_bonus", 2.5)

    def test_team_condition_on_driver_card(self):
        with pytest.raises(EffectValueError):
            parse_driver_effect("conditional_bonus", {"condition": "both_top5", "bonus": 10})

    def test_missing_condition(self):
        with pytest.raises(ValidationError):
            parse_driver_effect("conditional_bonus", {"bonus": 3})


class TestParseTeamEffect:
    """Tests for parse_team_effect."""

    def test_podium(self):
        assert parse_team_effect("podium", {"pointsPerPodium": 8, "maxPoints": 16}) == PodiumEffect(8, 16)
        assert parse_team_effect("podium") == PodiumEffect(8, 16)

    def test_conditional(self):
        effect = parse_team_effect("conditional_bonus", {"condition": "both_top5", "bonus": 10})
        assert effect.condition == TeamCondition.BOTH_TOP5
        assert effect.bonus == 10

    def test_sponsors(self):
        effect = parse_team_effect("conditional_bonus", {"condition": "sponsors", "bonus": {"zero": 5, "one": 1}})
        assert isinstance(effect, TeamConditionalBonusEffect)
        assert effect.sponsors.zero == 5
        assert effect.sponsors.one == 1

    def test_random_is_a_placeholder(self):
        assert isinstance(parse_team_effect("random"), RandomEffect)

    def test_unknown(self):
        assert parse_team_effect("multiply") == UnknownTeamEffect(raw_type="multiply")

    def test_driver_condition_on_team_card(self):
        with pytest.raises(EffectValueError):
            parse_team_effect("conditional_bonus", {"condition": "top5", "bonus": 7})

    def test_malformed_podium(self):
        with pytest.raises(ValidationError):
            parse_team_effect("podium", 8)
