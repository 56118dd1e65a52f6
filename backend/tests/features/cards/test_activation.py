"""
Tests for CardActivationService.
"""

import random

import pytest
from unittest.mock import MagicMock

from fantasy_f1.config import Settings
from fantasy_f1.features.cards import CardActivationError, CardActivationService, CardCatalog


@pytest.fixture
def service(card_catalog):
    return CardActivationService(card_catalog, rng=random.Random(11))


class TestActivationRules:
    """Season, sprint, deck and target rules."""

    def test_activate_by_name(self, service):
        cards = service.activate(season=2026, driver_card="2× Points", team_card="Podium")

        assert cards.driver_card.name == "2× Points"
        assert cards.team_card.name == "Podium"
        assert cards.mystery_transformed_card is None
        assert cards.random_transformed_card is None

    def test_no_cards(self, service):
        cards = service.activate(season=2026)
        assert cards.has_cards is False

    def test_before_cards_season(self, service):
        with pytest.raises(CardActivationError, match="Cards are only available for 2026\\+ seasons"):
            service.activate(season=2025, driver_card="2× Points")

    def test_first_season_is_configurable(self, card_catalog):
        service = CardActivationService(card_catalog, settings=Settings(cards_first_season=2025))
        assert service.activate(season=2025, driver_card="2× Points").driver_card is not None

    def test_sprint_weekend(self, service):
        with pytest.raises(CardActivationError, match="Cards cannot be used on sprint weekends"):
            service.activate(season=2026, is_sprint_weekend=True, team_card="Podium")

    def test_unknown_card(self, service):
        with pytest.raises(CardActivationError, match="Driver card not found: Podium"):
            service.activate(season=2026, driver_card="Podium")

    def test_card_on_wrong_side(self, service, team_card):
        with pytest.raises(CardActivationError, match="Podium is not a driver card"):
            service.activate(season=2026, driver_card=team_card("Podium"))

    def test_inactive_card(self, service, driver_card):
        retired = driver_card("+3 Points").model_copy(update={"is_active": False})
        with pytest.raises(CardActivationError, match=r"Driver card is not active: \+3 Points"):
            service.activate(season=2026, driver_card=retired)

    def test_card_not_in_deck(self, service, driver_card, team_card):
        deck = [driver_card("2× Points"), team_card("Podium")]
        service.activate(season=2026, driver_card="2× Points", team_card="Podium", deck=deck)

        with pytest.raises(CardActivationError, match="Team card not in your deck"):
            service.activate(season=2026, team_card="Top 5", deck=deck)

    def test_card_already_used(self, service, driver_card):
        used = [driver_card("2× Points").key]
        with pytest.raises(CardActivationError, match="Driver card already used this season"):
            service.activate(season=2026, driver_card="2× Points", used_card_keys=used)

    def test_same_name_other_side_not_used(self, service, driver_card):
        """Playing the driver Bottom 5 does not consume the team Bottom 5."""
        used = [driver_card("Bottom 5").key]
        cards = service.activate(season=2026, team_card="Bottom 5", used_card_keys=used)
        assert cards.team_card.name == "Bottom 5"


class TestTargets:
    """Mirror, Switcheroo and Espionage need a target."""

    @pytest.mark.parametrize("card,message", [
        ("Mirror", "Target player required for Mirror card"),
        ("Switcheroo", "Target driver required for Switcheroo card"),
    ])
    def test_driver_targets_required(self, service, card, message):
        with pytest.raises(CardActivationError, match=message):
            service.activate(season=2026, driver_card=card)

    def test_team_target_required(self, service):
        with pytest.raises(CardActivationError, match="Target team required for Espionage card"):
            service.activate(season=2026, team_card="Espionage")

    def test_targets_recorded(self, service):
        cards = service.activate(
            season=2026,
            driver_card="Switcheroo",
            team_card="Espionage",
            target_driver="M. Verstappen",
            target_team="McLaren",
        )
        assert cards.target_driver == "M. Verstappen"
        assert cards.target_team == "McLaren"
        assert cards.target_player is None

    def test_wrong_kind_of_target(self, service):
        with pytest.raises(CardActivationError):
            service.activate(season=2026, driver_card="Mirror", target_driver="M. Verstappen")


class TestTransformations:
    """Mystery/Random cards are transformed once, at activation."""

    def test_mystery_transformed(self, card_catalog):
        rng = MagicMock()
        rng.choice.side_effect = lambda pool: pool[0]
        service = CardActivationService(card_catalog, rng=rng)

        cards = service.activate(season=2026, driver_card="Mystery Card", team_card="Mystery Card")

        assert cards.mystery_transformed_card.name == "2× Points"
        assert cards.random_transformed_card.name == "Espionage"
        for call in rng.choice.call_args_list:
            assert all(c.effect_type not in ("mystery", "random") for c in call[0][0])

    def test_existing_transformation_reused(self, card_catalog, driver_card):
        rng = MagicMock()
        service = CardActivationService(card_catalog, rng=rng)
        first = service.activate(season=2026, driver_card="Mystery Card")
        first.mystery_transformed_card = driver_card("Teamwork")

        again = service.activate(season=2026, driver_card="Mystery Card", team_card="Podium", existing=first)

        assert again.mystery_transformed_card.name == "Teamwork"
        assert rng.choice.call_count == 1

    def test_new_card_draws_again(self, card_catalog, driver_card):
        rng = MagicMock()
        rng.choice.side_effect = lambda pool: pool[-1]
        service = CardActivationService(card_catalog, rng=rng)
        previous = service.activate(season=2026, driver_card="2× Points")

        cards = service.activate(season=2026, driver_card="Mystery Card", existing=previous)

        assert cards.mystery_transformed_card.name == "Bottom 5"

    def test_empty_pool(self, tmp_path):
        (tmp_path / "cards.yaml").write_text(
            "driver_cards:\n"
            "  - {name: Mystery Card, tier: silver, slot_cost: 2, effect_type: mystery}\n",
            encoding="utf-8",
        )
        service = CardActivationService(CardCatalog(tmp_path))

        with pytest.raises(CardActivationError, match="No driver cards available for Mystery Card transformation"):
            service.activate(season=2026, driver_card="Mystery Card")
