"""
Card activation.

Builds the RaceCardSelection stored for a user's pick. Mystery/Random cards
are transformed here, once, so later scoring passes reuse the same card.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Sequence

from fantasy_f1.config import Settings, settings as default_settings
from fantasy_f1.shared.constants import TRANSFORM_EFFECT_TYPES, CardType, TargetKind

from .catalog import CardCatalog
from .exceptions import CardActivationError
from .models import RaceCardSelection
from .schemas import Card

logger = logging.getLogger(__name__)

_TARGET_LABELS = {
    TargetKind.PLAYER: "Target player required for {name} card",
    TargetKind.DRIVER: "Target driver required for {name} card",
    TargetKind.TEAM: "Target team required for {name} card",
}


class CardActivationService:
    """
    Validates and records the cards a player activates for one race.

    Example usage:
        service = CardActivationService(catalog)
        cards = service.activate(
            season=2026,
            driver_card="Mirror",
            target_player="user-2",
            team_card="Mystery Card",
        )
        cards.random_transformed_card  # drawn once, stored with the pick
    """

    def __init__(
        self,
        catalog: CardCatalog,
        rng: random.Random | None = None,
        settings: Settings | None = None,
    ):
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.settings = settings or default_settings

    def activate(
        self,
        *,
        season: int,
        is_sprint_weekend: bool = False,
        driver_card: Card | str | None = None,
        team_card: Card | str | None = None,
        target_player: str | None = None,
        target_driver: str | None = None,
        target_team: str | None = None,
        deck: Sequence[Card] | None = None,
        used_card_keys: Iterable[str] = (),
        existing: RaceCardSelection | None = None,
    ) -> RaceCardSelection:
        """
        Activate up to one driver card and one team card.

        Args:
            season: Season of the league
            is_sprint_weekend: Cards are not allowed on sprint weekends
            driver_card / team_card: Card or card name from the catalog
            target_*: Targets for Mirror / Switcheroo / Espionage
            deck: Player's deck; when given, cards must be in it
            used_card_keys: Card keys already played this season in other rounds
            existing: Previously stored activation for the same race

        Raises:
            CardActivationError: If any rule is broken
        """
        if season < self.settings.cards_first_season:
            raise CardActivationError(
                f"Cards are only available for {self.settings.cards_first_season}+ seasons"
            )
        if is_sprint_weekend:
            raise CardActivationError("Cards cannot be used on sprint weekends")

        used = set(used_card_keys)
        deck_keys = {c.key for c in deck} if deck is not None else None
        targets = {
            TargetKind.PLAYER: target_player,
            TargetKind.DRIVER: target_driver,
            TargetKind.TEAM: target_team,
        }

        driver = self._check_card(driver_card, CardType.DRIVER, deck_keys, used, targets)
        team = self._check_card(team_card, CardType.TEAM, deck_keys, used, targets)

        selection = RaceCardSelection(
            driver_card=driver,
            team_card=team,
            target_player=target_player,
            target_driver=target_driver,
            target_team=target_team,
        )
        selection.mystery_transformed_card = self._transformation(
            driver, CardType.DRIVER,
            existing.driver_card if existing else None,
            existing.mystery_transformed_card if existing else None,
        )
        selection.random_transformed_card = self._transformation(
            team, CardType.TEAM,
            existing.team_card if existing else None,
            existing.random_transformed_card if existing else None,
        )

        logger.info(
            f"Activated cards for season {season}: "
            f"driver={driver.name if driver else None}, team={team.name if team else None}"
        )
        return selection

    def _check_card(
        self,
        card: Card | str | None,
        card_type: CardType,
        deck_keys: set[str] | None,
        used: set[str],
        targets: dict[TargetKind, str | None],
    ) -> Card | None:
        if card is None:
            return None

        label = card_type.value.capitalize()
        if isinstance(card, str):
            found = self.catalog.get(card_type, card)
            if found is None:
                raise CardActivationError(f"{label} card not found: {card}")
            card = found

        if card.type != card_type:
            raise CardActivationError(f"{card.name} is not a {card_type.value} card")
        if not card.is_active:
            raise CardActivationError(f"{label} card is not active: {card.name}")
        if deck_keys is not None and card.key not in deck_keys:
            raise CardActivationError(f"{label} card not in your deck")
        if card.key in used:
            raise CardActivationError(f"{label} card already used this season")
        if card.requires_target is not None and not targets[card.requires_target]:
            raise CardActivationError(_TARGET_LABELS[card.requires_target].format(name=card.name))
        return card

    def _transformation(
        self,
        card: Card | None,
        card_type: CardType,
        previous_card: Card | None,
        previous_transformation: Card | None,
    ) -> Card | None:
        """Card a Mystery/Random card turns into; None for other cards."""
        if card is None or card.effect_type != TRANSFORM_EFFECT_TYPES[card_type]:
            return None

        if previous_transformation is not None and previous_card is not None and previous_card.key == card.key:
            return previous_transformation

        pool = self.catalog.transformation_pool(card_type)
        if not pool:
            raise CardActivationError(
                f"No {card_type.value} cards available for {card.name} transformation"
            )
        drawn = self.rng.choice(pool)
        logger.info(f"{card.name} transformed into: {drawn.name} ({drawn.effect_type})")
        return drawn
