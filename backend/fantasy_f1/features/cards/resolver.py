"""
Card Effect Resolver.

Applies one activated driver card and one activated team card to the base
points of a selection. Mystery/Random cards are resolved to a concrete card
first (stored transformation, else a draw from the injected pool), then
applied once.

A failure inside one card never aborts scoring: it is logged and reported
in the effect description, with the pre-effect points kept.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable

from fantasy_f1.features.races.lookup import ResultLookup
from fantasy_f1.features.races.models import RaceResult, Selection
from fantasy_f1.shared.constants import TRANSFORM_EFFECT_TYPES, CardType

from .effects import (
    DriverEffectContext,
    EffectDetails,
    TeamEffectContext,
    parse_driver_effect,
    parse_team_effect,
)
from .exceptions import CardResolutionError
from .models import RaceCardSelection
from .ports import PlayerScoreLookup, TeamScoreLookup
from .schemas import Card

logger = logging.getLogger(__name__)

# Description prefix per transform card type
_TRANSFORM_LABELS = {
    CardType.DRIVER: "Mystery",
    CardType.TEAM: "Random",
}


@dataclass
class DriverCardResult:
    main_points: int
    reserve_points: int
    effect: EffectDetails | None = None


@dataclass
class TeamCardResult:
    team_points: int
    effect: EffectDetails | None = None


class CardEffectsService:
    """
    Applies driver and team card effects.

    Example usage:
        service = CardEffectsService(card_pool=catalog.active_cards())
        result = service.apply_driver_card_effect(
            base_main_points=18,
            base_reserve_points=0,
            race_result=race,
            selection=selection,
            race_card_selection=cards,
            lookup=ResultLookup(roster),
        )
        result.main_points  # 36 with 2× Points
    """

    def __init__(
        self,
        card_pool: Iterable[Card] = (),
        player_scores: PlayerScoreLookup | None = None,
        team_scores: TeamScoreLookup | None = None,
        rng: random.Random | None = None,
    ):
        self.card_pool = tuple(card_pool)
        self.player_scores = player_scores
        self.team_scores = team_scores
        self.rng = rng or random.Random()

    # =========================================================================
    # Driver cards
    # =========================================================================

    def apply_driver_card_effect(
        self,
        *,
        base_main_points: int,
        base_reserve_points: int,
        race_result: RaceResult,
        selection: Selection,
        race_card_selection: RaceCardSelection | None,
        lookup: ResultLookup,
        league_id: str | None = None,
        user_id: str | None = None,
    ) -> DriverCardResult:
        """Apply the activated driver card, if any."""
        if race_card_selection is None or race_card_selection.driver_card is None:
            return DriverCardResult(base_main_points, base_reserve_points, None)

        card = race_card_selection.driver_card
        details = EffectDetails(card_name=card.name, card_tier=card.tier.value)
        ctx = DriverEffectContext(
            main_points=base_main_points,
            reserve_points=base_reserve_points,
            race_result=race_result,
            selection=selection,
            lookup=lookup,
            target_player=race_card_selection.target_player,
            target_driver=race_card_selection.target_driver,
            league_id=league_id,
            user_id=user_id,
            player_scores=self.player_scores,
        )

        try:
            playable, transformed = self._resolve(
                card, race_card_selection.mystery_transformed_card, CardType.DRIVER
            )
            if playable is None:
                details.description = "No cards available"
                return DriverCardResult(base_main_points, base_reserve_points, details)

            outcome = parse_driver_effect(playable.effect_type, playable.effect_value).apply(ctx)
        except Exception as e:
            logger.error(f"Error applying driver card '{card.name}' for user {user_id}: {e}")
            details.description = f"Error: {e}"
            return DriverCardResult(base_main_points, base_reserve_points, details)

        details.effect_applied = outcome.applied
        details.description = self._describe(outcome.description, transformed, CardType.DRIVER)
        details.transformed_into = transformed.name if transformed else None
        logger.debug(
            f"Driver card '{card.name}': main {base_main_points} -> {outcome.main_points}, "
            f"reserve {base_reserve_points} -> {outcome.reserve_points}"
        )
        return DriverCardResult(outcome.main_points, outcome.reserve_points, details)

    # =========================================================================
    # Team cards
    # =========================================================================

    def apply_team_card_effect(
        self,
        *,
        base_team_points: int,
        race_result: RaceResult,
        selection: Selection,
        race_card_selection: RaceCardSelection | None,
        lookup: ResultLookup,
        league_id: str | None = None,
        user_id: str | None = None,
    ) -> TeamCardResult:
        """Apply the activated team card, if any."""
        if race_card_selection is None or race_card_selection.team_card is None:
            return TeamCardResult(base_team_points, None)

        card = race_card_selection.team_card
        details = EffectDetails(card_name=card.name, card_tier=card.tier.value)
        ctx = TeamEffectContext(
            team_points=base_team_points,
            race_result=race_result,
            selection=selection,
            lookup=lookup,
            target_team=race_card_selection.target_team,
            league_id=league_id,
            user_id=user_id,
            team_scores=self.team_scores,
        )

        try:
            playable, transformed = self._resolve(
                card, race_card_selection.random_transformed_card, CardType.TEAM
            )
            if playable is None:
                details.description = "No cards available"
                return TeamCardResult(base_team_points, details)

            outcome = parse_team_effect(playable.effect_type, playable.effect_value).apply(ctx)
        except Exception as e:
            logger.error(f"Error applying team card '{card.name}' for user {user_id}: {e}")
            details.description = f"Error: {e}"
            return TeamCardResult(base_team_points, details)

        details.effect_applied = outcome.applied
        details.description = self._describe(outcome.description, transformed, CardType.TEAM)
        details.transformed_into = transformed.name if transformed else None
        logger.debug(f"Team card '{card.name}': team {base_team_points} -> {outcome.team_points}")
        return TeamCardResult(outcome.team_points, details)

    # =========================================================================
    # Mystery / Random
    # =========================================================================

    def _resolve(
        self,
        card: Card,
        stored: Card | None,
        card_type: CardType,
    ) -> tuple[Card | None, Card | None]:
        """
        Card to actually apply, and the transformation used (if any).

        Returns (None, None) when a transform card has nothing to draw from.
        """
        transform_type = TRANSFORM_EFFECT_TYPES[card_type]
        if card.effect_type != transform_type:
            return card, None

        replacement = stored if stored is not None else self.draw_transformation(card_type)
        if replacement is None:
            return None, None
        if replacement.effect_type == transform_type:
            raise CardResolutionError(f"{card.name} cannot turn into {replacement.name}")
        return replacement, replacement

    def draw_transformation(self, card_type: CardType | str) -> Card | None:
        """Random active card of the type, never another transform card."""
        card_type = CardType(card_type)
        transform_type = TRANSFORM_EFFECT_TYPES[card_type]
        pool = [
            c for c in self.card_pool
            if c.type == card_type and c.is_active and c.effect_type != transform_type
        ]
        if not pool:
            logger.warning(f"No {card_type.value} cards available for transformation")
            return None

        drawn = self.rng.choice(pool)
        logger.info(f"Drew '{drawn.name}' for an unstored {transform_type} card")
        return drawn

    @staticmethod
    def _describe(description: str | None, transformed: Card | None, card_type: CardType) -> str | None:
        if transformed is None:
            return description
        label = _TRANSFORM_LABELS[card_type]
        return f"{label} card transformed into: {transformed.name} - {description or 'No effect'}"
