"""
ScoringService — points of one selection for one race round.

Flow:
    base main / reserve / team points from the race result
    -> card eligibility gate (season, sprint weekend)
    -> driver card, team card
    -> total + breakdown

Missing race data never raises: it scores zero.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field

from fantasy_f1.config import Settings, settings as default_settings
from fantasy_f1.features.cards.effects import EffectDetails
from fantasy_f1.features.cards.models import RaceCardSelection
from fantasy_f1.features.cards.resolver import CardEffectsService
from fantasy_f1.features.races.lookup import ResultLookup
from fantasy_f1.features.races.models import RaceResult, Selection
from fantasy_f1.features.roster.catalog import RosterCatalog

logger = logging.getLogger(__name__)

STATUS_DNS = "DNS"
STATUS_FINISHED = "FINISHED"


@dataclass
class ScoringContext:
    """Who is being scored (needed by Mirror / Espionage)."""

    league_id: str | None = None
    user_id: str | None = None


@dataclass
class BasePoints:
    """Points before any card effect."""

    main_driver_points: int = 0
    reserve_driver_points: int = 0
    team_points: int = 0

    @property
    def total(self) -> int:
        return self.main_driver_points + self.reserve_driver_points + self.team_points

    def to_dict(self) -> dict:
        return {**asdict(self), "total": self.total}


@dataclass
class CardInfo:
    """A played card and what it did."""

    name: str
    tier: str
    effect: EffectDetails

    def to_dict(self) -> dict:
        return {"name": self.name, "tier": self.tier, "effect": self.effect.to_dict()}


@dataclass
class ScoringBreakdown:
    """Every intermediate value of one scoring pass."""

    main_driver: str | None
    reserve_driver: str | None
    team: str | None
    is_sprint_weekend: bool
    main_driver_status: str  # DNS / FINISHED
    main_driver_points: int
    reserve_driver_points: int
    team_race_points: int
    team_sprint_points: int
    team_points: int
    cards_eligible: bool = False
    driver_card: CardInfo | None = None
    team_card: CardInfo | None = None
    base_points: BasePoints = field(default_factory=BasePoints)

    def to_dict(self) -> dict:
        data = {
            k: v for k, v in asdict(self).items()
            if k not in ("driver_card", "team_card", "base_points")
        }
        data["driver_card"] = self.driver_card.to_dict() if self.driver_card else None
        data["team_card"] = self.team_card.to_dict() if self.team_card else None
        data["base_points"] = self.base_points.to_dict()
        return data


@dataclass
class RaceScore:
    total_points: int
    breakdown: ScoringBreakdown

    def to_dict(self) -> dict:
        return {"total_points": self.total_points, "breakdown": self.breakdown.to_dict()}


class ScoringService:
    """
    Scores selections against race results.

    Without a CardEffectsService the service never applies cards; this is
    how other players' scores are computed for Mirror and Espionage.

    Example usage:
        service = ScoringService(RosterCatalog(settings.content_dir), card_effects)
        score = service.calculate_race_points(selection, race_result, cards,
                                              ScoringContext(league_id="L1", user_id="u1"))
        score.total_points
    """

    def __init__(
        self,
        roster_catalog: RosterCatalog,
        card_effects: CardEffectsService | None = None,
        settings: Settings | None = None,
    ):
        self.roster_catalog = roster_catalog
        self.card_effects = card_effects
        self.settings = settings or default_settings

    def lookup_for(self, season: int) -> ResultLookup:
        return ResultLookup(self.roster_catalog.for_season(season))

    def cards_eligible(self, race_result: RaceResult) -> bool:
        """Power cards only count from the first card season, never on sprint weekends."""
        return (
            race_result.season >= self.settings.cards_first_season
            and not race_result.is_sprint_weekend
        )

    def calculate_race_points(
        self,
        selection: Selection,
        race_result: RaceResult,
        race_card_selection: RaceCardSelection | None = None,
        context: ScoringContext | None = None,
    ) -> RaceScore:
        """
        Total points of a selection for one round.

        Args:
            selection: User's main driver, reserve driver and team
            race_result: Results of the round
            race_card_selection: Cards activated for this selection (optional)
            context: League / user being scored (optional)

        Returns:
            RaceScore with total_points and the full breakdown
        """
        context = context or ScoringContext()
        lookup = self.lookup_for(race_result.season)
        sprint = race_result.is_sprint_weekend

        # Main driver
        main_result = lookup.find_driver_result(selection.main_driver, race_result.results)
        if main_result is not None:
            main_dns = main_result.did_not_start
        else:
            # Non-starters may be missing from the classification entirely
            main_dns = bool(selection.main_driver) and bool(race_result.results)
        main_points = 0 if main_dns or main_result is None else main_result.points

        # Reserve driver
        reserve_points = 0
        if sprint:
            reserve_points = lookup.driver_points(selection.reserve_driver, race_result.sprint_results)
        elif main_dns:
            reserve_points = lookup.driver_points(selection.reserve_driver, race_result.results)

        # Team
        team_result = lookup.find_team_result(selection.team, race_result.team_results)
        if team_result is None and selection.team and race_result.team_results:
            logger.warning(f"Team not found in results: {selection.team}")
        team_race_points = team_result.race_points if team_result else 0
        team_sprint_points = team_result.sprint_points if team_result and sprint else 0
        team_points = lookup.team_points(selection.team, race_result.team_results, include_sprint=sprint)

        base = BasePoints(main_points, reserve_points, team_points)
        logger.debug(
            f"Round {race_result.round} base points for {context.user_id}: "
            f"main={main_points} (DNS={main_dns}), reserve={reserve_points}, team={team_points}"
        )

        breakdown = ScoringBreakdown(
            main_driver=selection.main_driver,
            reserve_driver=selection.reserve_driver,
            team=selection.team,
            is_sprint_weekend=sprint,
            main_driver_status=STATUS_DNS if main_dns else STATUS_FINISHED,
            main_driver_points=main_points,
            reserve_driver_points=reserve_points,
            team_race_points=team_race_points,
            team_sprint_points=team_sprint_points,
            team_points=team_points,
            cards_eligible=self.cards_eligible(race_result),
            base_points=base,
        )

        if (
            breakdown.cards_eligible
            and self.card_effects is not None
            and race_card_selection is not None
            and race_card_selection.has_cards
        ):
            self._apply_cards(breakdown, selection, race_result, race_card_selection, context, lookup)

        total = breakdown.main_driver_points + breakdown.reserve_driver_points + breakdown.team_points
        return RaceScore(total_points=total, breakdown=breakdown)

    def _apply_cards(
        self,
        breakdown: ScoringBreakdown,
        selection: Selection,
        race_result: RaceResult,
        cards: RaceCardSelection,
        context: ScoringContext,
        lookup: ResultLookup,
    ) -> None:
        base = breakdown.base_points
        try:
            if cards.driver_card is not None:
                driver = self.card_effects.apply_driver_card_effect(
                    base_main_points=base.main_driver_points,
                    base_reserve_points=base.reserve_driver_points,
                    race_result=race_result,
                    selection=selection,
                    race_card_selection=cards,
                    lookup=lookup,
                    league_id=context.league_id,
                    user_id=context.user_id,
                )
                breakdown.main_driver_points = driver.main_points
                breakdown.reserve_driver_points = driver.reserve_points
                breakdown.driver_card = CardInfo(
                    cards.driver_card.name, cards.driver_card.tier.value, driver.effect
                )

            if cards.team_card is not None:
                team = self.card_effects.apply_team_card_effect(
                    base_team_points=base.team_points,
                    race_result=race_result,
                    selection=selection,
                    race_card_selection=cards,
                    lookup=lookup,
                    league_id=context.league_id,
                    user_id=context.user_id,
                )
                breakdown.team_points = team.team_points
                breakdown.team_card = CardInfo(
                    cards.team_card.name, cards.team_card.tier.value, team.effect
                )
        except Exception as e:
            # Keep base points for whatever did not finish
            logger.error(f"Error applying card effects for {context.user_id}: {e}")
