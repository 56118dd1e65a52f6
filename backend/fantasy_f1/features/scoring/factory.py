"""Wiring of a card-aware ScoringService."""

from __future__ import annotations

import random

from fantasy_f1.config import Settings
from fantasy_f1.features.cards.catalog import CardCatalog
from fantasy_f1.features.cards.resolver import CardEffectsService
from fantasy_f1.features.races.repository import RaceResultRepository, SelectionRepository
from fantasy_f1.features.roster.catalog import RosterCatalog

from .lookups import SelectionAutoAssigner, SelectionPlayerScoreLookup, SelectionTeamScoreLookup
from .service import ScoringService


def build_scoring_service(
    roster_catalog: RosterCatalog,
    card_catalog: CardCatalog,
    selections: SelectionRepository,
    race_results: RaceResultRepository,
    auto_assigner: SelectionAutoAssigner | None = None,
    rng: random.Random | None = None,
    settings: Settings | None = None,
) -> ScoringService:
    """
    ScoringService that applies cards.

    Mirror / Espionage targets are scored by a second, card-free service,
    so cross-player lookups never recurse into other players' cards.
    """
    plain = ScoringService(roster_catalog, settings=settings)
    card_effects = CardEffectsService(
        card_pool=card_catalog.active_cards(),
        player_scores=SelectionPlayerScoreLookup(selections, race_results, plain, auto_assigner),
        team_scores=SelectionTeamScoreLookup(selections, race_results, plain),
        rng=rng,
    )
    return ScoringService(roster_catalog, card_effects, settings=settings)
