"""Scoring feature module — race scoring, cross-player lookups and standings."""

from .service import (
    ScoringService,
    ScoringContext,
    ScoringBreakdown,
    BasePoints,
    CardInfo,
    RaceScore,
    STATUS_DNS,
    STATUS_FINISHED,
)
from .lookups import (
    SelectionAutoAssigner,
    RosterAutoAssigner,
    SelectionPlayerScoreLookup,
    SelectionTeamScoreLookup,
)
from .factory import build_scoring_service
from .standings import ScoredRound, Standing, Standings, build_standings

__all__ = [
    "ScoringService",
    "ScoringContext",
    "ScoringBreakdown",
    "BasePoints",
    "CardInfo",
    "RaceScore",
    "STATUS_DNS",
    "STATUS_FINISHED",
    "SelectionAutoAssigner",
    "RosterAutoAssigner",
    "SelectionPlayerScoreLookup",
    "SelectionTeamScoreLookup",
    "build_scoring_service",
    "ScoredRound",
    "Standing",
    "Standings",
    "build_standings",
]
