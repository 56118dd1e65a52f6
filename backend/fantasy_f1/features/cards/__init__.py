"""Cards feature module — power card catalog, effects, deck rules and activation."""

from .exceptions import (
    CardError,
    EffectValueError,
    DeckValidationError,
    CardActivationError,
    CardResolutionError,
)
from .schemas import Card, ConditionalBonusValue, SponsorsBonus, PodiumValue
from .models import RaceCardSelection
from .catalog import CardCatalog
from .effects import EffectDetails, parse_driver_effect, parse_team_effect
from .ports import PlayerScore, PlayerScoreLookup, TeamScoreLookup
from .resolver import CardEffectsService, DriverCardResult, TeamCardResult
from .deck import DeckSummary, summarize_deck, validate_deck
from .activation import CardActivationService

__all__ = [
    # Errors
    "CardError",
    "EffectValueError",
    "DeckValidationError",
    "CardActivationError",
    "CardResolutionError",
    # Schemas / models
    "Card",
    "ConditionalBonusValue",
    "SponsorsBonus",
    "PodiumValue",
    "RaceCardSelection",
    "CardCatalog",
    # Effects
    "EffectDetails",
    "parse_driver_effect",
    "parse_team_effect",
    "PlayerScore",
    "PlayerScoreLookup",
    "TeamScoreLookup",
    "CardEffectsService",
    "DriverCardResult",
    "TeamCardResult",
    # Deck / activation
    "DeckSummary",
    "summarize_deck",
    "validate_deck",
    "CardActivationService",
]
