"""
Deck building rules.

A player's season deck must use every driver slot and every team slot
exactly, with at most one gold team card and no card twice.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from fantasy_f1.config import Settings, settings as default_settings
from fantasy_f1.shared.constants import CardTier, CardType

from .exceptions import DeckValidationError
from .schemas import Card


@dataclass
class DeckSummary:
    """Slot usage of a deck."""

    driver_slots: int
    team_slots: int
    gold_team_cards: int
    driver_slots_max: int
    team_slots_max: int
    gold_team_cards_max: int


def summarize_deck(
    driver_cards: Sequence[Card],
    team_cards: Sequence[Card],
    settings: Settings | None = None,
) -> DeckSummary:
    settings = settings or default_settings
    return DeckSummary(
        driver_slots=sum(c.slot_cost for c in driver_cards),
        team_slots=sum(c.slot_cost for c in team_cards),
        gold_team_cards=sum(1 for c in team_cards if c.tier == CardTier.GOLD),
        driver_slots_max=settings.driver_deck_slots,
        team_slots_max=settings.team_deck_slots,
        gold_team_cards_max=settings.max_gold_team_cards,
    )


def _check_cards(cards: Sequence[Card], card_type: CardType) -> None:
    for card in cards:
        if card.type != card_type or not card.is_active:
            raise DeckValidationError(f"Invalid {card_type.value} card: {card.name}")
    names = [c.name for c in cards]
    if len(set(names)) != len(names):
        raise DeckValidationError(f"Duplicate {card_type.value} cards not allowed")


def validate_deck(
    driver_cards: Sequence[Card],
    team_cards: Sequence[Card],
    settings: Settings | None = None,
) -> DeckSummary:
    """
    Check a deck against the deck-building rules.

    Args:
        driver_cards: Cards chosen for the driver side
        team_cards: Cards chosen for the team side
        settings: Slot limits (defaults to global settings)

    Returns:
        DeckSummary of the valid deck

    Raises:
        DeckValidationError: On the first broken rule
    """
    _check_cards(driver_cards, CardType.DRIVER)
    _check_cards(team_cards, CardType.TEAM)

    summary = summarize_deck(driver_cards, team_cards, settings)

    if summary.driver_slots > summary.driver_slots_max:
        raise DeckValidationError(f"Maximum {summary.driver_slots_max} driver card slots allowed")
    if summary.driver_slots < summary.driver_slots_max:
        raise DeckValidationError(f"You must use all {summary.driver_slots_max} driver card slots")

    if summary.team_slots > summary.team_slots_max:
        raise DeckValidationError(f"Maximum {summary.team_slots_max} team card slots allowed")
    if summary.team_slots < summary.team_slots_max:
        raise DeckValidationError(f"You must use all {summary.team_slots_max} team card slots")

    if summary.gold_team_cards > summary.gold_team_cards_max:
        raise DeckValidationError(f"Maximum {summary.gold_team_cards_max} gold team card allowed")

    return summary
