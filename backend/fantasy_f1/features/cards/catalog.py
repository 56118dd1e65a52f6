"""Card catalog loader — reads cards.yaml and provides access to card definitions."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from fantasy_f1.shared.constants import TRANSFORM_EFFECT_TYPES, CardType

from .schemas import Card

logger = logging.getLogger(__name__)

# YAML section per card type
_SECTIONS = {
    CardType.DRIVER: "driver_cards",
    CardType.TEAM: "team_cards",
}


class CardCatalog:
    """Loads and provides access to the power card catalog from YAML."""

    def __init__(self, content_dir: Path):
        self.content_dir = content_dir
        self._cards: list[Card] | None = None

    def load(self) -> list[Card]:
        """Load catalog from cards.yaml."""
        yaml_path = self.content_dir / "cards.yaml"
        if not yaml_path.exists():
            logger.warning(f"Card catalog not found: {yaml_path}")
            self._cards = []
            return []

        with open(yaml_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        cards = []
        for card_type, section in _SECTIONS.items():
            for c in data.get(section) or []:
                cards.append(Card.model_validate({**c, "type": card_type}))

        logger.debug(f"Loaded {len(cards)} cards from {yaml_path}")
        self._cards = cards
        return cards

    @property
    def all_cards(self) -> list[Card]:
        if self._cards is None:
            self.load()
        return self._cards or []

    def active_cards(self, card_type: CardType | str | None = None) -> list[Card]:
        """Active cards, optionally of one type."""
        wanted = CardType(card_type) if card_type else None
        return [
            c for c in self.all_cards
            if c.is_active and (wanted is None or c.type == wanted)
        ]

    def get(self, card_type: CardType | str, name: str) -> Card | None:
        wanted = CardType(card_type)
        return next(
            (c for c in self.all_cards if c.type == wanted and c.name == name),
            None,
        )

    def transformation_pool(self, card_type: CardType | str) -> list[Card]:
        """Cards a Mystery/Random card of this type may turn into."""
        wanted = CardType(card_type)
        excluded = TRANSFORM_EFFECT_TYPES[wanted]
        return [c for c in self.active_cards(wanted) if c.effect_type != excluded]
