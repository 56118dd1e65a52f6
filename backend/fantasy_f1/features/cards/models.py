"""Activation record for the cards played on one selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .schemas import Card


def _card(value: Any) -> Card | None:
    if value is None or isinstance(value, Card):
        return value
    return Card.model_validate(value)


@dataclass
class RaceCardSelection:
    """
    Cards activated for one selection.

    The *_transformed_card fields hold the card a Mystery/Random card turned
    into at activation time. Once set they are reused by every later scoring
    pass for the same race.
    """

    driver_card: Card | None = None
    team_card: Card | None = None
    target_player: str | None = None  # user id, Mirror
    target_driver: str | None = None  # Switcheroo
    target_team: str | None = None  # Espionage
    mystery_transformed_card: Card | None = None
    random_transformed_card: Card | None = None

    @property
    def has_cards(self) -> bool:
        return self.driver_card is not None or self.team_card is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RaceCardSelection":
        def pick(snake: str, camel: str) -> Any:
            return data[snake] if snake in data else data.get(camel)

        return cls(
            driver_card=_card(pick("driver_card", "driverCard")),
            team_card=_card(pick("team_card", "teamCard")),
            target_player=pick("target_player", "targetPlayer"),
            target_driver=pick("target_driver", "targetDriver"),
            target_team=pick("target_team", "targetTeam"),
            mystery_transformed_card=_card(pick("mystery_transformed_card", "mysteryTransformedCard")),
            random_transformed_card=_card(pick("random_transformed_card", "randomTransformedCard")),
        )

    def to_dict(self) -> dict:
        def dump(card: Card | None) -> dict | None:
            return card.model_dump(mode="json") if card else None

        return {
            "driver_card": dump(self.driver_card),
            "team_card": dump(self.team_card),
            "target_player": self.target_player,
            "target_driver": self.target_driver,
            "target_team": self.target_team,
            "mystery_transformed_card": dump(self.mystery_transformed_card),
            "random_transformed_card": dump(self.random_transformed_card),
        }
