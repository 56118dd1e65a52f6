"""
Power card schemas.

Pydantic models for card definitions and the structured effect payloads.
Field aliases match the camelCase keys of API payloads.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from fantasy_f1.shared.constants import (
    CardTier,
    CardType,
    DriverCondition,
    TargetKind,
    TeamCondition,
)


class Card(BaseModel):
    """One power card definition (read-only reference data)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    type: CardType
    tier: CardTier
    slot_cost: int = Field(default=1, ge=1, le=4, alias="slotCost")
    effect_type: str = Field(..., alias="effectType")
    effect_value: Any = Field(default=None, alias="effectValue")
    description: str = ""
    requires_target: Optional[TargetKind] = Field(default=None, alias="requiresTarget")
    is_active: bool = Field(default=True, alias="isActive")

    @property
    def key(self) -> str:
        """Unique id: names are only unique within a card type."""
        return f"{self.type.value}:{self.name}"


class SponsorsBonus(BaseModel):
    """Bonus table for the sponsors condition."""
    zero: int = 5
    one: int = 1


class ConditionalBonusValue(BaseModel):
    """{condition, bonus} payload of conditional_bonus cards."""
    condition: Union[DriverCondition, TeamCondition]
    bonus: Union[int, SponsorsBonus] = 0


class PodiumValue(BaseModel):
    """{pointsPerPodium, maxPoints} payload of the Podium card."""

    model_config = ConfigDict(populate_by_name=True)

    points_per_podium: int = Field(default=8, alias="pointsPerPodium")
    max_points: int = Field(default=16, alias="maxPoints")
