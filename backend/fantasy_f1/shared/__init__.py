"""
Shared utilities (NOT business logic).

Usage:
    from fantasy_f1.shared import points_for_position, CardType
    from fantasy_f1.shared.constants import RACE_POINTS
"""
from .constants import (
    CardType,
    CardTier,
    TargetKind,
    DriverEffectType,
    TeamEffectType,
    DriverCondition,
    TeamCondition,
    TRANSFORM_EFFECT_TYPES,
    RACE_POINTS,
    SPRINT_POINTS,
    POINTS_POSITIONS,
)
from .points import points_for_position, is_classified

__all__ = [
    # constants
    "CardType",
    "CardTier",
    "TargetKind",
    "DriverEffectType",
    "TeamEffectType",
    "DriverCondition",
    "TeamCondition",
    "TRANSFORM_EFFECT_TYPES",
    "RACE_POINTS",
    "SPRINT_POINTS",
    "POINTS_POSITIONS",
    # points
    "points_for_position",
    "is_classified",
]
