"""
Card effects — one class per effect kind.

parse_driver_effect / parse_team_effect are the only place where a raw
effect_type string is looked at; types a side does not know parse into
UnknownDriverEffect / UnknownTeamEffect.

Usage:
    effect = parse_driver_effect("multiply", 2)
    outcome = effect.apply(ctx)
"""

from typing import Any

from .base import (
    EffectDetails,
    DriverEffect,
    DriverEffectContext,
    DriverEffectOutcome,
    TeamEffect,
    TeamEffectContext,
    TeamEffectOutcome,
)
from .driver import (
    MultiplyEffect,
    MirrorEffect,
    SwitcherooEffect,
    TeamworkPlusEffect,
    TeamOrdersEffect,
    PositionAdjustEffect,
    DriverConditionalBonusEffect,
    FlatBonusEffect,
    MysteryEffect,
    UnknownDriverEffect,
)
from .team import (
    EspionageEffect,
    PodiumEffect,
    TeamConditionalBonusEffect,
    UndercutEffect,
    RandomEffect,
    UnknownTeamEffect,
)

DRIVER_EFFECTS: dict[str, type[DriverEffect]] = {
    cls.effect_type: cls
    for cls in (
        MultiplyEffect,
        MirrorEffect,
        SwitcherooEffect,
        TeamworkPlusEffect,
        TeamOrdersEffect,
        PositionAdjustEffect,
        DriverConditionalBonusEffect,
        FlatBonusEffect,
        MysteryEffect,
    )
}

TEAM_EFFECTS: dict[str, type[TeamEffect]] = {
    cls.effect_type: cls
    for cls in (
        EspionageEffect,
        PodiumEffect,
        TeamConditionalBonusEffect,
        UndercutEffect,
        RandomEffect,
    )
}


def parse_driver_effect(effect_type: str, effect_value: Any = None) -> DriverEffect:
    """Typed driver effect for a card. Raises on a malformed effect_value."""
    cls = DRIVER_EFFECTS.get(effect_type)
    if cls is None:
        return UnknownDriverEffect(raw_type=str(effect_type))
    return cls.from_value(effect_value)


def parse_team_effect(effect_type: str, effect_value: Any = None) -> TeamEffect:
    """Typed team effect for a card. Raises on a malformed effect_value."""
    cls = TEAM_EFFECTS.get(effect_type)
    if cls is None:
        return UnknownTeamEffect(raw_type=str(effect_type))
    return cls.from_value(effect_value)


__all__ = [
    "EffectDetails",
    "DriverEffect",
    "DriverEffectContext",
    "DriverEffectOutcome",
    "TeamEffect",
    "TeamEffectContext",
    "TeamEffectOutcome",
    "MultiplyEffect",
    "MirrorEffect",
    "SwitcherooEffect",
    "TeamworkPlusEffect",
    "TeamOrdersEffect",
    "PositionAdjustEffect",
    "DriverConditionalBonusEffect",
    "FlatBonusEffect",
    "MysteryEffect",
    "UnknownDriverEffect",
    "EspionageEffect",
    "PodiumEffect",
    "TeamConditionalBonusEffect",
    "UndercutEffect",
    "RandomEffect",
    "UnknownTeamEffect",
    "DRIVER_EFFECTS",
    "TEAM_EFFECTS",
    "parse_driver_effect",
    "parse_team_effect",
]
