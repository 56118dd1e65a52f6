"""
Driver card effects.

All effects act on the "active" driver: the main driver, or the reserve
when the main driver did not start (see DriverEffectContext.reserve_active).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fantasy_f1.shared.constants import DriverCondition, DriverEffectType
from fantasy_f1.shared.points import is_classified, points_for_position

from ..exceptions import CardResolutionError, EffectValueError
from ..schemas import ConditionalBonusValue
from .base import DriverEffect, DriverEffectContext, DriverEffectOutcome


def _int_value(value: Any, default: int, effect_type: str) -> int:
    """Whole-number effect_value; None/0 fall back to the default."""
    if value is None or value == 0:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise EffectValueError(f"{effect_type} expects a number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise EffectValueError(f"{effect_type} expects a whole number, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class MultiplyEffect(DriverEffect):
    """2× Points."""

    effect_type = DriverEffectType.MULTIPLY.value
    factor: int = 2

    @classmethod
    def from_value(cls, value: Any) -> "MultiplyEffect":
        return cls(factor=_int_value(value, 2, cls.effect_type))

    def apply(self, ctx: DriverEffectContext) -> DriverEffectOutcome:
        base = ctx.active_points
        new = base * self.factor
        return ctx.with_active_points(new, f"{ctx.active_label} points multiplied ×{self.factor}: {base} → {new}")


@dataclass(frozen=True)
class MirrorEffect(DriverEffect):
    """Copy another player's weekend driver score."""

    effect_type = DriverEffectType.MIRROR.value

    def apply(self, ctx: DriverEffectContext) -> DriverEffectOutcome:
        if not ctx.target_player:
            return ctx.unchanged("Mirror needs a target player")

        if ctx.player_scores is None:
            main = reserve = total = 0
        else:
            score = ctx.player_scores.get_player_score(
                target_user_id=ctx.target_player,
                league_id=ctx.league_id,
                season=ctx.race_result.season,
                round=ctx.race_result.round,
            )
            main, reserve, total = score.main_points, score.reserve_points, score.total_points

        return DriverEffectOutcome(
            main_points=main,
            reserve_points=reserve,
            applied=True,
            description=f"Mirrored player's score: {total} points",
        )


@dataclass(frozen=True)
class SwitcherooEffect(DriverEffect):
    """Score any chosen driver's race points."""

    effect_type = DriverEffectType.SWITCHEROO.value

    def apply(self, ctx: DriverEffectContext) -> DriverEffectOutcome:
        target = ctx.target_driver
        if not target:
            return ctx.unchanged("Switcheroo needs a target driver")

        points = ctx.lookup.driver_points(target, ctx.race_result.results)
        return ctx.with_active_points(
            points, f"{ctx.active_label} switched to {target}: {points} points"
        )


@dataclass(frozen=True)
class TeamworkPlusEffect(DriverEffect):
    """Active driver's points plus the teammate's."""

    effect_type = DriverEffectType.TEAMWORK_PLUS.value

    def apply(self, ctx: DriverEffectContext) -> DriverEffectOutcome:
        teammate, result = ctx.teammate_result()
        if teammate is None:
            return ctx.unchanged(f"{ctx.active_label} has no teammate")

        base = ctx.active_points
        teammate_points = result.points if result else 0
        new = base + teammate_points
        return ctx.with_active_points(
            new, f"{ctx.active_label} + teammate: {base} + {teammate_points} = {new}"
        )


@dataclass(frozen=True)
class TeamOrdersEffect(DriverEffect):
    """Teammate's points instead of the active driver's."""

    effect_type = DriverEffectType.TEAM_ORDERS.value

    def apply(self, ctx: DriverEffectContext) -> DriverEffectOutcome:
        teammate, result = ctx.teammate_result()
        if teammate is None:
            return ctx.unchanged(f"{ctx.active_label} has no teammate")

        points = result.points if result else 0
        return ctx.with_active_points(
            points, f"{ctx.active_label} uses teammate's points: {points}"
        )


@dataclass(frozen=True)
class PositionAdjustEffect(DriverEffect):
    """Classify the active driver N places higher (never above P1)."""

    effect_type = DriverEffectType.POSITION_ADJUST.value
    places: int = 1

    @classmethod
    def from_value(cls, value: Any) -> "PositionAdjustEffect":
        return cls(places=_int_value(value, 1, cls.effect_type))

    def apply(self, ctx: DriverEffectContext) -> DriverEffectOutcome:
        result = ctx.active_result()
        if result is None or not is_classified(result.position):
            return ctx.unchanged(f"{ctx.active_label} was not classified")

        new_position = max(1, result.position - self.places)
        points = points_for_position(new_position)
        return ctx.with_active_points(
            points,
            f"{ctx.active_label} position adjusted: "
            f"P{result.position} → P{new_position} ({points} points)",
        )


@dataclass(frozen=True)
class DriverConditionalBonusEffect(DriverEffect):
    """Bonus when the active driver meets a finishing condition."""

    effect_type = DriverEffectType.CONDITIONAL_BONUS.value
    condition: DriverCondition = DriverCondition.TOP5
    bonus: int = 0

    @classmethod
    def from_value(cls, value: Any) -> "DriverConditionalBonusEffect":
        payload = ConditionalBonusValue.model_validate(value)
        if not isinstance(payload.condition, DriverCondition):
            raise EffectValueError(f"Not a driver condition: {payload.condition.value}")
        if not isinstance(payload.bonus, int):
            raise EffectValueError(f"{payload.condition.value} expects a numeric bonus")
        return cls(condition=payload.condition, bonus=payload.bonus)

    def _is_met(self, ctx: DriverEffectContext) -> bool:
        result = ctx.active_result()
        if result is None or not is_classified(result.position):
            return False
        position = result.position

        if self.condition == DriverCondition.TOP5:
            return position <= 5
        if self.condition == DriverCondition.TOP10:
            return position <= 10
        if self.condition == DriverCondition.AHEAD_OF_TEAMMATE:
            _, teammate = ctx.teammate_result()
            return teammate is not None and is_classified(teammate.position) and position < teammate.position
        if self.condition == DriverCondition.BOTTOM5:
            return position > ctx.race_result.grid_size - 5
        return False

    def apply(self, ctx: DriverEffectContext) -> DriverEffectOutcome:
        if not self._is_met(ctx):
            return ctx.unchanged(f"{ctx.active_label} condition not met: {self.condition.value}")

        labels = {
            DriverCondition.TOP5: "Top 5 bonus",
            DriverCondition.TOP10: "Top 10 bonus",
            DriverCondition.AHEAD_OF_TEAMMATE: "ahead of teammate bonus",
            DriverCondition.BOTTOM5: "Bottom 5 bonus",
        }
        return ctx.with_active_points(
            ctx.active_points + self.bonus,
            f"{ctx.active_label} {labels[self.condition]}: +{self.bonus} points",
        )


@dataclass(frozen=True)
class FlatBonusEffect(DriverEffect):
    """Unconditional +N points."""

    effect_type = DriverEffectType.FLAT_BONUS.value
    bonus: int = 3

    @classmethod
    def from_value(cls, value: Any) -> "FlatBonusEffect":
        return cls(bonus=_int_value(value, 3, cls.effect_type))

    def apply(self, ctx: DriverEffectContext) -> DriverEffectOutcome:
        return ctx.with_active_points(
            ctx.active_points + self.bonus,
            f"{ctx.active_label} flat bonus: +{self.bonus} points",
        )


@dataclass(frozen=True)
class MysteryEffect(DriverEffect):
    """Placeholder for a card that becomes another driver card."""

    effect_type = DriverEffectType.MYSTERY.value

    def apply(self, ctx: DriverEffectContext) -> DriverEffectOutcome:
        # The resolver swaps the card before applying
        raise CardResolutionError("Mystery card was not resolved")


@dataclass(frozen=True)
class UnknownDriverEffect(DriverEffect):
    """An effect_type this side does not understand."""

    effect_type = "unknown"
    raw_type: str = ""

    def apply(self, ctx: DriverEffectContext) -> DriverEffectOutcome:
        return ctx.unchanged(f"Unknown effect type: {self.raw_type}")
