"""
Team card effects.

Effects operate on the selected team's base points for the round and on the
results of that team's two drivers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fantasy_f1.shared.constants import POINTS_POSITIONS, TeamCondition, TeamEffectType
from fantasy_f1.shared.points import is_classified, points_for_position

from ..exceptions import CardResolutionError, EffectValueError
from ..schemas import ConditionalBonusValue, PodiumValue, SponsorsBonus
from .base import TeamEffect, TeamEffectContext, TeamEffectOutcome


@dataclass(frozen=True)
class EspionageEffect(TeamEffect):
    """Copy another team's weekend points."""

    effect_type = TeamEffectType.ESPIONAGE.value

    def apply(self, ctx: TeamEffectContext) -> TeamEffectOutcome:
        target = ctx.target_team
        if not target:
            return ctx.unchanged("Espionage needs a target team")

        points = 0
        if ctx.team_scores is not None:
            points = ctx.team_scores.get_team_score(
                target_team=target,
                league_id=ctx.league_id,
                season=ctx.race_result.season,
                round=ctx.race_result.round,
            )
        return TeamEffectOutcome(
            team_points=points,
            applied=True,
            description=f"Espionage: Copied {target}'s {points} points",
        )


@dataclass(frozen=True)
class PodiumEffect(TeamEffect):
    """+N points per car on the podium, capped."""

    effect_type = TeamEffectType.PODIUM.value
    points_per_podium: int = 8
    max_points: int = 16

    @classmethod
    def from_value(cls, value: Any) -> "PodiumEffect":
        payload = PodiumValue.model_validate(value or {})
        return cls(
            points_per_podium=payload.points_per_podium or 8,
            max_points=payload.max_points or 16,
        )

    def apply(self, ctx: TeamEffectContext) -> TeamEffectOutcome:
        podium_count = sum(
            1 for r in ctx.driver_results()
            if r is not None and is_classified(r.position) and r.position <= 3
        )
        bonus = min(podium_count * self.points_per_podium, self.max_points)
        return TeamEffectOutcome(
            team_points=ctx.team_points + bonus,
            applied=podium_count > 0,
            description=f"{podium_count} podium car(s): +{bonus} points",
        )


@dataclass(frozen=True)
class TeamConditionalBonusEffect(TeamEffect):
    """Bonus when the team's cars (or base points) meet a condition."""

    effect_type = TeamEffectType.CONDITIONAL_BONUS.value
    condition: TeamCondition = TeamCondition.BOTH_TOP5
    bonus: int = 0
    sponsors: SponsorsBonus | None = None

    @classmethod
    def from_value(cls, value: Any) -> "TeamConditionalBonusEffect":
        payload = ConditionalBonusValue.model_validate(value)
        condition = payload.condition
        if not isinstance(condition, TeamCondition):
            raise EffectValueError(f"Not a team condition: {condition.value}")

        if condition == TeamCondition.SPONSORS:
            sponsors = payload.bonus if isinstance(payload.bonus, SponsorsBonus) else SponsorsBonus()
            return cls(condition=condition, sponsors=sponsors)

        if not isinstance(payload.bonus, int):
            raise EffectValueError(f"{condition.value} expects a numeric bonus")
        return cls(condition=condition, bonus=payload.bonus)

    def apply(self, ctx: TeamEffectContext) -> TeamEffectOutcome:
        if self.condition == TeamCondition.SPONSORS:
            return self._apply_sponsors(ctx)

        first, second = ctx.pair_results()
        grid = ctx.race_result.grid_size
        met = False
        label = ""

        if self.condition in (TeamCondition.BOTH_TOP5, TeamCondition.BOTH_TOP10):
            limit = 5 if self.condition == TeamCondition.BOTH_TOP5 else 10
            met = all(r is not None and is_classified(r.position) and r.position <= limit for r in (first, second))
            label = f"Both cars Top {limit}"
        elif self.condition == TeamCondition.BOTH_OUTSIDE_POINTS:
            # A car missing from the classification did not score either
            met = (first is not None or second is not None) and all(
                r is None or not is_classified(r.position) or r.position > POINTS_POSITIONS
                for r in (first, second)
            )
            label = "Both cars outside points"
        elif self.condition == TeamCondition.ONE_LAST_PLACE:
            met = any(r is not None and r.position == grid for r in ctx.driver_results())
            label = "One car last place"
        elif self.condition == TeamCondition.BOTH_BOTTOM5:
            threshold = grid - 4
            met = all(r is not None and is_classified(r.position) and r.position >= threshold for r in (first, second))
            label = "Both cars bottom 5"

        if not met:
            return ctx.unchanged(f"Condition not met: {self.condition.value}")
        return TeamEffectOutcome(
            team_points=ctx.team_points + self.bonus,
            applied=True,
            description=f"{label}: +{self.bonus} points",
        )

    def _apply_sponsors(self, ctx: TeamEffectContext) -> TeamEffectOutcome:
        sponsors = self.sponsors or SponsorsBonus()
        if ctx.team_points == 0:
            bonus = sponsors.zero or 5
        elif ctx.team_points == 1:
            bonus = sponsors.one or 1
        else:
            return ctx.unchanged(f"Condition not met: {self.condition.value}")
        return TeamEffectOutcome(
            team_points=ctx.team_points + bonus,
            applied=True,
            description=f"Team scored {ctx.team_points}: +{bonus} points",
        )


@dataclass(frozen=True)
class UndercutEffect(TeamEffect):
    """
    Reclassify the slower car one place behind its teammate.

    The new position is clamped to the grid size. Other drivers keep their
    positions; only this team's points are recomputed.
    """

    effect_type = TeamEffectType.UNDERCUT.value

    def apply(self, ctx: TeamEffectContext) -> TeamEffectOutcome:
        first, second = ctx.pair_results()
        if first is None or second is None or not (is_classified(first.position) and is_classified(second.position)):
            return ctx.unchanged("Undercut needs both cars classified")

        better, worse = (first, second) if first.position < second.position else (second, first)
        new_position = min(better.position + 1, ctx.race_result.grid_size)
        new_points = points_for_position(new_position)
        return TeamEffectOutcome(
            team_points=ctx.team_points - (worse.points or 0) + new_points,
            applied=True,
            description=f"Undercut: Second car P{worse.position} → P{new_position}",
        )


@dataclass(frozen=True)
class RandomEffect(TeamEffect):
    """Placeholder for a card that becomes another team card."""

    effect_type = TeamEffectType.RANDOM.value

    def apply(self, ctx: TeamEffectContext) -> TeamEffectOutcome:
        raise CardResolutionError("Random card was not resolved")


@dataclass(frozen=True)
class UnknownTeamEffect(TeamEffect):
    """An effect_type this side does not understand."""

    effect_type = "unknown"
    raw_type: str = ""

    def apply(self, ctx: TeamEffectContext) -> TeamEffectOutcome:
        return ctx.unchanged(f"Unknown effect type: {self.raw_type}")
