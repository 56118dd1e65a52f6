"""
Base types for card effects.

Each effect kind is one class holding its own typed payload. The resolver
builds a context with everything a branch may read, the effect returns an
outcome, and the resolver wraps it into EffectDetails.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, ClassVar, TYPE_CHECKING

from fantasy_f1.features.races.lookup import ResultLookup
from fantasy_f1.features.races.models import DriverResult, RaceResult, Selection

if TYPE_CHECKING:
    from fantasy_f1.features.cards.ports import PlayerScoreLookup, TeamScoreLookup


@dataclass
class EffectDetails:
    """What a card did, shown to the user next to the score."""

    card_name: str
    card_tier: str
    effect_applied: bool = False
    description: str | None = None
    transformed_into: str | None = None  # Mystery/Random only

    def to_dict(self) -> dict:
        return asdict(self)


# =============================================================================
# Driver side
# =============================================================================

@dataclass
class DriverEffectContext:
    """Inputs of one driver card evaluation."""

    main_points: int
    reserve_points: int
    race_result: RaceResult
    selection: Selection
    lookup: ResultLookup
    target_player: str | None = None
    target_driver: str | None = None
    league_id: str | None = None
    user_id: str | None = None
    player_scores: "PlayerScoreLookup | None" = None

    @property
    def reserve_active(self) -> bool:
        """Reserve takes the card when the main driver did not start."""
        return (
            self.main_points == 0
            and self.reserve_points > 0
            and not self.race_result.is_sprint_weekend
        )

    @property
    def active_points(self) -> int:
        return self.reserve_points if self.reserve_active else self.main_points

    @property
    def active_driver(self) -> str | None:
        return self.selection.reserve_driver if self.reserve_active else self.selection.main_driver

    @property
    def active_label(self) -> str:
        return "Reserve driver" if self.reserve_active else "Main driver"

    def active_result(self) -> DriverResult | None:
        return self.lookup.find_driver_result(self.active_driver, self.race_result.results)

    def teammate_result(self) -> tuple[str | None, DriverResult | None]:
        teammate = self.lookup.get_teammate(self.active_driver)
        if teammate is None:
            return None, None
        return teammate, self.lookup.find_driver_result(teammate, self.race_result.results)

    def unchanged(self, description: str | None = None) -> "DriverEffectOutcome":
        return DriverEffectOutcome(self.main_points, self.reserve_points, False, description)

    def with_active_points(self, points: int, description: str) -> "DriverEffectOutcome":
        """Outcome with the active slot set to `points`."""
        if self.reserve_active:
            return DriverEffectOutcome(self.main_points, points, True, description)
        return DriverEffectOutcome(points, self.reserve_points, True, description)


@dataclass
class DriverEffectOutcome:
    main_points: int
    reserve_points: int
    applied: bool
    description: str | None = None


class DriverEffect(ABC):
    """One driver card effect kind."""

    effect_type: ClassVar[str]

    @classmethod
    def from_value(cls, value: Any) -> "DriverEffect":
        """Build the effect from a card's raw effect_value."""
        return cls()

    @abstractmethod
    def apply(self, ctx: DriverEffectContext) -> DriverEffectOutcome:
        pass


# =============================================================================
# Team side
# =============================================================================

@dataclass
class TeamEffectContext:
    """Inputs of one team card evaluation."""

    team_points: int
    race_result: RaceResult
    selection: Selection
    lookup: ResultLookup
    target_team: str | None = None
    league_id: str | None = None
    user_id: str | None = None
    team_scores: "TeamScoreLookup | None" = None

    def team_drivers(self) -> list[str]:
        return self.lookup.get_team_drivers(self.selection.team)

    def driver_results(self) -> list[DriverResult | None]:
        """Results of the team's drivers, in roster order (None if absent)."""
        results = self.race_result.results
        return [self.lookup.find_driver_result(d, results) for d in self.team_drivers()]

    def pair_results(self) -> tuple[DriverResult | None, DriverResult | None]:
        """Results of the team's first two drivers."""
        found = self.driver_results() + [None, None]
        return found[0], found[1]

    def unchanged(self, description: str | None = None) -> "TeamEffectOutcome":
        return TeamEffectOutcome(self.team_points, False, description)


@dataclass
class TeamEffectOutcome:
    team_points: int
    applied: bool
    description: str | None = None


class TeamEffect(ABC):
    """One team card effect kind."""

    effect_type: ClassVar[str]

    @classmethod
    def from_value(cls, value: Any) -> "TeamEffect":
        return cls()

    @abstractmethod
    def apply(self, ctx: TeamEffectContext) -> TeamEffectOutcome:
        pass
