"""Data models for race results and user picks (dataclasses, no DB dependency)."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping

from fantasy_f1.config import settings
from fantasy_f1.shared.points import is_classified


def _pick(data: Mapping[str, Any], snake: str, camel: str, default: Any = None) -> Any:
    """Read a key from an API payload in either snake_case or camelCase."""
    if snake in data:
        return data[snake]
    return data.get(camel, default)


@dataclass
class DriverResult:
    """One driver's classification in a race or sprint."""

    driver: str  # as reported: "Max Verstappen" / "M. Verstappen"
    position: int | None = None  # None when unclassified
    points: int = 0
    team: str | None = None
    did_not_start: bool = False
    did_not_finish: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DriverResult":
        position = data.get("position")
        return cls(
            driver=data["driver"],
            position=position if isinstance(position, int) else None,
            points=data.get("points") or 0,
            team=data.get("team"),
            did_not_start=bool(_pick(data, "did_not_start", "didNotStart", False)),
            did_not_finish=bool(_pick(data, "did_not_finish", "didNotFinish", False)),
        )


@dataclass
class TeamResult:
    """A constructor's aggregated points for one round."""

    team: str
    race_points: int = 0
    sprint_points: int = 0
    total_points: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TeamResult":
        return cls(
            team=data["team"],
            race_points=_pick(data, "race_points", "racePoints", 0) or 0,
            sprint_points=_pick(data, "sprint_points", "sprintPoints", 0) or 0,
            total_points=_pick(data, "total_points", "totalPoints", 0) or 0,
        )


@dataclass
class RaceResult:
    """Full classification data for one round."""

    season: int
    round: int
    is_sprint_weekend: bool = False
    results: list[DriverResult] = field(default_factory=list)
    sprint_results: list[DriverResult] = field(default_factory=list)
    team_results: list[TeamResult] = field(default_factory=list)
    race_name: str | None = None

    @property
    def grid_size(self) -> int:
        """
        Last classified position.

        DNF/DNS rows without a position do not count. Falls back to
        settings.default_grid_size when nothing is classified yet.
        """
        return max(
            (r.position for r in self.results if is_classified(r.position)),
            default=settings.default_grid_size,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RaceResult":
        return cls(
            season=int(data["season"]),
            round=int(data["round"]),
            is_sprint_weekend=bool(_pick(data, "is_sprint_weekend", "isSprintWeekend", False)),
            results=[DriverResult.from_dict(r) for r in data.get("results") or []],
            sprint_results=[
                DriverResult.from_dict(r)
                for r in _pick(data, "sprint_results", "sprintResults", None) or []
            ],
            team_results=[
                TeamResult.from_dict(t)
                for t in _pick(data, "team_results", "teamResults", None) or []
            ],
            race_name=_pick(data, "race_name", "raceName"),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Selection:
    """One user's pick for one round."""

    main_driver: str | None
    reserve_driver: str | None
    team: str | None
    round: int | None = None
    league_id: str | None = None
    user_id: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Selection":
        return cls(
            main_driver=_pick(data, "main_driver", "mainDriver"),
            reserve_driver=_pick(data, "reserve_driver", "reserveDriver"),
            team=data.get("team"),
            round=data.get("round"),
            league_id=_pick(data, "league_id", "leagueId"),
            user_id=_pick(data, "user_id", "userId"),
        )

    def to_dict(self) -> dict:
        return asdict(self)
