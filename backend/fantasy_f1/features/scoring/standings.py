"""
League standings from scored rounds.

Driver standings count main + reserve points, constructor standings count
team points. Both are sorted by total, best first.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import asdict, dataclass, field
from typing import Iterable

from .service import RaceScore


@dataclass
class ScoredRound:
    """One user's scored round, as stored after a scoring pass."""

    user_id: str
    round: int
    score: RaceScore
    race_name: str | None = None


@dataclass
class DriverRoundEntry:
    round: int
    race_name: str | None
    main_driver: str | None
    reserve_driver: str | None
    main_race_points: int
    reserve_points: int  # sprint points on sprint weekends
    total_points: int
    is_sprint_weekend: bool
    main_driver_status: str


@dataclass
class ConstructorRoundEntry:
    round: int
    race_name: str | None
    team: str | None
    total_points: int
    is_sprint_weekend: bool


@dataclass
class Standing:
    user_id: str
    total_points: int = 0
    rounds: list = field(default_factory=list)


@dataclass
class Standings:
    driver_standings: list[Standing] = field(default_factory=list)
    constructor_standings: list[Standing] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def _ranked(by_user: dict[str, list]) -> list[Standing]:
    standings = []
    for user_id, rounds in by_user.items():
        rounds = sorted(rounds, key=lambda r: r.round)
        standings.append(
            Standing(
                user_id=user_id,
                total_points=sum(r.total_points for r in rounds),
                rounds=rounds,
            )
        )
    return sorted(standings, key=lambda s: (-s.total_points, s.user_id))


def build_standings(entries: Iterable[ScoredRound]) -> Standings:
    """Aggregate scored rounds into driver and constructor standings."""
    drivers: dict[str, list[DriverRoundEntry]] = defaultdict(list)
    constructors: dict[str, list[ConstructorRoundEntry]] = defaultdict(list)

    for entry in entries:
        b = entry.score.breakdown
        drivers[entry.user_id].append(
            DriverRoundEntry(
                round=entry.round,
                race_name=entry.race_name,
                main_driver=b.main_driver,
                reserve_driver=b.reserve_driver,
                main_race_points=b.main_driver_points,
                reserve_points=b.reserve_driver_points,
                total_points=b.main_driver_points + b.reserve_driver_points,
                is_sprint_weekend=b.is_sprint_weekend,
                main_driver_status=b.main_driver_status,
            )
        )
        constructors[entry.user_id].append(
            ConstructorRoundEntry(
                round=entry.round,
                race_name=entry.race_name,
                team=b.team,
                total_points=b.team_points,
                is_sprint_weekend=b.is_sprint_weekend,
            )
        )

    return Standings(
        driver_standings=_ranked(drivers),
        constructor_standings=_ranked(constructors),
    )
