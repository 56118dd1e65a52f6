"""Roster catalog loader — reads rosters/<season>.yaml and resolves aliases."""

from __future__ import annotations

import logging
import unicodedata
from pathlib import Path

import yaml

from .base import NameNormalizer, Roster
from .models import DriverEntry, TeamEntry

logger = logging.getLogger(__name__)


def alias_key(name: str) -> str:
    """Case-, whitespace- and accent-insensitive lookup key."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return " ".join(stripped.lower().split())


class SeasonRoster(NameNormalizer, Roster):
    """Drivers and teams of one season, with every known alias."""

    def __init__(
        self,
        season: int,
        teams: list[TeamEntry],
        drivers: list[DriverEntry],
    ):
        self.season = season
        self.teams = teams
        self.drivers = drivers

        self._team_aliases: dict[str, str] = {}
        for team in teams:
            for alias in [team.name, team.short_name, *team.alternate_names]:
                if alias:
                    self._team_aliases[alias_key(alias)] = team.name

        self._driver_aliases: dict[str, str] = {}
        self._driver_team: dict[str, str] = {}
        for driver in drivers:
            names = [driver.name, driver.short_name, *driver.alternate_names]
            # "L. Norris" also typed as "L Norris"
            names.append(driver.short_name.replace(".", ""))
            for alias in names:
                self._driver_aliases[alias_key(alias)] = driver.short_name
            self._driver_team[driver.short_name] = self.normalize_team_name(driver.team) or driver.team

    @classmethod
    def empty(cls, season: int) -> "SeasonRoster":
        return cls(season=season, teams=[], drivers=[])

    @classmethod
    def from_dict(cls, data: dict) -> "SeasonRoster":
        teams = [
            TeamEntry(
                name=t["name"],
                short_name=t.get("short_name"),
                alternate_names=list(t.get("alternate_names") or []),
            )
            for t in data.get("teams", [])
        ]
        drivers = [
            DriverEntry(
                name=d["name"],
                short_name=d["short_name"],
                team=d["team"],
                alternate_names=list(d.get("alternate_names") or []),
            )
            for d in data.get("drivers", [])
        ]
        return cls(season=int(data["season"]), teams=teams, drivers=drivers)

    # === NameNormalizer ===

    def normalize_driver_name(self, name: str | None) -> str | None:
        if not name or name == "None":
            return None
        cleaned = " ".join(name.split())
        return self._driver_aliases.get(alias_key(cleaned), cleaned)

    def normalize_team_name(self, name: str | None) -> str | None:
        if not name or name == "None":
            return None
        return self._team_aliases.get(alias_key(name))

    # === Roster ===

    def get_driver_team(self, driver: str | None) -> str | None:
        canonical = self.normalize_driver_name(driver)
        if canonical is None:
            return None
        return self._driver_team.get(canonical)

    def get_team_drivers(self, team: str | None) -> list[str]:
        canonical = self.normalize_team_name(team)
        if canonical is None:
            return []
        return [
            d.short_name for d in self.drivers
            if self._driver_team.get(d.short_name) == canonical
        ]

    def is_valid_driver(self, name: str | None) -> bool:
        return bool(name) and alias_key(name) in self._driver_aliases

    def is_valid_team(self, name: str | None) -> bool:
        return self.normalize_team_name(name) is not None


class RosterCatalog:
    """Loads and provides access to season rosters from YAML."""

    def __init__(self, content_dir: Path):
        self.content_dir = content_dir
        self._rosters: dict[int, SeasonRoster] | None = None

    def load(self) -> dict[int, SeasonRoster]:
        """Load every rosters/*.yaml file."""
        roster_dir = self.content_dir / "rosters"
        rosters: dict[int, SeasonRoster] = {}
        if not roster_dir.exists():
            logger.warning(f"Roster directory not found: {roster_dir}")
            self._rosters = rosters
            return rosters

        for path in sorted(roster_dir.glob("*.yaml")):
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            roster = SeasonRoster.from_dict(data)
            rosters[roster.season] = roster
            logger.debug(
                f"Loaded roster {roster.season}: "
                f"{len(roster.drivers)} drivers, {len(roster.teams)} teams"
            )

        self._rosters = rosters
        return rosters

    @property
    def rosters(self) -> dict[int, SeasonRoster]:
        if self._rosters is None:
            self.load()
        return self._rosters or {}

    @property
    def seasons(self) -> list[int]:
        return sorted(self.rosters)

    def for_season(self, season: int) -> SeasonRoster:
        """
        Roster for a season.

        Falls back to the latest known season before it (test seasons
        such as 3026 use the newest data), then to the earliest one.
        """
        rosters = self.rosters
        if season in rosters:
            return rosters[season]

        earlier = [s for s in rosters if s <= season]
        if earlier:
            return rosters[max(earlier)]
        if rosters:
            return rosters[min(rosters)]
        return SeasonRoster.empty(season)
