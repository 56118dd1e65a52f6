"""Roster entries (dataclasses, no DB dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TeamEntry:
    """A constructor as listed in a season roster."""

    name: str  # canonical: "Haas F1 Team"
    short_name: str | None = None  # "Haas"
    alternate_names: list[str] = field(default_factory=list)  # "MoneyGram Haas", ...


@dataclass
class DriverEntry:
    """A race driver as listed in a season roster."""

    name: str  # full: "Max Verstappen"
    short_name: str  # canonical id: "M. Verstappen"
    team: str  # canonical team name
    alternate_names: list[str] = field(default_factory=list)
