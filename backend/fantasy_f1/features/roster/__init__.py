"""Roster feature module — season rosters and driver/team name normalization."""

from .base import NameNormalizer, Roster
from .models import DriverEntry, TeamEntry
from .catalog import RosterCatalog, SeasonRoster, alias_key

__all__ = [
    "NameNormalizer",
    "Roster",
    "DriverEntry",
    "TeamEntry",
    "RosterCatalog",
    "SeasonRoster",
    "alias_key",
]
