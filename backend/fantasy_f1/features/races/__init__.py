"""Races feature module — race results, user picks and result lookups."""

from .models import (
    DriverResult,
    TeamResult,
    RaceResult,
    Selection,
)
from .lookup import ResultLookup
from .repository import (
    SelectionRepository,
    RaceResultRepository,
    InMemorySelectionRepository,
    InMemoryRaceResultRepository,
)

__all__ = [
    "DriverResult",
    "TeamResult",
    "RaceResult",
    "Selection",
    "ResultLookup",
    "SelectionRepository",
    "RaceResultRepository",
    "InMemorySelectionRepository",
    "InMemoryRaceResultRepository",
]
