"""
Roster ports.

The scoring engine only ever talks to these interfaces; the YAML-backed
SeasonRoster is the default implementation, a database-backed one can be
swapped in without touching the engine.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class NameNormalizer(ABC):
    """Maps driver/team aliases to one canonical identifier."""

    @abstractmethod
    def normalize_driver_name(self, name: Optional[str]) -> Optional[str]:
        """
        Canonical driver id ("M. Verstappen") for any known spelling.

        Returns None for empty input.
        """
        pass

    @abstractmethod
    def normalize_team_name(self, name: Optional[str]) -> Optional[str]:
        """Canonical team name, or None if the team is unknown."""
        pass


class Roster(ABC):
    """Driver/team membership for one season."""

    @abstractmethod
    def get_driver_team(self, driver: Optional[str]) -> Optional[str]:
        """Canonical team of a driver, or None."""
        pass

    @abstractmethod
    def get_team_drivers(self, team: Optional[str]) -> List[str]:
        """Canonical driver ids racing for a team (usually two)."""
        pass
