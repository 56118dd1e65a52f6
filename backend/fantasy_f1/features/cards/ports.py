"""
Cross-player ports used by Mirror and Espionage.

The resolver never touches storage: it asks these ports for another
player's (or another team's) score for the same round. Implementations
return zero when the data does not exist.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass


@dataclass
class PlayerScore:
    """Card-free score of one player for one round."""

    main_points: int = 0
    reserve_points: int = 0
    team_points: int = 0
    total_points: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


class PlayerScoreLookup(ABC):
    """Another player's weekend score (Mirror)."""

    @abstractmethod
    def get_player_score(
        self,
        target_user_id: str,
        league_id: str | None,
        season: int,
        round: int,
    ) -> PlayerScore:
        """Zero score when the target has no selection or no result exists."""
        pass


class TeamScoreLookup(ABC):
    """Another team's weekend points (Espionage)."""

    @abstractmethod
    def get_team_score(
        self,
        target_team: str,
        league_id: str | None,
        season: int,
        round: int,
    ) -> int:
        """0 when nobody picked the team or no result exists."""
        pass
