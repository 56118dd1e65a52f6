"""
Selection and race result repositories.

The engine reads other players' picks through these ports (Mirror,
Espionage). Storage belongs to the host application; the in-memory
implementations back the CLI scripts and the tests.

Usage:
    selections = InMemorySelectionRepository()
    selections.save(Selection("M. Verstappen", "L. Norris", "Ferrari",
                              round=3, league_id="L1", user_id="u1"))
    selections.get_selection("u1", "L1", 3)
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fantasy_f1.features.roster.base import NameNormalizer
from fantasy_f1.features.roster.catalog import alias_key

from .models import RaceResult, Selection


def _team_key(team: str, normalizer: NameNormalizer | None) -> str:
    if normalizer is not None:
        team = normalizer.normalize_team_name(team) or team
    return alias_key(team)


class SelectionRepository(ABC):
    """Read/write access to users' race picks."""

    @abstractmethod
    def get_selection(self, user_id: str, league_id: str | None, round: int) -> Selection | None:
        pass

    @abstractmethod
    def find_selection_with_team(
        self,
        league_id: str | None,
        round: int,
        team: str,
        normalizer: NameNormalizer | None = None,
    ) -> Selection | None:
        """
        Any pick in the league/round whose team matches.

        With a normalizer, aliases ("Scuderia Ferrari") match the canonical
        team; unknown names still compare by alias_key.
        """
        pass

    @abstractmethod
    def save(self, selection: Selection) -> Selection:
        pass


class RaceResultRepository(ABC):
    """Read/write access to race results."""

    @abstractmethod
    def get_race_result(self, season: int, round: int) -> RaceResult | None:
        pass

    @abstractmethod
    def save(self, race_result: RaceResult) -> RaceResult:
        pass


class InMemorySelectionRepository(SelectionRepository):
    """Selections keyed by (user, league, round)."""

    def __init__(self, selections: list[Selection] | None = None):
        self._items: dict[tuple, Selection] = {}
        for selection in selections or []:
            self.save(selection)

    def get_selection(self, user_id: str, league_id: str | None, round: int) -> Selection | None:
        return self._items.get((user_id, league_id, round))

    def find_selection_with_team(
        self,
        league_id: str | None,
        round: int,
        team: str,
        normalizer: NameNormalizer | None = None,
    ) -> Selection | None:
        wanted = _team_key(team, normalizer)
        for (_, selection_league, selection_round), selection in self._items.items():
            if selection_league != league_id or selection_round != round:
                continue
            if selection.team and _team_key(selection.team, normalizer) == wanted:
                return selection
        return None

    def save(self, selection: Selection) -> Selection:
        if selection.user_id is None or selection.round is None:
            raise ValueError("Selection needs user_id and round to be stored")
        self._items[(selection.user_id, selection.league_id, selection.round)] = selection
        return selection

    def __len__(self) -> int:
        return len(self._items)


class InMemoryRaceResultRepository(RaceResultRepository):
    """Race results keyed by (season, round)."""

    def __init__(self, results: list[RaceResult] | None = None):
        self._items: dict[tuple[int, int], RaceResult] = {}
        for result in results or []:
            self.save(result)

    def get_race_result(self, season: int, round: int) -> RaceResult | None:
        return self._items.get((season, round))

    def save(self, race_result: RaceResult) -> RaceResult:
        self._items[(race_result.season, race_result.round)] = race_result
        return race_result
