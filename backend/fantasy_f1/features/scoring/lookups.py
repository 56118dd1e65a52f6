"""
Cross-player score lookups backed by the selection / race result repositories.

Mirror and Espionage read another pick for the same round and score it
without cards. A Mirror target without a pick can get one auto-assigned.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from fantasy_f1.features.cards.ports import PlayerScore, PlayerScoreLookup, TeamScoreLookup
from fantasy_f1.features.races.models import Selection
from fantasy_f1.features.races.repository import RaceResultRepository, SelectionRepository
from fantasy_f1.features.roster.catalog import RosterCatalog

from .service import ScoringService

logger = logging.getLogger(__name__)


class SelectionAutoAssigner(ABC):
    """Creates a default pick for a player who has none."""

    @abstractmethod
    def assign(
        self,
        user_id: str,
        league_id: str | None,
        season: int,
        round: int,
    ) -> Selection | None:
        """The stored pick, or None when nothing could be assigned."""
        pass


class RosterAutoAssigner(SelectionAutoAssigner):
    """Assigns the first two roster drivers and the first roster team."""

    def __init__(self, roster_catalog: RosterCatalog, selections: SelectionRepository):
        self.roster_catalog = roster_catalog
        self.selections = selections

    def assign(
        self,
        user_id: str,
        league_id: str | None,
        season: int,
        round: int,
    ) -> Selection | None:
        roster = self.roster_catalog.for_season(season)
        if len(roster.drivers) < 2 or not roster.teams:
            logger.warning(
                f"Cannot auto-assign for {user_id}: "
                f"drivers={len(roster.drivers)}, teams={len(roster.teams)}"
            )
            return None

        selection = Selection(
            main_driver=roster.drivers[0].short_name,
            reserve_driver=roster.drivers[1].short_name,
            team=roster.teams[0].name,
            round=round,
            league_id=league_id,
            user_id=user_id,
        )
        self.selections.save(selection)
        logger.info(
            f"Auto-assigned selection for {user_id} round {round}: "
            f"{selection.main_driver}, {selection.reserve_driver}, {selection.team}"
        )
        return selection


class SelectionPlayerScoreLookup(PlayerScoreLookup):
    """Mirror: the target player's card-free score for the round."""

    def __init__(
        self,
        selections: SelectionRepository,
        race_results: RaceResultRepository,
        scoring: ScoringService,
        auto_assigner: SelectionAutoAssigner | None = None,
    ):
        self.selections = selections
        self.race_results = race_results
        self.scoring = scoring
        self.auto_assigner = auto_assigner

    def get_player_score(
        self,
        target_user_id: str,
        league_id: str | None,
        season: int,
        round: int,
    ) -> PlayerScore:
        selection = self.selections.get_selection(target_user_id, league_id, round)
        if selection is None and self.auto_assigner is not None:
            logger.info(f"Target player {target_user_id} has no selection for round {round}, auto-assigning")
            try:
                selection = self.auto_assigner.assign(target_user_id, league_id, season, round)
            except Exception as e:
                logger.error(f"Auto-assignment failed for {target_user_id}: {e}")
                selection = None

        if selection is None:
            logger.info(f"No selection for target player {target_user_id}, scoring 0")
            return PlayerScore()

        race_result = self.race_results.get_race_result(season, round)
        if race_result is None:
            return PlayerScore()

        score = self.scoring.calculate_race_points(selection, race_result)
        return PlayerScore(
            main_points=score.breakdown.main_driver_points,
            reserve_points=score.breakdown.reserve_driver_points,
            team_points=score.breakdown.team_points,
            total_points=score.total_points,
        )


class SelectionTeamScoreLookup(TeamScoreLookup):
    """Espionage: team points of any pick of the target team in the league."""

    def __init__(
        self,
        selections: SelectionRepository,
        race_results: RaceResultRepository,
        scoring: ScoringService,
    ):
        self.selections = selections
        self.race_results = race_results
        self.scoring = scoring

    def get_team_score(
        self,
        target_team: str,
        league_id: str | None,
        season: int,
        round: int,
    ) -> int:
        roster = self.scoring.lookup_for(season).roster
        selection = self.selections.find_selection_with_team(league_id, round, target_team, normalizer=roster)
        if selection is None:
            return 0

        race_result = self.race_results.get_race_result(season, round)
        if race_result is None:
            return 0

        return self.scoring.calculate_race_points(selection, race_result).breakdown.team_points
