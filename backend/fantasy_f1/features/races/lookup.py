"""
Result lookup layer.

Finds a driver's classification or a team's aggregate in one round's
data. Every lookup is tolerant of incomplete data: a driver who did not
start may be missing from the results entirely, so "not found" is a
normal answer (None / 0 / []), never an exception.
"""

from __future__ import annotations

from typing import Sequence

from fantasy_f1.features.roster.catalog import SeasonRoster

from .models import DriverResult, TeamResult


class ResultLookup:
    """
    Season-bound lookups over race results.

    Example usage:
        lookup = ResultLookup(roster_catalog.for_season(2026))
        result = lookup.find_driver_result("Checo", race.results)
        teammate = lookup.get_teammate("M. Verstappen")
    """

    def __init__(self, roster: SeasonRoster):
        self.roster = roster

    @property
    def season(self) -> int:
        return self.roster.season

    def find_driver_result(
        self,
        driver_name: str | None,
        results: Sequence[DriverResult] | None,
    ) -> DriverResult | None:
        """First result whose driver normalizes to the same canonical id."""
        if not driver_name or not results:
            return None

        target = self.roster.normalize_driver_name(driver_name)
        if target is None:
            return None

        for result in results:
            if self.roster.normalize_driver_name(result.driver) == target:
                return result
        return None

    def driver_points(
        self,
        driver_name: str | None,
        results: Sequence[DriverResult] | None,
    ) -> int:
        """Points scored by a driver, 0 if absent."""
        result = self.find_driver_result(driver_name, results)
        return result.points if result else 0

    def find_team_result(
        self,
        team_name: str | None,
        team_results: Sequence[TeamResult] | None,
    ) -> TeamResult | None:
        """Team aggregate matched on canonical team name."""
        if not team_name or not team_results:
            return None

        target = self.roster.normalize_team_name(team_name)
        if target is None:
            return None

        for team_result in team_results:
            if self.roster.normalize_team_name(team_result.team) == target:
                return team_result
        return None

    def team_points(
        self,
        team_name: str | None,
        team_results: Sequence[TeamResult] | None,
        include_sprint: bool = False,
    ) -> int:
        """Race points (+ sprint points when asked) of a team, 0 if absent."""
        team_result = self.find_team_result(team_name, team_results)
        if team_result is None:
            return 0

        points = team_result.race_points + (team_result.sprint_points if include_sprint else 0)
        if points == 0 and team_result.total_points > 0:
            # Manually entered results only carry the total
            points = team_result.total_points
        return points

    def get_teammate(self, driver_name: str | None) -> str | None:
        """The other driver of the same team, or None."""
        canonical = self.roster.normalize_driver_name(driver_name)
        team = self.roster.get_driver_team(canonical)
        if team is None:
            return None

        for driver in self.roster.get_team_drivers(team):
            if driver != canonical:
                return driver
        return None

    def get_team_drivers(self, team_name: str | None) -> list[str]:
        return self.roster.get_team_drivers(team_name)
