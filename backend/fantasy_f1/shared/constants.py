"""
Unified constants for cards, effects and points tables.

This module provides a single source of truth for the string keys used
in card definitions (seed YAML, API payloads) across the application.
"""

from enum import Enum


class CardType(str, Enum):
    """Which slot a power card is played in."""
    DRIVER = "driver"
    TEAM = "team"


class CardTier(str, Enum):
    """
    Cost grouping of a card.

    Cosmetic for scoring: the tier never changes the points math.
    """
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"


class TargetKind(str, Enum):
    """What a card needs to be pointed at when activated."""
    PLAYER = "player"   # Mirror
    DRIVER = "driver"   # Switcheroo
    TEAM = "team"       # Espionage


class DriverEffectType(str, Enum):
    """Effect keys understood on the driver side."""
    MULTIPLY = "multiply"
    MIRROR = "mirror"
    SWITCHEROO = "switcheroo"
    TEAMWORK_PLUS = "teamwork2"     # active driver + teammate
    TEAM_ORDERS = "teamwork"        # teammate instead of active driver
    POSITION_ADJUST = "position_adjust"
    MYSTERY = "mystery"
    CONDITIONAL_BONUS = "conditional_bonus"
    FLAT_BONUS = "flat_bonus"


class TeamEffectType(str, Enum):
    """Effect keys understood on the team side."""
    ESPIONAGE = "espionage"
    PODIUM = "podium"
    CONDITIONAL_BONUS = "conditional_bonus"
    UNDERCUT = "undercut"
    RANDOM = "random"


class DriverCondition(str, Enum):
    """Conditions for driver conditional_bonus cards."""
    TOP5 = "top5"
    TOP10 = "top10"
    AHEAD_OF_TEAMMATE = "ahead_of_teammate"
    BOTTOM5 = "bottom5"


class TeamCondition(str, Enum):
    """Conditions for team conditional_bonus cards."""
    BOTH_TOP5 = "both_top5"
    BOTH_TOP10 = "both_top10"
    BOTH_OUTSIDE_POINTS = "both_outside_points"
    ONE_LAST_PLACE = "one_last_place"
    BOTH_BOTTOM5 = "both_bottom5"
    SPONSORS = "sponsors"


# Effect types that draw another card instead of having an effect of their own
TRANSFORM_EFFECT_TYPES: dict[CardType, str] = {
    CardType.DRIVER: DriverEffectType.MYSTERY.value,
    CardType.TEAM: TeamEffectType.RANDOM.value,
}


# =============================================================================
# Points tables
# =============================================================================

# Grand Prix: top 10 score
RACE_POINTS: dict[int, int] = {
    1: 25, 2: 18, 3: 15, 4: 12, 5: 10,
    6: 8, 7: 6, 8: 4, 9: 2, 10: 1,
}

# Sprint: top 8 score
SPRINT_POINTS: dict[int, int] = {
    1: 8, 2: 7, 3: 6, 4: 5,
    5: 4, 6: 3, 7: 2, 8: 1,
}

# Last position that scores in a Grand Prix
POINTS_POSITIONS = max(RACE_POINTS)

# Result statuses that never score
NON_CLASSIFIED_STATUSES = frozenset({"dnf", "dns", "dq", "dsq"})
