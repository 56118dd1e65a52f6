"""
Points formulas shared by the scoring engine and card effects.
"""

from typing import Union

from .constants import NON_CLASSIFIED_STATUSES, RACE_POINTS, SPRINT_POINTS


def points_for_position(position: Union[int, str, None], sprint: bool = False) -> int:
    """
    Championship points for a finishing position.

    Args:
        position: 1-based position, or a status string ("DNF", "DSQ", ...).
                  Numeric strings ("4") are accepted.
        sprint: Use the sprint table instead of the Grand Prix table

    Returns:
        Points for the position, 0 outside the scoring positions
    """
    if position is None or isinstance(position, bool):
        return 0

    if isinstance(position, str):
        status = position.strip().lower()
        if status in NON_CLASSIFIED_STATUSES:
            return 0
        try:
            position = int(status)
        except ValueError:
            return 0

    table = SPRINT_POINTS if sprint else RACE_POINTS
    return table.get(int(position), 0)


def is_classified(position: Union[int, str, None]) -> bool:
    """True if the position is a real 1-based finishing position."""
    return isinstance(position, int) and not isinstance(position, bool) and position > 0
