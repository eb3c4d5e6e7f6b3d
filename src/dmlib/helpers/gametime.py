"""Game time conversions.

Game time counts days: ``2.0`` is two full days, ``0.5`` is half a day.
"""

from __future__ import annotations

from dmlib.config import DEFAULT_CONFIG, LibConfig


def to_human_hours(days: float, config: LibConfig = DEFAULT_CONFIG) -> float:
    """``to_human_hours(2.0) == 48``"""
    return days * config.game_hours_per_day


def to_game_hours(hours: float, config: LibConfig = DEFAULT_CONFIG) -> float:
    """``to_game_hours(12) == 0.5``"""
    return hours / config.game_hours_per_day
