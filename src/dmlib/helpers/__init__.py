"""Helpers - numbers, text and game time."""

from dmlib.helpers import gametime, numeric, text
from dmlib.helpers.gametime import to_game_hours, to_human_hours
from dmlib.helpers.numeric import Point, exp_curve, float_equals, lin_curve

__all__ = [
    "gametime",
    "numeric",
    "text",
    "Point",
    "exp_curve",
    "lin_curve",
    "float_equals",
    "to_game_hours",
    "to_human_hours",
]
