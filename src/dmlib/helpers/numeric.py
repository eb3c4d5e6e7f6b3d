"""Number clamps, defaults, predicates and fitted curves."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel

from dmlib.combinators.compose import pipe
from dmlib.config import DEFAULT_CONFIG, LibConfig
from dmlib.kernel import is_nothing

NumFn = Callable[[float], float]


class Point(BaseModel):
    """A point a curve is fitted through."""
    x: float
    y: float


def _point(p: Point | Mapping[str, Any]) -> Point:
    return Point.model_validate(p)


def force_min(minimum: float) -> NumFn:
    """Ensure a value is at least ``minimum``."""
    return lambda x: max(minimum, x)


def force_max(cap: float) -> NumFn:
    """Cap a value to at most ``cap``."""
    return lambda x: min(x, cap)


def force_range(minimum: float, maximum: float) -> NumFn:
    """Keep a value inside ``[minimum, maximum]``."""
    return pipe(force_max(maximum), force_min(minimum))


force_positive = force_min(0)
force_percent = force_range(0, 1)


def default_val(val: Any) -> Callable[[Any], Any]:
    """Replace an absent value (``None``/``NOTHING``) with ``val``."""
    def fill(x: Any) -> Any:
        if is_nothing(x):
            return val
        return x

    return fill


default_mult = default_val(1)
default_base = default_val(0)


def in_range(x: float, lo: float, hi: float) -> bool:
    return lo <= x <= hi


def float_equals(
    n1: float,
    n2: float,
    precision: float | None = None,
    config: LibConfig = DEFAULT_CONFIG,
) -> bool:
    if precision is None:
        precision = config.float_precision
    return in_range(n1, n2 - precision, n2 + precision)


def bool_base(callback: NumFn, predicate: Any) -> NumFn:
    """``callback(x)`` when ``predicate`` holds, else ``0``.

    ``0`` is a data value meant to be added to other results, not an
    absence marker.
    """
    def apply(x: float) -> float:
        if predicate:
            return callback(x)
        return 0

    return apply


def bool_multiplier(callback: NumFn, predicate: Any) -> NumFn:
    """``callback(x)`` when ``predicate`` holds, else ``x`` unchanged."""
    def apply(x: float) -> float:
        if predicate:
            return callback(x)
        return x

    return apply


def bool_mult(predicate: Any, val: float, mult: float) -> float:
    if predicate:
        return val * mult
    return val


def round_half_up(n: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(n + 0.5)


def skyrim_bool(val: Any) -> bool:
    """Game booleans are ``0``/``1``; anything but ``1`` is false."""
    return val is not None and val == 1


def exp_curve(shape: float, p1: Point | Mapping[str, Any], p2: Point | Mapping[str, Any]) -> NumFn:
    """Exponential ``a * e^(shape * x) + c`` passing through ``p1`` and ``p2``.

    Points are validated here; the fit itself is computed when the curve is
    called, so coincident points only fail on evaluation.

    Usage:
        f = exp_curve(-2.3, {"x": 0, "y": 3}, {"x": 1, "y": 0.5})
        f(0)  # 3.0
    """
    a1, a2 = _point(p1), _point(p2)

    def curve(x: float) -> float:
        ebx1 = math.exp(shape * a1.x)
        a = (a2.y - a1.y) / (math.exp(shape * a2.x) - ebx1)
        c = a1.y - a * ebx1
        return a * math.exp(shape * x) + c

    return curve


def lin_curve(p1: Point | Mapping[str, Any], p2: Point | Mapping[str, Any]) -> NumFn:
    """Line through ``p1`` and ``p2``.

    Usage:
        f = lin_curve({"x": 24, "y": 2}, {"x": 96, "y": 16})
        f(24)  # 2.0
        f(96)  # 16.0
    """
    a1, a2 = _point(p1), _point(p2)

    def line(x: float) -> float:
        m = (a2.y - a1.y) / (a2.x - a1.x)
        return m * (x - a1.x) + a1.y

    return line
