"""String formatting helpers."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from dmlib.kernel import NOTHING, Nothing

_FILE_NAME = re.compile(r"^.+/(.+)$")


def fmt(template: str, *args: Any) -> str:
    """printf-style formatting."""
    return template % args


def get_file_name(path: str) -> str | Nothing:
    """File name with extension from a path with either slash style."""
    match = _FILE_NAME.match(path.replace("\\", "/"))
    if match is None:
        return NOTHING
    return match.group(1)


def triml(s: str) -> str:
    return s.lstrip()


def trimr(s: str) -> str:
    return s.rstrip()


def trim(s: str) -> str:
    return s.strip()


def enclose_str(s: str, e1: str, e2: str | None = None) -> str:
    if e2 is None:
        e2 = e1
    return f"{e1}{s}{e2}"


def enclose_single_quote(s: str) -> str:
    return enclose_str(s, "'")


def enclose_double_quote(s: str) -> str:
    return enclose_str(s, '"')


def reduce_str(accum: str, s: str, separator: str) -> str:
    """Join step for ``reduce``: no separator before the first item."""
    if accum == "":
        return s
    return f"{accum}{separator}{s}"


def reduce_comma(accum: str, s: str) -> str:
    return reduce_str(accum, s, ",")


def reduce_comma_pretty(accum: str, s: str) -> str:
    return reduce_str(accum, s, ", ")


def float_to_percent_str(x: float) -> str:
    return "%.2f%%" % (x * 100)


def int_to_hex_lower(c: int) -> str:
    return f"{c:x}"


def int_to_hex_upper(c: int) -> str:
    return f"{c:X}"


def print_color(c: int) -> str:
    """RGB color as six upper-case hex digits."""
    return f"{c:06X}"


def pad_zeros(x: int, n: int = 0) -> str:
    """Integer with at least ``n`` digits."""
    return "%.*d" % (n, x)


def append_str(prefix: str) -> Callable[[Any], str]:
    return lambda val: prefix + str(val)
