"""Library settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Self


@dataclass(frozen=True)
class LibConfig:
    """Settings shared by the helpers that need them.

    Attributes:
        float_precision: Default tolerance for ``float_equals``.
        trace_logger: Logger name used by ``log_pipe``.
        trace_level: Level ``log_pipe`` records at.
        game_hours_per_day: Hours in one game day; game time is measured in days.
    """

    float_precision: float = 0.001
    trace_logger: str = "dmlib.trace"
    trace_level: int = logging.DEBUG
    game_hours_per_day: int = 24

    def with_overrides(self, **changes: Any) -> Self:
        return replace(self, **changes)


DEFAULT_CONFIG = LibConfig()
