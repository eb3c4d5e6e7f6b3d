"""Run-once callable."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from dmlib.kernel.nothing import NOTHING, Nothing

R = TypeVar("R")


class Once(Generic[R]):
    """Calls the wrapped function on the first call only.

    Every later call returns ``NOTHING``. The flag belongs to this
    instance; two ``Once`` objects around the same function are independent.
    """

    def __init__(self, fn: Callable[..., R]) -> None:
        self._fn = fn
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def __call__(self, *args: Any, **kwargs: Any) -> R | Nothing:
        if self._done:
            return NOTHING
        self._done = True
        return self._fn(*args, **kwargs)
