"""Pipeable functions - one calling convention for "call now" and "curry".

A ``Pipeable`` knows how many positional arguments its function needs.
Called with all of them it executes; called with fewer it returns a
``Curried`` that waits for the rest. Two capture orders exist:

- Pipeline form (plain call with too few arguments): the captured
  arguments go *last* and the missing ones are expected *first*, so
  ``map(fn)(container) == map(container, fn)``.
- Explicit form (``.partial(...)``): the captured arguments go *first*,
  like ``functools.partial``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any, Generic, Literal, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class Pipeable(Generic[R]):
    """N-ary function that curries itself when under-applied.

    Attributes:
        fn: The wrapped function.
        arity: Number of positional arguments required to execute ``fn``.
    """

    fn: Callable[..., R]
    arity: int

    def __post_init__(self) -> None:
        if self.arity <= 0:
            raise ValueError("arity must be positive")

    @property
    def name(self) -> str:
        return getattr(self.fn, "__name__", repr(self.fn))

    def __call__(self, *args: Any, **kwargs: Any) -> R | Curried[R]:
        if len(args) < self.arity:
            return Curried(self, args, kwargs, missing="leading")
        return self.fn(*args, **kwargs)

    def partial(self, *args: Any, **kwargs: Any) -> Curried[R]:
        """Capture ``args`` as the first arguments of ``fn``.

        The result keeps dispatching on arity, so it may be called with
        any number of the remaining arguments.
        """
        return Curried(self, args, kwargs, missing="trailing")

    def __repr__(self) -> str:
        return f"Pipeable({self.name}, arity={self.arity})"


@dataclass(frozen=True)
class Curried(Generic[R]):
    """A ``Pipeable`` with some arguments already captured.

    Attributes:
        target: The pipeable being applied.
        args: Captured positional arguments.
        kwargs: Captured keyword arguments.
        missing: Whether the arguments still to come are the leading or
            the trailing ones.
    """

    target: Pipeable[R]
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict, hash=False)
    missing: Literal["leading", "trailing"] = "leading"

    def __call__(self, *args: Any, **kwargs: Any) -> R | Curried[R]:
        if self.missing == "leading":
            full_args = args + self.args
        else:
            full_args = self.args + args
        full_kwargs = {**self.kwargs, **kwargs}

        if len(full_args) < self.target.arity:
            return replace(self, args=full_args, kwargs=full_kwargs)
        return self.target.fn(*full_args, **full_kwargs)

    def __repr__(self) -> str:
        return f"Curried({self.target.name}, args={self.args!r}, missing={self.missing!r})"


def pipeable(arity: int) -> Callable[[Callable[..., R]], Pipeable[R]]:
    """Decorator form of ``Pipeable``.

    Usage:
        @pipeable(2)
        def add(x, y):
            return x + y

        add(2, 3)          # 5
        add(20)(30)        # 50
    """
    def decorate(fn: Callable[..., R]) -> Pipeable[R]:
        return Pipeable(fn, arity)

    return decorate
