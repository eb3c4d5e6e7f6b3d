"""Composition combinators and small function primitives."""

from __future__ import annotations

import enum
import functools
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from dmlib.config import DEFAULT_CONFIG, LibConfig
from dmlib.kernel import NOTHING, Nothing, Once, is_nothing

T = TypeVar("T")
R = TypeVar("R")


# Pipelines


def force_table_input(fn: Callable[..., R]) -> Callable[..., R]:
    """Let ``fn`` accept either one list argument or a loose argument list.

    ``force_table_input(f)(a, b)`` calls ``f([a, b])``;
    ``force_table_input(f)([a, b])`` calls ``f([a, b])`` unchanged.
    """
    @functools.wraps(fn)
    def wrapper(*args: Any) -> R:
        if args and isinstance(args[0], (list, tuple)):
            return fn(*args)
        return fn(list(args))

    return wrapper


@dataclass(frozen=True)
class Pipeline:
    """Functions applied left to right; each stage feeds the next.

    Attributes:
        stages: The functions, in application order.
    """

    stages: tuple[Callable[[Any], Any], ...] = ()

    def __call__(self, value: Any) -> Any:
        for stage in self.stages:
            value = stage(value)
        return value

    def then(self, fn: Callable[[Any], Any]) -> Pipeline:
        """Return a new pipeline with ``fn`` appended."""
        return Pipeline(self.stages + (fn,))

    def __len__(self) -> int:
        return len(self.stages)


@force_table_input
def pipe(stages: Sequence[Callable[[Any], Any]]) -> Pipeline:
    """Compose functions into one that pipes its argument through them all.

    Usage:
        composed = pipe(func1, func2, func3)
        composed = pipe([func1, func2, func3])

    ``pipe(f, g)(x) == g(f(x))``. An empty pipe is the identity.
    """
    return Pipeline(tuple(stages))


compose = pipe


@force_table_input
def sequence(fns: Sequence[Callable[[Any], Any]]) -> Callable[[T], T]:
    """Apply every function to the same argument and return the argument.

    Outputs are discarded; the functions are called for their side effects.
    """
    funcs = tuple(fns)

    def run(value: T) -> T:
        for fn in funcs:
            fn(value)
        return value

    return run


def log_pipe(msg: str, config: LibConfig = DEFAULT_CONFIG) -> Callable[[T], T]:
    """Pipeline stage that logs ``msg`` with the passing value. Debugging aid."""
    logger = logging.getLogger(config.trace_logger)

    def stage(value: T) -> T:
        logger.log(config.trace_level, "%s: %r", msg, value)
        return value

    return stage


# Partial application


def curry(fn: Callable[..., R], argument: Any) -> Callable[..., R]:
    """Fix ``argument`` as the first argument of ``fn``."""
    def curried(*args: Any) -> R:
        return fn(argument, *args)

    return curried


def curry_last(fn: Callable[..., R], argument: Any) -> Callable[..., R]:
    """Fix ``argument`` as the last argument of ``fn``."""
    def curried(*args: Any) -> R:
        return fn(*args, argument)

    return curried


def curry_all(fn: Callable[..., R]) -> Callable[..., Callable[[Any], R]]:
    """Capture trailing arguments now, take the first one later.

    Usage:
        p = curry_all(print)(2, 3, 4)
        p(1)  # prints 1 2 3 4
    """
    def capture(*captured: Any) -> Callable[[Any], R]:
        def apply(x: Any) -> R:
            return fn(x, *captured)

        return apply

    return capture


def wrap(fn: Callable[..., Any], wrapper: Callable[..., R]) -> Callable[..., R]:
    """Decorate ``fn``: the result calls ``wrapper(fn, *args)``."""
    def wrapped(*args: Any) -> R:
        return wrapper(fn, *args)

    return wrapped


def once(fn: Callable[..., R]) -> Once[R]:
    """Run ``fn`` on the first call; return ``NOTHING`` afterwards.

    Usage:
        blind_date = once(lambda: "Sure, what could go wrong?")
        blind_date()  # "Sure, what could go wrong?"
        blind_date()  # NOTHING
    """
    return Once(fn)


def maybe(fn: Callable[[T], R]) -> Callable[[T | None], R | Nothing]:
    """Propagate absence: ``NOTHING`` in (or ``None``), ``NOTHING`` out."""
    def guarded(arg: T | None) -> R | Nothing:
        if is_nothing(arg):
            return NOTHING
        return fn(arg)  # type: ignore[arg-type]

    return guarded


# Primitives


def identity(x: T) -> T:
    return x


I = identity


def K(x: T) -> Callable[[Any], T]:
    """Constant function: ignores its argument, returns ``x``."""
    def constant(_: Any) -> T:
        return x

    return constant


first = K
second = K(I)


def not_(fn: Callable[..., Any]) -> Callable[..., bool]:
    def negated(*args: Any) -> bool:
        return not fn(*args)

    return negated


def unary(fn: Callable[..., R]) -> Callable[[Any], R]:
    """Force ``fn`` to receive only its first argument."""
    def single(arg: Any, *_: Any) -> R:
        return fn(arg)

    return single


def flip(fn: Callable[..., R]) -> Callable[..., R]:
    """Reverse the order of the arguments ``fn`` receives."""
    def flipped(*args: Any) -> R:
        return fn(*reversed(args))

    return flipped


def alt(f1: Callable[[T], R], f2: Callable[[T], R]) -> Callable[[T], R]:
    """Lazy branch on the argument: ``f1`` when it is present, ``f2`` otherwise."""
    def choose(value: T) -> R:
        if is_nothing(value) or value is False:
            return f2(value)
        return f1(value)

    return choose


def alt2(test: Any, f1: Callable[..., R], f2: Callable[..., R]) -> Callable[..., R]:
    """Lazy branch on ``test``, decided when the function is built."""
    def choose(*args: Any) -> R:
        if test:
            return f1(*args)
        return f2(*args)

    return choose


def has_nargs(comparison: Callable[[int, int], bool], n: int) -> Callable[..., bool]:
    """Compare the number of arguments a call receives against ``n``.

    Usage:
        has_nargs(less_than, 2)(10)        # True
        has_nargs(equals, 2)(10, 20)       # True
    """
    def check(*args: Any) -> bool:
        return comparison(len(args), n)

    return check


def equals(x: Any, y: Any) -> bool:
    return x == y


def less_than(x: Any, y: Any) -> bool:
    return x < y


def if_then(condition: Any, c_true: T, c_false: T) -> T:
    """Eager conditional expression. Prefer ``alt`` for lazy evaluation."""
    if condition:
        return c_true
    return c_false


def case(value: Any, results: Mapping[Any, T], else_val: T) -> T:
    """Pascal-style ``case``: ``results[value]`` or ``else_val``."""
    return results.get(value, else_val)


def make_enum(names: Sequence[str], name: str = "Enum") -> type[enum.IntEnum]:
    """Create an integer enumeration numbered from 1.

    Usage:
        Danger = make_enum(["Normal", "Warning", "Danger", "Critical"])
        Danger.Normal == 1
    """
    return enum.IntEnum(name, list(names))
