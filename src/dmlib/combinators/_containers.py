"""Container shape helpers shared by the combinators."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

from dmlib.kernel import NOTHING, Curried, Pipeable

_TEXT = (str, bytes, bytearray)


def is_container(value: Any) -> bool:
    """Mappings and non-text sequences are containers; anything else is a leaf."""
    if isinstance(value, _TEXT):
        return False
    return isinstance(value, (Mapping, Sequence))


def is_mutable_container(value: Any) -> bool:
    return isinstance(value, (MutableMapping, MutableSequence))


def entries(container: Any) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, value)`` pairs; positions stand in for keys on sequences."""
    if isinstance(container, Mapping):
        return iter(container.items())
    return enumerate(container)


def rebuild(container: Any, pairs: Iterable[tuple[Any, Any]]) -> dict[Any, Any] | list[Any]:
    """Collect ``pairs`` into a new container shaped like ``container``."""
    if isinstance(container, Mapping):
        return dict(pairs)
    return [value for _, value in pairs]


def lookup(container: Any, key: Any) -> Any:
    """Value at ``key`` or ``NOTHING`` when the container has none."""
    if isinstance(container, Mapping):
        return container.get(key, NOTHING)
    if is_container(container) and isinstance(key, int) and 0 <= key < len(container):
        return container[key]
    return NOTHING


def force_table(value: Any) -> Any:
    """Wrap a leaf value in a one-entry list; containers pass through."""
    if is_container(value):
        return value
    return [value]


def _positional_capacity(fn: Callable[..., Any]) -> int:
    if isinstance(fn, Curried):
        return fn.target.arity - len(fn.args)
    if isinstance(fn, Pipeable):
        return fn.arity
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1

    count = 0
    for param in signature.parameters.values():
        if param.kind is param.VAR_POSITIONAL:
            return 2
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def entry_caller(fn: Callable[..., Any]) -> Callable[[Any, Any], Any]:
    """Adapt ``fn`` to the ``(value, key)`` convention.

    Functions taking a single positional argument are called with the value
    only, so ``map(xs, str.upper)`` works like ``map(xs, lambda v, k: v.upper())``.
    """
    if _positional_capacity(fn) >= 2:
        return fn

    def call(value: Any, _key: Any) -> Any:
        return fn(value)

    return call
