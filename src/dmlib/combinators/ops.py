"""Sequence and mapping operations.

Every operation taking a container and something else is pipeable: call it
without the container to get a pipeline stage.

    pipe(map(double), filter(is_even), reduce(0, add))(numbers)

Mappings give back ``dict`` keyed like the input. Sequences give back
``list``; the key passed to callbacks is the position.

Names like ``map``, ``filter`` and ``any`` shadow the builtins inside this
module on purpose; the builtins are reached through ``builtins``.
"""

from __future__ import annotations

import builtins
import itertools
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from dmlib.combinators._containers import (
    entries,
    entry_caller,
    force_table,
    is_container,
    rebuild,
)
from dmlib.combinators.compose import not_
from dmlib.kernel import NOTHING, pipeable


@pipeable(2)
def map(container: Any, fn: Callable[..., Any]) -> dict[Any, Any] | list[Any]:
    """Apply ``fn(value, key)`` to every entry. Size and keys are preserved."""
    call = entry_caller(fn)
    return rebuild(container, ((k, call(v, k)) for k, v in entries(container)))


@pipeable(2)
def filter(container: Any, fn: Callable[..., Any]) -> dict[Any, Any]:
    """Keep the entries for which ``fn(value, key)`` is truthy.

    Kept entries keep their original keys and are not re-indexed: a sequence
    gives back a ``{position: value}`` dict, so ``filter`` and ``reject`` with
    the same predicate split any container by key.
    """
    call = entry_caller(fn)
    return {k: v for k, v in entries(container) if call(v, k)}


@pipeable(2)
def reject(container: Any, fn: Callable[..., Any]) -> dict[Any, Any]:
    """Drop the entries for which ``fn(value, key)`` is truthy."""
    return filter(container, not_(entry_caller(fn)))


@pipeable(2)
def first_in(container: Any, fn: Callable[..., Any]) -> Any:
    """First value satisfying ``fn(value, key)``, or ``NOTHING``.

    Stops at the first match; use it instead of ``filter`` when at most one
    element is expected.
    """
    call = entry_caller(fn)
    for key, value in entries(container):
        if call(value, key):
            return value
    return NOTHING


@pipeable(3)
def reduce(container: Any, initial: Any, fn: Callable[[Any, Any], Any]) -> Any:
    """Left fold: ``fn(accumulator, value)`` in iteration order."""
    accumulator = initial
    for _, value in entries(container):
        accumulator = fn(accumulator, value)
    return accumulator


@pipeable(2)
def take(container: Any, n: int) -> dict[Any, Any] | list[Any]:
    """First ``n`` entries in iteration order."""
    return rebuild(container, itertools.islice(entries(container), builtins.max(n, 0)))


@pipeable(2)
def take_a(container: Any, n: int) -> list[Any]:
    """First ``n`` entries at contiguous positions ``0, 1, 2...``.

    Stops early at the first missing position. Unlike ``take`` the result is
    always a list, in position order, whatever order a mapping was built in.
    """
    taken = []
    for position in range(n):
        if isinstance(container, Mapping):
            if position not in container:
                break
        elif position >= len(container):
            break
        taken.append(container[position])
    return taken


@pipeable(2)
def skip(container: Any, n: int) -> dict[Any, Any] | list[Any]:
    """All entries but the first ``n``, in iteration order."""
    return rebuild(container, itertools.islice(entries(container), builtins.max(n, 0), None))


@dataclass(frozen=True)
class Match:
    """Outcome of ``any``.

    Truthy only when something matched; unpacks as ``found, value, key``.
    """

    found: bool
    value: Any = NOTHING
    key: Any = NOTHING

    def __bool__(self) -> bool:
        return self.found

    def __iter__(self):
        return iter((self.found, self.value, self.key))


@pipeable(2)
def any(container: Any, fn: Callable[..., Any]) -> Match:
    """Whether some entry satisfies ``fn(value, key)``, with that entry."""
    call = entry_caller(fn)
    for key, value in entries(force_table(container)):
        if call(value, key):
            return Match(True, value, key)
    return Match(False)


@pipeable(2)
def for_each(container: Any, fn: Callable[..., Any]) -> Any:
    """Call ``fn(value, key)`` on every entry. Returns ``container`` itself."""
    call = entry_caller(fn)
    for key, value in entries(force_table(container)):
        call(value, key)
    return container


@pipeable(2)
def tap(value: Any, fn: Callable[[Any], Any]) -> Any:
    """Call ``fn(value)`` for its side effects and return ``value``."""
    fn(value)
    return value


@pipeable(2)
def build_keys(container: Any, fn: Callable[..., Any]) -> dict[Any, Any]:
    """New mapping whose keys are ``fn(key, value)``.

    Usage:
        build_keys(irange(3), lambda i: i * 3)  # {0: 1, 3: 2, 6: 3}
    """
    call = entry_caller(fn)
    return {call(k, v): v for k, v in entries(container)}


def flatten(container: Any) -> list[Any]:
    """Concatenate nested containers, at any depth, into one list."""
    flat: list[Any] = []
    for _, value in entries(container):
        if is_container(value):
            flat.extend(flatten(value))
        else:
            flat.append(value)
    return flat


def drop_nils(container: Any) -> list[Any]:
    """Truthy values only, re-indexed in order.

    This is a lossy filter: ``0``, ``False``, ``""`` and empty containers are
    dropped together with ``None`` and ``NOTHING``.
    """
    return [value for _, value in entries(container) if value]


def keys(container: Any) -> list[Any]:
    return [k for k, _ in entries(container)]


def values(container: Any) -> list[Any]:
    return [v for _, v in entries(container)]


def table_len(container: Any) -> int:
    return len(container)


def is_empty(container: Any) -> bool:
    return len(container) == 0


def extract_value(container: Any) -> Any:
    """Value of the first entry, or ``NOTHING`` when there is none."""
    for _, value in entries(container):
        return value
    return NOTHING


def irange(start: int, end: int | None = None, step: int = 1) -> list[int]:
    """Inclusive range. With one argument, counts ``1..start``."""
    if end is None:
        start, end = 1, start
    stop = end + 1 if step > 0 else end - 1
    return list(range(start, stop, step))


def table_from_numbers(
    numbers: Any,
    index_gen: Callable[..., Any],
    val_gen: Callable[..., Any],
) -> dict[Any, Any]:
    """Mapping built from numbers: keys from ``index_gen(index, value)``,
    values from ``val_gen(value, key)``."""
    return map(build_keys(numbers, index_gen), val_gen)


def flip_array(sequence: Any) -> list[Any]:
    """Reversed copy of a sequence: ``flip_array([1, 2, 3]) == [3, 2, 1]``."""
    return list(reversed(sequence))
