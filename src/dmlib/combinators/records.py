"""Deep copy and merge of records."""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from dmlib.combinators._containers import (
    entries,
    is_container,
    is_mutable_container,
    lookup,
)
from dmlib.combinators.compose import pipe
from dmlib.kernel import NOTHING, is_nothing, pipeable

T = TypeVar("T")


def deep_copy(value: T, _memo: dict[int, Any] | None = None) -> T:
    """Recursively clone dicts, lists, tuples and sets.

    Already visited sources are remembered by identity, so a structure that
    refers to itself is cloned into one with the same cycles. ``dict``
    subclasses such as ``defaultdict`` keep their type; other mappings become
    ``dict``. Anything else (numbers, strings, arbitrary objects) is returned
    as is.
    """
    memo = {} if _memo is None else _memo
    marker = id(value)
    if marker in memo:
        return memo[marker]

    if isinstance(value, Mapping):
        mapping: dict[Any, Any]
        if isinstance(value, dict) and type(value) is not dict:
            # keeps the subclass and its state, e.g. a defaultdict factory
            mapping = copy.copy(value)
            mapping.clear()
        else:
            mapping = {}
        memo[marker] = mapping
        for key, item in value.items():
            mapping[deep_copy(key, memo)] = deep_copy(item, memo)
        return mapping  # type: ignore[return-value]

    if isinstance(value, list):
        items: list[Any] = []
        memo[marker] = items
        items.extend(deep_copy(item, memo) for item in value)
        return items  # type: ignore[return-value]

    if isinstance(value, set):
        members: set[Any] = set()
        memo[marker] = members
        members.update(deep_copy(item, memo) for item in value)
        return members  # type: ignore[return-value]

    if isinstance(value, (tuple, frozenset)):
        copied = [deep_copy(item, memo) for item in value]
        # a cycle through a mutable child may have already produced our clone
        if marker in memo:
            return memo[marker]
        if isinstance(value, frozenset):
            clone: Any = frozenset(copied)
        elif hasattr(value, "_make"):
            clone = value._make(copied)
        else:
            clone = tuple(copied)
        memo[marker] = clone
        return clone

    return value


def assign(target: T, source: Any) -> T:
    """Merge ``source`` into ``target`` in place, limited to ``target``'s keys.

    For every key of ``target`` with a value present in ``source`` the value
    is overwritten. When both sides hold containers the merge recurses, so
    only the leaf fields present in ``source`` change. Keys missing from
    ``target`` are never added.

    Usage:
        assign({"a": 1, "b": 2}, {"a": 5, "c": 9})  # {"a": 5, "b": 2}
    """
    for key, current in list(entries(target)):
        incoming = lookup(source, key)
        if is_nothing(incoming):
            continue
        if is_mutable_container(current) and is_container(incoming):
            assign(current, incoming)
        else:
            target[key] = incoming  # type: ignore[index]
    return target


def join_tables(
    t1: Mapping[Any, Any],
    t2: Mapping[Any, Any],
    on_existing_key: Callable[[Any, Any, Any], Any],
) -> dict[Any, Any]:
    """Union of two mappings; ``on_existing_key(v1, v2, key)`` settles clashes.

    Unlike ``assign`` every key of ``t2`` ends up in the result. Neither
    input is modified.

    Usage:
        join_tables({"a": 1, "b": 3}, {"a": 3, "c": 4}, lambda x, y, _: (x + y) / 2)
        # {"a": 2.0, "b": 3, "c": 4}
    """
    joined: dict[Any, Any] = deep_copy(t1)  # type: ignore[assignment]
    for key, incoming in t2.items():
        existing = joined.get(key, NOTHING)
        if is_nothing(existing):
            joined[key] = incoming
        else:
            joined[key] = on_existing_key(existing, incoming, key)
    return joined


@pipeable(2)
def process_record(record: T, transforms: Sequence[Callable[[Any], Any]] | Callable[[Any], Any]) -> T:
    """Transform a private copy of ``record`` and merge the result back.

    The record is deep copied, piped through ``transforms`` and the outcome
    is ``assign``-ed onto the original, which keeps its identity and shape.
    """
    processed = pipe(transforms)(deep_copy(record))
    return assign(record, processed)


@pipeable(2)
def process_table(table: T, transforms: Sequence[Callable[[Any], Any]] | Callable[[Any], Any]) -> T:
    """Same as ``process_record``, for any table."""
    return process_record(table, transforms)
