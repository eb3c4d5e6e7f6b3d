"""Conversion between library containers and the host's associative object.

The host keeps data in string-keyed map objects. ``to_host`` converts every
nested mapping, not only the top level, so a whole tree built with the
combinators can be handed over in one call.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, ItemsView, KeysView, Mapping
from typing import Any, ParamSpec

from pydantic import BaseModel, ConfigDict

from dmlib.combinators._containers import is_container
from dmlib.combinators.ops import filter
from dmlib.kernel import ConversionError, pipeable

logger = logging.getLogger(__name__)

P = ParamSpec("P")


class HostMap(BaseModel):
    """Host associative object: free-form, string keys only.

    Entries are reachable as attributes (``obj.name``) or items
    (``obj["name"]``).
    """

    model_config = ConfigDict(extra="allow")

    @property
    def entries(self) -> dict[str, Any]:
        return self.model_extra or {}

    def __getitem__(self, key: str) -> Any:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> KeysView[str]:
        return self.entries.keys()

    def items(self) -> ItemsView[str, Any]:
        return self.entries.items()


def to_host(value: Any) -> Any:
    """Convert ``value`` recursively.

    Mappings become ``HostMap``, sequences become lists of converted items,
    anything else passes through.

    Raises:
        ConversionError: If a mapping has a non-string key.
    """
    if isinstance(value, HostMap):
        return value
    if isinstance(value, Mapping):
        converted: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise ConversionError(
                    f"Host object keys must be strings, got {type(key).__name__}",
                    raw_value=key,
                )
            converted[key] = to_host(item)
        logger.debug("Converted mapping with %d keys to host object", len(converted))
        return HostMap.model_validate(converted)
    if is_container(value):
        return [to_host(item) for item in value]
    return value


def from_host(value: Any) -> Any:
    """Convert host objects back into plain dicts and lists."""
    if isinstance(value, HostMap):
        return {key: from_host(item) for key, item in value.items()}
    if is_container(value) and not isinstance(value, Mapping):
        return [from_host(item) for item in value]
    return value


def to_host_fn(func: Callable[P, Any]) -> Callable[P, Any]:
    """Decorate ``func`` so that its result is converted with ``to_host``."""
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
        return to_host(func(*args, **kwargs))

    return wrapper


@pipeable(2)
def filter_map(container: Any, fn: Callable[..., Any]) -> Any:
    """``filter`` whose result is converted to host objects.

    ``filter`` keys survivors by position on sequences, and host keys must be
    strings, so filtering a sequence raises ``ConversionError``.
    """
    return to_host(filter(container, fn))
