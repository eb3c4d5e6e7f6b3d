"""The "nothing" sentinel - absence of a result."""

from __future__ import annotations

from typing import Any, TypeGuard


class Nothing:
    """Singleton marking the absence of a value.

    Distinct from falsy payloads: ``0``, ``False`` and ``""`` are data,
    ``NOTHING`` is not.
    """

    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOTHING"

    def __reduce__(self) -> str:
        return "NOTHING"


NOTHING = Nothing()


def is_nothing(value: Any) -> TypeGuard[Nothing | None]:
    """True for ``NOTHING`` and ``None``."""
    return value is NOTHING or value is None
