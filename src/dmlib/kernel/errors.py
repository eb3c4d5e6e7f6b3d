"""Error types for dmlib."""

from __future__ import annotations


class DmlibError(Exception):
    """Base class for errors raised by dmlib."""


class ConversionError(DmlibError):
    """Error raised when a value cannot be converted to a host object.

    This error preserves the raw value for debugging purposes.
    """

    def __init__(self, message: str, raw_value: object) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ConversionError({super().__repr__()}, raw_value={self.raw_value!r})"
