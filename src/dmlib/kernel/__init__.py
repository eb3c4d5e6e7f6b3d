"""Kernel layer - calling convention and sentinel primitives."""

from dmlib.kernel.errors import ConversionError, DmlibError
from dmlib.kernel.nothing import NOTHING, Nothing, is_nothing
from dmlib.kernel.once import Once
from dmlib.kernel.pipeable import Curried, Pipeable, pipeable

__all__ = [
    "NOTHING",
    "Nothing",
    "is_nothing",
    # Calling convention
    "Pipeable",
    "Curried",
    "pipeable",
    "Once",
    # Errors
    "DmlibError",
    "ConversionError",
]
