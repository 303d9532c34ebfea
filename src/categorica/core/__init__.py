"""Core container types."""

from categorica.core.option import Option, Some, Nothing
from categorica.core.either import Either, Left, Right
from categorica.core.sequence import Seq
from categorica.core.exceptions import (
    CategoricaError,
    EmptyReductionError,
    UnwrapError,
    NotMappableError,
)

__all__ = [
    "Option",
    "Some",
    "Nothing",
    "Either",
    "Left",
    "Right",
    "Seq",
    "CategoricaError",
    "EmptyReductionError",
    "UnwrapError",
    "NotMappableError",
]
