"""Exceptions raised by Categorica.

Absence is modelled as data (``Nothing``, ``Left``). These exceptions cover
misuse only: unwrapping an empty container, reducing nothing, or mapping over
something that is not a container.
"""

__all__ = [
    "CategoricaError",
    "EmptyReductionError",
    "UnwrapError",
    "NotMappableError",
]


class CategoricaError(Exception):
    """Base class for all Categorica errors."""


class EmptyReductionError(CategoricaError, ValueError):
    """Raised when a non-empty reduction receives no items."""


class UnwrapError(CategoricaError, ValueError):
    """Raised when a value is extracted from the wrong variant."""


class NotMappableError(CategoricaError, TypeError):
    """Raised when ``fmap`` is given a type with no functor instance."""
