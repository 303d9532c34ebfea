"""Natural transformations between container types.

A natural transformation converts one functor into another uniformly, whatever
the contained value type. It must commute with mapping (the naturality
condition)::

    transform(fmap(c, f)) == fmap(transform(c), f)

i.e. applying ``f`` before converting gives the same observable result as
converting first and applying ``f`` with the target container's own ``map``.

Transformations:
    - ``option_to_either``: ``Some(v)`` -> ``Right(v)``, ``Nothing`` -> ``Left("No value found")``
    - ``option_to_seq``: ``Some(v)`` -> ``Seq(v)``, ``Nothing`` -> ``Seq()``
    - ``either_to_option``: ``Right(v)`` -> ``Some(v)``, ``Left(_)`` -> ``Nothing``
    - ``seq_to_option``: first element as ``Some``, ``Nothing`` when empty

All of them are total over their input type. Anything else raises ``TypeError``.
"""

from typing import Any, Callable

from categorica.core.either import Either, Left, Right
from categorica.core.option import Nothing, Option, Some
from categorica.core.sequence import Seq
from categorica.core.types import A
from categorica.functional.functor import fmap
from categorica.logger.logger import setup_logger

__all__ = [
    "NO_VALUE_FOUND",
    "option_to_either",
    "option_to_seq",
    "either_to_option",
    "seq_to_option",
    "is_natural",
]

logger = setup_logger("categorica.natural")

NO_VALUE_FOUND = "No value found"


def option_to_either(option: Option[A], left: Any = NO_VALUE_FOUND) -> Either[Any, A]:
    """Convert an ``Option`` into an ``Either``.

    Args:
        option: The optional value.
        left: Value carried by the ``Left`` when ``option`` is empty.

    Returns:
        ``Right(value)`` if present, ``Left(left)`` if absent.
    """
    match option:
        case Some(value):
            return Right(value)
        case Nothing():
            return Left(left)
        case _:
            raise TypeError(f"Expected an Option, got {type(option).__name__}")


def option_to_seq(option: Option[A]) -> Seq[A]:
    """Convert an ``Option`` into a sequence of zero or one element."""
    match option:
        case Some(value):
            return Seq.of(value)
        case Nothing():
            return Seq.empty()
        case _:
            raise TypeError(f"Expected an Option, got {type(option).__name__}")


def either_to_option(either: Either[Any, A]) -> Option[A]:
    """Keep the right value and forget the left one."""
    match either:
        case Right(value):
            return Some(value)
        case Left():
            return Nothing()
        case _:
            raise TypeError(f"Expected an Either, got {type(either).__name__}")


def seq_to_option(seq: Seq[A]) -> Option[A]:
    """Return the first element of the sequence as an ``Option``."""
    if not isinstance(seq, Seq):
        raise TypeError(f"Expected a Seq, got {type(seq).__name__}")
    return seq.head_option()


def is_natural(
    transform: Callable[[Any], Any], container: Any, f: Callable[[Any], Any]
) -> bool:
    """Check the naturality condition for one container and one function.

    Args:
        transform: The natural transformation under test.
        container: Input in the source container type.
        f: Pure function over the contained values.

    Returns:
        True if ``transform(fmap(container, f)) == fmap(transform(container), f)``.
    """
    map_then_transform = transform(fmap(container, f))
    transform_then_map = fmap(transform(container), f)
    holds = map_then_transform == transform_then_map
    logger.debug(
        f"Naturality of {getattr(transform, '__name__', transform)} "
        f"for {container!r}: {holds}"
    )
    return holds
