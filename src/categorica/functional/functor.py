"""Functor helpers: shape-preserving mapping and the functor laws.

A functor is a container that supports ``map``: applying a pure function to
every contained value while keeping the container's shape (variant, length and
order). Two laws must hold for any lawful instance:

    - **Identity**: ``fmap(c, identity) == c``
    - **Composition**: ``fmap(c, compose(f, g)) == fmap(fmap(c, f), g)``

The laws are properties, not something the type system enforces. The
``satisfies_*`` functions evaluate them for a concrete container and functions
so they can be asserted in tests or printed in demonstrations.

Supported containers:
    - :class:`~categorica.core.option.Option` (``Some`` / ``Nothing``)
    - :class:`~categorica.core.sequence.Seq`
    - :class:`~categorica.core.either.Either` (right-biased)
    - built-in ``list`` and ``tuple`` (mapped element-wise, type preserved)

Example:
    >>> from categorica.core import Some, Seq
    >>> from categorica.functional.functor import fmap, satisfies_identity_law
    >>> fmap(Some(3), lambda x: x + 1)
    Some(4)
    >>> fmap(Seq.of(1, 2, 3), lambda x: x * 2)
    Seq(2, 4, 6)
    >>> satisfies_identity_law([1, 2, 3])
    True
"""

from functools import singledispatch
from typing import Any, Callable

from categorica.core.either import Either
from categorica.core.exceptions import NotMappableError
from categorica.core.option import Option
from categorica.core.sequence import Seq
from categorica.core.types import A, B, C
from categorica.logger.logger import setup_logger

__all__ = [
    "fmap",
    "identity",
    "compose",
    "satisfies_identity_law",
    "satisfies_composition_law",
]

logger = setup_logger("categorica.functor")


def identity(x: A) -> A:
    """Return the argument unchanged."""
    return x


def compose(f: Callable[[A], B], g: Callable[[B], C]) -> Callable[[A], C]:
    """Return the function that applies ``f`` first, then ``g``."""

    def composed(x: A) -> C:
        return g(f(x))

    return composed


@singledispatch
def fmap(container: Any, f: Callable[[Any], Any]) -> Any:
    """Map ``f`` over ``container``, producing a new container of the same shape.

    Args:
        container: A supported functor instance.
        f: Pure function applied to each contained value.

    Returns:
        A new container; the input is never modified.

    Raises:
        NotMappableError: If no functor instance is registered for the type.
    """
    raise NotMappableError(f"No functor instance for {type(container).__name__}")


@fmap.register
def _(container: Option, f: Callable[[Any], Any]) -> Option:
    return container.map(f)


@fmap.register
def _(container: Seq, f: Callable[[Any], Any]) -> Seq:
    return container.map(f)


@fmap.register
def _(container: Either, f: Callable[[Any], Any]) -> Either:
    return container.map(f)


@fmap.register
def _(container: list, f: Callable[[Any], Any]) -> list:
    return [f(item) for item in container]


@fmap.register
def _(container: tuple, f: Callable[[Any], Any]) -> tuple:
    return tuple(f(item) for item in container)


def satisfies_identity_law(container: Any) -> bool:
    """Check ``fmap(container, identity) == container``."""
    holds = fmap(container, identity) == container
    logger.debug(f"Identity law for {container!r}: {holds}")
    return holds


def satisfies_composition_law(
    container: Any, f: Callable[[Any], Any], g: Callable[[Any], Any]
) -> bool:
    """Check that mapping ``f`` then ``g`` equals mapping their composition once.

    Args:
        container: A supported functor instance.
        f: First function.
        g: Second function, applied to the results of ``f``.

    Returns:
        True if ``fmap(container, compose(f, g)) == fmap(fmap(container, f), g)``.
    """
    one_pass = fmap(container, compose(f, g))
    two_passes = fmap(fmap(container, f), g)
    holds = one_pass == two_passes
    logger.debug(f"Composition law for {container!r}: {holds}")
    return holds
