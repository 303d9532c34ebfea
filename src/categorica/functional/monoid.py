"""Monoids: associative combination with an identity element.

A monoid over a type ``A`` is a pair of

    - ``combine(x, y) -> A``, associative:
      ``combine(combine(x, y), z) == combine(x, combine(y, z))``
    - ``identity: A`` with ``combine(identity, x) == x == combine(x, identity)``

Instances (witnesses) are plain :class:`Monoid` values, one per type and
operation, so the same type can carry several monoids (integers under addition
and under multiplication).

Witnesses:
    - ``INT_ADDITION``: ``+`` with ``0``
    - ``INT_MULTIPLICATION``: ``*`` with ``1``
    - ``SEQ_CONCAT``: order-preserving concatenation with ``Seq()``
    - ``STR_CONCAT``: string concatenation with ``""``
    - ``ALL``: logical and with ``True``
    - ``ANY``: logical or with ``False``

Reduction:
    :func:`reduce` folds a non-empty iterable left to right and raises
    :class:`~categorica.core.exceptions.EmptyReductionError` on empty input.
    :func:`fold` starts from the identity instead, so it is total and returns
    ``monoid.identity`` for empty input.

Example:
    >>> from categorica.functional.monoid import INT_ADDITION, reduce
    >>> reduce([1, 2, 3, 4, 5], INT_ADDITION)
    15
"""

import functools
import operator
from typing import Callable, Generic, Iterable

from pydantic import BaseModel, ConfigDict, Field

from categorica.core.exceptions import EmptyReductionError
from categorica.core.sequence import Seq
from categorica.core.types import A
from categorica.logger.logger import setup_logger

__all__ = [
    "Monoid",
    "INT_ADDITION",
    "INT_MULTIPLICATION",
    "SEQ_CONCAT",
    "STR_CONCAT",
    "ALL",
    "ANY",
    "reduce",
    "fold",
    "is_associative",
    "has_identity",
]

logger = setup_logger("categorica.monoid")


class Monoid(BaseModel, Generic[A]):
    """Witness that ``A`` forms a monoid under ``combine`` with ``identity``.

    Associativity and the identity property are not checked at construction;
    use :func:`is_associative` and :func:`has_identity` to test a witness.

    Attributes:
        name: Human-readable label used in logs.
        combine: Associative binary operation.
        identity: Neutral element for ``combine``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Label for the witness, e.g. 'int_addition'.")
    combine: Callable[[A, A], A] = Field(
        ..., description="Associative binary operation."
    )
    identity: A = Field(..., description="Identity element for combine.")

    def __repr__(self) -> str:
        return f"Monoid({self.name}, identity={self.identity!r})"


INT_ADDITION: Monoid[int] = Monoid(name="int_addition", combine=operator.add, identity=0)
INT_MULTIPLICATION: Monoid[int] = Monoid(
    name="int_multiplication", combine=operator.mul, identity=1
)
SEQ_CONCAT: Monoid[Seq] = Monoid(
    name="seq_concat", combine=Seq.concat, identity=Seq.empty()
)
STR_CONCAT: Monoid[str] = Monoid(name="str_concat", combine=operator.add, identity="")
ALL: Monoid[bool] = Monoid(name="all", combine=lambda x, y: x and y, identity=True)
ANY: Monoid[bool] = Monoid(name="any", combine=lambda x, y: x or y, identity=False)


def reduce(items: Iterable[A], monoid: Monoid[A]) -> A:
    """Combine a non-empty iterable left to right.

    Args:
        items: Values to combine, e.g. a ``Seq``, list or generator.
        monoid: Witness supplying ``combine``.

    Returns:
        ``combine(...combine(combine(x0, x1), x2)..., xn)``.

    Raises:
        EmptyReductionError: If ``items`` yields nothing.
    """
    iterator = iter(items)
    try:
        first = next(iterator)
    except StopIteration:
        raise EmptyReductionError(
            f"Cannot reduce an empty sequence with {monoid.name}; use fold() instead"
        ) from None

    result = functools.reduce(monoid.combine, iterator, first)
    logger.debug(f"Reduced with {monoid.name}: {result!r}")
    return result


def fold(items: Iterable[A], monoid: Monoid[A]) -> A:
    """Combine an iterable left to right starting from ``monoid.identity``."""
    return functools.reduce(monoid.combine, items, monoid.identity)


def is_associative(monoid: Monoid[A], x: A, y: A, z: A) -> bool:
    """Check ``combine(combine(x, y), z) == combine(x, combine(y, z))``."""
    combine = monoid.combine
    holds = combine(combine(x, y), z) == combine(x, combine(y, z))
    logger.debug(f"Associativity of {monoid.name} for {x!r}, {y!r}, {z!r}: {holds}")
    return holds


def has_identity(monoid: Monoid[A], x: A) -> bool:
    """Check that ``identity`` is neutral on both sides of ``x``."""
    left = monoid.combine(monoid.identity, x)
    right = monoid.combine(x, monoid.identity)
    holds = left == x and right == x
    logger.debug(f"Identity of {monoid.name} for {x!r}: {holds}")
    return holds
