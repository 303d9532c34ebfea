"""Disjunctions: a value that is either ``Left`` or ``Right``, never both.

By convention ``Left`` carries a failure or alternative and ``Right`` carries a
success. Mapping is right-biased: :meth:`Either.map` transforms a ``Right`` and
passes a ``Left`` through unchanged, which is what makes ``Either[L, _]`` a
functor in its right-hand type. Building a ``Left`` is a normal, always
reachable branch, not an error path.

Example:
    >>> from categorica.core.either import Left, Right
    >>> Right(41).map(lambda x: x + 1)
    Right(42)
    >>> Left("boom").map(lambda x: x + 1)
    Left('boom')
"""

from abc import abstractmethod
from typing import Callable, Generic

from pydantic import BaseModel, ConfigDict, Field

from categorica.core.exceptions import UnwrapError
from categorica.core.types import B, C, L, R

__all__ = [
    "Either",
    "Left",
    "Right",
]


class Either(BaseModel, Generic[L, R]):
    """Base class for the two disjunction variants."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def is_right(self) -> bool:
        """Return True for the ``Right`` variant."""

    def is_left(self) -> bool:
        return not self.is_right()

    @abstractmethod
    def map(self, f: Callable[[R], B]) -> "Either[L, B]":
        """Apply ``f`` to a ``Right`` value; ``Left`` is returned as is."""

    @abstractmethod
    def map_left(self, f: Callable[[L], C]) -> "Either[C, R]":
        """Apply ``f`` to a ``Left`` value; ``Right`` is returned as is."""

    @abstractmethod
    def flat_map(self, f: Callable[[R], "Either[L, B]"]) -> "Either[L, B]":
        """Chain an ``Either``-returning function on the right side."""

    @abstractmethod
    def fold(self, if_left: Callable[[L], B], if_right: Callable[[R], B]) -> B:
        """Collapse both variants into a single value."""

    @abstractmethod
    def get_or_else(self, default: R) -> R:
        """Return the right value, or ``default`` for a ``Left``."""

    @abstractmethod
    def swap(self) -> "Either[R, L]":
        """Exchange the two sides."""

    @abstractmethod
    def unwrap(self) -> R:
        """Return the right value.

        Raises:
            UnwrapError: If called on a ``Left``.
        """


class Left(Either[L, R], Generic[L, R]):
    """Left (failure/alternative) variant."""

    __match_args__ = ("value",)

    value: L = Field(..., description="The left-hand value.")

    def __init__(self, value: L) -> None:
        super().__init__(value=value)

    def is_right(self) -> bool:
        return False

    def map(self, f: Callable[[R], B]) -> "Either[L, B]":
        return self  # type: ignore[return-value]

    def map_left(self, f: Callable[[L], C]) -> "Either[C, R]":
        return Left(f(self.value))

    def flat_map(self, f: Callable[[R], "Either[L, B]"]) -> "Either[L, B]":
        return self  # type: ignore[return-value]

    def fold(self, if_left: Callable[[L], B], if_right: Callable[[R], B]) -> B:
        return if_left(self.value)

    def get_or_else(self, default: R) -> R:
        return default

    def swap(self) -> "Either[R, L]":
        return Right(self.value)

    def unwrap(self) -> R:
        raise UnwrapError(f"Called unwrap() on Left({self.value!r})")

    def __repr__(self) -> str:
        return f"Left({self.value!r})"

    def __str__(self) -> str:
        return f"Left({self.value})"


class Right(Either[L, R], Generic[L, R]):
    """Right (success) variant."""

    __match_args__ = ("value",)

    value: R = Field(..., description="The right-hand value.")

    def __init__(self, value: R) -> None:
        super().__init__(value=value)

    def is_right(self) -> bool:
        return True

    def map(self, f: Callable[[R], B]) -> "Either[L, B]":
        return Right(f(self.value))

    def map_left(self, f: Callable[[L], C]) -> "Either[C, R]":
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[R], "Either[L, B]"]) -> "Either[L, B]":
        result = f(self.value)
        if not isinstance(result, Either):
            raise TypeError(
                f"flat_map function must return an Either, got {type(result).__name__}"
            )
        return result

    def fold(self, if_left: Callable[[L], B], if_right: Callable[[R], B]) -> B:
        return if_right(self.value)

    def get_or_else(self, default: R) -> R:
        return self.value

    def swap(self) -> "Either[R, L]":
        return Left(self.value)

    def unwrap(self) -> R:
        return self.value

    def __repr__(self) -> str:
        return f"Right({self.value!r})"

    def __str__(self) -> str:
        return f"Right({self.value})"
