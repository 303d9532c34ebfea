"""Optional values: presence (``Some``) or absence (``Nothing``).

An ``Option`` holds exactly one of two variants. ``Some`` wraps a single value
that cannot be reassigned after construction, ``Nothing`` holds no value at all.
Both are frozen Pydantic models, so equality is structural and instances are
hashable whenever their contents are.

Mapping over an ``Option`` preserves its shape: ``Some`` maps to ``Some`` and
``Nothing`` stays ``Nothing``. This makes ``Option`` a functor, see
:mod:`categorica.functional.functor` for the laws.

Example:
    >>> from categorica.core.option import Some, Nothing, Option
    >>> Some(3).map(lambda x: x + 1)
    Some(4)
    >>> Nothing().map(lambda x: x + 1)
    Nothing
    >>> Option.of(None)
    Nothing
"""

from abc import abstractmethod
from typing import Callable, Generic, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from categorica.core.exceptions import UnwrapError
from categorica.core.types import A, B

__all__ = [
    "Option",
    "Some",
    "Nothing",
]


class Option(BaseModel, Generic[A]):
    """Base class for the two optional-value variants.

    Not instantiated directly; construct ``Some(value)`` or ``Nothing()``, or
    use :meth:`Option.of` to lift a possibly-``None`` Python value.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, value: Optional[A]) -> "Option[A]":
        """Lift a Python value into an ``Option``.

        Args:
            value: Any value. ``None`` is treated as absence.

        Returns:
            ``Some(value)`` if value is not None, otherwise ``Nothing()``.
        """
        if value is None:
            return Nothing()
        return Some(value)

    @abstractmethod
    def is_some(self) -> bool:
        """Return True if a value is present."""

    def is_nothing(self) -> bool:
        """Return True if no value is present."""
        return not self.is_some()

    @abstractmethod
    def map(self, f: Callable[[A], B]) -> "Option[B]":
        """Apply ``f`` to the contained value, preserving the variant."""

    @abstractmethod
    def flat_map(self, f: Callable[[A], "Option[B]"]) -> "Option[B]":
        """Apply an ``Option``-returning function without nesting the result."""

    @abstractmethod
    def filter(self, predicate: Callable[[A], bool]) -> "Option[A]":
        """Keep the value only if ``predicate`` holds for it."""

    @abstractmethod
    def fold(self, if_nothing: Callable[[], B], if_some: Callable[[A], B]) -> B:
        """Collapse the option into a single value, handling both variants."""

    @abstractmethod
    def get_or_else(self, default: A) -> A:
        """Return the contained value, or ``default`` when absent."""

    @abstractmethod
    def unwrap(self) -> A:
        """Return the contained value.

        Raises:
            UnwrapError: If called on ``Nothing``.
        """


class Some(Option[A], Generic[A]):
    """Present optional value."""

    __match_args__ = ("value",)

    value: A = Field(..., description="The wrapped value.")

    def __init__(self, value: A) -> None:
        super().__init__(value=value)

    def is_some(self) -> bool:
        return True

    def map(self, f: Callable[[A], B]) -> "Option[B]":
        return Some(f(self.value))

    def flat_map(self, f: Callable[[A], "Option[B]"]) -> "Option[B]":
        result = f(self.value)
        if not isinstance(result, Option):
            raise TypeError(
                f"flat_map function must return an Option, got {type(result).__name__}"
            )
        return result

    def filter(self, predicate: Callable[[A], bool]) -> "Option[A]":
        return self if predicate(self.value) else Nothing()

    def fold(self, if_nothing: Callable[[], B], if_some: Callable[[A], B]) -> B:
        return if_some(self.value)

    def get_or_else(self, default: A) -> A:
        return self.value

    def unwrap(self) -> A:
        return self.value

    def __iter__(self) -> Iterator[A]:  # type: ignore[override]
        return iter((self.value,))

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def __str__(self) -> str:
        return f"Some({self.value})"


class Nothing(Option[A], Generic[A]):
    """Absent optional value."""

    def is_some(self) -> bool:
        return False

    def map(self, f: Callable[[A], B]) -> "Option[B]":
        return Nothing()

    def flat_map(self, f: Callable[[A], "Option[B]"]) -> "Option[B]":
        return Nothing()

    def filter(self, predicate: Callable[[A], bool]) -> "Option[A]":
        return self

    def fold(self, if_nothing: Callable[[], B], if_some: Callable[[A], B]) -> B:
        return if_nothing()

    def get_or_else(self, default: A) -> A:
        return default

    def unwrap(self) -> A:
        raise UnwrapError("Called unwrap() on Nothing")

    def __iter__(self) -> Iterator[A]:  # type: ignore[override]
        return iter(())

    def __repr__(self) -> str:
        return "Nothing"

    def __str__(self) -> str:
        return "Nothing"
