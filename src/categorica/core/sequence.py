"""Immutable ordered sequences.

``Seq`` is a finite, ordered, immutable sequence. Its length and element order
are fixed once constructed: operations that "add" elements (:meth:`Seq.append`,
:meth:`Seq.concat`, ``+``) return a new ``Seq`` and leave the original untouched.

Example:
    >>> from categorica.core.sequence import Seq
    >>> xs = Seq.of(1, 2, 3)
    >>> xs.map(lambda x: x * 2)
    Seq(2, 4, 6)
    >>> xs + Seq.of(4)
    Seq(1, 2, 3, 4)
    >>> xs
    Seq(1, 2, 3)
"""

from typing import Callable, Generic, Iterable, Iterator, Tuple, overload

from pydantic import BaseModel, ConfigDict, Field

from categorica.core.option import Nothing, Option, Some
from categorica.core.types import A, B

__all__ = [
    "Seq",
]


class Seq(BaseModel, Generic[A]):
    """Finite ordered sequence with value semantics.

    Attributes:
        items: The elements, stored as a tuple.
    """

    model_config = ConfigDict(frozen=True)

    items: Tuple[A, ...] = Field(
        default=(), description="Elements of the sequence in order."
    )

    def __init__(self, items: Iterable[A] = ()) -> None:
        super().__init__(items=tuple(items))

    @classmethod
    def of(cls, *items: A) -> "Seq[A]":
        """Build a sequence from positional arguments."""
        return cls(items)

    @classmethod
    def empty(cls) -> "Seq[A]":
        """Return the empty sequence."""
        return cls(())

    def map(self, f: Callable[[A], B]) -> "Seq[B]":
        """Apply ``f`` to every element, keeping length and order."""
        return Seq(f(item) for item in self.items)

    def flat_map(self, f: Callable[[A], "Seq[B]"]) -> "Seq[B]":
        """Apply a ``Seq``-returning function and flatten one level."""
        return Seq(out for item in self.items for out in f(item))

    def concat(self, other: "Seq[A]") -> "Seq[A]":
        """Return a new sequence with ``other`` appended after this one."""
        if not isinstance(other, Seq):
            raise TypeError(f"Cannot concatenate Seq with {type(other).__name__}")
        return Seq(self.items + other.items)

    def append(self, item: A) -> "Seq[A]":
        return Seq(self.items + (item,))

    def head_option(self) -> "Option[A]":
        """Return the first element as an ``Option``.

        Returns:
            ``Some(first)`` for a non-empty sequence, ``Nothing()`` otherwise.
        """
        if not self.items:
            return Nothing()
        return Some(self.items[0])

    def is_empty(self) -> bool:
        return len(self.items) == 0

    def to_list(self) -> list:
        return list(self.items)

    def __add__(self, other: "Seq[A]") -> "Seq[A]":
        if not isinstance(other, Seq):
            return NotImplemented
        return self.concat(other)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[A]:  # type: ignore[override]
        return iter(self.items)

    @overload
    def __getitem__(self, index: int) -> A: ...

    @overload
    def __getitem__(self, index: slice) -> "Seq[A]": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Seq(self.items[index])
        return self.items[index]

    def __repr__(self) -> str:
        return f"Seq({', '.join(repr(item) for item in self.items)})"

    def __str__(self) -> str:
        return f"Seq({', '.join(str(item) for item in self.items)})"
