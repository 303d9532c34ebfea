"""Reusable type variables for the Categorica containers.

The same names are used across the container models and the functional helpers
so that signatures read consistently:

    A, B, C: Element types before and after mapping.
    L, R: Left and right sides of a disjunction.
"""

from typing import TypeVar

__all__ = [
    "A",
    "B",
    "C",
    "L",
    "R",
]

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

L = TypeVar("L")
R = TypeVar("R")
