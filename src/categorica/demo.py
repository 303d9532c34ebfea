"""Console demonstrations of the functor, naturality and monoid laws.

Each ``example_*`` function is independent: it builds its own inputs, computes
one result and returns it. :func:`main` runs them in order and prints each
result on its own line.
"""

import typing as tp

from categorica.config import settings
from categorica.core import Nothing, Seq, Some
from categorica.functional.functor import (
    fmap,
    satisfies_composition_law,
    satisfies_identity_law,
)
from categorica.functional.monoid import (
    INT_ADDITION,
    SEQ_CONCAT,
    has_identity,
    is_associative,
    reduce,
)
from categorica.functional.natural import option_to_either, option_to_seq
from categorica.logger.logger import setup_logger

logger = setup_logger("categorica.demo")


def example_map_option() -> Some:
    return fmap(Some(3), lambda x: x + 1)


def example_map_seq() -> Seq:
    return fmap(Seq.of(1, 2, 3), lambda x: x * 2)


def example_option_to_either_some():
    return option_to_either(Some(42), left=settings.NO_VALUE_MESSAGE)


def example_option_to_either_nothing():
    return option_to_either(Nothing(), left=settings.NO_VALUE_MESSAGE)


def example_naturality() -> bool:
    """Map-then-convert equals convert-then-map for ``Some(5)`` and ``str``."""
    return option_to_seq(fmap(Some(5), str)) == fmap(option_to_seq(Some(5)), str)


def example_sum() -> int:
    return reduce(Seq.of(1, 2, 3, 4, 5), INT_ADDITION)


def example_concat() -> Seq:
    return reduce(Seq.of(Seq.of(1, 2), Seq.of(3, 4), Seq.of(5)), SEQ_CONCAT)


def example_functor_laws() -> bool:
    def inc(x):
        return x + 1

    def double(x):
        return x * 2

    containers = [Some(3), Nothing(), Seq.of(1, 2, 3)]
    return all(
        satisfies_identity_law(c) and satisfies_composition_law(c, inc, double)
        for c in containers
    )


def example_monoid_laws() -> bool:
    xs, ys, zs = Seq.of(1), Seq.of(2, 3), Seq.of(4)
    return (
        is_associative(INT_ADDITION, 1, 2, 3)
        and has_identity(INT_ADDITION, 7)
        and is_associative(SEQ_CONCAT, xs, ys, zs)
        and has_identity(SEQ_CONCAT, ys)
    )


def render_examples() -> tp.List[str]:
    """Run every example and render each result as one output line."""
    return [
        str(example_map_option()),
        str(example_map_seq()),
        str(example_option_to_either_some()),
        str(example_option_to_either_nothing()),
        str(example_naturality()),
        f"The sum is: {example_sum()}",
        str(example_concat()),
        f"Functor laws hold: {example_functor_laws()}",
        f"Monoid laws hold: {example_monoid_laws()}",
    ]


def main():
    """Print the demonstrations to standard output."""
    logger.info("Running Categorica demonstrations...")
    for line in render_examples():
        print(line)


if __name__ == "__main__":
    main()
