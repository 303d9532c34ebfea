import pytest
from pydantic import ValidationError
from categorica.core.sequence import Seq
from categorica.core.option import Some, Nothing


@pytest.fixture
def xs():
    return Seq.of(1, 2, 3)


def test_construction(xs):
    assert Seq([1, 2, 3]) == xs
    assert Seq((1, 2, 3)) == xs
    assert Seq(x for x in [1, 2, 3]) == xs
    assert xs.items == (1, 2, 3)


def test_empty():
    assert len(Seq.empty()) == 0
    assert Seq.empty().is_empty()
    assert Seq.empty() == Seq()


def test_map_keeps_order_and_length(xs):
    assert xs.map(lambda x: x * 2) == Seq.of(2, 4, 6)
    assert xs == Seq.of(1, 2, 3)


def test_concat_returns_new_sequence(xs):
    combined = xs.concat(Seq.of(4, 5))
    assert combined == Seq.of(1, 2, 3, 4, 5)
    assert xs == Seq.of(1, 2, 3)


def test_plus_operator(xs):
    assert xs + Seq.of(4) == Seq.of(1, 2, 3, 4)


def test_plus_rejects_other_types(xs):
    with pytest.raises(TypeError):
        xs + [4]
    with pytest.raises(TypeError):
        xs.concat([4])


def test_append(xs):
    assert xs.append(4) == Seq.of(1, 2, 3, 4)
    assert len(xs) == 3


def test_flat_map(xs):
    assert xs.flat_map(lambda x: Seq.of(x, x)) == Seq.of(1, 1, 2, 2, 3, 3)


def test_sequence_protocol(xs):
    assert list(xs) == [1, 2, 3]
    assert xs[0] == 1
    assert xs[-1] == 3
    assert xs[1:] == Seq.of(2, 3)
    assert xs.to_list() == [1, 2, 3]


def test_head_option(xs):
    assert xs.head_option() == Some(1)
    assert Seq.empty().head_option() == Nothing()


def test_frozen(xs):
    with pytest.raises(ValidationError):
        xs.items = (9,)


def test_rendering():
    assert str(Seq.of(2, 4, 6)) == "Seq(2, 4, 6)"
    assert repr(Seq.of("5")) == "Seq('5')"
    assert str(Seq.empty()) == "Seq()"
