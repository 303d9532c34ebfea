import pytest
from pydantic import ValidationError
from categorica.core.either import Either, Left, Right
from categorica.core.exceptions import UnwrapError


def test_variants():
    assert Right(1).is_right()
    assert not Right(1).is_left()
    assert Left("e").is_left()
    assert not Left("e").is_right()


def test_map_is_right_biased():
    assert Right(41).map(lambda x: x + 1) == Right(42)
    assert Left("boom").map(lambda x: x + 1) == Left("boom")


def test_map_left():
    assert Left("boom").map_left(str.upper) == Left("BOOM")
    assert Right(1).map_left(str.upper) == Right(1)


def test_left_and_right_are_distinct():
    assert Left(1) != Right(1)
    assert Left(1) == Left(1)
    assert Right(1) == Right(1)


def test_flat_map():
    def parse(text):
        return Right(int(text)) if text.isdigit() else Left(f"not a number: {text}")

    assert Right("12").flat_map(parse) == Right(12)
    assert Right("x").flat_map(parse) == Left("not a number: x")
    assert Left("earlier").flat_map(parse) == Left("earlier")


def test_flat_map_requires_either():
    with pytest.raises(TypeError):
        Right(1).flat_map(lambda x: x)


def test_fold():
    assert Right(2).fold(len, lambda x: x * 10) == 20
    assert Left("abc").fold(len, lambda x: x * 10) == 3


def test_get_or_else_and_unwrap():
    assert Right(5).get_or_else(0) == 5
    assert Left("e").get_or_else(0) == 0
    assert Right(5).unwrap() == 5
    with pytest.raises(UnwrapError):
        Left("e").unwrap()


def test_swap():
    assert Left(1).swap() == Right(1)
    assert Right(1).swap() == Left(1)


def test_frozen():
    right = Right(1)
    with pytest.raises(ValidationError):
        right.value = 2


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Either()


def test_rendering():
    assert str(Right(42)) == "Right(42)"
    assert str(Left("No value found")) == "Left(No value found)"
    assert repr(Left("No value found")) == "Left('No value found')"
