import pytest
from pydantic import ValidationError
from categorica.core.option import Option, Some, Nothing
from categorica.core.exceptions import UnwrapError


@pytest.fixture
def some_three():
    return Some(3)


def test_some_holds_value(some_three):
    assert some_three.value == 3
    assert some_three.is_some()
    assert not some_three.is_nothing()


def test_nothing_is_empty():
    nothing = Nothing()
    assert nothing.is_nothing()
    assert not nothing.is_some()


def test_map_some(some_three):
    assert some_three.map(lambda x: x + 1) == Some(4)


def test_map_does_not_touch_original(some_three):
    some_three.map(lambda x: x * 100)
    assert some_three == Some(3)


def test_map_nothing_never_calls_function():
    calls = []
    result = Nothing().map(lambda x: calls.append(x))
    assert result == Nothing()
    assert calls == []


def test_structural_equality():
    assert Some(3) == Some(3)
    assert Some(3) != Some(4)
    assert Some(3) != Nothing()
    assert Nothing() == Nothing()


def test_hashable():
    assert hash(Some(3)) == hash(Some(3))
    assert len({Some(1), Some(1), Nothing(), Nothing()}) == 2


def test_frozen(some_three):
    with pytest.raises(ValidationError):
        some_three.value = 10


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Option()


def test_of_lifts_none_to_nothing():
    assert Option.of(None) == Nothing()
    assert Option.of(0) == Some(0)
    assert Option.of("") == Some("")


def test_some_may_hold_none():
    assert Some(None).is_some()


def test_flat_map():
    def half(x):
        return Some(x // 2) if x % 2 == 0 else Nothing()

    assert Some(8).flat_map(half) == Some(4)
    assert Some(3).flat_map(half) == Nothing()
    assert Nothing().flat_map(half) == Nothing()


def test_flat_map_requires_option():
    with pytest.raises(TypeError):
        Some(1).flat_map(lambda x: x + 1)


def test_filter():
    assert Some(4).filter(lambda x: x > 3) == Some(4)
    assert Some(2).filter(lambda x: x > 3) == Nothing()
    assert Nothing().filter(lambda x: True) == Nothing()


def test_fold():
    assert Some(2).fold(lambda: "empty", lambda x: f"got {x}") == "got 2"
    assert Nothing().fold(lambda: "empty", lambda x: f"got {x}") == "empty"


def test_get_or_else():
    assert Some(1).get_or_else(0) == 1
    assert Nothing().get_or_else(0) == 0


def test_unwrap():
    assert Some("a").unwrap() == "a"
    with pytest.raises(UnwrapError):
        Nothing().unwrap()


def test_unwrap_error_is_value_error():
    with pytest.raises(ValueError):
        Nothing().unwrap()


def test_rendering():
    assert str(Some(4)) == "Some(4)"
    assert repr(Some("a")) == "Some('a')"
    assert str(Nothing()) == "Nothing"
    assert repr(Nothing()) == "Nothing"


def test_match_variants():
    def describe(option):
        match option:
            case Some(value):
                return f"some {value}"
            case Nothing():
                return "nothing"

    assert describe(Some(1)) == "some 1"
    assert describe(Nothing()) == "nothing"


def test_iteration_yields_zero_or_one_item():
    assert list(Some(3)) == [3]
    assert list(Nothing()) == []
    assert [x * 2 for x in Some(4)] == [8]
