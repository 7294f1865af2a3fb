import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from dataclasses import FrozenInstanceError

import pytest
from fpcore.either import (
    EitherTag,
    Left,
    Right,
    either,
    expect_either,
    from_left,
    from_right,
    is_left,
    is_right,
)
from fpcore.errors import InvalidEitherError
from fpcore.maybe import Just, Nothing


@pytest.fixture
def calls():
    return []


@pytest.fixture
def fn(calls):
    def callback(x):
        calls.append(x)
        return "the result"

    return callback


def check_sign(x):
    return Right(x) if x > 0 else Left("neg")


# ============ Left ============


def test_left_tag():
    assert Left("the message").tag is EitherTag.LEFT


def test_left_fmap_ignores_callback(fn, calls):
    source = Left("the message")
    assert source.fmap(fn) == Left("the message")
    assert calls == []


def test_left_apply_takes_left(calls):
    source = Left("the message")
    assert source.apply(Left("no callback available!")) == source


def test_left_apply_ignores_callback_and_garbage(fn, calls):
    source = Left("the message")
    assert source.apply(Right(fn)) == source
    assert source.apply(12345) == source
    assert calls == []


def test_left_bind_ignores_callback(fn, calls):
    source = Left("the message")
    assert source.bind(fn) == source
    assert calls == []


def test_left_is_frozen():
    with pytest.raises(FrozenInstanceError):
        Left("x").value = "y"


# ============ Right ============


def test_right_tag():
    assert Right("the data").tag is EitherTag.RIGHT


def test_right_fmap(fn, calls):
    assert Right("the source").fmap(fn) == Right("the result")
    assert calls == ["the source"]


def test_right_apply(fn, calls):
    assert Right("the source").apply(Right(fn)) == Right("the result")
    assert Right("the source").apply(Left("nope")) == Left("nope")
    assert calls == ["the source"]


def test_right_apply_rejects_non_either():
    with pytest.raises(InvalidEitherError):
        Right(1).apply(Just(lambda x: x))


def test_right_bind_rejects_non_either():
    with pytest.raises(InvalidEitherError) as info:
        Right(1).bind(lambda x: x + 1)
    assert "Expected Either value" in str(info.value)


def test_right_is_frozen():
    with pytest.raises(FrozenInstanceError):
        Right("x").value = "y"


def test_bind_scenario():
    assert Right(5).bind(check_sign) == Right(5)
    assert Right(-5).bind(check_sign) == Left("neg")
    assert Left("earlier").bind(check_sign) == Left("earlier")


def test_left_and_right_never_equal():
    assert Left(1) != Right(1)
    assert repr(Left(1)) == "Left(1)"
    assert repr(Right("a")) == "Right('a')"
    assert str(Right("a")) == 'Right ("a")'


# ============ Eliminators ============


def test_either_eliminator():
    describe = either(lambda err: f"error: {err}")(lambda v: f"value: {v}")
    assert describe(Right(1)) == "value: 1"
    assert describe(Left("bad")) == "error: bad"
    with pytest.raises(InvalidEitherError):
        describe("plain string")


def test_from_right_and_from_left():
    assert from_right(0)(Right(7)) == 7
    assert from_right(0)(Left("e")) == 0
    assert from_left("none")(Left("e")) == "e"
    assert from_left("none")(Right(7)) == "none"


# ============ is_left() / is_right() ============


class Exploding:
    def __getattr__(self, name):
        raise ValueError(name)


@pytest.mark.parametrize(
    "value",
    [None, [1, 2, 3], {"any": "object"}, object(), lambda: None, Exploding(), Nothing, Just(1), Left],
)
def test_predicates_are_total(value):
    assert is_left(value) is False
    assert is_right(value) is False


def test_predicates_on_instances():
    assert is_left(Left(None)) is True
    assert is_right(Left(None)) is False
    assert is_right(Right(None)) is True
    assert is_left(Right(None)) is False


def test_expect_either():
    right = Right(1)
    assert expect_either(right) is right
    with pytest.raises(InvalidEitherError):
        expect_either(None)
