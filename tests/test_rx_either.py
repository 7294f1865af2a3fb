import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import asyncio
import operator

import pytest
from fpcore import rx_either
from fpcore.either import Left, Right
from fpcore.errors import InvalidEitherError
from fpcore.streams import of, pipe, to_list


async def timed(*steps):
    for delay, value in steps:
        await asyncio.sleep(delay)
        yield value


def validate(x):
    return Right(x) if x > 0 else Left("neg")


@pytest.mark.asyncio
async def test_default_to_and_extract():
    stream = lambda: of(Right(1), Left("e"), Right(3))
    assert await to_list(pipe(stream(), rx_either.default_to(0))) == [1, 0, 3]
    assert await to_list(pipe(stream(), rx_either.extract())) == [1, None, 3]


@pytest.mark.asyncio
async def test_sequence_right_wraps_every_element():
    result = await to_list(rx_either.sequence(Right(of(1, 2, 3))))
    assert result == [Right(1), Right(2), Right(3)]


@pytest.mark.asyncio
async def test_sequence_left_is_single_element():
    assert await to_list(rx_either.sequence(Left("x"))) == [Left("x")]


@pytest.mark.asyncio
async def test_distinct_until_changed_scenario():
    stream = of(Right(1), Right(1), Right(2), Left("e"), Left("e"))
    result = await to_list(pipe(stream, rx_either.distinct_until_changed()))
    assert result == [Right(1), Right(2), Left("e")]


@pytest.mark.asyncio
async def test_distinct_until_changed_lefts():
    stream = lambda: of(Left("a"), Left("b"), Right("a"), Left("a"))

    # Left payloads are ignored unless a left comparator is given
    result = await to_list(pipe(stream(), rx_either.distinct_until_changed()))
    assert result == [Left("a"), Right("a"), Left("a")]

    result = await to_list(
        pipe(stream(), rx_either.distinct_until_changed(left_comparator=operator.eq))
    )
    assert result == [Left("a"), Left("b"), Right("a"), Left("a")]


@pytest.mark.asyncio
async def test_map_operators():
    stream = lambda: of(Right(5), Right(-5), Left("early"))

    assert await to_list(pipe(stream(), rx_either.map.fmap(str))) == [
        Right("5"),
        Right("-5"),
        Left("early"),
    ]
    assert await to_list(pipe(stream(), rx_either.map.apply(Right(abs)))) == [
        Right(5),
        Right(5),
        Left("early"),
    ]
    assert await to_list(pipe(stream(), rx_either.map.apply(Left("no f")))) == [
        Left("no f"),
        Left("no f"),
        Left("early"),
    ]
    assert await to_list(pipe(stream(), rx_either.map.bind(validate))) == [
        Right(5),
        Left("neg"),
        Left("early"),
    ]


@pytest.mark.asyncio
async def test_map_bind_with_bad_callback_fails_stream():
    with pytest.raises(InvalidEitherError):
        await to_list(pipe(of(Right(1)), rx_either.map.bind(lambda x: x)))


@pytest.mark.asyncio
async def test_switch_map_fmap_and_bind():
    stream = lambda: timed((0, Right(2)), (0.05, Left("stop")))

    result = await to_list(pipe(stream(), rx_either.switch_map.fmap(lambda x: of(x, x * x))))
    assert result == [Right(2), Right(4), Left("stop")]

    result = await to_list(
        pipe(stream(), rx_either.switch_map.bind(lambda x: Right(of(x)) if x > 1 else Left("small")))
    )
    assert result == [Right(2), Left("stop")]


@pytest.mark.asyncio
async def test_switch_map_apply():
    result = await to_list(pipe(of(Right(3)), rx_either.switch_map.apply(Right(lambda x: of(x + 1)))))
    assert result == [Right(4)]

    result = await to_list(pipe(of(Right(3)), rx_either.switch_map.apply(Left("no f"))))
    assert result == [Left("no f")]


@pytest.mark.asyncio
async def test_switch_map_id_short_circuits_left():
    calls = []

    def fetch(x):
        calls.append(x)
        return of(validate(x))

    stream = timed((0, Left("boom")), (0.05, Right(3)), (0.05, Right(-3)))
    result = await to_list(pipe(stream, rx_either.switch_map.id(fetch)))

    assert result == [Left("boom"), Right(3), Left("neg")]
    assert calls == [3, -3]


@pytest.mark.asyncio
async def test_switch_map_id_sync_source_emits_left_first():
    calls = []

    def fetch(x):
        calls.append(x)
        return of(Right(x))

    result = await to_list(pipe(of(Left("e"), Right(1)), rx_either.switch_map.id(fetch)))

    assert result == [Left("e"), Right(1)]
    assert calls == [1]


@pytest.mark.asyncio
async def test_switch_map_fmap_sync_source_keeps_every_element():
    stream = of(Right(1), Left("e"), Right(2))
    result = await to_list(pipe(stream, rx_either.switch_map.fmap(lambda x: of(x, -x))))
    assert result == [Right(1), Right(-1), Left("e"), Right(2), Right(-2)]


@pytest.mark.asyncio
async def test_switch_map_bind_bad_callback_fails_stream():
    with pytest.raises(InvalidEitherError):
        await to_list(pipe(of(Right(1)), rx_either.switch_map.bind(lambda x: of(x))))
