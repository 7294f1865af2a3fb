# fpcore/rx_maybe.py
# Stream operators for streams of Maybe values.
#
# The lifted operations are exposed twice: as plain functions (map_fmap,
# switch_map_id, ...) and grouped under the `map` and `switch_map`
# namespaces at the bottom of the module:
#
#     pipe(source, rx_maybe.map.fmap(f), rx_maybe.default_to(0))

from __future__ import annotations

import operator
from types import SimpleNamespace
from typing import Any, AsyncIterable, Callable, TypeVar

from . import streams
from .maybe import Just, Maybe, Nothing, from_maybe, is_just, is_nothing
from .streams import Comparator, Operator

T = TypeVar("T")
U = TypeVar("U")

ObservableMaybe = AsyncIterable[Maybe[T]]


def default_to(default_value: T) -> Operator:
    """Just(x) -> x, Nothing -> default_value"""
    return streams.map_(from_maybe(default_value))


def extract() -> Operator:
    """Just(x) -> x, Nothing -> None"""
    return streams.map_(from_maybe(None))


def sequence(m: Maybe[AsyncIterable[T]]) -> ObservableMaybe[T]:
    """
    Maybe (Stream T) -> Stream (Maybe T)
    Just(stream) - элементы stream, каждый обёрнут в Just.
    Nothing      - поток из одного Nothing.
    """
    if is_just(m):
        return streams.map_(Just)(m.value)  # type: ignore[attr-defined]
    return streams.of(Nothing)


def distinct_until_changed(comparator: Comparator = operator.eq) -> Operator:
    """
    Подавляет подряд идущие эквивалентные Maybe:
    два Nothing эквивалентны всегда, два Just - если comparator(a, b),
    Just и Nothing не эквивалентны никогда.
    """

    def equivalent(ma: Maybe[Any], mb: Maybe[Any]) -> bool:
        if is_nothing(ma) and is_nothing(mb):
            return True
        return is_just(ma) and is_just(mb) and bool(comparator(ma.value, mb.value))  # type: ignore[attr-defined]

    return streams.distinct_until_changed(equivalent)


# ============ map: one-to-one lifts ============


def map_fmap(f: Callable[[T], U]) -> Operator:
    """(T -> U) -> Stream (Maybe T) -> Stream (Maybe U)"""
    return streams.map_(lambda mx: mx.fmap(f))


def map_apply(mf: Maybe[Callable[[T], U]]) -> Operator:
    """Maybe (T -> U) -> Stream (Maybe T) -> Stream (Maybe U)"""
    return streams.map_(lambda mx: mx.apply(mf))


def map_bind(f: Callable[[T], Maybe[U]]) -> Operator:
    """(T -> Maybe U) -> Stream (Maybe T) -> Stream (Maybe U)"""
    return streams.map_(lambda mx: mx.bind(f))


# ============ switch_map: lifts with nested streams ============


def switch_map_fmap(f: Callable[[T], AsyncIterable[U]]) -> Operator:
    """(T -> Stream U) -> Stream (Maybe T) -> Stream (Maybe U)"""
    return streams.switch_map(lambda mx: sequence(mx.fmap(f)))


def switch_map_apply(mf: Maybe[Callable[[T], AsyncIterable[U]]]) -> Operator:
    """Maybe (T -> Stream U) -> Stream (Maybe T) -> Stream (Maybe U)"""
    return streams.switch_map(lambda mx: sequence(mx.apply(mf)))


def switch_map_bind(f: Callable[[T], Maybe[AsyncIterable[U]]]) -> Operator:
    """(T -> Maybe (Stream U)) -> Stream (Maybe T) -> Stream (Maybe U)"""
    return streams.switch_map(lambda mx: sequence(mx.bind(f)))


def switch_map_id(f: Callable[[T], AsyncIterable[Maybe[U]]]) -> Operator:
    """
    (T -> Stream (Maybe U)) -> Stream (Maybe T) -> Stream (Maybe U)
    Для Nothing f не вызывается, выдаётся сам Nothing.
    """

    def project(mx: Maybe[T]) -> AsyncIterable[Maybe[U]]:
        if is_just(mx):
            return f(mx.value)  # type: ignore[attr-defined]
        return streams.of(Nothing)

    return streams.switch_map(project)


map = SimpleNamespace(fmap=map_fmap, apply=map_apply, bind=map_bind)

switch_map = SimpleNamespace(
    fmap=switch_map_fmap,
    apply=switch_map_apply,
    bind=switch_map_bind,
    id=switch_map_id,
)
