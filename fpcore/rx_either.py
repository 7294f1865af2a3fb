# fpcore/rx_either.py
# Stream operators for streams of Either values. Same layout as rx_maybe:
# plain functions plus the `map` / `switch_map` namespaces.

from __future__ import annotations

import operator
from types import SimpleNamespace
from typing import Any, AsyncIterable, Callable, Optional, TypeVar

from . import streams
from .either import Either, Right, from_right, is_left, is_right
from .streams import Comparator, Operator

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")

ObservableEither = AsyncIterable[Either[L, R]]


def default_to(default_value: R) -> Operator:
    """Right(x) -> x, Left(_) -> default_value"""
    return streams.map_(from_right(default_value))


def extract() -> Operator:
    """Right(x) -> x, Left(_) -> None"""
    return streams.map_(from_right(None))


def sequence(e: Either[L, AsyncIterable[R]]) -> ObservableEither[L, R]:
    """
    Either L (Stream R) -> Stream (Either L R)
    Right(stream) - элементы stream в Right, Left(x) - поток из одного Left(x).
    """
    if is_right(e):
        return streams.map_(Right)(e.value)  # type: ignore[attr-defined]
    return streams.of(e)


def distinct_until_changed(
    comparator: Comparator = operator.eq,
    left_comparator: Optional[Comparator] = None,
) -> Operator:
    """
    Подавляет подряд идущие эквивалентные Either.
    Два Right эквивалентны, если comparator(a, b).
    Два Left эквивалентны всегда, либо по left_comparator, если он передан.
    Left и Right не эквивалентны никогда.
    """

    def equivalent(ea: Either[Any, Any], eb: Either[Any, Any]) -> bool:
        if is_left(ea) and is_left(eb):
            return left_comparator is None or bool(left_comparator(ea.value, eb.value))  # type: ignore[attr-defined]
        return is_right(ea) and is_right(eb) and bool(comparator(ea.value, eb.value))  # type: ignore[attr-defined]

    return streams.distinct_until_changed(equivalent)


# ============ map: one-to-one lifts ============


def map_fmap(f: Callable[[R], U]) -> Operator:
    """(R1 -> R2) -> Stream (Either L R1) -> Stream (Either L R2)"""
    return streams.map_(lambda ex: ex.fmap(f))


def map_apply(ef: Either[L, Callable[[R], U]]) -> Operator:
    """Either L (R1 -> R2) -> Stream (Either L R1) -> Stream (Either L R2)"""
    return streams.map_(lambda ex: ex.apply(ef))


def map_bind(f: Callable[[R], Either[L, U]]) -> Operator:
    """(R1 -> Either L R2) -> Stream (Either L R1) -> Stream (Either L R2)"""
    return streams.map_(lambda ex: ex.bind(f))


# ============ switch_map: lifts with nested streams ============


def switch_map_fmap(f: Callable[[R], AsyncIterable[U]]) -> Operator:
    return streams.switch_map(lambda ex: sequence(ex.fmap(f)))


def switch_map_apply(ef: Either[L, Callable[[R], AsyncIterable[U]]]) -> Operator:
    return streams.switch_map(lambda ex: sequence(ex.apply(ef)))


def switch_map_bind(f: Callable[[R], Either[L, AsyncIterable[U]]]) -> Operator:
    return streams.switch_map(lambda ex: sequence(ex.bind(f)))


def switch_map_id(f: Callable[[R], AsyncIterable[Either[L, U]]]) -> Operator:
    """
    (R1 -> Stream (Either L R2)) -> Stream (Either L R1) -> Stream (Either L R2)
    Left выдаётся как есть, f для него не вызывается.
    """

    def project(ex: Either[L, R]) -> AsyncIterable[Either[L, U]]:
        if is_right(ex):
            return f(ex.value)  # type: ignore[attr-defined]
        return streams.of(ex)

    return streams.switch_map(project)


map = SimpleNamespace(fmap=map_fmap, apply=map_apply, bind=map_bind)

switch_map = SimpleNamespace(
    fmap=switch_map_fmap,
    apply=switch_map_apply,
    bind=switch_map_bind,
    id=switch_map_id,
)
