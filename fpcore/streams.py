# fpcore/streams.py
# Minimal asynchronous push-stream built on asyncio async iterators.
# A stream is any AsyncIterable; an operator is a function
# AsyncIterable[T] -> AsyncIterator[U]. The container adapters in
# rx_maybe / rx_either only need the pieces defined here.

from __future__ import annotations

import asyncio
import logging
import operator
from typing import (
    Any,
    AsyncIterable,
    AsyncIterator,
    Callable,
    Iterable,
    List,
    Optional,
    TypeVar,
    Union,
)

from .compose import pipe as compose_pipe

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

Operator = Callable[[AsyncIterable[T]], AsyncIterator[U]]
Comparator = Callable[[T, T], bool]


# ============ Constructors ============


async def of(*values: T) -> AsyncIterator[T]:
    """Конечный поток из переданных значений, of(x) - поток из одного элемента"""
    for value in values:
        yield value


async def from_iterable(
    iterable: Union[Iterable[T], AsyncIterable[T]],
) -> AsyncIterator[T]:
    """Оборачивает обычный или асинхронный итерируемый объект в поток"""
    if hasattr(iterable, "__aiter__"):
        async for value in iterable:  # type: ignore[union-attr]
            yield value
    else:
        for value in iterable:  # type: ignore[union-attr]
            yield value


# ============ Operators ============


def map_(f: Callable[[T], U]) -> Operator:
    """Один-к-одному: порядок и количество элементов сохраняются"""

    async def operator_(source: AsyncIterable[T]) -> AsyncIterator[U]:
        async for value in source:
            yield f(value)

    return operator_


def distinct_until_changed(comparator: Comparator = operator.eq) -> Operator:
    """
    Пропускает элемент, если comparator(предыдущий, текущий) истинно.
    Сравнение идёт с последним выпущенным элементом.
    """

    async def operator_(source: AsyncIterable[T]) -> AsyncIterator[T]:
        has_previous = False
        previous: Any = None
        async for value in source:
            if has_previous and comparator(previous, value):
                continue
            has_previous = True
            previous = value
            yield value

    return operator_


async def _next(iterator: AsyncIterator[T]) -> T:
    return await iterator.__anext__()


async def _close(iterator: Any) -> None:
    aclose = getattr(iterator, "aclose", None)
    if aclose is not None:
        await aclose()


def switch_map(project: Callable[[T], AsyncIterable[U]]) -> Operator:
    """
    Для каждого элемента источника project(element) даёт внутренний поток.
    Новый элемент источника отменяет активный внутренний поток, его ещё
    не доставленные элементы отбрасываются.

    Следующий элемент источника обрабатывается только после того, как
    внутренний поток получил шанс выполниться: поток, который отдаёт
    элементы без ожидания, успевает выдать их все до переключения.
    """

    async def operator_(source: AsyncIterable[T]) -> AsyncIterator[U]:
        source_it = source.__aiter__()
        source_next: Optional[asyncio.Task] = None
        inner_it: Optional[AsyncIterator[U]] = None
        inner_next: Optional[asyncio.Task] = None
        source_done = False
        generation = 0

        try:
            while True:
                if inner_it is not None and inner_next is None:
                    inner_next = asyncio.create_task(_next(inner_it))
                    # one loop tick: an inner that does not suspend is done after it
                    await asyncio.sleep(0)

                if inner_next is not None and inner_next.done():
                    task, inner_next = inner_next, None
                    try:
                        value = task.result()
                    except StopAsyncIteration:
                        inner_it = None
                        if source_done:
                            return
                        continue
                    yield value
                    continue

                if source_done:
                    if inner_next is None:
                        return
                    await asyncio.wait({inner_next})
                    continue

                if source_next is None:
                    source_next = asyncio.create_task(_next(source_it))

                waiting = {t for t in (source_next, inner_next) if t is not None}
                await asyncio.wait(waiting, return_when=asyncio.FIRST_COMPLETED)

                # inner output that is already available goes first
                if inner_next is not None and inner_next.done():
                    continue
                if not source_next.done():
                    continue

                task, source_next = source_next, None
                try:
                    element = task.result()
                except StopAsyncIteration:
                    source_done = True
                    if inner_it is None:
                        return
                    continue

                if inner_next is not None:
                    logger.debug("switch_map: cancelling inner stream #%d", generation)
                    inner_next.cancel()
                    await asyncio.gather(inner_next, return_exceptions=True)
                    inner_next = None
                if inner_it is not None:
                    await _close(inner_it)
                generation += 1
                inner_it = project(element).__aiter__()
        finally:
            pending = [t for t in (source_next, inner_next) if t is not None and not t.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
            if inner_it is not None:
                await _close(inner_it)
            await _close(source_it)

    return operator_


# ============ Helpers ============


def pipe(source: AsyncIterable[Any], *operators: Operator) -> AsyncIterator[Any]:
    """pipe(source, op1, op2) == op2(op1(source))"""
    return compose_pipe(*operators)(source)


async def to_list(stream: AsyncIterable[T]) -> List[T]:
    """Собирает конечный поток в список"""
    return [value async for value in stream]
