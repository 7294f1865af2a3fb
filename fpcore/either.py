# fpcore/either.py
# Either: disjunction biased toward Right.
# Left is the failure / alternate channel and carries its payload untouched
# through fmap, apply and bind.

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Generic, TypeVar

from .assertions import is_function
from .errors import InvalidEitherError
from .utils import show

logger = logging.getLogger(__name__)

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")


class EitherTag(Enum):
    LEFT = "Either.Left"
    RIGHT = "Either.Right"


class Either(Generic[L, R]):
    """
    Either<L, R> - левая ветвь обычно представляет ошибку,
    правая - успешное значение. Операции работают только над Right.
    """

    __slots__ = ()

    tag: ClassVar[EitherTag]

    def fmap(self, f: Callable[[R], U]) -> "Either[L, U]":
        raise NotImplementedError

    def apply(self, ef: "Either[L, Callable[[R], U]]") -> "Either[L, U]":
        raise NotImplementedError

    def bind(self, f: Callable[[R], "Either[L, U]"]) -> "Either[L, U]":
        raise NotImplementedError


@dataclass(frozen=True, repr=False)
class Left(Either[L, Any]):
    value: L

    tag: ClassVar[EitherTag] = EitherTag.LEFT

    # Left never calls f and never looks at ef
    def fmap(self, f: Callable[[Any], U]) -> Either[L, U]:
        return self

    def apply(self, ef: Any) -> Either[L, U]:
        return self

    def bind(self, f: Callable[[Any], Either[L, U]]) -> Either[L, U]:
        return self

    def __repr__(self) -> str:
        return f"Left({self.value!r})"

    def __str__(self) -> str:
        return f"Left ({show(self.value)})"


@dataclass(frozen=True, repr=False)
class Right(Either[Any, R]):
    value: R

    tag: ClassVar[EitherTag] = EitherTag.RIGHT

    def fmap(self, f: Callable[[R], U]) -> Either[Any, U]:
        return Right(f(self.value))

    def apply(self, ef: Either[Any, Callable[[R], U]]) -> Either[Any, U]:
        return expect_either(ef).fmap(lambda f: f(self.value))

    def bind(self, f: Callable[[R], Either[Any, U]]) -> Either[Any, U]:
        return expect_either(f(self.value))

    def __repr__(self) -> str:
        return f"Right({self.value!r})"

    def __str__(self) -> str:
        return f"Right ({show(self.value)})"


# ============ Eliminators ============


def either(
    on_left: Callable[[L], U],
) -> Callable[[Callable[[R], U]], Callable[[Either[L, R]], U]]:
    """either(on_left)(on_right)(e) - разбор обеих ветвей в одно значение"""

    def with_right(on_right: Callable[[R], U]) -> Callable[[Either[L, R]], U]:
        def eliminate(e: Either[L, R]) -> U:
            checked = expect_either(e)
            if is_right(checked):
                return on_right(checked.value)  # type: ignore[attr-defined]
            return on_left(checked.value)  # type: ignore[attr-defined]

        return eliminate

    return with_right


def from_right(default: R) -> Callable[[Either[Any, R]], R]:
    def eliminate(e: Either[Any, R]) -> R:
        return e.value if is_right(e) else default  # type: ignore[attr-defined]

    return eliminate


def from_left(default: L) -> Callable[[Either[L, Any]], L]:
    def eliminate(e: Either[L, Any]) -> L:
        return e.value if is_left(e) else default  # type: ignore[attr-defined]

    return eliminate


# ============ Structural predicates ============


def _has_shape(e: Any, tag: EitherTag) -> bool:
    return (
        not isinstance(e, type)
        and e.tag is tag
        and hasattr(e, "value")
        and is_function(e.fmap)
        and is_function(e.apply)
        and is_function(e.bind)
    )


def is_left(e: Any) -> bool:
    try:
        return _has_shape(e, EitherTag.LEFT)
    except Exception:
        return False


def is_right(e: Any) -> bool:
    try:
        return _has_shape(e, EitherTag.RIGHT)
    except Exception:
        return False


def expect_either(x: Any) -> Either[Any, Any]:
    """Возвращает x, если это Either, иначе InvalidEitherError"""
    if not is_left(x) and not is_right(x):
        logger.debug("rejected non-Either value %s", show(x))
        raise InvalidEitherError(show(x))
    return x
