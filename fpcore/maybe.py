# fpcore/maybe.py
# Maybe: optional value container with variants Just(value) and Nothing.
# Both variants are frozen; Nothing is a process-wide singleton.

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Generic, Optional, TypeVar

from .assertions import is_function
from .errors import InvalidMaybeError
from .utils import show

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class MaybeTag(Enum):
    JUST = "Maybe.Just"
    NOTHING = "Maybe.Nothing"


class Maybe(Generic[T]):
    """
    Закрытый тип-сумма из двух вариантов: Just(value) и Nothing.
    Поддерживает fmap / apply / bind (функтор, аппликатив, монада).
    Экземпляры создаются только через Just(...) или берётся синглтон Nothing.
    """

    __slots__ = ()

    tag: ClassVar[MaybeTag]

    def fmap(self, f: Callable[[T], U]) -> "Maybe[U]":
        raise NotImplementedError

    def apply(self, mf: "Maybe[Callable[[T], U]]") -> "Maybe[U]":
        raise NotImplementedError

    def bind(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        raise NotImplementedError


@dataclass(frozen=True, repr=False)
class Just(Maybe[T]):
    value: T

    tag: ClassVar[MaybeTag] = MaybeTag.JUST

    def fmap(self, f: Callable[[T], U]) -> Maybe[U]:
        return Just(f(self.value))

    def apply(self, mf: Maybe[Callable[[T], U]]) -> Maybe[U]:
        return expect_maybe(mf).fmap(lambda f: f(self.value))

    def bind(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return expect_maybe(f(self.value))

    def __repr__(self) -> str:
        return f"Just({self.value!r})"

    def __str__(self) -> str:
        return f"Just ({show(self.value)})"


@dataclass(frozen=True, repr=False)
class _Nothing(Maybe[Any]):
    tag: ClassVar[MaybeTag] = MaybeTag.NOTHING

    _instance: ClassVar[Optional["_Nothing"]] = None

    def __new__(cls) -> "_Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    # copy / deepcopy / pickle resolve back to the module level singleton
    def __reduce__(self) -> str:
        return "Nothing"

    def fmap(self, f: Callable[[Any], U]) -> Maybe[U]:
        return self

    def apply(self, mf: Any) -> Maybe[U]:
        return self

    def bind(self, f: Callable[[Any], Maybe[U]]) -> Maybe[U]:
        return self

    def __repr__(self) -> str:
        return "Nothing"

    __str__ = __repr__


Nothing: Maybe[Any] = _Nothing()


# ============ Eliminators ============


def maybe(default: U) -> Callable[[Callable[[T], U]], Callable[[Maybe[T]], U]]:
    """
    maybe(default)(f)(m): f(value) для Just, default для Nothing.
    f не вызывается, если m - Nothing.
    """

    def with_function(f: Callable[[T], U]) -> Callable[[Maybe[T]], U]:
        def eliminate(m: Maybe[T]) -> U:
            return f(m.value) if is_just(m) else default  # type: ignore[attr-defined]

        return eliminate

    return with_function


def from_maybe(default: T) -> Callable[[Maybe[T]], T]:
    """from_maybe(default)(m): значение из Just или default"""

    def eliminate(m: Maybe[T]) -> T:
        return m.value if is_just(m) else default  # type: ignore[attr-defined]

    return eliminate


# ============ Structural predicates ============
# Total over any value: whatever goes wrong while probing the shape means "no".


def _has_operations(m: Any) -> bool:
    return is_function(m.fmap) and is_function(m.apply) and is_function(m.bind)


def is_just(m: Any) -> bool:
    try:
        return (
            not isinstance(m, type)
            and m.tag is MaybeTag.JUST
            and hasattr(m, "value")
            and _has_operations(m)
        )
    except Exception:
        return False


def is_nothing(m: Any) -> bool:
    try:
        return (
            not isinstance(m, type)
            and m.tag is MaybeTag.NOTHING
            and _has_operations(m)
        )
    except Exception:
        return False


def expect_maybe(x: Any) -> Maybe[Any]:
    """Возвращает x, если это Maybe, иначе InvalidMaybeError"""
    if not is_just(x) and not is_nothing(x):
        logger.debug("rejected non-Maybe value %s", show(x))
        raise InvalidMaybeError(show(x))
    return x
