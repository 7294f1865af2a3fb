# fpcore/assertions.py
# Type guards and precondition checks.

from numbers import Real
from typing import Any, Optional, TypeVar

from .errors import NilValueError

T = TypeVar("T")

_SCALARS = (str, bytes, int, float, complex, bool)


def is_nil(x: Any) -> bool:
    return x is None


def is_string(x: Any) -> bool:
    return isinstance(x, str)


def is_function(x: Any) -> bool:
    return callable(x)


def is_number(x: Any) -> bool:
    """Вещественное число; bool числом не считается"""
    return isinstance(x, Real) and not isinstance(x, bool)


def is_boolean(x: Any) -> bool:
    return isinstance(x, bool)


def is_object(x: Any) -> bool:
    """Любой не-None объект, кроме скалярных примитивов и вызываемых объектов"""
    return x is not None and not isinstance(x, _SCALARS) and not callable(x)


def is_non_empty(xs: Any) -> bool:
    """Непустой список или кортеж"""
    return isinstance(xs, (list, tuple)) and len(xs) > 0


def expect_non_nil(x: Optional[T], message: Optional[str] = None) -> T:
    """
    Возвращает x без изменений или бросает NilValueError, если x is None.
    message - необязательный текст ошибки
    """
    if is_nil(x):
        raise NilValueError(message)
    return x
