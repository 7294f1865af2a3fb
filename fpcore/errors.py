# fpcore/errors.py
# Exceptions raised by the containers and helpers.

from typing import Optional


class FpCoreError(Exception):
    """Базовое исключение библиотеки"""


class InvalidContainerError(FpCoreError, TypeError):
    """
    Значение должно было быть контейнером (Maybe / Either), но им не является.
    Обычно означает, что callback для bind/apply вернул что-то постороннее.
    """

    container = "container"

    def __init__(self, value_repr: str):
        self.value_repr = value_repr
        super().__init__(f"Expected {self.container} value but got {value_repr}")


class InvalidMaybeError(InvalidContainerError):
    container = "Maybe"


class InvalidEitherError(InvalidContainerError):
    container = "Either"


class NilValueError(FpCoreError, ValueError):
    """Обязательное значение оказалось None"""

    default_message = "Encountered NIL value where NON-NIL is expected."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message if message is not None else self.default_message)
