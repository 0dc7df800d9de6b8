__all__ = [
    "InvalidArgumentError",
    "NoneArgumentError",
    "NotCallableError",
    "GeneratorCallableError",
    "NotSetLikeError",
    "NotDeparsableError",
]

from dataclasses import dataclass
from typing import Any


class InvalidArgumentError(TypeError):
    """Base class of every error raised for a bad argument to a set operation."""


@dataclass(frozen=True, slots=True)
class NoneArgumentError(InvalidArgumentError):
    name: str

    def __str__(self):
        return f"Expected {self.name} to be a value, but got None"


@dataclass(frozen=True, slots=True)
class NotCallableError(InvalidArgumentError):
    name: str
    value: Any

    def __str__(self):
        return (
            f"Expected {self.name} to be callable, but got {self.value!r} of type "
            f"{type(self.value).__name__}"
        )


@dataclass(frozen=True, slots=True)
class GeneratorCallableError(InvalidArgumentError):
    name: str
    value: Any

    def __str__(self):
        return (
            f"Expected {self.name} to be a function returning a single value, but got "
            f"{self.value!r}, which produces a generator or coroutine when called"
        )


@dataclass(frozen=True, slots=True)
class NotSetLikeError(InvalidArgumentError):
    position: int
    value: Any

    def __str__(self):
        return (
            f"Expected every set argument to be an instance of collections.abc.Set, but argument "
            f"{self.position} is {self.value!r} of type {type(self.value).__name__}"
        )


@dataclass(frozen=True, slots=True)
class NotDeparsableError(ValueError):
    element: Any

    def __str__(self):
        return (
            f"Expected each element to be an int, a finite float, or a str not containing both "
            f"quote characters, but got {self.element!r} of type {type(self.element).__name__}"
        )
