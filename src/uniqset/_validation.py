__all__ = [
    "no_context",
    "require_value",
    "require_function",
    "require_sets",
    "bind_context",
]

from collections.abc import Set
from functools import partial
from inspect import isasyncgenfunction, iscoroutinefunction, isgeneratorfunction, isroutine
from typing import Any, Callable

from ._exceptions import (
    GeneratorCallableError,
    NoneArgumentError,
    NotCallableError,
    NotSetLikeError,
)


class _NoContext:
    def __repr__(self) -> str:
        return "no_context"


# Distinguishes an omitted context from an explicit context of None
no_context: Any = _NoContext()


def require_value(value: object, name: str) -> None:
    if value is None:
        raise NoneArgumentError(name)


def suspends(function: object) -> bool:
    return (
        isgeneratorfunction(function)
        or isasyncgenfunction(function)
        or iscoroutinefunction(function)
    )


def require_function(value: object, name: str) -> None:
    if not callable(value):
        raise NotCallableError(name, value)
    if suspends(value):
        raise GeneratorCallableError(name, value)
    # Callable instances are inspected through the __call__ of their class
    if not isroutine(value) and not isinstance(value, (type, partial)):
        if suspends(getattr(type(value), "__call__", None)):
            raise GeneratorCallableError(name, value)


def require_sets(values: tuple[object, ...]) -> None:
    for position, value in enumerate(values):
        if not isinstance(value, Set):
            raise NotSetLikeError(position, value)


def bind_context(function: Callable[..., Any], context: Any) -> Callable[..., Any]:
    if context is no_context:
        return function
    else:
        return partial(function, context)
