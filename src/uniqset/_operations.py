"""Set operations as free functions taking the set explicitly.

Every function validates its arguments before touching any element and raises a subclass of
`InvalidArgumentError` on the first violation. None of them mutates its arguments; set-valued
results are always new `UniqueSet` instances.
"""

from __future__ import annotations

__all__ = [
    "is_empty",
    "every",
    "exists",
    "filter",
    "map",
    "fold",
    "fold_right",
    "partition",
    "is_subset_of",
    "is_superset_of",
    "is_proper_subset_of",
    "is_proper_superset_of",
    "union",
    "intersect",
    "difference",
    "to_list",
    "to_dict",
]

from collections.abc import Collection, Iterable
from typing import TYPE_CHECKING, Any, Callable, Hashable, TypeVar

from . import _unique_set
from ._validation import bind_context, no_context, require_function, require_sets, require_value

if TYPE_CHECKING:
    from ._unique_set import UniqueSet

Element = TypeVar("Element", bound=Hashable)
Other = TypeVar("Other", bound=Hashable)
State = TypeVar("State")


def is_empty(source: Collection[Element]) -> bool:
    require_value(source, "source")
    return len(source) == 0


def every(
    source: Iterable[Element], predicate: Callable[..., bool], *, context: Any = no_context
) -> bool:
    require_value(source, "source")
    require_function(predicate, "predicate")

    predicate = bind_context(predicate, context)
    for element in source:
        if not predicate(element):
            return False
    return True


def exists(
    source: Collection[Element], predicate: Callable[..., bool], *, context: Any = no_context
) -> bool:
    require_value(source, "source")
    require_function(predicate, "predicate")

    if len(source) == 0:
        return False

    predicate = bind_context(predicate, context)
    for element in source:
        if predicate(element):
            return True
    return False


def filter(
    source: Iterable[Element], predicate: Callable[..., bool], *, context: Any = no_context
) -> UniqueSet[Element]:
    require_value(source, "source")
    require_function(predicate, "predicate")

    predicate = bind_context(predicate, context)
    return _unique_set.UniqueSet(element for element in source if predicate(element))


def map(
    source: Iterable[Element], mapping: Callable[..., Other], *, context: Any = no_context
) -> UniqueSet[Other]:
    """Apply `mapping` to each element.

    Results that compare equal collapse into one element at the position of the first of them, so
    the result may be smaller than `source`.
    """
    require_value(source, "source")
    require_function(mapping, "mapping")

    mapping = bind_context(mapping, context)
    return _unique_set.UniqueSet(mapping(element) for element in source)


def fold(
    source: Iterable[Element],
    folder: Callable[..., State],
    state: State,
    *,
    context: Any = no_context,
) -> State:
    """Accumulate from the first element to the last, calling `folder(state, element)`."""
    require_value(source, "source")
    require_value(state, "state")
    require_function(folder, "folder")

    folder = bind_context(folder, context)
    for element in source:
        state = folder(state, element)
    return state


def fold_right(
    source: Iterable[Element],
    folder: Callable[..., State],
    state: State,
    *,
    context: Any = no_context,
) -> State:
    """Accumulate from the last element to the first, calling `folder(element, state)`.

    The argument order is the mirror of `fold`.
    """
    require_value(source, "source")
    require_value(state, "state")
    require_function(folder, "folder")

    folder = bind_context(folder, context)
    for element in reversed(list(source)):
        state = folder(element, state)
    return state


def partition(
    source: Iterable[Element], predicate: Callable[..., bool], *, context: Any = no_context
) -> tuple[UniqueSet[Element], UniqueSet[Element]]:
    """Split `source` into the elements that satisfy `predicate` and those that do not."""
    require_value(source, "source")
    require_function(predicate, "predicate")

    predicate = bind_context(predicate, context)
    matching = _unique_set.UniqueSet()
    non_matching = _unique_set.UniqueSet()
    for element in source:
        if predicate(element):
            matching.add(element)
        else:
            non_matching.add(element)
    return matching, non_matching


def is_subset_of(source: Iterable[Element], other: Collection[Element]) -> bool:
    require_value(source, "source")
    require_value(other, "other")
    return all(element in other for element in source)


def is_superset_of(source: Collection[Element], other: Iterable[Element]) -> bool:
    require_value(source, "source")
    require_value(other, "other")
    return all(element in source for element in other)


def is_proper_subset_of(source: Collection[Element], other: Collection[Element]) -> bool:
    require_value(source, "source")
    require_value(other, "other")
    return all(element in other for element in source) and any(
        element not in source for element in other
    )


def is_proper_superset_of(source: Collection[Element], other: Collection[Element]) -> bool:
    require_value(source, "source")
    require_value(other, "other")
    return all(element in source for element in other) and any(
        element not in other for element in source
    )


def union(source: Iterable[Element], *others: Iterable[Element]) -> UniqueSet[Element]:
    """Combine `source` with each of `others`.

    The elements of `source` come first in their own order, then the unseen elements of each
    other set in argument order. With no `others`, the result is a copy of `source`.
    """
    require_value(source, "source")
    require_sets(others)

    result = _unique_set.UniqueSet(source)
    for other in others:
        result.update(other)
    return result


def intersect(source: Iterable[Element], *others: Collection[Element]) -> UniqueSet[Element]:
    """Keep the elements of `source` found in every one of `others`, in the order of `source`.

    The intersection of no sets is empty.
    """
    require_value(source, "source")
    require_sets(others)

    if len(others) == 0:
        return _unique_set.UniqueSet()

    return _unique_set.UniqueSet(
        element for element in source if all(element in other for other in others)
    )


def difference(source: Iterable[Element], other: Collection[Element]) -> UniqueSet[Element]:
    require_value(source, "source")
    require_value(other, "other")
    return _unique_set.UniqueSet(element for element in source if element not in other)


def to_list(source: Iterable[Element]) -> list[Element]:
    require_value(source, "source")
    return list(source)


def to_dict(source: Iterable[Element]) -> dict[Element, Element]:
    require_value(source, "source")
    return {element: element for element in source}
