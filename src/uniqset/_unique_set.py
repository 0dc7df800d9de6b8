from __future__ import annotations

__all__ = ["UniqueSet"]

from collections.abc import Hashable, Iterable, Iterator, MutableSet, Set
from typing import Any, Callable, TypeVar

from . import _operations as operations
from ._validation import no_context, require_value

Element = TypeVar("Element", bound=Hashable)
Other = TypeVar("Other", bound=Hashable)
State = TypeVar("State")


class UniqueSet(MutableSet[Element]):
    """A set that remembers the order in which its elements were first added.

    Adding an element that is already present leaves it where it is. Equality is plain set
    equality, so order does not matter when comparing two sets.
    """

    def __init__(self, items: Iterable[Element] = (), /):
        require_value(items, "items")
        # Rely on stable dictionary
        self._items: dict[Element, None] = dict.fromkeys(items)

    @classmethod
    def empty(cls) -> UniqueSet[Element]:
        return cls()

    @classmethod
    def of(cls, *items: Element) -> UniqueSet[Element]:
        return cls(items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, x: object) -> bool:
        return x in self._items

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Element]:
        return reversed(self._items)

    def __eq__(self, other: object):
        if isinstance(other, UniqueSet):
            return self._items.keys() == other._items.keys()
        else:
            return super().__eq__(other)

    def __or__(self, other: Set[Element]) -> UniqueSet[Element]:
        if not isinstance(other, Set):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: Set[Element]) -> UniqueSet[Element]:
        if not isinstance(other, Set):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other: Set[Element]) -> UniqueSet[Element]:
        if not isinstance(other, Set):
            return NotImplemented
        return self.difference(other)

    def __repr__(self) -> str:
        if len(self._items) == 0:
            return "UniqueSet()"
        else:
            return f"UniqueSet([{', '.join(repr(item) for item in self._items)}])"

    def add(self, element: Element, /) -> None:
        self._items[element] = None

    def discard(self, element: Element, /) -> None:
        self._items.pop(element, None)

    def update(self, *others: Iterable[Element]) -> None:
        for other in others:
            self._items.update(dict.fromkeys(other))

    def copy(self) -> UniqueSet[Element]:
        return UniqueSet(self._items)

    def is_empty(self) -> bool:
        return operations.is_empty(self)

    def every(self, predicate: Callable[..., bool], *, context: Any = no_context) -> bool:
        """Test whether all elements satisfy `predicate`; true when the set is empty."""
        return operations.every(self, predicate, context=context)

    def exists(self, predicate: Callable[..., bool], *, context: Any = no_context) -> bool:
        """Test whether any element satisfies `predicate`; false when the set is empty."""
        return operations.exists(self, predicate, context=context)

    def filter(
        self, predicate: Callable[..., bool], *, context: Any = no_context
    ) -> UniqueSet[Element]:
        return operations.filter(self, predicate, context=context)

    def map(self, mapping: Callable[..., Other], *, context: Any = no_context) -> UniqueSet[Other]:
        return operations.map(self, mapping, context=context)

    def fold(
        self, folder: Callable[..., State], state: State, *, context: Any = no_context
    ) -> State:
        return operations.fold(self, folder, state, context=context)

    def fold_right(
        self, folder: Callable[..., State], state: State, *, context: Any = no_context
    ) -> State:
        return operations.fold_right(self, folder, state, context=context)

    def partition(
        self, predicate: Callable[..., bool], *, context: Any = no_context
    ) -> tuple[UniqueSet[Element], UniqueSet[Element]]:
        return operations.partition(self, predicate, context=context)

    def is_subset_of(self, other: Set[Element]) -> bool:
        return operations.is_subset_of(self, other)

    def is_superset_of(self, other: Set[Element]) -> bool:
        return operations.is_superset_of(self, other)

    def is_proper_subset_of(self, other: Set[Element]) -> bool:
        return operations.is_proper_subset_of(self, other)

    def is_proper_superset_of(self, other: Set[Element]) -> bool:
        return operations.is_proper_superset_of(self, other)

    def union(self, *others: Set[Element]) -> UniqueSet[Element]:
        return operations.union(self, *others)

    def intersect(self, *others: Set[Element]) -> UniqueSet[Element]:
        return operations.intersect(self, *others)

    def difference(self, other: Set[Element]) -> UniqueSet[Element]:
        return operations.difference(self, other)

    def to_list(self) -> list[Element]:
        return operations.to_list(self)

    def to_dict(self) -> dict[Element, Element]:
        return operations.to_dict(self)
