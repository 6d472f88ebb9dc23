from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from .exceptions import InvalidArgumentError, NotFoundError

__all__ = ('Set',)

T = TypeVar('T')


class Set(Generic[T]):
    """An unordered collection of unique elements.

    Elements only need to support ``==``; they do not have to be hashable.
    Membership is a linear scan over the elements in insertion order, which
    is also the order used for iteration and display. ``None`` is not a valid
    element.

    The set-algebra operations are static and never modify their operands::

        a = Set([1, 2, 3])
        b = Set([3, 4])
        Set.union(a, b)  # Set({1, 2, 3, 4})
    """

    __slots__ = ('_items',)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for item in iterable:
            self.add(item)

    @property
    def count(self) -> int:
        """Number of elements in the set."""
        return len(self._items)

    # -- Mutation --------------------------------------------------------------

    def add(self, item: T) -> None:
        """Add `item` unless an equal element is already present.

        Raises:
            InvalidArgumentError: if `item` is None.
        """
        if item is None:
            raise InvalidArgumentError.for_none('item')
        if item not in self._items:
            self._items.append(item)

    def remove(self, item: T) -> None:
        """Remove `item` from the set.

        Raises:
            InvalidArgumentError: if `item` is None.
            NotFoundError: if no element equals `item`.
        """
        if item is None:
            raise InvalidArgumentError.for_none('item')
        if item not in self._items:
            raise NotFoundError(item)
        self._items.remove(item)

    # -- Set algebra -----------------------------------------------------------

    @staticmethod
    def union(a: Set[T], b: Set[T]) -> Set[T]:
        """Return a new set with the elements of `a` followed by the new elements of `b`."""
        _check_operands(a, b)
        result: Set[T] = Set()
        result._items = _distinct([*a._items, *b._items])
        return result

    @staticmethod
    def intersection(a: Set[T], b: Set[T]) -> Set[T]:
        """Return a new set with the elements present in both `a` and `b`.

        The smaller set drives the scan (`b` on a tie), so the result follows
        the order of that set.
        """
        _check_operands(a, b)
        if a.count < b.count:
            driver, other = a, b
        else:
            driver, other = b, a

        result: Set[T] = Set()
        for item in driver._items:
            if item in other._items:
                result.add(item)
        return result

    @staticmethod
    def difference(a: Set[T], b: Set[T]) -> Set[T]:
        """Return a new set with the elements present in exactly one of `a` and `b`.

        This is the symmetric difference: elements of `a` missing from `b`,
        then elements of `b` missing from `a`.
        """
        _check_operands(a, b)
        result: Set[T] = Set()
        for item in a._items:
            if item not in b._items:
                result.add(item)
        for item in b._items:
            if item not in a._items:
                result.add(item)
        result._items = _distinct(result._items)
        return result

    @staticmethod
    def subset(a: Set[T], b: Set[T]) -> bool:
        """Return True if every element of `a` is also in `b`."""
        _check_operands(a, b)
        return all(item in b._items for item in a._items)

    # -- Python protocols ------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        if item is None:
            return False
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.count == other.count and all(item in other._items for item in self._items)

    def __or__(self, other: Any) -> Set[T]:
        if not isinstance(other, Set):
            return NotImplemented
        return Set.union(self, other)

    def __and__(self, other: Any) -> Set[T]:
        if not isinstance(other, Set):
            return NotImplemented
        return Set.intersection(self, other)

    def __xor__(self, other: Any) -> Set[T]:
        if not isinstance(other, Set):
            return NotImplemented
        return Set.difference(self, other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return Set.subset(self, other)

    def __repr__(self) -> str:
        if not self._items:
            return f'{type(self).__name__}()'
        return f'{type(self).__name__}({self})'

    def __str__(self) -> str:
        return '{' + ', '.join(map(repr, self._items)) + '}'


def _check_operands(a: Any, b: Any) -> None:
    for name, operand in (('a', a), ('b', b)):
        if operand is None:
            raise InvalidArgumentError.for_none(name)
        if not isinstance(operand, Set):
            raise TypeError(f'{name} must be a Set, not {type(operand).__name__}')


def _distinct(items: list[T]) -> list[T]:
    # keeps the first of each group of equal items, order preserved
    seen: list[T] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen
