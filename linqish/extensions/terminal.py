from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..exceptions import (
    IndexOutOfBoundsError, MultipleItemsMatchError, NoItemFoundError, require
)

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _default_equality(a: Any, b: Any) -> bool:
    return a == b


class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- conversions ---

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    # --- quantifiers ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._enumerable._get_data())
        return sum(1 for x in self._enumerable._get_data() if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        data = self._enumerable._get_data()
        if predicate is None: return len(data) > 0
        return any(predicate(x) for x in data)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. true for an empty sequence."""
        require(predicate, 'predicate')
        return all(predicate(x) for x in self._enumerable._get_data())

    def contains(self, element: T, equality: Optional[EqualityComparer[T]] = None) -> bool:
        """check membership using equality (== by default)"""
        equals = equality or _default_equality
        return any(equals(x, element) for x in self._enumerable._get_data())

    def sequence_equal(self, other: Iterable[T], comparator: Optional[EqualityComparer[T]] = None) -> bool:
        """same length and pairwise equal under comparator"""
        data = self._enumerable._get_data()
        other_data = list(other)
        if len(data) != len(other_data): return False
        equals = comparator or _default_equality
        return all(equals(a, b) for a, b in zip(data, other_data))

    # --- element operators ---

    def element_at(self, index: int) -> T:
        """element at a zero-based index; negative indexes are out of bounds"""
        require(index, 'index')
        data = self._enumerable._get_data()
        if index < 0 or index >= len(data):
            raise IndexOutOfBoundsError(index)
        return data[index]

    def element_at_or_default(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """element at index, or default when out of bounds"""
        require(index, 'index')
        try: return self.element_at(index)
        except IndexOutOfBoundsError: return default

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element matching predicate"""
        for item in self._enumerable._get_data():
            if predicate is None or predicate(item): return item
        raise NoItemFoundError()

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except NoItemFoundError: return default

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element matching predicate"""
        for item in reversed(self._enumerable._get_data()):
            if predicate is None or predicate(item): return item
        raise NoItemFoundError()

    def last_or_default(self, predicate: Optional[Predicate[T]] = None,
                        default: Optional[T] = None) -> Optional[T]:
        """get last element or default"""
        try: return self.last(predicate)
        except NoItemFoundError: return default

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get the only matching element, erroring if not exactly one"""
        found, result = False, None
        for item in self._enumerable._get_data():
            if predicate is None or predicate(item):
                if found: raise MultipleItemsMatchError()
                found, result = True, item
        if not found: raise NoItemFoundError()
        return result

    def single_or_default(self, predicate: Optional[Predicate[T]] = None,
                          default: Optional[T] = None) -> Optional[T]:
        """
        get the only matching element, or default when nothing matches.
        more than one match is still an error.
        """
        try: return self.single(predicate)
        except NoItemFoundError: return default
