from __future__ import annotations
import typing
import numpy as np
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

Number = Union[int, float]


class StatsAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _get_values(self, selector: Optional[Selector[T, Number]] = None) -> List[Number]:
        """helper to extract numeric values for statistical operations."""
        if selector: return self._enumerable.select(selector).to.list()
        data = self._enumerable.to.list()
        if data and not all(isinstance(x, (int, float)) for x in data):
            raise TypeError("sequence contains non-numeric types for statistical operation.")
        return data

    @staticmethod
    def _total(values: List[Number]) -> Number:
        if not values: return 0
        try:
            if all(isinstance(x, int) for x in values):
                # object dtype keeps python ints, which never overflow
                return np.sum(np.asarray(values, dtype=object))
            result = np.sum(values)
            return result.item() if hasattr(result, 'item') else result
        except (TypeError, ValueError):
            return sum(values)

    def sum(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        """calc sum. 0 for an empty sequence."""
        return self._total(self._get_values(selector))

    def average(self, selector: Optional[Selector[T, Number]] = None) -> float:
        """calc average. nan for an empty sequence."""
        values = self._get_values(selector)
        if not values: return float('nan')
        return self._total(values) / len(values)

    def min(self, selector: Optional[Selector[T, Any]] = None) -> Optional[T]:
        """element with the smallest key, first one on ties. none when empty."""
        data = self._enumerable._get_data()
        if not data: return None
        return min(data, key=selector) if selector else min(data)

    def max(self, selector: Optional[Selector[T, Any]] = None) -> Optional[T]:
        """element with the largest key, first one on ties. none when empty."""
        data = self._enumerable._get_data()
        if not data: return None
        return max(data, key=selector) if selector else max(data)
