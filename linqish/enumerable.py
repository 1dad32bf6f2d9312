from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from . import ordering

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.stats import StatsAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a linq-inspired, lazily evaluated sequence."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.stats = StatsAccessor(self)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        state = f"{len(self._cached_result)} items" if self._is_cached else "pending"
        return f"{type(self).__name__}({state})"

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """
    a sequence grouped by one or more evaluators. iterating it yields the nested
    groups; to_list() flattens them back into one ordered list.
    """

    def __init__(self, data_func: Callable[[], List[T]], evaluators: List[Evaluator[T, Any]]):
        super().__init__(self._grouped_data)
        self._source_func = data_func
        self._evaluators = evaluators
        self._grouped: Optional[GroupedSequence[T]] = None

    def grouped(self) -> GroupedSequence[T]:
        """
        the grouped sequence, built on first use by one order_by and a then_by per further evaluator.
        the object is shared with this enumerable: refining it with then_by also changes
        depth, iteration and to_list() here.
        """
        if self._grouped is None:
            first, *rest = self._evaluators
            grouped = ordering.order_by(self._source_func(), first)
            for evaluator in rest:
                ordering.then_by(grouped, evaluator)
            self._grouped = grouped
        return self._grouped

    def _grouped_data(self) -> List[Any]:
        return self.grouped().groups

    @property
    def depth(self) -> int:
        return self.grouped().depth

    def then_by(self, evaluator: Evaluator[T, K]) -> 'OrderedEnumerable[T]':
        """group every leaf group by a further key, one level deeper"""
        return OrderedEnumerable(self._source_func, self._evaluators + [evaluator])

    def to_list(self) -> List[T]:
        """flatten all groups into a single ordered list"""
        return ordering.to_list(self.grouped())

    def flatten(self) -> 'Enumerable[T]':
        """lazily flattened view, for chaining further operations"""
        return Enumerable(self.to_list)
