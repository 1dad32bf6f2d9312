from __future__ import annotations
import inspect
import typing
from itertools import takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable


def _with_index(predicate: Callable[..., bool]) -> Callable[[Tuple[int, T]], bool]:
    """adapt a predicate to (index, item) pairs, passing the index only when it takes two parameters"""
    try:
        wants_index = len(inspect.signature(predicate).parameters) >= 2
    except (TypeError, ValueError):  # builtins without an introspectable signature
        wants_index = False
    if wants_index:
        return lambda pair: predicate(pair[1], pair[0])
    return lambda pair: predicate(pair[1])


class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: [x for x in self._get_data() if predicate(x)])

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: [selector(x) for x in self._get_data()])

    def order_by(self: 'Enumerable[T]', evaluator: Evaluator[T, K]) -> 'OrderedEnumerable[T]':
        """group elements into ascending runs of equal key"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self._get_data, [evaluator])

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._get_data()[:max(count, 0)])

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._get_data()[max(count, 0):])

    def take_while(self: 'Enumerable[T]', predicate: Callable[..., bool]) -> 'Enumerable[T]':
        """
        take elements while predicate is true.
        the predicate receives (element, index) when it accepts two parameters.
        """
        from ..enumerable import Enumerable
        def take_data():
            pairs = takewhile(_with_index(predicate), enumerate(self._get_data()))
            return [item for _, item in pairs]
        return Enumerable(take_data)

    def skip_while(self: 'Enumerable[T]', predicate: Callable[..., bool]) -> 'Enumerable[T]':
        """
        skip elements while predicate is true, then yield the rest.
        the predicate receives (element, index) when it accepts two parameters.
        """
        from ..enumerable import Enumerable
        def skip_data():
            pairs = dropwhile(_with_index(predicate), enumerate(self._get_data()))
            return [item for _, item in pairs]
        return Enumerable(skip_data)

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(reversed(self._get_data())))
