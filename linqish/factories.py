import typing
from .types import *
from .generators import range_of

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: list(data))

def from_range(begin: Union[int, float], end: Optional[Union[int, float]] = None,
               step: Optional[Union[int, float]] = None) -> 'Enumerable[Union[int, float]]':
    """create enumerable over [begin, end) by step, or [0, begin) with one argument"""
    from .enumerable import Enumerable
    numbers = range_of(begin, end, step)
    return Enumerable(lambda: list(numbers))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [item] * count)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: [])

# --- aliases ---
linqish = from_iterable
P = from_iterable
