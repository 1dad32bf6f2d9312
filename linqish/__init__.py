"""
linqish: linq-style queries over python sequences.

    >>> from linqish import P
    >>> P([4, 3, 6, 2, 1, 5]).order_by(lambda x: x % 2).then_by(lambda x: x).to_list()
    [2, 4, 6, 1, 3, 5]
"""

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    linqish,
    P
)

# expose the ordering engine
from .ordering import order_by, then_by, to_list

# free-function helper modules
from . import generators, lists, strings

# expose supporting data classes
from .types import GroupedSequence

from .exceptions import (
    LinqishError,
    RequiredParameterError,
    IndexOutOfBoundsError,
    InvalidParameterError,
    MultipleItemsMatchError,
    NoItemFoundError
)

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "linqish",
    "P",
    "order_by",
    "then_by",
    "to_list",
    "generators",
    "lists",
    "strings",
    "GroupedSequence",
    "LinqishError",
    "RequiredParameterError",
    "IndexOutOfBoundsError",
    "InvalidParameterError",
    "MultipleItemsMatchError",
    "NoItemFoundError"
]
