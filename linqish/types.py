from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Evaluator = Callable[[T], K]
EqualityComparer = Callable[[T, T], bool]


class GroupedSequence(Generic[T]):
    """
    nested groups produced by order_by/then_by, paired with the number of
    grouping passes applied so far. flattening stops after exactly `depth`
    levels, so list-valued elements of the source data stay intact.
    """

    def __init__(self, groups: List[Any], depth: int = 1):
        self.groups = groups
        self.depth = depth

    @property
    def is_empty(self) -> bool: return not self.groups

    def __iter__(self) -> Iterator[Any]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def __getitem__(self, index):
        return self.groups[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, GroupedSequence):
            return self.depth == other.depth and self.groups == other.groups
        return NotImplemented

    def __repr__(self) -> str:
        return f"GroupedSequence(groups={len(self.groups)}, depth={self.depth})"
