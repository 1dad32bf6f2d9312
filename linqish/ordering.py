"""
hierarchical ordering: order_by groups a sequence into runs of equal key,
then_by re-groups every leaf group one level deeper, and to_list flattens
the result back by exactly as many levels as grouping passes were applied.

    >>> to_list(then_by(order_by([4, 3, 6, 2, 1, 5], lambda x: x % 2), lambda x: x))
    [2, 4, 6, 1, 3, 5]
"""
import logging
from .types import *
from .lists import sort_by
from .exceptions import InvalidParameterError, require

logger = logging.getLogger(__name__)

# marks "no previous key" so that None is usable as an ordinary key
_NO_KEY = object()


def _key_kind(key: Any) -> type:
    # bools never group with numbers; ints and floats share one numeric kind
    if isinstance(key, bool):
        return bool
    if isinstance(key, (int, float)):
        return float
    return type(key)


def _same_key(previous: Any, key: Any) -> bool:
    return previous is not _NO_KEY and _key_kind(key) is _key_kind(previous) and key == previous


def _sort_key(pair: Tuple[Any, Any]) -> Tuple[bool, Any]:
    # None keys sort first; equal tuple members are matched with == so None is never compared with <
    key = pair[0]
    return key is not None, key


def _ensure_grouped(value: Any, param_name: str) -> 'GroupedSequence[Any]':
    if not isinstance(value, GroupedSequence):
        raise InvalidParameterError(
            param_name, f"Expected a GroupedSequence produced by order_by, got {type(value).__name__}.")
    if value.depth < 1:
        raise InvalidParameterError(param_name, f"Ordering depth must be at least 1, got {value.depth}.")
    return value


def order_by(sequence: Iterable[T], evaluator: Evaluator[T, K]) -> GroupedSequence[T]:
    """
    sort by ascending evaluated key and split into groups of equal key.
    the source is not mutated and the evaluator runs once per element.
    """
    require(evaluator, 'evaluator')
    keyed = sort_by([(evaluator(item), item) for item in sequence], _sort_key)

    groups: List[List[T]] = []
    previous = _NO_KEY
    for key, item in keyed:
        if _same_key(previous, key):
            groups[-1].append(item)
        else:
            groups.append([item])
        previous = key

    logger.debug(f"order_by: {len(keyed)} items into {len(groups)} groups")
    return GroupedSequence(groups, depth=1)


def _regroup_leaves(groups: List[Any], level: int, evaluator: Evaluator[T, K]) -> None:
    """replace every group `level` levels down with its own order_by groups"""
    for index, group in enumerate(groups):
        if level == 1:
            groups[index] = order_by(group, evaluator).groups
        else:
            _regroup_leaves(group, level - 1, evaluator)


def then_by(grouped: GroupedSequence[T], evaluator: Evaluator[T, K]) -> GroupedSequence[T]:
    """
    refine an ordering in place: every leaf group is ordered by the evaluator
    and replaced by the resulting sub-groups. returns the same object, one
    level deeper.
    """
    _ensure_grouped(grouped, 'grouped')
    require(evaluator, 'evaluator')
    _regroup_leaves(grouped.groups, grouped.depth, evaluator)
    grouped.depth += 1
    logger.debug(f"then_by: ordering depth is now {grouped.depth}")
    return grouped


def _flatten(items: List[Any], level: int) -> List[Any]:
    if not level:
        return list(items)
    flat = []
    for child in items:
        flat.extend(_flatten(child, level - 1))
    return flat


def to_list(grouped: GroupedSequence[T]) -> List[T]:
    """concatenate all leaf groups, in order, into one flat list"""
    _ensure_grouped(grouped, 'grouped')
    return _flatten(grouped.groups, grouped.depth)
