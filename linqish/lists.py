from .types import *
from .exceptions import IndexOutOfBoundsError, InvalidParameterError, require


def sort_by(sequence: List[T], evaluator: Evaluator[T, K]) -> List[T]:
    """stable in-place ascending sort by evaluated key. returns the same list."""
    require(evaluator, 'evaluator')
    # python's sort is stable and compares keys with <, so any orderable key works
    sequence.sort(key=evaluator)
    return sequence


def remove(sequence: List[T], start: int, stop: Optional[int] = None) -> List[T]:
    """
    removes the inclusive index range [start, stop] in place.
    a single index is removed when stop is omitted. returns the same list.
    """
    require(start, 'start')
    stop = start if stop is None else stop
    for index in (start, stop):
        if index < 0 or index >= len(sequence):
            raise IndexOutOfBoundsError(index)
    if stop < start:
        raise InvalidParameterError('stop', f"Stop ({stop}) must not be before start ({start}).")
    del sequence[start:stop + 1]
    return sequence
