from .types import *
from .exceptions import InvalidParameterError

Number = Union[int, float]


def range_of(begin: Number, end: Optional[Number] = None, step: Optional[Number] = None) -> Iterator[Number]:
    """
    lazily yield numbers in [begin, end) by step.
    with a single argument the range is [0, begin). unlike the builtin range,
    begin, end and step may be floats.
    """
    start, stop = (0, begin) if end is None else (begin, end)
    increment = 1 if step is None else step
    if increment <= 0:
        raise InvalidParameterError('step', f"Step must be positive, got {increment}.")

    def generate():
        current = start
        while current < stop:
            yield current
            current = current + increment

    return generate()
