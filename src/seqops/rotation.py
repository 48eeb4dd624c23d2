import logging
from copy import copy
from typing import Any, TypeVar

from seqops.interfaces.sequence import ResizableSequence

LOGGER = logging.getLogger(__name__)

S = TypeVar("S", bound=ResizableSequence[Any])


def rotate(seq: S, places: int) -> S:
    """Rotate `seq` in place by `places` and return it.

    A positive amount moves the last `places` elements to the front, a negative amount moves the first `-places`
    elements to the back:

        >>> rotate([1, 2, 3, 4], 1)
        [4, 1, 2, 3]
        >>> rotate([1, 2, 3, 4], -1)
        [2, 3, 4, 1]

    Amounts with an absolute value of at least `len(seq)` wrap around. Rotating an empty sequence is a no-op.
    """
    if places == 0:
        return seq

    length = len(seq)
    if length == 0:
        LOGGER.debug("Ignoring rotation by %d of an empty sequence", places)
        return seq

    # number of elements that move from the end to the front, in [0, length)
    shift = places % length
    if shift == 0:
        return seq

    # only buffer the shorter of the two spans that swap places
    if shift <= length - shift:
        tail = seq[length - shift :]
        del seq[length - shift :]
        seq[0:0] = tail
    else:
        head = seq[: length - shift]
        del seq[: length - shift]
        seq.extend(head)

    return seq


def rotated(seq: S, places: int) -> S:
    """Return a rotated copy of `seq`, see `rotate`. `seq` itself is left unchanged."""
    return rotate(copy(seq), places)
