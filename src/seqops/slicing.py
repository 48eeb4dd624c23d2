"""Splitting a sequence at the first element that does not satisfy a predicate.

All operations scan from the start and evaluate the predicate at most once per element, stopping at the first element
for which it is falsy (the split point). If the predicate raises, a `PredicateError` is raised and the input sequence is
left unmodified, even for the mutating `keep_while`.
"""

import logging
from collections.abc import Callable
from copy import copy
from typing import Any, TypeVar

from seqops.exceptions import PredicateError
from seqops.interfaces.sequence import ResizableSequence

LOGGER = logging.getLogger(__name__)

S = TypeVar("S", bound=ResizableSequence[Any])


def split_point(seq: ResizableSequence[Any], predicate: Callable[[Any], object]) -> int:
    """Index of the first element for which `predicate` is falsy, or `len(seq)` if there is none."""
    index = 0
    for element in seq:
        try:
            satisfied = predicate(element)
        except Exception as e:
            LOGGER.debug("Predicate failed on element at index %d, aborting scan", index)
            msg = f"Predicate failed on element at index {index}"
            raise PredicateError(msg, index) from e

        if not satisfied:
            break
        index += 1

    return index


def keep_while(seq: S, predicate: Callable[[Any], object]) -> S:
    """Truncate `seq` in place to the leading elements satisfying `predicate`, and return it.

        >>> keep_while([0, 2, 4, 7], lambda x: x % 2 == 0)
        [0, 2, 4]
    """
    # the whole scan completes before anything is removed
    index = split_point(seq, predicate)
    del seq[index:]
    return seq


def take_while(seq: S, predicate: Callable[[Any], object]) -> S:
    """Return a new sequence of the leading elements of `seq` satisfying `predicate`.

        >>> take_while([0, 2, 4, 7, 6, 8], lambda x: x % 2 == 0)
        [0, 2, 4]
    """
    index = split_point(seq, predicate)
    taken = copy(seq)
    del taken[index:]
    return taken


def skip_while(seq: S, predicate: Callable[[Any], object]) -> S:
    """Return a new sequence of the elements of `seq` from the first one not satisfying `predicate` onwards.

        >>> skip_while([0, 2, 4, 7, 6, 8], lambda x: x % 2 == 0)
        [7, 6, 8]
    """
    index = split_point(seq, predicate)
    remaining = copy(seq)
    del remaining[:index]
    return remaining
