import logging
from collections.abc import Callable
from typing import Any

from seqops.exceptions import IndexSourceError, PredicateError
from seqops.index_sources import PythonIndexSource
from seqops.interfaces.index_source import IndexSource
from seqops.interfaces.sequence import ResizableSequence

LOGGER = logging.getLogger(__name__)

_DEFAULT_INDEX_SOURCE = PythonIndexSource()


def remove_first(seq: ResizableSequence[Any], predicate: Callable[[Any], object]) -> Any:  # noqa: ANN401
    """Remove and return the first element of `seq` satisfying `predicate`, or return `None` if there is none.

        >>> seq = [1, 2, 2, 3, 4, 2, 5]
        >>> remove_first(seq, lambda x: x % 2 == 0)
        2
        >>> seq
        [1, 2, 3, 4, 2, 5]

    If `predicate` raises, a `PredicateError` is raised and nothing is removed.
    """
    for index, element in enumerate(seq):
        try:
            matches = predicate(element)
        except Exception as e:
            LOGGER.debug("Predicate failed on element at index %d, nothing removed", index)
            msg = f"Predicate failed on element at index {index}"
            raise PredicateError(msg, index) from e

        if matches:
            return seq.pop(index)

    LOGGER.debug("No element out of %d matched, nothing removed", len(seq))
    return None


def remove_random(seq: ResizableSequence[Any], index_source: IndexSource | None = None) -> Any:  # noqa: ANN401
    """Remove and return a uniformly chosen element of `seq`, or return `None` if `seq` is empty."""
    length = len(seq)
    if length == 0:
        return None

    if index_source is None:
        index_source = _DEFAULT_INDEX_SOURCE

    index = index_source(length)
    if not 0 <= index < length:
        msg = f"Index source returned {index}, expected a value in [0, {length})"
        raise IndexSourceError(msg)

    return seq.pop(index)
