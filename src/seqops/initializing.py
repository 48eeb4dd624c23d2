import logging
from collections.abc import Callable
from typing import Any, TypeVar

from seqops.exceptions import ProducerError
from seqops.interfaces.sequence import ResizableSequence

LOGGER = logging.getLogger(__name__)

S = TypeVar("S", bound=ResizableSequence[Any])


def repeating(
    producer: Callable[[], Any],
    count: int,
    factory: Callable[[], S] = list,  # type: ignore[assignment]
) -> S:
    """Create a sequence of `count` elements, each one the result of a separate call of `producer`.

    The producer is called exactly `count` times, in order. It is not called at all if `count <= 0`, in which case an
    empty sequence is returned. If the producer raises, construction is abandoned and a `ProducerError` is raised
    instead; the partially built sequence is discarded.

        >>> repeating(lambda: "value", 3)
        ['value', 'value', 'value']
    """
    sequence = factory()
    for index in range(count):
        try:
            value = producer()
        except Exception as e:
            LOGGER.debug("Producer failed at index %d of %d, discarding %d produced elements", index, count, index)
            msg = f"Producer failed while creating element {index} of {count}"
            raise ProducerError(msg, index) from e

        sequence.append(value)

    return sequence
