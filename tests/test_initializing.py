from array import array
from collections import UserList
from collections.abc import Callable
from itertools import count

import pytest

from seqops.exceptions import ProducerError
from seqops.index_sources import PythonIndexSource
from seqops.initializing import repeating


@pytest.fixture
def counter() -> Callable[[], int]:
    return count().__next__


def test_repeating_constant() -> None:
    assert repeating(lambda: "Value", 3) == ["Value", "Value", "Value"]


def test_repeating_calls_producer_in_order(counter: Callable[[], int]) -> None:
    assert repeating(counter, 3) == [0, 1, 2]
    # exactly 3 calls were made
    assert counter() == 3


@pytest.mark.parametrize("num", [0, -1, -10])
def test_repeating_non_positive_count(num: int) -> None:
    def producer() -> int:
        pytest.fail("producer must not be called")

    assert repeating(producer, num) == []


def test_repeating_no_memoization() -> None:
    index_source = PythonIndexSource(seed=0)
    values = repeating(lambda: index_source(1_000_000), 50)

    assert len(values) == 50
    assert len(set(values)) > 1


def test_repeating_with_factory(counter: Callable[[], int]) -> None:
    values = repeating(counter, 4, factory=UserList)
    assert type(values) is UserList
    assert values == UserList([0, 1, 2, 3])

    assert repeating(lambda: 7, 2, factory=lambda: array("b")) == array("b", [7, 7])


def test_repeating_producer_error(counter: Callable[[], int]) -> None:
    def producer() -> int:
        value = counter()
        if value == 2:
            msg = "out of values"
            raise RuntimeError(msg)
        return value

    with pytest.raises(ProducerError) as exc_info:
        repeating(producer, 5)

    assert exc_info.value.index == 2
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    # aborted immediately, no further calls after the failing one
    assert counter() == 3
