from collections.abc import Iterable, Iterator
from typing import Generic, Protocol, Self, TypeVar

T = TypeVar("T")


class ResizableSequence(Protocol, Generic[T]):
    """Capability set required by the algorithms in this package.

    `list`, `collections.UserList`, `bytearray` and `array.array` all satisfy it structurally.
    """

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[T]: ...

    def __getitem__(self, index: slice, /) -> Self: ...

    def __delitem__(self, index: int | slice, /) -> None: ...

    def __setitem__(self, index: slice, values: Iterable[T], /) -> None: ...

    def append(self, value: T, /) -> None: ...

    def extend(self, values: Iterable[T], /) -> None: ...

    def pop(self, index: int = -1, /) -> T: ...
