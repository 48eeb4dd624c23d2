from typing import Protocol


class IndexSource(Protocol):
    def __call__(self, upper: int) -> int:
        """Return an integer uniformly distributed over `[0, upper)`. `upper` is always positive."""
