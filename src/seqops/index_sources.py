from random import Random

import numpy as np


class PythonIndexSource:
    def __init__(self, seed: int | None = None) -> None:
        self._rng = Random(seed)

    def __call__(self, upper: int) -> int:
        return self._rng.randrange(upper)


class NumpyIndexSource:
    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)

    def __call__(self, upper: int) -> int:
        # builtin int rather than np.int64
        return int(self._rng.integers(upper))
