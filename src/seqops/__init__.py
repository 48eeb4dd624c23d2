from seqops.exceptions import (
    BaseSequenceError,
    CallbackError,
    IndexSourceError,
    PredicateError,
    ProducerError,
)
from seqops.index_sources import NumpyIndexSource, PythonIndexSource
from seqops.initializing import repeating
from seqops.interfaces import IndexSource, ResizableSequence
from seqops.removal import remove_first, remove_random
from seqops.rotation import rotate, rotated
from seqops.slicing import keep_while, skip_while, split_point, take_while
