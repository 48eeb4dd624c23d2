from seqops.interfaces.index_source import IndexSource
from seqops.interfaces.sequence import ResizableSequence
