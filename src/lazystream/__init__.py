"""
lazystream: lazily evaluated, recursively defined streams.

A stream separates the description of a sequence from the production of
its values. Elements are computed one at a time on demand, so streams can
be infinite and operators compose without intermediate collections.
"""

from lazystream.config import StreamConfig
from lazystream.streams import (
    Stream,
    StreamExhausted,
    EMPTY,
    concat,
    interleave,
    IterationSource,
    IteratorSource,
    SourceExhausted,
)
from lazystream.memory import MemoryMonitor, MemoryPressureLevel, install_default_handlers

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "StreamConfig",
    "Stream",
    "StreamExhausted",
    "EMPTY",
    "concat",
    "interleave",
    "IterationSource",
    "IteratorSource",
    "MemoryMonitor",
    "MemoryPressureLevel",
]

# Log memory pressure seen during long terminal traversals
install_default_handlers()
