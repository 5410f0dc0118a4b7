"""Lazy head/tail streams."""

from lazystream.streams.stream import (
    Stream,
    StreamExhausted,
    EMPTY,
)
from lazystream.streams.operators import (
    concat,
    interleave,
    Collector,
    ListCollector,
    SetCollector,
    MapCollector,
    CountCollector,
)
from lazystream.streams.sources import (
    IterationSource,
    IteratorSource,
    SourceExhausted,
)

__all__ = [
    "Stream",
    "StreamExhausted",
    "EMPTY",
    "concat",
    "interleave",
    "Collector",
    "ListCollector",
    "SetCollector",
    "MapCollector",
    "CountCollector",
    "IterationSource",
    "IteratorSource",
    "SourceExhausted",
]
