"""
Lazy, recursively defined streams.

A stream is either the shared ``EMPTY`` sentinel or a pair of thunks: one
producing the first element and one producing the remaining stream.
Neither thunk runs until asked for, and nothing is cached, so every call to
``first()`` or ``remain()`` re-runs the underlying computation.
"""

from typing import (
    Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional,
    Sequence, Set, TypeVar, Union
)

from lazystream.memory import TraversalWatch
from lazystream.streams.operators import (
    Collector, ListCollector, SetCollector, MapCollector, CountCollector,
    concat, interleave
)
from lazystream.streams.sources import IterationSource, as_source

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')


class StreamExhausted(RuntimeError):
    """Raised when an element is requested from the empty stream."""


def _ended():
    raise StreamExhausted("stream already ended")


class Stream(Generic[T]):
    """
    A lazy stream of elements, produced on demand.
    """

    def __init__(self, first: Callable[[], T], remain: Callable[[], 'Stream[T]']):
        """
        Initialize stream.

        Args:
            first: Thunk producing the first element
            remain: Thunk producing the stream of remaining elements
        """
        self._first = first
        self._remain = remain

    def first(self) -> T:
        """Evaluate and return the first element."""
        return self._first()

    def remain(self) -> 'Stream[T]':
        """Evaluate and return the stream of remaining elements."""
        return self._remain()

    def end(self) -> bool:
        """True only for the empty sentinel; never looks ahead."""
        return self is EMPTY

    def __iter__(self) -> Iterator[T]:
        return StreamIterator(self)

    def __repr__(self) -> str:
        return "Stream(<empty>)" if self.end() else "Stream(<lazy>)"

    # Factory methods

    @classmethod
    def create(cls, first: Callable[[], T], remain: Callable[[], 'Stream[T]']) -> 'Stream[T]':
        """Wrap two thunks into a stream without invoking either."""
        return cls(first, remain)

    @staticmethod
    def empty() -> 'Stream[Any]':
        """Return the shared empty stream."""
        return EMPTY

    @classmethod
    def of(cls, *items: T) -> 'Stream[T]':
        """Create stream from the given values."""
        return cls.from_array(0, items)

    @classmethod
    def from_array(cls, start: int, items: Sequence[T]) -> 'Stream[T]':
        """Create stream over ``items`` beginning at index ``start``."""
        if start < 0:
            raise ValueError(f"start index must be non-negative, got {start}")
        if start >= len(items):
            return EMPTY
        return cls.create(lambda: items[start], lambda: cls.from_array(start + 1, items))

    @classmethod
    def from_range(cls, start: int, stop: Optional[int] = None, step: int = 1) -> 'Stream[int]':
        """Create stream of integers, with ``range()`` argument semantics."""
        if stop is None:
            start, stop = 0, start
        return cls.from_array(0, range(start, stop, step))

    @classmethod
    def from_iterator(cls, source: Union[IterationSource[T], Iterable[T]]) -> 'Stream[T]':
        """
        Create stream drawing from a single-pass source.

        Elements are drawn when a head thunk runs, not when the stream is
        built. The source is shared, so a second traversal of the result
        sees it already advanced.
        """
        source = as_source(source)
        if not source.has_next():
            return EMPTY
        return cls.create(source.next, lambda: cls.from_iterator(source))

    @classmethod
    def from_collection(cls, collection: Iterable[T]) -> 'Stream[T]':
        """Create stream over a fresh iterator of ``collection``."""
        return cls.from_iterator(iter(collection))

    @classmethod
    def from_supplier(cls, supplier: Callable[[], T]) -> 'Stream[T]':
        """Create infinite stream calling ``supplier`` for every element."""
        return cls.create(supplier, lambda: cls.from_supplier(supplier))

    @classmethod
    def from_generator(cls, initial: T, generator: Callable[[T], T]) -> 'Stream[T]':
        """Create infinite stream ``initial, generator(initial), ...``."""
        return cls.create(lambda: initial, lambda: cls.from_generator(generator(initial), generator))

    # Transformation operators

    def limit(self, n: int) -> 'Stream[T]':
        """Take at most the first n elements."""
        if n <= 0 or self.end():
            return EMPTY
        return self.create(self.first, lambda: self.remain().limit(n - 1))

    def skip(self, n: int) -> 'Stream[T]':
        """Drop the first n elements; negative n skips nothing."""
        s = self
        while not s.end() and n > 0:
            s = s.remain()
            n -= 1
        return s

    def map(self, mapper: Callable[[T], U]) -> 'Stream[U]':
        """Apply ``mapper`` to each element as it is read."""
        if self.end():
            return EMPTY
        return self.create(lambda: mapper(self.first()), lambda: self.remain().map(mapper))

    def filter(self, predicate: Callable[[T], bool]) -> 'Stream[T]':
        """
        Keep only elements matching ``predicate``.

        The source is advanced eagerly up to the next match, so filtering an
        infinite stream with no further matches never returns.
        """
        s = self
        while not s.end():
            item = s.first()
            if predicate(item):
                matched = s
                return self.create(lambda: item, lambda: matched.remain().filter(predicate))
            s = s.remain()
        return EMPTY

    def concat(self, other: 'Stream[T]') -> 'Stream[T]':
        """Append ``other`` after this stream."""
        return concat(self, other)

    def interleave(self, other: 'Stream[T]') -> 'Stream[T]':
        """Alternate elements with ``other``, starting with this stream."""
        return interleave(self, other)

    def flat_map(self, mapper: Callable[[T], 'Stream[U]']) -> 'Stream[U]':
        """
        Concatenate the streams produced by ``mapper`` for each element.

        The source is folded eagerly, so it must be finite.
        """
        return self.collect(EMPTY, lambda s, item: s.concat(mapper(item)))

    # Terminal operators

    def collect(self, initial: U, accumulator: Callable[[U, T], U]) -> U:
        """Left fold from the first element to the end of the stream."""
        watch = TraversalWatch("collect")
        result = initial
        s = self
        try:
            while not s.end():
                result = accumulator(result, s.first())
                s = s.remain()
                watch.tick()
        finally:
            watch.done()
        return result

    def collect_into(self, collector: Collector[T, U]) -> U:
        """Fold the stream with a ``Collector``."""
        return self.collect(collector.supply(), collector.accumulate)

    def to_list(self) -> List[T]:
        """Collect all elements into a list, in order."""
        return self.collect_into(ListCollector())

    def to_set(self) -> Set[T]:
        """Collect distinct elements into a set."""
        return self.collect_into(SetCollector())

    def to_map(self, key_func: Callable[[T], K], value_func: Callable[[T], V]) -> Dict[K, V]:
        """Collect into a dict; later keys overwrite earlier ones."""
        return self.collect_into(MapCollector(key_func, value_func))

    def count(self) -> int:
        """Count elements."""
        return self.collect_into(CountCollector())

    def for_each(self, consumer: Callable[[T], Any]) -> None:
        """Apply ``consumer`` to each element in order."""
        watch = TraversalWatch("for_each")
        s = self
        try:
            while not s.end():
                consumer(s.first())
                s = s.remain()
                watch.tick()
        finally:
            watch.done()


class StreamIterator(Iterator[T]):
    """
    Python iterator over a stream.

    Each step reads the current head once, then moves to the tail. Errors
    raised by thunks reach the caller unchanged.
    """

    def __init__(self, stream: Stream[T]):
        self._stream = stream

    def __iter__(self) -> 'StreamIterator[T]':
        return self

    def __next__(self) -> T:
        if self._stream.end():
            raise StopIteration
        item = self._stream.first()
        self._stream = self._stream.remain()
        return item


EMPTY: Stream[Any] = Stream(_ended, _ended)
