"""
Single-pass iteration sources consumed by ``Stream.from_iterator``.

A source answers "is there another element?" without consuming it and
hands out elements one at a time. Consumption is destructive: a stream
built over a source shares the source's cursor, so traversing it twice
sees the source already advanced.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar('T')

_NOTHING = object()


class SourceExhausted(LookupError):
    """Raised when an element is taken from a source that has none left."""


class IterationSource(ABC, Generic[T]):
    """Base class for external single-pass sources."""

    @abstractmethod
    def has_next(self) -> bool:
        """Return True if ``next()`` would produce an element."""
        pass

    @abstractmethod
    def next(self) -> T:
        """Consume and return the next element."""
        pass


class IteratorSource(IterationSource[T]):
    """Adapt a Python iterable or iterator to the ``IterationSource`` protocol.

    Python iterators only signal exhaustion by raising ``StopIteration``,
    so ``has_next()`` pulls one element ahead and holds it until ``next()``
    hands it out.
    """

    def __init__(self, iterable: Iterable[T]):
        self._iterator: Iterator[T] = iter(iterable)
        self._buffered = _NOTHING

    def has_next(self) -> bool:
        if self._buffered is _NOTHING:
            self._buffered = next(self._iterator, _NOTHING)
        return self._buffered is not _NOTHING

    def next(self) -> T:
        if not self.has_next():
            raise SourceExhausted("iteration source is exhausted")
        item, self._buffered = self._buffered, _NOTHING
        return item

    def __repr__(self):
        return f"IteratorSource({self._iterator!r})"


def as_source(source) -> IterationSource:
    """Return ``source`` unchanged if it is already an ``IterationSource``."""
    if isinstance(source, IterationSource):
        return source
    if not hasattr(source, '__iter__'):
        raise TypeError("Source must be iterable or an IterationSource")
    return IteratorSource(source)
