"""
Stream combinators and collectors.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, List, Set, TypeVar

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')


def concat(s1, s2):
    """
    Yield every element of ``s1``, then every element of ``s2``.

    If ``s1`` is already empty the result is ``s2`` itself.
    """
    if s1.end():
        return s2
    return s1.create(s1.first, lambda: concat(s1.remain(), s2))


def interleave(s1, s2):
    """
    Alternate elements of ``s1`` and ``s2``, starting with ``s1``.

    Once either side runs out, the rest of the other follows unchanged.
    """
    if s1.end():
        return s2
    return s1.create(s1.first, lambda: interleave(s2, s1.remain()))


class Collector(ABC, Generic[T, U]):
    """Base class for the accumulation step of a terminal fold."""

    @abstractmethod
    def supply(self) -> U:
        """Return a fresh initial accumulator."""
        pass

    @abstractmethod
    def accumulate(self, acc: U, item: T) -> U:
        """Fold one element into the accumulator."""
        pass


class ListCollector(Collector[T, List[T]]):
    """Collect elements in traversal order, keeping duplicates."""

    def supply(self) -> List[T]:
        return []

    def accumulate(self, acc: List[T], item: T) -> List[T]:
        acc.append(item)
        return acc


class SetCollector(Collector[T, Set[T]]):
    """Collect distinct elements."""

    def supply(self) -> Set[T]:
        return set()

    def accumulate(self, acc: Set[T], item: T) -> Set[T]:
        acc.add(item)
        return acc


class MapCollector(Collector[T, Dict[K, V]]):
    """Collect ``key_func(item) -> value_func(item)``; the last write wins."""

    def __init__(self, key_func: Callable[[T], K], value_func: Callable[[T], V]):
        self.key_func = key_func
        self.value_func = value_func

    def supply(self) -> Dict[K, V]:
        return {}

    def accumulate(self, acc: Dict[K, V], item: T) -> Dict[K, V]:
        acc[self.key_func(item)] = self.value_func(item)
        return acc


class CountCollector(Collector[Any, int]):
    """Count elements regardless of value."""

    def supply(self) -> int:
        return 0

    def accumulate(self, acc: int, item: Any) -> int:
        return acc + 1
