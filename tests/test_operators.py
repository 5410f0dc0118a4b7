#!/usr/bin/env python3
"""
Tests for stream combinators and collectors.
"""

import unittest
from lazystream import Stream, concat, interleave
from lazystream.streams import Collector, ListCollector, MapCollector


class TestConcat(unittest.TestCase):
    """Test sequential splicing."""

    def test_concat(self):
        """concat appends the second stream."""
        self.assertEqual(Stream.of(1, 2, 3, 4).concat(Stream.of(9, 8, 7)).to_list(),
                         [1, 2, 3, 4, 9, 8, 7])
        self.assertEqual(Stream.of(123, 456).concat(Stream.empty()).to_list(), [123, 456])

    def test_concat_empty_first_returns_second(self):
        """An empty left side yields the right side itself."""
        s2 = Stream.of("aaa", "bbb")
        self.assertIs(concat(Stream.empty(), s2), s2)
        self.assertEqual(Stream.empty().concat(s2).to_list(), ["aaa", "bbb"])

    def test_concat_two_empties(self):
        """concat of two empties is empty."""
        self.assertTrue(Stream.empty().concat(Stream.empty()).end())
        self.assertEqual(Stream.empty().concat(Stream.empty()).to_list(), [])

    def test_concat_infinite_left(self):
        """With an infinite left side the right side is never reached."""
        odds = Stream.from_generator(1, lambda n: n + 2)
        evens = Stream.from_generator(2, lambda n: n + 2)
        self.assertEqual(odds.concat(evens).limit(3).to_list(), [1, 3, 5])


class TestInterleave(unittest.TestCase):
    """Test alternation."""

    def test_interleave(self):
        """interleave alternates starting with the left side."""
        self.assertEqual(Stream.of(1, 3, 5, 7).interleave(Stream.of(2, 4, 6, 8)).to_list(),
                         [1, 2, 3, 4, 5, 6, 7, 8])

    def test_interleave_uneven(self):
        """Once one side runs out the other streams through."""
        self.assertEqual(Stream.of(2, 5).interleave(Stream.of(1, 3, 4)).to_list(), [2, 1, 5, 3, 4])
        self.assertEqual(Stream.of(3, 8, 5).interleave(Stream.of(2, 4)).to_list(), [3, 2, 8, 4, 5])

    def test_interleave_with_empty(self):
        """An empty side contributes nothing."""
        self.assertEqual(Stream.empty().interleave(Stream.of(1, 2, 3)).to_list(), [1, 2, 3])
        self.assertEqual(Stream.of(1, 2, 3).interleave(Stream.empty()).to_list(), [1, 2, 3])
        s2 = Stream.of(1)
        self.assertIs(interleave(Stream.empty(), s2), s2)

    def test_interleave_infinite(self):
        """Two infinite streams interleave lazily."""
        odds = Stream.from_generator(1, lambda n: n + 2)
        evens = Stream.from_generator(2, lambda n: n + 2)
        self.assertEqual(odds.interleave(evens).limit(4).to_list(), [1, 2, 3, 4])


class TestFlatMap(unittest.TestCase):
    """Test flattening."""

    def test_flat_map(self):
        """flat_map concatenates sub-streams in source order."""
        s1 = Stream.of(10, 20, 30).flat_map(lambda n: Stream.of(n + 1, n + 2, n + 3))
        self.assertEqual(s1.to_list(), [11, 12, 13, 21, 22, 23, 31, 32, 33])
        s2 = Stream.of(1, 2, 3).flat_map(lambda n: Stream.of(f"{n}a", f"{n}b"))
        self.assertEqual(s2.to_list(), ["1a", "1b", "2a", "2b", "3a", "3b"])

    def test_flat_map_two_elements(self):
        """flat_map over two elements."""
        s = Stream.of(10, 20).flat_map(lambda n: Stream.of(n + 1, n + 2, n + 3))
        self.assertEqual(s.to_list(), [11, 12, 13, 21, 22, 23])

    def test_flat_map_is_eager(self):
        """The mapper runs for every element when flat_map is called."""
        calls = []

        def mapper(n):
            calls.append(n)
            return Stream.of(n)

        Stream.of(1, 2, 3).flat_map(mapper)
        self.assertEqual(calls, [1, 2, 3])

    def test_flat_map_empty_results(self):
        """Empty sub-streams disappear."""
        s = Stream.of(1, 2, 3).flat_map(lambda n: Stream.of(n) if n != 2 else Stream.empty())
        self.assertEqual(s.to_list(), [1, 3])
        self.assertTrue(Stream.empty().flat_map(lambda n: Stream.of(n)).end())


class TestCollectors(unittest.TestCase):
    """Test collectors used by terminal operators."""

    def test_collect_into_custom_collector(self):
        """A custom Collector plugs into collect_into."""
        class Joiner(Collector):
            def supply(self):
                return []

            def accumulate(self, acc, item):
                acc.append(str(item))
                return acc

        parts = Stream.of(1, 2, 3).collect_into(Joiner())
        self.assertEqual("-".join(parts), "1-2-3")

    def test_collectors_supply_fresh_accumulators(self):
        """Each traversal starts from a new container."""
        collector = ListCollector()
        s = Stream.of(1, 2)
        first = s.collect_into(collector)
        second = s.collect_into(collector)
        self.assertEqual(first, [1, 2])
        self.assertEqual(second, [1, 2])
        self.assertIsNot(first, second)

    def test_map_collector(self):
        """MapCollector applies key and value functions."""
        collector = MapCollector(len, str.upper)
        self.assertEqual(Stream.of("a", "bb", "cc").collect_into(collector), {1: "A", 2: "CC"})

    def test_collector_is_abstract(self):
        """Collector cannot be instantiated directly."""
        with self.assertRaises(TypeError):
            Collector()


if __name__ == '__main__':
    unittest.main()
