#!/usr/bin/env python3
"""
Basic usage examples for lazystream.
"""

import logging
import random
from lazystream import Stream, StreamConfig, StreamExhausted, SourceExhausted


def example_infinite_streams():
    """Example: Describe infinite sequences and take what you need."""
    print("\n=== Infinite Streams Example ===")

    naturals = Stream.from_generator(1, lambda n: n + 1)
    print(f"First ten naturals: {naturals.limit(10).to_list()}")
    print(f"Skip 2, take 5: {naturals.skip(2).limit(5).to_list()}")

    squares = naturals.map(lambda n: n * n)
    print(f"Even squares: {squares.filter(lambda n: n % 2 == 0).limit(5).to_list()}")

    dice = Stream.from_supplier(lambda: random.randint(1, 6))
    print(f"Five dice rolls: {dice.limit(5).to_list()}")


def example_primes():
    """Example: Sieve of Eratosthenes over an infinite stream."""
    print("\n=== Prime Sieve Example ===")

    def sieve(s):
        p = s.first()
        return Stream.create(lambda: p, lambda: sieve(s.remain().filter(lambda n: n % p != 0)))

    primes = sieve(Stream.from_generator(2, lambda n: n + 1))
    print(f"First 15 primes: {primes.limit(15).to_list()}")


def example_combinators():
    """Example: Combine finite streams."""
    print("\n=== Combinators Example ===")

    odds = Stream.of(1, 3, 5, 7)
    evens = Stream.of(2, 4, 6, 8)
    print(f"concat: {odds.concat(evens).to_list()}")
    print(f"interleave: {odds.interleave(evens).to_list()}")
    print(f"flat_map: {Stream.of(10, 20).flat_map(lambda n: Stream.of(n + 1, n + 2, n + 3)).to_list()}")
    print(f"to_map: {Stream.of(1, 2, 3).to_map(lambda n: n, str)}")


def example_single_pass_source():
    """Example: Streams over iterators are single-pass."""
    print("\n=== Single-pass Source Example ===")

    lines = Stream.from_iterator(iter(["alpha", "beta", "gamma"]))
    print(f"First traversal: {lines.to_list()}")

    try:
        lines.first()
    except SourceExhausted:
        print("Second read fails: the iterator is already exhausted")

    try:
        Stream.empty().first()
    except StreamExhausted as e:
        print(f"Empty stream: {e}")


def example_memory_monitoring():
    """Example: Memory pressure logging during long traversals."""
    print("\n=== Memory Monitoring Example ===")

    StreamConfig.set_defaults(memory_check_interval=50_000)
    total = Stream.from_range(1, 200_001).collect(0, lambda acc, n: acc + n)
    print(f"Sum of 1..200000: {total}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    example_infinite_streams()
    example_primes()
    example_combinators()
    example_single_pass_source()
    example_memory_monitoring()
