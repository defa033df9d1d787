"""Least-recently-set cache driven by a small command language."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from collections import OrderedDict
from collections.abc import Iterable, Iterator


class Cache(ABC):
    """Integer key/value cache interface."""

    @abstractmethod
    def set(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def get(self, key: int) -> int:
        """Return the value for ``key``, or -1 when absent."""


class LRUCache(Cache):
    """Cache that evicts the entry set least recently once it is over capacity.

    Reading an entry does not refresh it; only setting does. A capacity of
    zero stores nothing.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def set(self, key: int, value: int) -> None:
        if self.capacity == 0:
            return
        self._entries[key] = value
        self._entries.move_to_end(key)
        while len(self._entries) > self.capacity:
            self._entries.popitem(last=False)

    def get(self, key: int) -> int:
        return self._entries.get(key, -1)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


def _take_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def run_commands(lines: Iterable[str]) -> list[int]:
    """Run ``n capacity`` followed by ``n`` get/set commands; return the get results."""
    tokens = iter(" ".join(lines).split())
    count = _take_int(tokens)
    cache = LRUCache(_take_int(tokens))
    results: list[int] = []
    for _ in range(count):
        command = next(tokens, None)
        if command is None:
            break
        if command == "get":
            results.append(cache.get(_take_int(tokens)))
        elif command == "set":
            key = _take_int(tokens)
            cache.set(key, _take_int(tokens))
    return results


def main(argv: list[str] | None = None) -> int:
    """Read cache commands from standard input and print each lookup."""
    parser = argparse.ArgumentParser(
        prog="lru-cache", description="Run cache commands read from standard input."
    )
    parser.parse_args(argv)
    for value in run_commands(sys.stdin):
        print(value)
    return 0