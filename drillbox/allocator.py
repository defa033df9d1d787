"""Bump allocator over a fixed-size byte arena."""

from __future__ import annotations

ARENA_SIZE = 1 << 20


class OutOfMemoryError(MemoryError):
    """Raised when the arena cannot hold a requested block."""


class SmallAllocator:
    """Hands out consecutive slices of one arena; memory is never reused.

    Blocks are writable ``memoryview`` objects over the arena.
    """

    def __init__(self, size: int = ARENA_SIZE) -> None:
        if size < 1:
            raise ValueError(f"arena size must be positive, got {size}")
        self._memory = bytearray(size)
        self._view = memoryview(self._memory)
        self._next_free = 0

    @property
    def capacity(self) -> int:
        return len(self._memory)

    @property
    def used(self) -> int:
        return self._next_free

    def alloc(self, size: int) -> memoryview:
        """Reserve ``size`` bytes and return them as a block."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        if self._next_free + size >= len(self._memory):
            raise OutOfMemoryError(
                f"cannot allocate {size} bytes, {len(self._memory) - self._next_free} left"
            )
        start = self._next_free
        self._next_free += size
        return self._view[start:start + size]

    def realloc(self, block, size: int) -> memoryview:
        """Reserve a new block of ``size`` bytes holding the start of ``block``."""
        data = memoryview(block).cast("B")[:size].tobytes()
        fresh = self.alloc(size)
        fresh[:len(data)] = data
        return fresh

    def free(self, block: memoryview) -> None:
        """Release ``block`` so it can no longer be used.

        The arena space is not reclaimed; that happens only when the
        allocator itself is discarded.
        """
        if not isinstance(block, memoryview) or block.obj is not self._memory:
            raise ValueError("block was not allocated by this allocator")
        block.release()