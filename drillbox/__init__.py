"""Small programming drills: puzzles, state machines, containers, a cache, an allocator and a pool simulation."""

__version__ = "0.1.0"