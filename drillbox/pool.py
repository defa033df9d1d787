"""Predator and prey fish moving around a rectangular pool."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

_PLACEMENT_ATTEMPTS = 100


class Direction(Enum):
    """Directions a fish can swim in."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


_OFFSETS = {
    Direction.UP: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
}

_CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


@dataclass(frozen=True)
class Coord:
    """A cell position in the pool."""

    x: int
    y: int

    def distance_to(self, other: Coord) -> int:
        """Manhattan distance to ``other``."""
        return abs(self.x - other.x) + abs(self.y - other.y)


def random_direction(rng: random.Random) -> Direction:
    """Pick one of the four directions at random."""
    return rng.choice(list(Direction))


def random_coord(m: int, n: int, rng: random.Random) -> Coord:
    """Pick a random cell in an ``m`` by ``n`` pool."""
    return Coord(rng.randrange(m), rng.randrange(n))


def step_move_to(
    pool: Pool,
    start: Coord,
    direction: Direction,
    occupied: Callable[[Coord], bool],
) -> Coord:
    """Return the cell one step from ``start``.

    The step goes in ``direction`` when that cell lies inside the pool and is
    not ``occupied``. Otherwise the direction turns clockwise and the step is
    tried again. After four failed tries ``start`` is returned.
    """
    m, n = pool.size
    for _ in range(len(_OFFSETS)):
        dx, dy = _OFFSETS[direction]
        x, y = start.x + dx, start.y + dy
        if 0 <= x < m and 0 <= y < n:
            target = Coord(x, y)
            if not occupied(target):
                return target
        direction = _CLOCKWISE[direction]
    return start


class _Fish:
    def __init__(self, coord: Coord, pool: Pool) -> None:
        self.coord = coord
        self.pool = pool

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.coord!r})"


class Victim(_Fish):
    """Prey that swims one step in a random direction, avoiding other fish."""

    def move(self) -> Coord:
        """Take one step and return the new position."""
        target = step_move_to(
            self.pool,
            self.coord,
            random_direction(self.pool.rng),
            self.pool.is_fish_at,
        )
        self.pool._relocate(self, target)
        return target


class Predator(_Fish):
    """Hunter that chases the nearest victim up to two steps and eats it on contact."""

    def _step(self, direction: Direction) -> Coord:
        target = step_move_to(self.pool, self.coord, direction, self.pool.is_predator_at)
        if target != self.coord and self.pool.is_fish_at(target):
            self.pool.remove_fish(target)
        self.pool._relocate(self, target)
        return target

    def move(self) -> Coord:
        """Take up to two steps and return the new position."""
        pool = self.pool
        if not pool.victims_empty():
            for _ in range(2):
                prey = pool.nearest_victim_to(self.coord)
                if prey is None:
                    break
                if self.coord.x < prey.x:
                    direction = Direction.RIGHT
                elif self.coord.x > prey.x:
                    direction = Direction.LEFT
                elif self.coord.y < prey.y:
                    direction = Direction.UP
                else:
                    direction = Direction.DOWN
                before = pool.victim_count
                self._step(direction)
                if pool.victim_count < before:
                    break
            return self.coord
        for _ in range(2):
            self._step(random_direction(pool.rng))
        return self.coord


class Pool:
    """An ``m`` by ``n`` grid where each cell holds at most one fish."""

    def __init__(self, m: int, n: int, rng: random.Random | None = None) -> None:
        if m < 1 or n < 1:
            raise ValueError(f"pool size must be positive, got {m}x{n}")
        self._cells: list[list[_Fish | None]] = [[None] * n for _ in range(m)]
        self.victims: list[Victim] = []
        self.predators: list[Predator] = []
        self.rng = rng if rng is not None else random.Random()

    @property
    def size(self) -> tuple[int, int]:
        return len(self._cells), len(self._cells[0])

    @property
    def victim_count(self) -> int:
        return len(self.victims)

    @property
    def predator_count(self) -> int:
        return len(self.predators)

    def _check(self, coord: Coord) -> None:
        m, n = self.size
        if not (0 <= coord.x < m and 0 <= coord.y < n):
            raise IndexError(f"{coord} lies outside a {m}x{n} pool")

    def _free_cells(self) -> list[Coord]:
        m, n = self.size
        return [
            Coord(x, y)
            for x in range(m)
            for y in range(n)
            if self._cells[x][y] is None
        ]

    def _place_new(self, number: int, kind: type[_Fish]) -> None:
        if number < 0:
            raise ValueError(f"number of fish must not be negative, got {number}")
        free = len(self._free_cells())
        if number > free:
            raise ValueError(f"cannot place {number} fish, only {free} free cells")
        m, n = self.size
        for _ in range(number):
            for _ in range(_PLACEMENT_ATTEMPTS):
                coord = random_coord(m, n, self.rng)
                if not self.is_fish_at(coord):
                    break
            else:
                coord = self.rng.choice(self._free_cells())
            self.add_fish(coord, kind(coord, self))

    def set_victims(self, number: int) -> None:
        """Place ``number`` victims on random free cells."""
        self._place_new(number, Victim)

    def set_predators(self, number: int) -> None:
        """Place ``number`` predators on random free cells."""
        self._place_new(number, Predator)

    def add_fish(self, coord: Coord, fish: Victim | Predator) -> None:
        """Put ``fish`` on the empty cell at ``coord``."""
        self._check(coord)
        if isinstance(fish, Victim):
            school: list = self.victims
        elif isinstance(fish, Predator):
            school = self.predators
        else:
            raise TypeError(f"not a fish: {fish!r}")
        if self.is_fish_at(coord):
            raise ValueError(f"cell {coord} is already occupied")
        fish.coord = coord
        fish.pool = self
        school.append(fish)
        self._cells[coord.x][coord.y] = fish

    def remove_fish(self, coord: Coord) -> Victim | Predator | None:
        """Take the fish at ``coord`` out of the pool and return it, if any."""
        self._check(coord)
        fish = self._cells[coord.x][coord.y]
        if fish is None:
            return None
        if isinstance(fish, Victim):
            self.victims.remove(fish)
        else:
            self.predators.remove(fish)
        self._cells[coord.x][coord.y] = None
        return fish

    def _relocate(self, fish: _Fish, target: Coord) -> None:
        if target == fish.coord:
            return
        self._cells[fish.coord.x][fish.coord.y] = None
        self._cells[target.x][target.y] = fish
        fish.coord = target

    def is_fish_at(self, coord: Coord) -> bool:
        self._check(coord)
        return self._cells[coord.x][coord.y] is not None

    def is_predator_at(self, coord: Coord) -> bool:
        self._check(coord)
        return isinstance(self._cells[coord.x][coord.y], Predator)

    def nearest_victim_to(self, coord: Coord) -> Coord | None:
        """Position of the victim closest to ``coord``; the earliest placed wins ties."""
        if not self.victims:
            return None
        return min(self.victims, key=lambda v: v.coord.distance_to(coord)).coord

    def victims_empty(self) -> bool:
        return not self.victims

    def simulate(self, steps: int) -> tuple[int, int]:
        """Run ``steps`` rounds and return the victim and predator counts."""
        for _ in range(steps):
            for victim in list(self.victims):
                if victim in self.victims:
                    victim.move()
            for predator in list(self.predators):
                predator.move()
        return self.victim_count, self.predator_count

    def render(self) -> str:
        """Draw the grid: ``V`` victim, ``P`` predator, ``e`` empty."""
        lines = ["Cells:\n["]
        for row in self._cells:
            marks = []
            for cell in row:
                if isinstance(cell, Victim):
                    marks.append("V ")
                elif isinstance(cell, Predator):
                    marks.append("P ")
                else:
                    marks.append("e ")
            lines.append("".join(marks) + "\n")
        lines.append("]")
        return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Populate a pool, run the simulation and report the survivors."""
    parser = argparse.ArgumentParser(
        prog="pool", description="Simulate predators hunting victims in a pool."
    )
    parser.add_argument("--size", type=int, nargs=2, default=[5, 5], metavar=("M", "N"))
    parser.add_argument("--victims", type=int, default=12)
    parser.add_argument("--predators", type=int, default=3)
    parser.add_argument("--steps", type=int, default=40)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    pool = Pool(args.size[0], args.size[1], random.Random(args.seed))
    pool.set_victims(args.victims)
    pool.set_predators(args.predators)
    m, n = pool.size
    print(f"{m}, {n}")
    print(f"{pool.victim_count}, {pool.predator_count}")
    print(pool.render())
    victims, predators = pool.simulate(args.steps)
    print(f"Victims size: {victims}")
    print(f"Predators size: {predators}")
    return 0