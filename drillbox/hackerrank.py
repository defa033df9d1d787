"""Solutions to a handful of small array and string exercises."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def breaking_records(scores: Sequence[int]) -> list[int]:
    """Count how often the season's best and worst scores were broken.

    Returns ``[best_breaks, worst_breaks]``.
    """
    if not scores:
        raise ValueError("at least one score is required")
    lowest = highest = scores[0]
    best_breaks = worst_breaks = 0
    for score in scores[1:]:
        if score < lowest:
            lowest = score
            worst_breaks += 1
        if score > highest:
            highest = score
            best_breaks += 1
    return [best_breaks, worst_breaks]


def maximum_perimeter_triangle(sticks: Iterable[int]) -> list[int]:
    """Pick three sticks forming the non-degenerate triangle of largest perimeter.

    The sides are returned in ascending order, or ``[-1]`` when no triangle exists.
    """
    ordered = sorted(sticks, reverse=True)
    for big, small, smallest in zip(ordered, ordered[1:], ordered[2:]):
        if big < small + smallest and big + small + smallest > 0:
            return [smallest, small, big]
    return [-1]


def migratory_birds(arr: Iterable[int]) -> int:
    """Return the most frequent bird type, preferring the lowest id on ties."""
    counts = Counter(arr)
    if not counts:
        raise ValueError("at least one sighting is required")
    top = max(counts.values())
    return min(bird for bird, count in counts.items() if count == top)


def strings_xor(s1: str, s2: str) -> str:
    """XOR two binary strings digit by digit over the length of ``s1``."""
    if len(s2) < len(s1):
        raise ValueError("second string is shorter than the first")
    return "".join("0" if a == b else "1" for a, b in zip(s1, s2))


def _round_grade(grade: int) -> int:
    if grade >= 38:
        remainder = grade % 5
        if remainder >= 3:
            return grade + 5 - remainder
    return grade


def grading_students(grades: Iterable[int]) -> list[int]:
    """Round each passing grade up to the next multiple of five when it is close."""
    return [_round_grade(grade) for grade in grades]


def rotate_left(d: int, arr: Sequence[int]) -> list[int]:
    """Rotate ``arr`` left by ``d`` positions."""
    if not 0 <= d <= len(arr):
        raise ValueError(f"rotation {d} out of range for {len(arr)} items")
    items = list(arr)
    return items[d:] + items[:d]


def kangaroo(x1: int, v1: int, x2: int, v2: int) -> str:
    """Say whether two kangaroos land on the same spot after the same number of jumps."""
    if v1 == v2:
        return "YES" if x1 == x2 else "NO"
    distance = x1 - x2
    closing = v2 - v1
    if distance % closing == 0 and distance // closing > 0:
        return "YES"
    return "NO"


def picking_numbers(a: Iterable[int]) -> int:
    """Length of the longest run of sorted values spanning at most one."""
    values = sorted(a)
    if not values:
        return 0
    best = 0
    run = 1
    anchor = values[0]
    for previous, current in zip(values, values[1:]):
        if current - previous <= 1 and current - anchor <= 1:
            run += 1
            continue
        anchor = current
        best = max(best, run)
        run = 1
    return max(best, run)


def separate_numbers(s: str) -> str:
    """Report whether ``s`` splits into increasing consecutive numbers.

    Returns the text the check prints, line by line.
    """
    if len(s) < 2:
        return "NO\n"
    first = -1
    start = 0
    i = 1
    while i < len(s):
        following = str(int(s[start:i]) + 1)
        if s[i:i + len(following)] == following:
            if first == -1:
                first = i
            start = i
            i += len(following)
            continue
        if first == -1:
            i += 1
            continue
        return "NO\n"
    output = ""
    if first != -1:
        output += f"YES {s[:first]}\n"
    return output + "No\n"