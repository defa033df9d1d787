"""Solutions to three classic string and linked-list puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


def largest_common_prefix(words: Iterable[str]) -> str:
    """Find a longest prefix shared by at least two of ``words``.

    Prefixes are grown one character at a time. A prefix is extended
    whenever two or more of its words agree on the next character. Growth
    stops when no prefix can be extended any further. The alphabetically
    first of the prefixes that remain is returned. When no two words share
    even a first character, the result is the empty string.
    """
    items = list(words)
    prefixes: dict[str, list[int]] = {"": list(range(len(items)))}
    frontier = [""]
    position = 0
    while frontier:
        created: dict[str, list[int]] = {}
        for prefix in frontier:
            groups: dict[str, list[int]] = {}
            for index in prefixes[prefix]:
                word = items[index]
                if position < len(word):
                    groups.setdefault(word[position], []).append(index)
            shared = {
                prefix + ch: indices
                for ch, indices in groups.items()
                if len(indices) > 1
            }
            if shared:
                del prefixes[prefix]
                created.update(shared)
        prefixes.update(created)
        frontier = list(created)
        position += 1
    return min(prefixes)


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of ``s``.

    Among palindromes of equal length the leftmost wins. When no palindrome
    of two or more characters exists, the first character is returned.
    """
    if len(s) < 2:
        return s
    best_start, best_len = 0, 1
    for center in range(2 * len(s) - 1):
        left = center // 2
        right = left + center % 2
        while left >= 0 and right < len(s) and s[left] == s[right]:
            left -= 1
            right += 1
        start = left + 1
        length = right - left - 1
        if length > best_len or (
            length == best_len and length > 1 and start < best_start
        ):
            best_start, best_len = start, length
    return s[best_start:best_start + best_len]


@dataclass
class ListNode:
    """Node of a singly linked list of decimal digits, least significant first."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> ListNode:
        """Build a list holding ``digits`` in the given order."""
        head: ListNode | None = None
        for digit in reversed(list(digits)):
            head = cls(digit, head)
        if head is None:
            raise ValueError("a list needs at least one digit")
        return head

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def digits(self) -> list[int]:
        """Return the values of this node and all that follow it."""
        return list(self)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as reversed digit lists; return the reversed sum."""
    head: ListNode | None = None
    tail: ListNode | None = None
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        node = ListNode(digit)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head