"""Split and combine camel-case identifiers."""

from __future__ import annotations

import argparse
import sys


def _lower(ch: str) -> str:
    return ch.lower() if "A" <= ch <= "Z" else ch


def _upper(ch: str) -> str:
    return ch.upper() if "a" <= ch <= "z" else ch


def convert_first_char(kind: str, word: str) -> str:
    """Adjust the first letter of ``word`` for a method, variable or class name."""
    if not word:
        return word
    if kind in ("M", "V"):
        return _lower(word[0]) + word[1:]
    if kind == "C":
        return _upper(word[0]) + word[1:]
    return word


def _split(text: str) -> str:
    out = ""
    for ch in text:
        if ch in "()":
            continue
        if "A" <= ch <= "Z":
            if out:
                out += " "
            out += _lower(ch)
        else:
            out += ch
    return out


def _combine(lex: str, text: str) -> str:
    words = text.split()
    out = convert_first_char(lex, words[0]) if words else ""
    for word in words[1:]:
        out += _upper(word[0]) + word[1:]
    if lex == "M":
        out += "()"
    return out


def parse_input_line(op: str, lex: str, line: str) -> str:
    """Process a line of the form ``op;lex;text``.

    ``S`` splits an identifier into lower-case words, ``C`` combines words into
    an identifier. Lines shorter than five characters give an empty result.
    """
    if len(line) < 5:
        return ""
    text = line[4:]
    if op == "S":
        return _split(text)
    if op == "C":
        return _combine(lex, text)
    return ""


def main(argv: list[str] | None = None) -> int:
    """Read operation lines from standard input and print each result."""
    parser = argparse.ArgumentParser(
        prog="camelcase",
        description="Split or combine identifiers read from standard input.",
    )
    parser.parse_args(argv)
    for raw in sys.stdin:
        line = raw.rstrip("\n")
        if len(line) < 5:
            break
        print(parse_input_line(line[0], line[2], line))
    return 0