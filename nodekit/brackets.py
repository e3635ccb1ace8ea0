"""Bracket balance checks."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_valid(s: str) -> bool:
    """Tell whether ``s`` is a non-empty, properly nested run of ()[]{}."""
    if not s or len(s) % 2:
        return False
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif not stack or _PAIRS.get(ch) != stack[-1]:
            return False
        else:
            stack.pop()
    return not stack


def is_vps(s: str) -> bool:
    """Tell whether ``s`` is a valid parenthesis string.

    Every character other than ``(`` closes the most recent open one.
    """
    depth = 0
    for ch in s:
        if ch == "(":
            depth += 1
        elif depth == 0:
            return False
        else:
            depth -= 1
    return depth == 0


def answer_vps(lines: Iterable[str]) -> list[str]:
    """Return ``YES`` or ``NO`` for each string."""
    return ["YES" if is_vps(line) else "NO" for line in lines]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a count and that many strings from stdin; print YES or NO for each."""
    parser = argparse.ArgumentParser(
        description="Check parenthesis strings read from standard input."
    )
    parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    if not tokens:
        parser.error("missing the number of strings")
    try:
        count = int(tokens[0])
    except ValueError:
        parser.error(f"invalid count: {tokens[0]!r}")
    strings = tokens[1 : count + 1]
    if len(strings) < count:
        parser.error("fewer strings than announced")
    for answer in answer_vps(strings):
        print(answer)
    return 0