"""Run a script of stack commands: push, pop, size, empty, top."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence

Command = tuple[str, Optional[int]]


def execute(commands: Iterable[Command]) -> list[int]:
    """Run ``commands`` against an empty stack and return what they report.

    ``pop`` and ``top`` report -1 on an empty stack, ``empty`` reports 1 or 0.
    Unknown commands are ignored.
    """
    stack: list[int] = []
    output: list[int] = []
    for name, arg in commands:
        if name == "push":
            if arg is None:
                raise ValueError("push needs a value")
            stack.append(arg)
        elif name == "pop":
            output.append(stack.pop() if stack else -1)
        elif name == "size":
            output.append(len(stack))
        elif name == "empty":
            output.append(int(not stack))
        elif name == "top":
            output.append(stack[-1] if stack else -1)
    return output


def parse_input(text: str) -> list[Command]:
    """Parse a command count followed by that many commands."""
    tokens = iter(text.split())

    def take() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    count = int(take())
    commands: list[Command] = []
    for _ in range(count):
        name = take()
        commands.append((name, int(take()) if name == "push" else None))
    return commands


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read commands from stdin and print one result per line."""
    parser = argparse.ArgumentParser(
        description="Run stack commands read from standard input."
    )
    parser.parse_args(argv)
    try:
        commands = parse_input(sys.stdin.read())
    except ValueError as exc:
        parser.error(str(exc))
    for value in execute(commands):
        print(value)
    return 0