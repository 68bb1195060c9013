"""Validation of command-line command and argument ordering.

Commands are expected to follow a standard convention:

- subcommands sorted alphabetically by name;
- arguments grouped and sorted as
  1. positional arguments (alphabetically by id),
  2. flags with short options (alphabetically by short option, lowercase
     before uppercase for the same letter),
  3. flags with long-only options (alphabetically by long option).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


class OrderingError(AssertionError):
    """Raised when a command's subcommands or arguments are out of order."""

    def __init__(self, command: str, details: str) -> None:
        self.command = command
        self.details = details
        super().__init__(f"CLI ordering error in '{command}': {details}")


@dataclass
class Arg:
    """A command-line argument: positional unless it has a short or long option."""

    id: str
    short: Optional[str] = None
    long: Optional[str] = None

    def __post_init__(self) -> None:
        if self.short is not None and len(self.short) != 1:
            raise ValueError(f"short option must be a single character: {self.short!r}")

    def is_positional(self) -> bool:
        """Return True when the argument has neither a short nor a long option."""
        return self.short is None and self.long is None


@dataclass
class Command:
    """A command with its arguments and subcommands, built fluently."""

    name: str
    arguments: list[Arg] = field(default_factory=list)
    subcommands: list[Command] = field(default_factory=list)

    def arg(self, arg: Arg) -> Command:
        """Append an argument and return the command for chaining."""
        self.arguments.append(arg)
        return self

    def subcommand(self, command: Command) -> Command:
        """Append a subcommand and return the command for chaining."""
        self.subcommands.append(command)
        return self


def assert_command_order(cmd: Command) -> None:
    """Check ordering of ``cmd`` and all of its subcommands recursively.

    Raises :class:`OrderingError` describing the first problem found.
    """
    _check_subcommands(cmd)
    _check_arguments(cmd)
    for sub in cmd.subcommands:
        assert_command_order(sub)


def _format_diff(current: Iterable[str], expected: Iterable[str]) -> str:
    lines = ["\n\nCurrent order:\n"]
    lines.extend(f"  • {item}\n" for item in current)
    lines.append("\nExpected order:\n")
    lines.extend(f"  • {item}\n" for item in expected)
    return "".join(lines)


def _check_subcommands(cmd: Command) -> None:
    names = [sub.name for sub in cmd.subcommands]
    expected = sorted(names)
    if names != expected:
        raise OrderingError(
            cmd.name,
            "Subcommands must be sorted alphabetically." + _format_diff(names, expected),
        )


def _short_key(arg: Arg) -> tuple[str, int]:
    char = arg.short or ""
    lowered = char.lower() if char.isascii() else char
    return lowered, 1 if char.isupper() else 0


def _short_label(arg: Arg) -> str:
    return f"-{arg.short} ({arg.id})"


def _check_arguments(cmd: Command) -> None:
    positional = [a for a in cmd.arguments if a.is_positional()]
    with_short = [a for a in cmd.arguments if a.short is not None]
    long_only = [a for a in cmd.arguments if a.short is None and a.long is not None]

    positional_ids = [a.id for a in positional]
    sorted_positional = sorted(positional_ids)
    if positional_ids != sorted_positional:
        raise OrderingError(
            cmd.name,
            "Positional arguments must be sorted alphabetically."
            + _format_diff(positional_ids, sorted_positional),
        )

    sorted_short = sorted(with_short, key=_short_key)
    if [a.short for a in with_short] != [a.short for a in sorted_short]:
        raise OrderingError(
            cmd.name,
            "Flags with short options must be sorted alphabetically by short option."
            + _format_diff(map(_short_label, with_short), map(_short_label, sorted_short)),
        )

    long_names = [a.long for a in long_only]
    sorted_long = sorted(long_names)
    if long_names != sorted_long:
        raise OrderingError(
            cmd.name,
            "Long-only flags must be sorted alphabetically."
            + _format_diff((f"--{n}" for n in long_names), (f"--{n}" for n in sorted_long)),
        )

    arg_ids = [a.id for a in cmd.arguments]
    expected_ids = [a.id for a in (*positional, *with_short, *long_only)]
    if arg_ids != expected_ids:
        raise OrderingError(
            cmd.name,
            "Arguments must be in the correct group order.\n"
            "Expected: [positional, short flags, long-only flags]"
            + _format_diff(arg_ids, expected_ids),
        )