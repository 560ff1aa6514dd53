"""Splitting a command line into parts, and the errors that parsing reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union


class CommandParseError(Exception):
    """Base class of every error found while parsing a bot command."""


@dataclass(eq=True)
class MissingCommand(CommandParseError):
    """The prefix was given without a command after it."""

    def __str__(self) -> str:
        return "Missing command"


@dataclass(eq=True)
class UnknownCommand(CommandParseError):
    """The command is not one the bot knows."""

    command: str

    def __str__(self) -> str:
        return f"Unknown command `{self.command}`"


@dataclass(eq=True)
class MissingArgValue(CommandParseError):
    """An argument was written as ``key=`` with nothing after the sign."""

    arg: str

    def __str__(self) -> str:
        return f"Missing value for argument `{self.arg}`"


@dataclass(eq=True)
class UnknownArg(CommandParseError):
    """The command does not accept this argument."""

    arg: str

    def __str__(self) -> str:
        return f"Unknown argument `{self.arg}`"


@dataclass(eq=True)
class DuplicateArg(CommandParseError):
    """The same key was given more than once."""

    arg: str

    def __str__(self) -> str:
        return f"Duplicate argument `{self.arg}`"


@dataclass(eq=True)
class ValidationError(CommandParseError):
    """An argument had a value that is not allowed."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Bare:
    """A part of a command without a value, such as ``try``."""

    value: str


@dataclass(frozen=True)
class KeyValue:
    """A part of a command written as ``key=value``."""

    key: str
    value: str


CommandPart = Union[Bare, KeyValue]


def parse_parts(text: str) -> List[CommandPart]:
    """Split the text after the bot prefix into command parts.

    Parsing stops at the first word starting with ``@``, which belongs to
    another bot. Raises MissingArgValue for ``key=`` and DuplicateArg when a
    key repeats.
    """
    parts: List[CommandPart] = []
    seen_keys = set()
    for item in text.split():
        if item.startswith("@"):
            break
        key, sep, value = item.partition("=")
        if not sep:
            parts.append(Bare(item))
            continue
        if not value:
            raise MissingArgValue(key)
        if key in seen_keys:
            raise DuplicateArg(key)
        seen_keys.add(key)
        parts.append(KeyValue(key, value))
    return parts