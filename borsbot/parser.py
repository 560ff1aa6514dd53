"""Parsing bot commands out of pull request comments."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Union

from borsbot.commands import (
    MAX_PRIORITY,
    Approve,
    ApproverMyself,
    ApproverSpecified,
    BorsCommand,
    CommitSha,
    Delegate,
    Help,
    Info,
    LastParent,
    OpenTree,
    Ping,
    RollupMode,
    SetPriority,
    SetRollupMode,
    TreeClosed,
    Try,
    TryCancel,
    Unapprove,
    Undelegate,
)
from borsbot.parts import (
    Bare,
    CommandParseError,
    CommandPart,
    KeyValue,
    MissingArgValue,
    MissingCommand,
    UnknownArg,
    UnknownCommand,
    ValidationError,
    parse_parts,
)

#: The outcome of parsing one command: the command itself or the error found.
ParseOutcome = Union[BorsCommand, CommandParseError]

_Parser = Callable[[CommandPart, Sequence[CommandPart]], Optional[BorsCommand]]

_MAX_TRY_JOBS = 10
_SHA_LENGTH = 40


class CommandParser:
    """Finds and parses commands that follow a prefix such as ``@bors``."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def parse_commands(self, text: str) -> List[ParseOutcome]:
        """Parse every command in ``text``.

        Each line holds at most one command, starting at the first occurrence
        of the prefix. The result has one entry per such line: the parsed
        command, or the CommandParseError that was found in it.
        """
        outcomes: List[ParseOutcome] = []
        for line in _lines(text):
            index = line.find(self.prefix)
            if index < 0:
                continue
            try:
                outcomes.append(parse_command(line[index + len(self.prefix):]))
            except CommandParseError as error:
                outcomes.append(error)
        return outcomes


def _lines(text: str) -> List[str]:
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_command(text: str) -> BorsCommand:
    """Parse a single command from the text after the prefix.

    Raises CommandParseError when the text holds no valid command.
    """
    parts = parse_parts(text)
    if not parts:
        raise MissingCommand()
    command, arguments = parts[0], parts[1:]
    for parser in _PARSERS:
        result = parser(command, arguments)
        if result is not None:
            return result
    name = command.value if isinstance(command, Bare) else command.key
    raise UnknownCommand(name)


def _parse_priority_value(value: str) -> int:
    digits = value[1:] if value.startswith("+") else value
    if not digits or any(ch not in "0123456789" for ch in digits):
        raise ValidationError("Priority must be a non-negative integer")
    priority = int(digits)
    if priority > MAX_PRIORITY:
        raise ValidationError("Priority must be a non-negative integer")
    return priority


def _parse_priority(parts: Sequence[CommandPart]) -> Optional[int]:
    """Parse the first ``p=`` or ``priority=`` argument, if there is one."""
    for part in parts:
        if isinstance(part, KeyValue) and part.key in ("p", "priority"):
            return _parse_priority_value(part.value)
    return None


def _parse_rollup(parts: Sequence[CommandPart]) -> Optional[RollupMode]:
    """Parse the first rollup argument, if there is one."""
    for part in parts:
        if part == Bare("rollup-"):
            return RollupMode.MAYBE
        if part == Bare("rollup"):
            return RollupMode.ALWAYS
        if isinstance(part, KeyValue) and part.key == "rollup":
            try:
                return RollupMode.parse(part.value)
            except ValueError as error:
                raise ValidationError(str(error)) from None
    return None


def _parse_sha(value: str) -> CommitSha:
    if len(value.encode("utf-8")) != _SHA_LENGTH:
        raise ValueError("SHA must have exactly 40 characters")
    return CommitSha(value)


def _parser_approval(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    if command == Bare("r+"):
        approver = ApproverMyself()
    elif isinstance(command, KeyValue) and command.key == "r":
        if not command.value:
            raise MissingArgValue("r")
        approver = ApproverSpecified(command.value)
    else:
        return None
    priority = _parse_priority(parts)
    rollup = _parse_rollup(parts)
    return Approve(approver=approver, priority=priority, rollup=rollup)


def _parser_unapprove(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    return Unapprove() if command == Bare("r-") else None


def _parser_help(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    return Help() if command == Bare("help") else None


def _parser_ping(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    return Ping() if command == Bare("ping") else None


def _parser_try(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    if command != Bare("try"):
        return None
    parent = None
    jobs: tuple = ()
    for part in parts:
        if isinstance(part, Bare):
            raise UnknownArg(part.value)
        if part.key == "parent":
            if part.value == "last":
                parent = LastParent()
            else:
                try:
                    parent = _parse_sha(part.value)
                except ValueError as error:
                    raise ValidationError(
                        f"Try parent has to be a valid commit SHA: {error}"
                    ) from None
        elif part.key == "jobs":
            raw_jobs = part.value.split(",")
            if not raw_jobs:
                raise ValidationError("Try jobs must not be empty")
            if len(raw_jobs) > _MAX_TRY_JOBS:
                raise ValidationError("Try jobs must not have more than 10 jobs")
            jobs = tuple(raw_jobs)
        else:
            raise UnknownArg(part.key)
    return Try(parent=parent, jobs=jobs)


def _parser_try_cancel(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    if command == Bare("try") and parts and parts[0] == Bare("cancel"):
        return TryCancel()
    return None


def _parser_delegation(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    if command == Bare("delegate+"):
        return Delegate()
    if command == Bare("delegate-"):
        return Undelegate()
    return None


def _parser_priority(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    priority = _parse_priority([command])
    return None if priority is None else SetPriority(priority)


def _parser_rollup(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    mode = _parse_rollup([command])
    return None if mode is None else SetRollupMode(mode)


def _parser_info(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    return Info() if command == Bare("info") else None


def _parser_tree_ops(command: CommandPart, parts: Sequence[CommandPart]) -> Optional[BorsCommand]:
    if command == Bare("treeclosed-"):
        return OpenTree()
    if isinstance(command, KeyValue) and command.key == "treeclosed":
        return TreeClosed(_parse_priority_value(command.value))
    return None


# The order matters: earlier parsers take precedence.
_PARSERS: Sequence[_Parser] = (
    _parser_approval,
    _parser_unapprove,
    _parser_rollup,
    _parser_priority,
    _parser_try_cancel,
    _parser_try,
    _parser_delegation,
    _parser_info,
    _parser_help,
    _parser_ping,
    _parser_tree_ops,
)