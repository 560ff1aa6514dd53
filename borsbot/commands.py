"""Bors commands as users write them in pull request comments."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple, Union

#: Largest priority a command may carry (priorities are unsigned 32-bit values).
MAX_PRIORITY = 2**32 - 1


@dataclass(frozen=True)
class CommitSha:
    """A git commit hash."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LastParent:
    """Use the parent of the previous build as the merge base (``parent=last``)."""


Parent = Union[CommitSha, LastParent]


@dataclass(frozen=True)
class ApproverMyself:
    """The approver is the author of the comment."""


@dataclass(frozen=True)
class ApproverSpecified:
    """The approver was named explicitly in the command."""

    name: str


Approver = Union[ApproverMyself, ApproverSpecified]


class RollupMode(enum.Enum):
    """How a pull request may take part in rollups."""

    ALWAYS = "always"
    IFFY = "iffy"
    MAYBE = "maybe"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> RollupMode:
        """Parse a rollup mode from its textual form, raising ValueError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Invalid rollup mode `{value}`. Possible values are always/iffy/never/maybe"
            ) from None


class BorsCommand:
    """Base class of every command a user can give to the bot."""

    __slots__ = ()


@dataclass(frozen=True)
class Approve(BorsCommand):
    """Approve a pull request."""

    approver: Approver
    priority: Optional[int] = None
    rollup: Optional[RollupMode] = None


@dataclass(frozen=True)
class Unapprove(BorsCommand):
    """Withdraw an approval."""


@dataclass(frozen=True)
class Help(BorsCommand):
    """Print help."""


@dataclass(frozen=True)
class Ping(BorsCommand):
    """Ping the bot."""


@dataclass(frozen=True)
class Try(BorsCommand):
    """Perform a try build."""

    parent: Optional[Parent] = None
    jobs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TryCancel(BorsCommand):
    """Cancel a running try build."""


@dataclass(frozen=True)
class SetPriority(BorsCommand):
    """Set the priority of a pull request."""

    priority: int


@dataclass(frozen=True)
class Info(BorsCommand):
    """Show information about the current pull request."""


@dataclass(frozen=True)
class Delegate(BorsCommand):
    """Delegate approval authority to the pull request author."""


@dataclass(frozen=True)
class Undelegate(BorsCommand):
    """Revoke a previously granted delegation."""


@dataclass(frozen=True)
class SetRollupMode(BorsCommand):
    """Set the rollup mode of a pull request."""

    mode: RollupMode


@dataclass(frozen=True)
class OpenTree(BorsCommand):
    """Open the repository tree for merging."""


@dataclass(frozen=True)
class TreeClosed(BorsCommand):
    """Close the tree for everything below the given priority."""

    priority: int