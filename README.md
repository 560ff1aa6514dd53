# borsbot

A small library for merge bots that watch pull request comments. It does two
jobs:

* it finds bot commands such as `@bors r+ p=1 rollup` in comment text and
  turns each one into a command object, or into a parse error that says what
  went wrong;
* it renders the comments the bot posts back: try build results,
  cancellations and failed workflows.

The package has no runtime dependencies and supports Python 3.10 and later.

## Parsing commands

```python
from borsbot.parser import CommandParser

parser = CommandParser("@bors")
results = parser.parse_commands("Looks good!\n@bors r+ p=1 rollup=iffy")
# [Approve(approver=ApproverMyself(), priority=1, rollup=<RollupMode.IFFY: 'iffy'>)]
```

`CommandParser.parse_commands` looks at each line of the text. A line that
contains the prefix yields one result, and the command is read from the text
after the first occurrence of the prefix. A line without the prefix yields
nothing. Each result is one of two things:

* a command from `borsbot.commands`: `Approve`, `Unapprove`, `Help`, `Ping`,
  `Try`, `TryCancel`, `SetPriority`, `Info`, `Delegate`, `Undelegate`,
  `SetRollupMode`, `OpenTree` or `TreeClosed`. All of these are subclasses of
  `BorsCommand`.
* an error from `borsbot.parts`: `MissingCommand`, `UnknownCommand`,
  `MissingArgValue`, `UnknownArg`, `DuplicateArg` or `ValidationError`. All of
  these are subclasses of `CommandParseError`, which is an `Exception`.

To parse the text after a prefix yourself, call `borsbot.parser.parse_command`.
It returns the command, or raises the `CommandParseError` it finds.

These commands are understood:

| Comment | Command |
|---|---|
| `r+ [p=N] [rollup=MODE]` | `Approve` with `ApproverMyself()` |
| `r=USER [p=N] [rollup=MODE]` | `Approve` with `ApproverSpecified(USER)` |
| `r-` | `Unapprove` |
| `p=N`, `priority=N` | `SetPriority` |
| `rollup`, `rollup-`, `rollup=MODE` | `SetRollupMode` (`rollup` means always, `rollup-` means maybe) |
| `try [parent=SHA\|last] [jobs=a,b]` | `Try` with a `CommitSha` or `LastParent` parent and a tuple of jobs |
| `try cancel` | `TryCancel` |
| `delegate+`, `delegate-` | `Delegate`, `Undelegate` |
| `treeclosed=N`, `treeclosed-` | `TreeClosed`, `OpenTree` |
| `info`, `help`, `ping` | `Info`, `Help`, `Ping` |

Parsing follows these rules:

* A priority must be a non-negative integer that fits in 32 bits, from 0 to
  4294967295.
* A try parent must be `last` or a 40-character SHA.
* At most 10 try jobs may be given.
* The rollup mode is one of `always`, `iffy`, `maybe` or `never`.
  `RollupMode.parse` reads it from text and raises `ValueError` for anything
  else.
* A key given twice (`p=1 p=2`) is a `DuplicateArg`. A key with no value
  (`p=`) is a `MissingArgValue`.
* Parsing stops at the first word that starts with `@`, so
  `@bors try @rust-timer queue` is read as a plain `try`.

`borsbot.parts.parse_parts` does the word splitting. It returns a list of
`Bare` and `KeyValue` parts.

## Rendering comments

```python
from borsbot.comment import (
    WorkflowResult, WorkflowStatus, try_build_succeeded_comment,
)

workflows = [WorkflowResult("CI", "https://ci.example.com/1", WorkflowStatus.SUCCESS)]
text = try_build_succeeded_comment(
    workflows, "ea9c1b050cc8b420c2c211d2177811e564a4dc60"
).render()
```

Each function in `borsbot.comment` returns a `Comment`, and
`Comment.render()` gives its text. The functions are:

* `try_build_succeeded_comment`
* `workflow_failed_comment`
* `try_build_cancelled_comment`
* `unclean_try_build_cancelled_comment`
* `try_build_in_progress_comment`
* `no_try_build_in_progress_comment`
* `cant_find_last_parent_comment`

In a workflow list, a workflow whose status is `WorkflowStatus.SUCCESS` is
marked `:white_check_mark:`. Any other status is marked `:x:`.

A comment that carries metadata ends with a hidden
`<!-- homu: {...} -->` JSON marker. A successful try build is one example: its
marker is `{"type":"TryBuildCompleted","merge_sha":"<sha>"}`.

## What the package does not do

The package only parses commands and renders reply text. It does not:

* receive webhooks or run a bot service;
* talk to a code hosting API or to CI;
* store pull request or build state.

A program that needs any of these has to provide it and call this package for
parsing and rendering.

## Running the tests

```
pip install -e ".[test]"
pytest
```