"""Comments that the bot posts on pull requests."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Sequence


class WorkflowStatus(enum.Enum):
    """State of a CI workflow."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class WorkflowResult:
    """A CI workflow as shown in a comment."""

    name: str
    url: str
    status: WorkflowStatus


@dataclass(frozen=True)
class Comment:
    """A comment that can be posted to a pull request."""

    text: str
    metadata: Optional[Dict[str, Any]] = None

    def render(self) -> str:
        """Return the comment body, with metadata embedded as an HTML comment."""
        if self.metadata is None:
            return self.text
        payload = json.dumps(self.metadata, separators=(",", ":"))
        return f"{self.text}\n<!-- homu: {payload} -->"


def _list_workflows_status(workflows: Sequence[WorkflowResult]) -> str:
    return "\n".join(
        f"- [{w.name}]({w.url}) "
        + (":white_check_mark:" if w.status is WorkflowStatus.SUCCESS else ":x:")
        for w in workflows
    )


def try_build_succeeded_comment(workflows: Sequence[WorkflowResult], commit_sha) -> Comment:
    sha = str(commit_sha)
    status = _list_workflows_status(workflows)
    return Comment(
        text=f":sunny: Try build successful\n{status}\nBuild commit: {sha} (`{sha}`)",
        metadata={"type": "TryBuildCompleted", "merge_sha": sha},
    )


def try_build_in_progress_comment() -> Comment:
    return Comment(
        ":exclamation: A try build is currently in progress. "
        "You can cancel it using @bors try cancel."
    )


def cant_find_last_parent_comment() -> Comment:
    return Comment(
        ":exclamation: There was no previous build. Please set an explicit parent "
        "or remove the `parent=last` argument to use the default parent."
    )


def no_try_build_in_progress_comment() -> Comment:
    return Comment(":exclamation: There is currently no try build in progress.")


def unclean_try_build_cancelled_comment() -> Comment:
    return Comment("Try build was cancelled. It was not possible to cancel some workflows.")


def try_build_cancelled_comment(workflow_urls: Iterable[str]) -> Comment:
    lines = ["Try build cancelled.", "Cancelled workflows:"]
    lines.extend(f"- {url}" for url in workflow_urls)
    return Comment("\n".join(lines))


def workflow_failed_comment(workflows: Sequence[WorkflowResult]) -> Comment:
    return Comment(f":broken_heart: Test failed\n{_list_workflows_status(workflows)}")