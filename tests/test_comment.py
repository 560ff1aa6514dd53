import json

from borsbot.commands import CommitSha
from borsbot.comment import (
    Comment,
    WorkflowResult,
    WorkflowStatus,
    cant_find_last_parent_comment,
    no_try_build_in_progress_comment,
    try_build_cancelled_comment,
    try_build_in_progress_comment,
    try_build_succeeded_comment,
    unclean_try_build_cancelled_comment,
    workflow_failed_comment,
)

SHA = "ea9c1b050cc8b420c2c211d2177811e564a4dc60"


def _workflows():
    return [
        WorkflowResult("build", "https://ci.example.com/1", WorkflowStatus.SUCCESS),
        WorkflowResult("test", "https://ci.example.com/2", WorkflowStatus.FAILURE),
    ]


def test_plain_comment_renders_text():
    assert Comment("hello").render() == "hello"


def test_simple_comments_have_source_text():
    assert no_try_build_in_progress_comment().render() == (
        ":exclamation: There is currently no try build in progress."
    )
    assert unclean_try_build_cancelled_comment().render() == (
        "Try build was cancelled. It was not possible to cancel some workflows."
    )
    assert try_build_in_progress_comment().render() == (
        ":exclamation: A try build is currently in progress. "
        "You can cancel it using @bors try cancel."
    )
    assert "`parent=last`" in cant_find_last_parent_comment().render()
    assert cant_find_last_parent_comment().metadata is None


def test_try_build_cancelled_lists_urls():
    comment = try_build_cancelled_comment(
        iter(["https://ci.example.com/1", "https://ci.example.com/2"])
    )
    assert comment.render().split("\n") == [
        "Try build cancelled.",
        "Cancelled workflows:",
        "- https://ci.example.com/1",
        "- https://ci.example.com/2",
    ]


def test_try_build_cancelled_without_urls():
    assert try_build_cancelled_comment([]).render() == (
        "Try build cancelled.\nCancelled workflows:"
    )


def test_workflow_failed_comment():
    lines = workflow_failed_comment(_workflows()).render().split("\n")
    assert lines[0] == ":broken_heart: Test failed"
    assert lines[1] == "- [build](https://ci.example.com/1) :white_check_mark:"
    assert lines[2] == "- [test](https://ci.example.com/2) :x:"
    assert len(lines) == 3


def test_pending_workflow_is_marked_failed():
    wf = [WorkflowResult("lint", "https://ci.example.com/3", WorkflowStatus.PENDING)]
    assert workflow_failed_comment(wf).render().endswith(":x:")


def test_try_build_succeeded_text_and_metadata():
    comment = try_build_succeeded_comment(_workflows(), CommitSha(SHA))
    rendered = comment.render()
    text, marker = rendered.rsplit("\n", 1)
    assert text == comment.text
    assert text.startswith(":sunny: Try build successful\n")
    assert text.endswith(f"Build commit: {SHA} (`{SHA}`)")
    assert marker.startswith("<!-- homu: ") and marker.endswith(" -->")
    payload = json.loads(marker[len("<!-- homu: ") : -len(" -->")])
    assert payload == {"type": "TryBuildCompleted", "merge_sha": SHA}


def test_try_build_succeeded_metadata_is_compact_with_type_first():
    rendered = try_build_succeeded_comment([], SHA).render()
    marker = rendered.rsplit("\n", 1)[1]
    assert " " not in marker[len("<!-- homu: ") : -len(" -->")]
    assert marker.startswith('<!-- homu: {"type":"TryBuildCompleted"')
    assert try_build_succeeded_comment([], SHA) == try_build_succeeded_comment(
        [], CommitSha(SHA)
    )