import pytest

from borsbot.parts import (
    Bare,
    CommandParseError,
    DuplicateArg,
    KeyValue,
    MissingArgValue,
    MissingCommand,
    UnknownArg,
    UnknownCommand,
    ValidationError,
    parse_parts,
)


def test_empty_input_has_no_parts():
    assert parse_parts("") == []
    assert parse_parts("   \t ") == []


def test_bare_parts():
    assert parse_parts(" try cancel") == [Bare("try"), Bare("cancel")]


def test_key_value_parts():
    assert parse_parts("r=user1 p=2") == [KeyValue("r", "user1"), KeyValue("p", "2")]


def test_mixed_parts_keep_order():
    assert parse_parts("r+ rollup=iffy p=1") == [
        Bare("r+"),
        KeyValue("rollup", "iffy"),
        KeyValue("p", "1"),
    ]


def test_value_with_comma_is_kept_whole():
    assert parse_parts("r=user1,user2") == [KeyValue("r", "user1,user2")]


def test_value_may_contain_equals_sign():
    assert parse_parts("a=b=c") == [KeyValue("a", "b=c")]


def test_arg_without_value():
    with pytest.raises(MissingArgValue) as info:
        parse_parts("ping a=")
    assert info.value == MissingArgValue("a")


def test_priority_without_value():
    with pytest.raises(MissingArgValue) as info:
        parse_parts("r+ p=")
    assert info.value.arg == "p"


def test_try_jobs_without_value():
    with pytest.raises(MissingArgValue) as info:
        parse_parts("try jobs=")
    assert info.value.arg == "jobs"


def test_duplicate_key():
    with pytest.raises(DuplicateArg) as info:
        parse_parts("ping a=b a=c")
    assert info.value == DuplicateArg("a")


def test_duplicate_priority():
    with pytest.raises(DuplicateArg) as info:
        parse_parts("p=1 p=2")
    assert info.value.arg == "p"


def test_duplicate_bare_words_are_allowed():
    assert parse_parts("ping ping") == [Bare("ping"), Bare("ping")]


def test_stops_at_other_bot_mention():
    assert parse_parts(" try @rust-timer queue") == [Bare("try")]


def test_stops_before_errors_after_mention():
    assert parse_parts("ping @other a= a=b a=c") == [Bare("ping")]


def test_errors_are_command_parse_errors():
    with pytest.raises(CommandParseError):
        parse_parts("x=")


@pytest.mark.parametrize(
    "error, text",
    [
        (MissingCommand(), "Missing command"),
        (UnknownCommand("foo"), "Unknown command `foo`"),
        (MissingArgValue("p"), "Missing value for argument `p`"),
        (UnknownArg("a"), "Unknown argument `a`"),
        (DuplicateArg("a"), "Duplicate argument `a`"),
        (ValidationError("Try jobs must not be empty"), "Try jobs must not be empty"),
    ],
)
def test_error_messages(error, text):
    assert str(error) == text


def test_errors_compare_by_value():
    assert UnknownArg("a") == UnknownArg("a")
    assert UnknownArg("a") != UnknownArg("b")
    assert UnknownArg("a") != DuplicateArg("a")
    assert MissingCommand() == MissingCommand()