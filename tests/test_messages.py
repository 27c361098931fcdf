import pytest

from chantest.messages import (
    TIMEOUT_MESSAGE,
    default_or_custom_message,
    message_from_msg_and_args,
)


def test_no_args_is_empty():
    assert message_from_msg_and_args() == ""


def test_single_string_is_used_verbatim():
    assert message_from_msg_and_args("boom") == "boom"


def test_single_string_is_not_formatted():
    """A lone message is not a template, so a literal % survives."""
    assert message_from_msg_and_args("100% done") == "100% done"


def test_template_and_args_are_formatted():
    assert message_from_msg_and_args("code=%d", 42) == "code=42"
    assert message_from_msg_and_args("%s got %r", "worker", [1, 2]) == "worker got [1, 2]"


def test_non_string_template_raises_type_error():
    with pytest.raises(TypeError, match="got int"):
        message_from_msg_and_args(42)

    with pytest.raises(TypeError, match="got NoneType"):
        message_from_msg_and_args(None, "x")


def test_template_argument_mismatch_propagates():
    with pytest.raises(TypeError):
        message_from_msg_and_args("%d and %d", 1)


def test_default_used_when_no_custom_message():
    assert default_or_custom_message(TIMEOUT_MESSAGE) == TIMEOUT_MESSAGE


def test_default_used_when_custom_message_is_empty():
    assert default_or_custom_message("default", "") == "default"


def test_custom_message_overrides_default():
    assert default_or_custom_message("default", "code=%d", 42) == "code=42"
    assert default_or_custom_message("default", "boom") == "boom"


def test_empty_template_with_args_falls_back_to_default():
    assert message_from_msg_and_args("", 1) == ""
    assert default_or_custom_message("default", "", 1) == "default"
