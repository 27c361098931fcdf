"""Failure message resolution for channel assertions."""

from typing import Any

TIMEOUT_MESSAGE = "timeout waiting for channel send or receive"
UNEXPECTED_RECV_MESSAGE = "unexpected channel receive"
UNEXPECTED_SEND_MESSAGE = "unexpected channel send"


def message_from_msg_and_args(*msg_and_args: Any) -> str:
    """Format a custom failure message.

    The first argument is a ``%``-style template and any further arguments are
    substituted into it. No arguments, or an empty template, yields an empty
    string so the caller falls back to its default message.

    Raises:
        TypeError: If the first argument is not a string.
    """
    if not msg_and_args:
        return ""

    template, *args = msg_and_args
    if not isinstance(template, str):
        raise TypeError(
            f"custom message must start with a str template, got {type(template).__name__}"
        )

    if not args or template == "":
        return template
    return template % tuple(args)


def default_or_custom_message(default_message: str, *custom_msg_and_args: Any) -> str:
    """Return the formatted custom message, or default_message if it is empty."""
    msg = message_from_msg_and_args(*custom_msg_and_args)
    if msg == "":
        return default_message
    return msg
