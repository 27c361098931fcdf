"""Utilities for testing code that communicates over channels and queues.

The module-level helpers use DEFAULT; construct a Before for a different
timeout.
"""

from typing import Any, Callable

from .messages import TIMEOUT_MESSAGE, UNEXPECTED_RECV_MESSAGE, UNEXPECTED_SEND_MESSAGE
from .policy import DEFAULT, Before, ExpectationFailed
from .protocols import AsyncChannel, Channel


def expect(do: Callable[[], None]) -> None:
    """Call Before.expect on DEFAULT."""
    __tracebackhide__ = True
    DEFAULT.expect(do)


def assert_recv(ch: Channel, *msg_and_args: Any) -> Any:
    """Call Before.assert_recv on DEFAULT."""
    __tracebackhide__ = True
    return DEFAULT.assert_recv(ch, *msg_and_args)


def assert_no_recv(ch: Channel, *msg_and_args: Any) -> None:
    """Call Before.assert_no_recv on DEFAULT."""
    __tracebackhide__ = True
    return DEFAULT.assert_no_recv(ch, *msg_and_args)


def assert_send(ch: Channel, value: Any, *msg_and_args: Any) -> None:
    """Call Before.assert_send on DEFAULT."""
    __tracebackhide__ = True
    DEFAULT.assert_send(ch, value, *msg_and_args)


def assert_no_send(ch: Channel, value: Any, *msg_and_args: Any) -> None:
    """Call Before.assert_no_send on DEFAULT."""
    __tracebackhide__ = True
    DEFAULT.assert_no_send(ch, value, *msg_and_args)


__all__ = [
    "DEFAULT",
    "TIMEOUT_MESSAGE",
    "UNEXPECTED_RECV_MESSAGE",
    "UNEXPECTED_SEND_MESSAGE",
    "AsyncChannel",
    "Before",
    "Channel",
    "ExpectationFailed",
    "assert_no_recv",
    "assert_no_send",
    "assert_recv",
    "assert_send",
    "expect",
]
