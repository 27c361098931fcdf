"""Timeout policy for asserting on channel operations."""

import logging
import queue
import threading
from datetime import timedelta
from typing import Any, Callable, List, NoReturn, Optional, Tuple, Union

import logfire
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import Settings
from .messages import (
    TIMEOUT_MESSAGE,
    UNEXPECTED_RECV_MESSAGE,
    UNEXPECTED_SEND_MESSAGE,
    default_or_custom_message,
)
from .protocols import Channel

logger = logging.getLogger(__name__)

_failures_counter = logfire.metric_counter("chantest.expectations_failed")


class ExpectationFailed(AssertionError):
    """Raised when a channel expectation is not met within the timeout window."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


def fail_expectation(
    operation: str,
    seconds: float,
    default_message: str,
    msg_and_args: Tuple[Any, ...],
    value: Any = None,
) -> NoReturn:
    """Record a failed expectation and raise ExpectationFailed."""
    __tracebackhide__ = True
    message = default_or_custom_message(default_message, *msg_and_args)
    _failures_counter.add(1, {"operation": operation})
    logger.debug(f"{operation} failed after {seconds}s: {message}")
    raise ExpectationFailed(message, value=value)


class Before(BaseModel):
    """The amount of time to wait before failing an expectation.

    Policies are immutable and can be shared between tests and threads:

        slow = Before(0.5)
        slow.assert_recv(results)
    """

    model_config = ConfigDict(frozen=True)

    seconds: float = Field(
        ..., ge=0, le=threading.TIMEOUT_MAX, description="Timeout in seconds"
    )

    def __init__(self, seconds: Union[float, timedelta, None] = None, **data: Any):
        if seconds is not None:
            data["seconds"] = seconds
        super().__init__(**data)

    @field_validator("seconds", mode="before")
    @classmethod
    def _from_timedelta(cls, v: Any) -> Any:
        if isinstance(v, timedelta):
            return v.total_seconds()
        return v

    def expect(self, do: Callable[[], None]) -> None:
        """Fail if do doesn't return very quickly, typically after blocking on
        a single channel operation.

        Useful for checking that a background thread is unblocked and has
        reached a point where it reads from or sends to something do touches,
        and for synchronizing with its continuation. do runs on its own daemon
        thread, which is left running if the deadline passes. An exception
        raised by do is re-raised here.
        """
        __tracebackhide__ = True
        done = threading.Event()
        errors: List[BaseException] = []

        def run():
            try:
                do()
            except BaseException as e:
                errors.append(e)
            finally:
                if done.is_set():
                    if errors:
                        logger.debug(
                            f"expect action finished after its deadline: {errors[0]!r}"
                        )
                    else:
                        logger.debug("expect action finished after its deadline")
                done.set()

        threading.Thread(target=run, name="chantest-expect", daemon=True).start()

        if not done.wait(self.seconds):
            # Flag the deadline so a late finish is logged by the action thread.
            done.set()
            fail_expectation("expect", self.seconds, TIMEOUT_MESSAGE, ())
        if errors:
            raise errors[0]

    def assert_recv(self, ch: Channel, *msg_and_args: Any) -> Any:
        """Assert that something is quickly received from ch and return it.

        A custom failure message can be given as a format string followed by
        its arguments.
        """
        __tracebackhide__ = True
        value, ok = self._recv(ch)
        if not ok:
            fail_expectation("assert_recv", self.seconds, TIMEOUT_MESSAGE, msg_and_args)
        return value

    def assert_no_recv(self, ch: Channel, *msg_and_args: Any) -> None:
        """Assert that nothing is received from ch for a short period of time.

        On failure the received item is consumed and exposed as
        ``ExpectationFailed.value``.
        """
        __tracebackhide__ = True
        value, ok = self._recv(ch)
        if not ok:
            return None
        fail_expectation(
            "assert_no_recv",
            self.seconds,
            UNEXPECTED_RECV_MESSAGE,
            msg_and_args,
            value=value,
        )

    def assert_send(self, ch: Channel, value: Any, *msg_and_args: Any) -> None:
        """Assert that value is quickly sent to ch."""
        __tracebackhide__ = True
        if not self._send(ch, value):
            fail_expectation("assert_send", self.seconds, TIMEOUT_MESSAGE, msg_and_args)

    def assert_no_send(self, ch: Channel, value: Any, *msg_and_args: Any) -> None:
        """Assert that value is not accepted by ch for a short period of time."""
        __tracebackhide__ = True
        if self._send(ch, value):
            fail_expectation(
                "assert_no_send",
                self.seconds,
                UNEXPECTED_SEND_MESSAGE,
                msg_and_args,
                value=value,
            )

    def _recv(self, ch: Channel) -> Tuple[Optional[Any], bool]:
        # The channel's timed get races the receive against the deadline, so
        # an item is either returned here or left in the channel.
        try:
            return ch.get(timeout=self.seconds), True
        except queue.Empty:
            return None, False

    def _send(self, ch: Channel, value: Any) -> bool:
        try:
            ch.put(value, timeout=self.seconds)
        except queue.Full:
            return False
        return True


# Plenty of time for a thread to reach a channel operation if it is not
# blocked or doing something slow.
DEFAULT = Before(Settings().default_timeout)
