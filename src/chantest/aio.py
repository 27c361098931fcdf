"""asyncio versions of the channel assertions.

These mirror the methods of Before for ``asyncio.Queue`` and other awaitable
channels. Unlike the threaded ``expect``, an awaitable that misses its deadline
is cancelled rather than left running.
"""

import asyncio
from typing import Any, Awaitable, Optional, Tuple

from .messages import TIMEOUT_MESSAGE, UNEXPECTED_RECV_MESSAGE, UNEXPECTED_SEND_MESSAGE
from .policy import DEFAULT, Before, fail_expectation
from .protocols import AsyncChannel


async def _within(before: Before, awaitable: Awaitable[Any]) -> Tuple[Any, bool]:
    """Await awaitable, returning (result, True), or (None, False) on timeout."""
    deadline = asyncio.timeout(before.seconds)
    try:
        async with deadline:
            return await awaitable, True
    except TimeoutError:
        if not deadline.expired():
            raise
        return None, False


async def expect(awaitable: Awaitable[Any], *, before: Optional[Before] = None) -> None:
    """Fail if awaitable doesn't complete very quickly."""
    __tracebackhide__ = True
    before = DEFAULT if before is None else before
    _, ok = await _within(before, awaitable)
    if not ok:
        fail_expectation("expect", before.seconds, TIMEOUT_MESSAGE, ())


async def assert_recv(
    ch: AsyncChannel, *msg_and_args: Any, before: Optional[Before] = None
) -> Any:
    """Assert that something is quickly received from ch and return it."""
    __tracebackhide__ = True
    before = DEFAULT if before is None else before
    value, ok = await _within(before, ch.get())
    if not ok:
        fail_expectation("assert_recv", before.seconds, TIMEOUT_MESSAGE, msg_and_args)
    return value


async def assert_no_recv(
    ch: AsyncChannel, *msg_and_args: Any, before: Optional[Before] = None
) -> None:
    """Assert that nothing is received from ch for a short period of time."""
    __tracebackhide__ = True
    before = DEFAULT if before is None else before
    value, ok = await _within(before, ch.get())
    if not ok:
        return None
    fail_expectation(
        "assert_no_recv",
        before.seconds,
        UNEXPECTED_RECV_MESSAGE,
        msg_and_args,
        value=value,
    )


async def assert_send(
    ch: AsyncChannel, value: Any, *msg_and_args: Any, before: Optional[Before] = None
) -> None:
    """Assert that value is quickly sent to ch."""
    __tracebackhide__ = True
    before = DEFAULT if before is None else before
    _, ok = await _within(before, ch.put(value))
    if not ok:
        fail_expectation("assert_send", before.seconds, TIMEOUT_MESSAGE, msg_and_args)


async def assert_no_send(
    ch: AsyncChannel, value: Any, *msg_and_args: Any, before: Optional[Before] = None
) -> None:
    """Assert that value is not accepted by ch for a short period of time."""
    __tracebackhide__ = True
    before = DEFAULT if before is None else before
    _, ok = await _within(before, ch.put(value))
    if ok:
        fail_expectation(
            "assert_no_send",
            before.seconds,
            UNEXPECTED_SEND_MESSAGE,
            msg_and_args,
            value=value,
        )
