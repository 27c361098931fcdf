import queue
import time

import pytest

from tests.fakes import BackgroundReceiver, HandoffChannel, send_soon


def test_handoff_get_times_out_when_nobody_sends():
    ch = HandoffChannel()
    with pytest.raises(queue.Empty):
        ch.get(timeout=0.01)


def test_handoff_put_times_out_without_receiver():
    ch = HandoffChannel()
    with pytest.raises(queue.Full):
        ch.put(1, timeout=0.01)


def test_handoff_timed_out_put_withdraws_item():
    ch = HandoffChannel()
    with pytest.raises(queue.Full):
        ch.put("stale", timeout=0.01)

    assert ch.pending() == 0
    with pytest.raises(queue.Empty):
        ch.get(block=False)


def test_handoff_put_returns_once_item_taken():
    ch = HandoffChannel()
    receiver = BackgroundReceiver(ch).start()

    ch.put("hello", timeout=1.0)

    assert receiver.results.get(timeout=1.0) == "hello"
    assert ch.pending() == 0


def test_handoff_delivers_to_waiting_receiver():
    ch = HandoffChannel()
    send_soon(ch, 3, delay=0.01)

    start = time.monotonic()
    assert ch.get(timeout=1.0) == 3
    assert time.monotonic() - start < 1.0
