import threading

import pytest

from application import actions as A
from application.channel import ActionChannel, ChannelClosedError


def test_drain_returns_in_send_order():
    channel = ActionChannel()
    channel.send(A.TICK)
    channel.send(A.RENDER)
    assert list(channel.drain()) == [A.TICK, A.RENDER]
    assert list(channel.drain()) == []


def test_send_from_other_thread():
    channel = ActionChannel()
    t = threading.Thread(target=channel.send, args=(A.show_status("hi"),))
    t.start()
    t.join()
    assert [a.message for a in channel.drain()] == ["hi"]


def test_send_after_close_raises():
    channel = ActionChannel()
    channel.close()
    assert channel.closed
    with pytest.raises(ChannelClosedError):
        channel.send(A.NOOP)
