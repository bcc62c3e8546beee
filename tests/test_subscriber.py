import threading

import pytest

from blerelay.subscriber import InvalidLengthError, Subscriber


def test_subscribe_then_lookup_returns_callback():
    received = []
    sub = Subscriber()
    sub.subscribe(0x0010, lambda data, err: received.append((data, err)))
    callback = sub.lookup(0x0010)
    callback(b"\x01\x02", None)
    assert received == [(b"\x01\x02", None)]


def test_lookup_of_unknown_handle_is_none():
    assert Subscriber().lookup(0x0042) is None


def test_unsubscribe_removes_callback():
    sub = Subscriber()
    sub.subscribe(7, lambda data, err: None)
    sub.unsubscribe(7)
    assert sub.lookup(7) is None


def test_unsubscribe_of_unknown_handle_leaves_others():
    def keep(data, err):
        return None

    sub = Subscriber()
    sub.subscribe(1, keep)
    sub.unsubscribe(2)
    assert sub.lookup(1) is keep


def test_subscribe_replaces_previous_callback():
    def first(data, err):
        return None

    def second(data, err):
        return None

    sub = Subscriber()
    sub.subscribe(3, first)
    sub.subscribe(3, second)
    assert sub.lookup(3) is second


def test_concurrent_subscriptions_all_land():
    sub = Subscriber()

    def register(handle):
        sub.subscribe(handle, lambda data, err: handle)

    threads = [threading.Thread(target=register, args=(h,)) for h in range(50)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert all(sub.lookup(h)(b"", None) == h for h in range(50))


def test_invalid_length_error_message():
    error = InvalidLengthError()
    assert str(error) == "invalid length"
    with pytest.raises(ValueError, match="invalid length"):
        raise error