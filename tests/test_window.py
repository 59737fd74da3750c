import pytest

from fivednine.log import FatalError
from fivednine.render.window import (
    EventType,
    KeyType,
    Window,
    _EventQueue,
    _key_type_from_symbol,
)


def test_window_requires_a_title():
    with pytest.raises(FatalError):
        Window()


@pytest.mark.parametrize(
    "symbol, expected",
    [
        (ord("a"), KeyType.A),
        (ord("d"), KeyType.D),
        (ord("q"), KeyType.Q),
        (0xFF51, KeyType.LEFT),
        (0xFF53, KeyType.RIGHT),
        (ord("z"), KeyType.INVALID),
    ],
)
def test_key_symbol_mapping(symbol, expected):
    assert _key_type_from_symbol(symbol) is expected


def test_empty_queue_polls_none():
    assert _EventQueue().poll() is EventType.NONE


def test_key_event_reaches_handler():
    queue = _EventQueue()
    received = []
    queue.handler = lambda event_type, key_type: received.append((event_type, key_type))
    queue.push(EventType.KEY_DOWN, KeyType.A)
    assert queue.poll() is EventType.KEY_DOWN
    assert received == [(EventType.KEY_DOWN, KeyType.A)]


def test_key_up_and_invalid_key_reach_handler():
    queue = _EventQueue()
    received = []
    queue.handler = lambda event_type, key_type: received.append((event_type, key_type))
    queue.push(EventType.KEY_UP, KeyType.INVALID)
    assert queue.poll() is EventType.KEY_UP
    assert received == [(EventType.KEY_UP, KeyType.INVALID)]


def test_quit_does_not_reach_handler():
    queue = _EventQueue()
    received = []
    queue.handler = lambda event_type, key_type: received.append(event_type)
    queue.push(EventType.QUIT)
    assert queue.poll() is EventType.QUIT
    assert received == []


def test_events_come_out_in_order():
    queue = _EventQueue()
    queue.push(EventType.KEY_DOWN, KeyType.D)
    queue.push(EventType.QUIT)
    assert [queue.poll(), queue.poll(), queue.poll()] == [
        EventType.KEY_DOWN,
        EventType.QUIT,
        EventType.NONE,
    ]


def test_key_event_without_handler_is_still_returned():
    queue = _EventQueue()
    queue.push(EventType.KEY_DOWN, KeyType.Q)
    assert queue.poll() is EventType.KEY_DOWN