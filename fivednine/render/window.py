"""An OpenGL window that reports quit and key events."""

from __future__ import annotations

import enum
from collections import deque
from typing import Callable

from fivednine import log
from fivednine.render.color import ColorRGB

DEFAULT_WINDOW_WIDTH = 1024
DEFAULT_WINDOW_HEIGHT = 768


class EventType(enum.Enum):
    """What a call to ``Window.poll_events`` found."""

    NONE = 0
    INVALID = 1
    KEY_DOWN = 2
    KEY_UP = 3
    QUIT = 4


class KeyType(enum.Enum):
    """Keys the application reacts to."""

    INVALID = 0
    LEFT = 1
    RIGHT = 2
    A = 3
    D = 4
    Q = 5


KeyHandler = Callable[[EventType, KeyType], None]

# Key symbol values as reported by the windowing library.
_KEY_SYMBOLS = {
    0x61: KeyType.A,
    0x64: KeyType.D,
    0x71: KeyType.Q,
    0xFF51: KeyType.LEFT,
    0xFF53: KeyType.RIGHT,
}


def _key_type_from_symbol(symbol: int) -> KeyType:
    return _KEY_SYMBOLS.get(symbol, KeyType.INVALID)


class _EventQueue:
    """Pending window events; key events are passed to the handler as they are polled."""

    def __init__(self) -> None:
        self._events: deque[tuple[EventType, KeyType]] = deque()
        self.handler: KeyHandler | None = None

    def push(self, event_type: EventType, key_type: KeyType = KeyType.INVALID) -> None:
        self._events.append((event_type, key_type))

    def poll(self) -> EventType:
        if not self._events:
            return EventType.NONE
        event_type, key_type = self._events.popleft()
        if event_type in (EventType.KEY_DOWN, EventType.KEY_UP) and self.handler is not None:
            self.handler(event_type, key_type)
        return event_type


class Window:
    """A window with an OpenGL 3.2 core context, vsync on and the cursor hidden."""

    def __init__(
        self,
        title: str | None = None,
        width: int = DEFAULT_WINDOW_WIDTH,
        height: int = DEFAULT_WINDOW_HEIGHT,
        full_screen: bool = False,
    ) -> None:
        log.check(title is not None, "Window requires a name")
        self._queue = _EventQueue()

        import pyglet
        from pyglet import gl

        config = gl.Config(
            double_buffer=True,
            major_version=3,
            minor_version=2,
            forward_compatible=True,
        )
        try:
            self._native = pyglet.window.Window(
                width=width,
                height=height,
                caption=title,
                fullscreen=full_screen,
                config=config,
                vsync=True,
            )
        except Exception as exc:
            log.log_line_and_fail(
                log.LogZone.RENDER, "Failed to create window %s: %s", title, exc
            )
        self._native.set_mouse_visible(False)
        self._native.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_close=self._on_close,
        )
        self._native.switch_to()
        gl.glViewport(0, 0, width, height)

    def _on_key_press(self, symbol: int, modifiers: int) -> bool:
        self._queue.push(EventType.KEY_DOWN, _key_type_from_symbol(symbol))
        return True

    def _on_key_release(self, symbol: int, modifiers: int) -> bool:
        self._queue.push(EventType.KEY_UP, _key_type_from_symbol(symbol))
        return True

    def _on_close(self) -> bool:
        self._queue.push(EventType.QUIT)
        return True

    def poll_events(self) -> EventType:
        """Return the next pending event, or EventType.NONE when there is none."""
        self._native.switch_to()
        self._native.dispatch_events()
        return self._queue.poll()

    def clear(self, color: ColorRGB) -> None:
        from pyglet import gl

        self._native.switch_to()
        gl.glClearColor(*color.normalized(), 1.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)

    def update(self) -> None:
        """Present the frame that was drawn."""
        self._native.flip()

    def quit(self) -> None:
        """Queue a quit event."""
        self._queue.push(EventType.QUIT)

    def dimensions(self) -> tuple[int, int]:
        width, height = self._native.get_size()
        return int(width), int(height)

    def set_key_handler(self, handler: KeyHandler | None) -> None:
        """Call ``handler(event_type, key_type)`` for each key event polled."""
        self._queue.handler = handler

    def close(self) -> None:
        self._native.close()

    def __enter__(self) -> "Window":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()