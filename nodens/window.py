"""Windows: the abstract interface and a window driven by its host."""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from nodens.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from nodens.log import CORE_NAME

EventCallback = Callable[[Event], None]

_log = logging.getLogger(CORE_NAME)


@dataclass
class WindowProps:
    """Settings a window is created with."""

    title: str = "Nodens Engine"
    width: int = 1280
    height: int = 720
    vsync: bool = True


class Action(enum.IntEnum):
    """State change of a key or a mouse button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Window(ABC):
    """Interface every window implementation provides."""

    @abstractmethod
    def on_update(self) -> None:
        """Process pending input and present the frame."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Width in pixels."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Height in pixels."""

    @abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None:
        """Set the function that receives every event of this window."""

    @property
    @abstractmethod
    def vsync(self) -> bool:
        """Whether presentation waits for vertical sync."""


class HostWindow(Window):
    """A window whose input is fed in by its host.

    The host reports what happened through :meth:`resize`, :meth:`close`,
    :meth:`key`, :meth:`mouse_button`, :meth:`scroll` and :meth:`cursor_pos`;
    each turns into the matching event, sent to the event callback.
    """

    def __init__(self, props: Optional[WindowProps] = None) -> None:
        props = props if props is not None else WindowProps()
        self._title = props.title
        self._width = props.width
        self._height = props.height
        self._vsync = props.vsync
        self._callback: Optional[EventCallback] = None
        self._keys: dict[int, Action] = {}
        self._buttons: dict[int, Action] = {}
        self._cursor = (0.0, 0.0)
        self._frames = 0
        _log.info("Creating window %s (%s, %s)", props.title, props.width, props.height)

    def _emit(self, event: Event) -> None:
        if self._callback is None:
            raise RuntimeError("no event callback is set on this window")
        self._callback(event)

    def on_update(self) -> None:
        """Present one frame."""
        self._frames += 1

    @property
    def frames(self) -> int:
        """Number of frames presented so far."""
        return self._frames

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def title(self) -> str:
        """The window's title."""
        return self._title

    def set_event_callback(self, callback: EventCallback) -> None:
        self._callback = callback

    @property
    def vsync(self) -> bool:
        return self._vsync

    @vsync.setter
    def vsync(self, enabled: bool) -> None:
        self._vsync = bool(enabled)

    def resize(self, width: int, height: int) -> None:
        """The window was resized."""
        self._width = width
        self._height = height
        self._emit(WindowResizeEvent(width, height))

    def close(self) -> None:
        """The user asked to close the window."""
        self._emit(WindowCloseEvent())

    def key(self, key: int, action: Action | int) -> None:
        """A key was pressed, released or repeated."""
        action = Action(action)
        self._keys[key] = action
        if action is Action.PRESS:
            self._emit(KeyPressedEvent(key, 0))
        elif action is Action.RELEASE:
            self._emit(KeyReleasedEvent(key))
        else:
            self._emit(KeyPressedEvent(key, 1))

    def mouse_button(self, button: int, action: Action | int) -> None:
        """A mouse button was pressed or released; repeats are ignored."""
        action = Action(action)
        if action is Action.REPEAT:
            return
        self._buttons[button] = action
        if action is Action.PRESS:
            self._emit(MouseButtonPressedEvent(button))
        else:
            self._emit(MouseButtonReleasedEvent(button))

    def scroll(self, x_offset: float, y_offset: float) -> None:
        """The mouse wheel or touchpad scrolled."""
        self._emit(MouseScrolledEvent(float(x_offset), float(y_offset)))

    def cursor_pos(self, x: float, y: float) -> None:
        """The cursor moved."""
        self._cursor = (float(x), float(y))
        self._emit(MouseMovedEvent(*self._cursor))

    def key_state(self, key: int) -> Action:
        """The last reported action of a key."""
        return self._keys.get(key, Action.RELEASE)

    def mouse_button_state(self, button: int) -> Action:
        """The last reported action of a mouse button."""
        return self._buttons.get(button, Action.RELEASE)

    def cursor_position(self) -> tuple[float, float]:
        """The last reported cursor position."""
        return self._cursor


def create_window(props: Optional[WindowProps] = None) -> HostWindow:
    """Create the platform's window."""
    return HostWindow(props)