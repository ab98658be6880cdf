"""Window, keyboard and mouse events, and their dispatch."""

from __future__ import annotations

import enum
from typing import Callable, ClassVar, TypeVar


class EventType(enum.Enum):
    """Kind of an event."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    MOUSE_BUTTON_PRESSED = 11
    MOUSE_BUTTON_RELEASED = 12
    MOUSE_MOVED = 13
    MOUSE_SCROLLED = 14


class EventCategory(enum.IntFlag):
    """Categories an event may belong to; they combine as bit flags."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _number(value: float) -> str:
    return f"{value:g}"


class Event:
    """Base class of all events.

    Concrete events set ``EVENT_TYPE`` and ``CATEGORY``; classes that leave
    ``EVENT_TYPE`` unset are abstract and cannot be instantiated.
    """

    EVENT_TYPE: ClassVar[EventType | None] = None
    CATEGORY: ClassVar[EventCategory] = EventCategory.NONE

    def __init__(self) -> None:
        if type(self).EVENT_TYPE is None:
            raise TypeError(f"{type(self).__name__} is abstract and cannot be instantiated")
        self.handled = False

    @property
    def event_type(self) -> EventType:
        """The kind of this event."""
        return type(self).EVENT_TYPE  # type: ignore[return-value]

    @property
    def name(self) -> str:
        """The event's name, such as ``WindowResize``."""
        return "".join(part.capitalize() for part in self.event_type.name.split("_"))

    @property
    def category_flags(self) -> EventCategory:
        """All categories this event belongs to."""
        return type(self).CATEGORY

    def is_in_category(self, category: EventCategory) -> bool:
        """Whether the event belongs to any of the given categories."""
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self}>"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to handlers that match its type."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event is of ``event_class``'s type.

        The handler's result is or-ed into the event's ``handled`` flag.
        Returns whether the handler was called.
        """
        if self._event.event_type is not event_class.EVENT_TYPE:
            return False
        self._event.handled = bool(func(self._event)) or self._event.handled  # type: ignore[arg-type]
        return True


# Application events


class WindowResizeEvent(Event):
    EVENT_TYPE = EventType.WINDOW_RESIZE
    CATEGORY = EventCategory.APPLICATION

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self._width}, {self._height}"


class WindowMovedEvent(Event):
    EVENT_TYPE = EventType.WINDOW_MOVED
    CATEGORY = EventCategory.APPLICATION


class WindowCloseEvent(Event):
    EVENT_TYPE = EventType.WINDOW_CLOSE
    CATEGORY = EventCategory.APPLICATION


class WindowFocusEvent(Event):
    EVENT_TYPE = EventType.WINDOW_FOCUS
    CATEGORY = EventCategory.APPLICATION


class WindowLostFocusEvent(Event):
    EVENT_TYPE = EventType.WINDOW_LOST_FOCUS
    CATEGORY = EventCategory.APPLICATION


class AppTickEvent(Event):
    EVENT_TYPE = EventType.APP_TICK
    CATEGORY = EventCategory.APPLICATION


class AppUpdateEvent(Event):
    EVENT_TYPE = EventType.APP_UPDATE
    CATEGORY = EventCategory.APPLICATION


class AppRenderEvent(Event):
    EVENT_TYPE = EventType.APP_RENDER
    CATEGORY = EventCategory.APPLICATION


# Keyboard events


class KeyEvent(Event):
    """Base of keyboard events."""

    CATEGORY = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self._key_code = key_code

    @property
    def key_code(self) -> int:
        return self._key_code


class KeyPressedEvent(KeyEvent):
    EVENT_TYPE = EventType.KEY_PRESSED

    def __init__(self, key_code: int, repeat_count: int) -> None:
        super().__init__(key_code)
        self._repeat_count = repeat_count

    @property
    def repeat_count(self) -> int:
        return self._repeat_count

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self._key_code} ({self._repeat_count} Repeats)"


class KeyReleasedEvent(KeyEvent):
    EVENT_TYPE = EventType.KEY_RELEASED

    def __init__(self, key_code: int) -> None:
        super().__init__(key_code)

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self._key_code}"


# Mouse events


class MouseMovedEvent(Event):
    EVENT_TYPE = EventType.MOUSE_MOVED
    CATEGORY = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_number(self._x)}, {_number(self._y)}"


class MouseScrolledEvent(Event):
    EVENT_TYPE = EventType.MOUSE_SCROLLED
    CATEGORY = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, x_offset: float, y_offset: float) -> None:
        super().__init__()
        self._x_offset = float(x_offset)
        self._y_offset = float(y_offset)

    @property
    def x_offset(self) -> float:
        return self._x_offset

    @property
    def y_offset(self) -> float:
        return self._y_offset

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_number(self._x_offset)}, {_number(self._y_offset)}"


class MouseButtonEvent(Event):
    """Base of mouse button events."""

    CATEGORY = EventCategory.MOUSE_BUTTON | EventCategory.INPUT

    def __init__(self, button: int) -> None:
        super().__init__()
        self._button = button

    @property
    def button(self) -> int:
        return self._button


class MouseButtonPressedEvent(MouseButtonEvent):
    EVENT_TYPE = EventType.MOUSE_BUTTON_PRESSED

    def __init__(self, button: int) -> None:
        super().__init__(button)

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self._button}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    EVENT_TYPE = EventType.MOUSE_BUTTON_RELEASED

    def __init__(self, button: int) -> None:
        super().__init__(button)

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self._button}"