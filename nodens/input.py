"""Polling the current state of keyboard and mouse."""

from __future__ import annotations

from abc import ABC, abstractmethod

from nodens.window import Action, HostWindow


class Input(ABC):
    """Answers questions about the input devices' current state."""

    @abstractmethod
    def is_key_pressed(self, key_code: int) -> bool:
        """Whether the key is held down."""

    @abstractmethod
    def is_mouse_button_pressed(self, button: int) -> bool:
        """Whether the mouse button is held down."""

    @abstractmethod
    def mouse_position(self) -> tuple[float, float]:
        """The cursor's position."""

    def mouse_x(self) -> float:
        """The cursor's horizontal position."""
        return self.mouse_position()[0]

    def mouse_y(self) -> float:
        """The cursor's vertical position."""
        return self.mouse_position()[1]


class WindowInput(Input):
    """Input state as reported to a window."""

    def __init__(self, window: HostWindow) -> None:
        self._window = window

    def is_key_pressed(self, key_code: int) -> bool:
        return self._window.key_state(key_code) in (Action.PRESS, Action.REPEAT)

    def is_mouse_button_pressed(self, button: int) -> bool:
        return self._window.mouse_button_state(button) is Action.PRESS

    def mouse_position(self) -> tuple[float, float]:
        x, y = self._window.cursor_position()
        return float(x), float(y)