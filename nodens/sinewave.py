"""An example application that animates a 2D and a 3D sine wave."""

from __future__ import annotations

import math
from typing import Optional

from nodens.application import Application
from nodens.events import Event, EventDispatcher, WindowResizeEvent
from nodens.layer import Layer
from nodens.timestep import TimeStep
from nodens.window import Window, WindowProps

_COUNT = 1001
_STEP = 0.001
_FREQUENCY = 10 * 3.1415


class SinewaveLayer(Layer):
    """Holds sine wave samples and slides them along on every frame.

    ``xs``/``ys`` form the 2D wave; ``xs3d``/``ys3d``/``zs3d`` a helix.
    """

    def __init__(self) -> None:
        super().__init__("Sinewave3d")
        self.xs = [i * _STEP for i in range(_COUNT)]
        self.xs3d = list(self.xs)
        self.last_resize: Optional[WindowResizeEvent] = None
        self._sample()

    def _sample(self) -> None:
        self.ys = [math.sin(_FREQUENCY * x) for x in self.xs]
        self.ys3d = [math.sin(_FREQUENCY * x) for x in self.xs3d]
        self.zs3d = [math.cos(_FREQUENCY * x) for x in self.xs3d]

    def on_update(self, ts: TimeStep) -> None:
        self.xs = [x + _STEP for x in self.xs]
        self.xs3d = [x + _STEP for x in self.xs3d]
        self._sample()

    def on_event(self, event: Event) -> None:
        EventDispatcher(event).dispatch(WindowResizeEvent, self.on_window_resize)

    def on_window_resize(self, event: WindowResizeEvent) -> bool:
        """Remember the resize and consume it."""
        self.last_resize = event
        return True


def create_application(window: Optional[Window] = None) -> Application:
    """Create the example application with its sine wave layer."""
    app = Application(
        WindowProps("Nodens Example - Sinewave3d", 800, 600, False), window=window
    )
    app.push_layer(SinewaveLayer())
    return app