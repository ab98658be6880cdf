"""The application: owns the window and the layers, and runs the frame loop."""

from __future__ import annotations

import time
from typing import Callable, ClassVar, Optional

from nodens.events import Event, EventDispatcher, WindowCloseEvent
from nodens.layer import Layer, LayerStack
from nodens.timestep import TimeStep
from nodens.window import Window, WindowProps, create_window

Clock = Callable[[], float]


def _elapsed_clock() -> Clock:
    start = time.perf_counter()
    return lambda: time.perf_counter() - start


class Application:
    """The one running application.

    Events come from the window, reach :meth:`on_event`, and are passed to
    the layers from the top down until one handles them.
    """

    _instance: ClassVar[Optional["Application"]] = None

    def __init__(
        self,
        props: Optional[WindowProps] = None,
        window: Optional[Window] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        if Application._instance is not None:
            raise RuntimeError("Application already exists!")
        self._window = window if window is not None else create_window(props)
        self._clock = clock if clock is not None else _elapsed_clock()
        self._running = True
        self._closed = False
        self._last_frame_time = 0.0
        self._layers = LayerStack()
        self._window.set_event_callback(self.on_event)
        Application._instance = self

    @staticmethod
    def get() -> "Application":
        """The application that currently exists."""
        if Application._instance is None:
            raise RuntimeError("no application exists")
        return Application._instance

    @property
    def window(self) -> Window:
        """The application's window."""
        return self._window

    @property
    def running(self) -> bool:
        """Whether the frame loop keeps going."""
        return self._running

    @property
    def layers(self) -> LayerStack:
        """The application's layers, bottom first."""
        return self._layers

    def push_layer(self, layer: Layer) -> None:
        """Add a layer below the overlays and attach it."""
        self._layers.push_layer(layer)
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        """Add an overlay on top and attach it."""
        self._layers.push_overlay(overlay)
        overlay.on_attach()

    def _on_window_close(self, event: WindowCloseEvent) -> bool:
        self._running = False
        return True

    def on_event(self, event: Event) -> None:
        """Handle an event, then pass it down the layers from the top."""
        EventDispatcher(event).dispatch(WindowCloseEvent, self._on_window_close)
        for layer in reversed(list(self._layers)):
            layer.on_event(event)
            if event.handled:
                break

    def run(self) -> None:
        """Run frames until the window is closed."""
        while self._running:
            now = float(self._clock())
            step = TimeStep(now - self._last_frame_time)
            self._last_frame_time = now

            for layer in list(self._layers):
                layer.on_update(step)
            for layer in list(self._layers):
                layer.on_imgui_render(step)

            self._window.on_update()

    def close(self) -> None:
        """Stop, detach every layer from the top down and release the instance."""
        if self._closed:
            return
        self._closed = True
        self._running = False
        for layer in reversed(list(self._layers)):
            layer.on_detach()
        if Application._instance is self:
            Application._instance = None

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()