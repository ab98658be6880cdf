"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator, Optional

from nodens.events import Event
from nodens.timestep import TimeStep


class Layer:
    """A unit of per-frame behaviour; subclasses override the hooks they need."""

    def __init__(self, name: str = "Layer") -> None:
        self._name = name
        self._attached = False
        self._last_render_step: Optional[TimeStep] = None

    @property
    def name(self) -> str:
        """The layer's name, for debugging."""
        return self._name

    @property
    def attached(self) -> bool:
        """Whether the layer has been attached and not yet detached."""
        return self._attached

    @property
    def last_render_step(self) -> Optional[TimeStep]:
        """The time step passed to the most recent UI render, if any."""
        return self._last_render_step

    def on_attach(self) -> None:
        """Called when the layer is pushed onto an application."""
        self._attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed."""
        self._attached = False

    def on_update(self, ts: TimeStep) -> None:
        """Called once per frame."""

    def on_imgui_render(self, ts: TimeStep) -> None:
        """Called once per frame after :meth:`on_update`, to draw the UI."""
        self._last_render_step = ts

    def on_event(self, event: Event) -> None:
        """Called for each event that reaches this layer."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name!r}>"


class LayerStack:
    """Layers followed by overlays; overlays always stay after the layers.

    Iteration goes from the bottom layer to the top overlay.
    """

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def _find(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def push_layer(self, layer: Layer) -> None:
        """Add a layer above the other layers but below every overlay."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        """Add an overlay on top of everything."""
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Remove a layer; does nothing if it is not in the stack."""
        index = self._find(layer)
        if index is not None:
            del self._layers[index]
            self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove an overlay; does nothing if it is not in the stack."""
        index = self._find(overlay)
        if index is not None:
            del self._layers[index]

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def __contains__(self, layer: object) -> bool:
        return any(item is layer for item in self._layers)