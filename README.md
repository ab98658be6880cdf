# nodens

A small application framework built around three ideas:

* **Events** – typed event objects (window, keyboard, mouse, application)
  with categories and a dispatcher that routes an event to a handler by type.
* **Layers** – an ordered `LayerStack` of `Layer` objects. Ordinary layers
  sit below overlays; updates run bottom to top, events travel top to bottom
  and stop as soon as a layer marks them handled.
* **A frame loop** – `Application` owns a window and a layer stack,
  measures the time between frames as a `TimeStep`, and runs until the
  window is closed.

The package has no dependencies beyond the standard library.

## Modules

| Module | Contents |
| --- | --- |
| `nodens.events` | `EventType`, `EventCategory`, `Event`, `EventDispatcher` and the concrete events |
| `nodens.layer` | `Layer`, `LayerStack` |
| `nodens.timestep` | `TimeStep` |
| `nodens.window` | `WindowProps`, `Action`, `Window`, `HostWindow`, `create_window` |
| `nodens.input` | `Input`, `WindowInput` |
| `nodens.application` | `Application` |
| `nodens.codes` | `Key`, `MouseButton` |
| `nodens.log` | `init`, `core_logger`, `client_logger` |
| `nodens.sinewave` | `SinewaveLayer`, `create_application` |

## Writing a layer

Subclass `Layer` and override the hooks you need: `on_attach`,
`on_detach`, `on_update(ts)`, `on_imgui_render(ts)` and `on_event(event)`.
A layer also exposes `name`, `attached` and `last_render_step` (the time
step passed to its most recent `on_imgui_render`).

```python
from nodens.events import EventDispatcher, KeyPressedEvent
from nodens.layer import Layer


class CounterLayer(Layer):
    def __init__(self):
        super().__init__("Counter")
        self.frames = 0
        self.keys = []

    def on_update(self, ts):
        self.frames += 1

    def on_event(self, event):
        EventDispatcher(event).dispatch(KeyPressedEvent, self.on_key)

    def on_key(self, event):
        self.keys.append(event.key_code)
        return True  # handled: layers below will not see it
```

`LayerStack.push_layer` inserts above the other layers but below every
overlay; `push_overlay` appends on top. `pop_layer` and `pop_overlay`
remove a layer and do nothing if it is not there. The stack supports
`iter`, `reversed`, `len` and `in`.

## Running an application

```python
from nodens.application import Application
from nodens.codes import Key
from nodens.window import Action, HostWindow, WindowProps

window = HostWindow(WindowProps("Demo", 800, 600, False))
with Application(window=window) as app:
    counter = CounterLayer()
    app.push_layer(counter)

    # Events arrive through the window and travel down the layer stack.
    window.resize(1024, 768)
    window.key(Key.A, Action.PRESS)

    # Closing the window stops the loop.
    window.close()
    app.run()
```

Only one `Application` exists at a time: creating a second raises
`RuntimeError`, and `Application.get()` returns the current one.
`Application.close()` (also called on leaving a `with` block) stops the
loop, detaches the layers from the top down and releases the instance so a
new application can be created.

If no window is given, one is made with `create_window(props)`. The frame
loop reads time from a clock, by default the seconds elapsed since the
application was created; pass `clock=` any zero-argument callable returning
seconds to control it, for instance in tests. Each frame calls `on_update`
on every layer, then `on_imgui_render` on every layer, then the window's
`on_update`.

## Windows

`HostWindow` holds no native handle: the host program reports what
happened through `resize`, `close`, `key`, `mouse_button`, `scroll` and
`cursor_pos`, and each becomes the matching event sent to the window's
event callback (a `RuntimeError` is raised if none is set). A key press
gives a `KeyPressedEvent` with repeat count 0, a repeat gives one with
repeat count 1, and a release gives a `KeyReleasedEvent`; mouse-button
repeats are ignored. The window keeps `width`, `height`, `title`, `vsync`
(settable) and `frames`, the number of times `on_update` was called, and
remembers the last reported state via `key_state`, `mouse_button_state`
and `cursor_position`.

## Events

Every event has the properties `event_type` (an `EventType`), `name`
(such as `"WindowResize"`) and `category_flags` (built from the
`EventCategory` flags), the method `is_in_category(...)`, and a `handled`
flag. `str(event)` gives a readable description such as
`WindowResizeEvent: 1024, 768` or `KeyPressedEvent: 65 (0 Repeats)`.

`EventDispatcher(event).dispatch(EventClass, func)` calls `func` only if
the event is of that type, ors its result into `handled`, and returns
whether `func` was called.

## Input

`WindowInput(window)` answers polling questions about a `HostWindow`:
`is_key_pressed` (true after a press or repeat), `is_mouse_button_pressed`,
`mouse_position`, `mouse_x` and `mouse_y`. Key and button codes are
available as the `Key` and `MouseButton` enumerations in `nodens.codes`.

## Logging

`nodens.log.init()` sets up two loggers writing every level, including a
`TRACE` level below `DEBUG`, to standard output: the framework's own
(`core_logger()`, named `NODENS`) and one for application code
(`client_logger()`, named `APP`). Lines are coloured by level when standard
output is a terminal. Asking for a logger before `init()` raises
`RuntimeError`.

## Example

`nodens.sinewave` contains `SinewaveLayer`, which holds 1001 samples of a
2D sine wave (`xs`, `ys`) and a 3D helix (`xs3d`, `ys3d`, `zs3d`) and
shifts them along on every update, and consumes window resize events,
keeping the last one in `last_resize`. `create_application(window=None)`
builds an application titled "Nodens Example - Sinewave3d" (800×600,
vsync off) with that layer pushed.

## What it does not do

The package opens no native window and draws nothing: there is no
graphics context, no immediate-mode UI and no plotting. `on_imgui_render`
is only a per-frame hook, and the sine-wave example computes its data
without displaying it. There is no command-line program; applications are
built and run from Python.