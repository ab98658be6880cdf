import pytest

from nodens.application import Application
from nodens.events import KeyPressedEvent, WindowCloseEvent
from nodens.layer import Layer
from nodens.window import HostWindow, WindowProps


class Recorder(Layer):
    def __init__(self, name, log, handles=False):
        super().__init__(name)
        self.log = log
        self.handles = handles

    def on_attach(self):
        self.log.append(("attach", self.name))

    def on_detach(self):
        self.log.append(("detach", self.name))

    def on_update(self, ts):
        self.log.append(("update", self.name, float(ts)))

    def on_imgui_render(self, ts):
        self.log.append(("render", self.name))

    def on_event(self, event):
        self.log.append(("event", self.name))
        if self.handles:
            event.handled = True


class Closer(Layer):
    def __init__(self, frames):
        super().__init__("closer")
        self.frames = frames
        self.count = 0

    def on_update(self, ts):
        self.count += 1
        if self.count == self.frames:
            Application.get().window.close()


@pytest.fixture
def window():
    return HostWindow(WindowProps())


@pytest.fixture
def app(window):
    application = Application(window=window)
    yield application
    application.close()


def test_get_returns_instance(app):
    assert Application.get() is app


def test_second_application_raises(app):
    with pytest.raises(RuntimeError):
        Application()


def test_close_releases_instance(window):
    app = Application(window=window)
    app.close()
    with pytest.raises(RuntimeError):
        Application.get()
    with Application() as other:
        assert Application.get() is other


def test_context_manager_closes(window):
    with Application(window=window) as app:
        assert app.running
    assert not app.running
    with pytest.raises(RuntimeError):
        Application.get()


def test_window_from_props():
    with Application(WindowProps("demo", 320, 240, True)) as app:
        assert (app.window.title, app.window.width, app.window.height) == ("demo", 320, 240)


def test_window_is_the_given_one(app, window):
    assert app.window is window


def test_push_attaches_and_orders(app):
    log = []
    base = Recorder("base", log)
    overlay = Recorder("overlay", log)
    top = Recorder("top", log)
    app.push_layer(base)
    app.push_overlay(overlay)
    app.push_layer(top)
    assert log == [("attach", "base"), ("attach", "overlay"), ("attach", "top")]
    assert list(app.layers) == [base, top, overlay]


def test_events_go_top_down_and_stop_when_handled(app):
    log = []
    app.push_layer(Recorder("bottom", log))
    app.push_layer(Recorder("middle", log, handles=True))
    app.push_overlay(Recorder("top", log))
    event = KeyPressedEvent(65, 0)
    app.on_event(event)
    assert [entry for entry in log if entry[0] == "event"] == [("event", "top"), ("event", "middle")]
    assert event.handled


def test_window_close_stops_running(app, window):
    window.close()
    assert not app.running


def test_close_event_marked_handled(app):
    event = WindowCloseEvent()
    app.on_event(event)
    assert event.handled


def test_run_steps_and_stops(window):
    times = iter([1.0, 1.5, 3.0])
    log = []
    with Application(window=window, clock=lambda: next(times)) as app:
        app.push_layer(Recorder("rec", log))
        app.push_layer(Closer(3))
        app.run()
    steps = [entry[2] for entry in log if entry[0] == "update"]
    assert steps == pytest.approx([1.0, 0.5, 1.5])
    assert window.frames == 3
    frames = [entry[0] for entry in log if entry[0] in ("update", "render")]
    assert frames == ["update", "render"] * 3


def test_close_detaches_top_down(window):
    log = []
    app = Application(window=window)
    app.push_layer(Recorder("base", log))
    app.push_overlay(Recorder("overlay", log))
    app.close()
    app.close()
    assert [entry for entry in log if entry[0] == "detach"] == [("detach", "overlay"), ("detach", "base")]