import pytest

from core.engine import Engine
from core.registry import Registry
from core.scene import Scene


class RecordingScene(Scene):
    def __init__(self, log, **kwargs):
        super().__init__(**kwargs)
        self.log = log

    def construct(self):
        self.log.append("construct")

    def tick(self, dt):
        self.log.append(("tick", dt))
        super().tick(dt)


@pytest.fixture()
def registry():
    return Registry()


def test_start_constructs_scenes_once(registry, fake_clock, event_log):
    registry.register_scene("main", RecordingScene(event_log))
    engine = Engine(registry, clock=fake_clock)

    engine.start()
    engine.start()

    assert event_log == ["construct"]
    assert engine.started


def test_step_ticks_registered_tickers(registry, fake_clock, make_probe, event_log):
    registry.register_ticker("a", make_probe("a"))
    registry.register_ticker("b", make_probe("b"))
    engine = Engine(registry, clock=fake_clock)

    engine.step(0.5)

    assert event_log == [("tick", "a", 0.5), ("tick", "b", 0.5)]
    assert engine.frame_count == 1


def test_step_skips_disabled_ticker(registry, fake_clock, make_probe, event_log):
    probe = make_probe("off")
    probe.enabled = False
    registry.register_ticker("off", probe)

    Engine(registry, clock=fake_clock).step(0.1)

    assert event_log == []


def test_negative_dt_is_clamped(registry, fake_clock, make_probe, event_log):
    registry.register_ticker("a", make_probe("a"))

    Engine(registry, clock=fake_clock).step(-1.0)

    assert event_log == [("tick", "a", 0.0)]


def test_run_for_fixed_frames_uses_clock(registry, fake_clock, event_log):
    scene = RecordingScene(event_log)
    registry.register_scene("main", scene)
    registry.register_ticker("main", scene)
    frames = []
    engine = Engine(registry, clock=fake_clock, fps=30, on_frame=frames.append)

    engine.run(frames=3)

    assert fake_clock.calls == [30, 30, 30]
    assert frames == [pytest.approx(0.016)] * 3
    assert event_log[0] == "construct"
    assert len(event_log) == 4
    assert engine.frame_count == 3


def test_stop_ends_open_ended_run(registry, fake_clock):
    engine = None

    def on_frame(dt):
        if engine.frame_count == 5:
            engine.stop()

    engine = Engine(registry, clock=fake_clock, on_frame=on_frame)
    engine.run()

    assert engine.frame_count == 5
