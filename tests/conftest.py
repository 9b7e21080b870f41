"""Shared fixtures: instrumented scene objects, output targets and clocks."""

from __future__ import annotations

from typing import Callable, List

import pytest

from core.sceneobject import SceneObject


class Probe(SceneObject):
    """Scene object that records every lifecycle call into a shared log."""

    def __init__(self, label: str, log: list, **kwargs) -> None:
        super().__init__(**kwargs)
        self.label = label
        self.log = log

    def construct(self) -> None:
        self.log.append(("construct", self.label))

    def tick(self, dt: float) -> None:
        self.log.append(("tick", self.label, dt))
        self.tick_all_children(dt)

    def destroy(self) -> bool:
        self.log.append(("destroy", self.label))
        return super().destroy()


class RecordingTarget:
    def __init__(self, label: str, log: list) -> None:
        self.label = label
        self.log = log
        self.destroy_calls = 0

    def destroy(self) -> None:
        self.destroy_calls += 1
        self.log.append(("target_destroyed", self.label))


class FakeClock:
    """Stands in for pygame.time.Clock; returns a fixed frame time in ms."""

    def __init__(self, ms: int = 16) -> None:
        self.ms = ms
        self.calls: List[int] = []

    def tick(self, framerate: int = 0) -> int:
        self.calls.append(framerate)
        return self.ms


@pytest.fixture()
def event_log() -> list:
    return []


@pytest.fixture()
def make_probe(event_log) -> Callable[..., Probe]:
    def _make(label: str, **kwargs) -> Probe:
        return Probe(label, event_log, **kwargs)

    return _make


@pytest.fixture()
def make_target(event_log) -> Callable[[str], RecordingTarget]:
    def _make(label: str) -> RecordingTarget:
        return RecordingTarget(label, event_log)

    return _make


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()
