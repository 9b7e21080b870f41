"""Frame-sampled camera tween.

A tween captures the camera's transform when it starts playing and, on
every :meth:`CameraTween.advance`, writes ``start + (end - start) * ease``
back into the camera. Completion is therefore quantized to the frame
loop: the owner advances the tween from its own tick.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional, Tuple

from pygame.math import Vector3

from config import DEFAULT_TWEEN_DURATION
from core.attributes import CFrame
from camera.easing import EasingDirection, EasingStyle, ease

logger = logging.getLogger(__name__)

# Absorbs float drift when summing many small frame deltas
_EPSILON = 1e-9


class TweenState(Enum):
    IDLE = auto()
    PLAYING = auto()
    PAUSED = auto()
    COMPLETED = auto()
    CANCELLED = auto()


@dataclass(frozen=True)
class TweenInfo:
    """Timing and shape of a tween.

    ``repeat_count`` extra cycles follow the first one; with ``reverses``
    each cycle runs forward then back, ending at the start value.
    """

    time: float = DEFAULT_TWEEN_DURATION
    easing_style: EasingStyle = EasingStyle.LINEAR
    easing_direction: EasingDirection = EasingDirection.OUT
    repeat_count: int = 0
    reverses: bool = False
    delay_time: float = 0.0

    @property
    def cycle_time(self) -> float:
        return max(0.0, self.time) * (2.0 if self.reverses else 1.0)

    @property
    def total_time(self) -> float:
        return max(0.0, self.delay_time) + self.cycle_time * (max(0, self.repeat_count) + 1)


@dataclass
class Connection:
    """Handle to a signal subscription."""

    signal: "TweenSignal"
    callback: Callable[[], None]

    def disconnect(self) -> None:
        self.signal._remove(self)


class TweenSignal:
    """Completion notification of a tween. Fires at most once."""

    def __init__(self) -> None:
        self._connections: List[Tuple[Connection, bool]] = []
        self.fired = False

    def connect(self, callback: Callable[[], None]) -> Connection:
        return self._add(callback, once=False)

    def once(self, callback: Callable[[], None]) -> Connection:
        return self._add(callback, once=True)

    def _add(self, callback: Callable[[], None], once: bool) -> Connection:
        conn = Connection(self, callback)
        if self.fired:
            # Late subscribers still learn about the completion
            callback()
            return conn
        self._connections.append((conn, once))
        return conn

    def _remove(self, conn: Connection) -> None:
        self._connections = [(c, o) for c, o in self._connections if c is not conn]

    def fire(self) -> None:
        if self.fired:
            return
        self.fired = True
        pending = self._connections
        self._connections = [(c, o) for c, o in pending if not o]
        for conn, _ in pending:
            conn.callback()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class CameraTween:
    """Animates ``camera.cframe`` (and optional extra properties).

    Parameters
    ----------
    camera : object
        Anything with a read/write ``cframe`` attribute.
    target : CFrame
        Transform reached at the end of a forward cycle.
    info : TweenInfo
        Timing and easing.
    other_properties : dict | None
        Extra camera attributes. Numbers are interpolated alongside the
        transform; anything else is assigned on completion.
    on_finished : callable | None
        Called with the tween once it completes or is cancelled.
    """

    def __init__(
        self,
        camera,
        target: CFrame,
        info: Optional[TweenInfo] = None,
        other_properties: Optional[Dict[str, Any]] = None,
        on_finished: Optional[Callable[["CameraTween"], None]] = None,
    ) -> None:
        self.camera = camera
        self.target = target.copy()
        self.info = info or TweenInfo()
        self.other_properties = dict(other_properties or {})
        self.state = TweenState.IDLE
        self.elapsed = 0.0
        self.completed = TweenSignal()
        self._on_finished = on_finished

        self._start: Optional[CFrame] = None
        self._numeric: Dict[str, Tuple[float, float]] = {}

    @property
    def total_duration(self) -> float:
        return self.info.total_time

    @property
    def is_active(self) -> bool:
        return self.state in (TweenState.PLAYING, TweenState.PAUSED)

    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state is TweenState.IDLE:
            self._capture_start()
        elif self.state is not TweenState.PAUSED:
            logger.debug("CameraTween.play(): ignored in state %s", self.state.name)
            return
        self.state = TweenState.PLAYING

    def pause(self) -> None:
        if self.state is TweenState.PLAYING:
            self.state = TweenState.PAUSED

    def cancel(self) -> None:
        """Stop sampling; the camera keeps whatever value it has now."""
        if self.state in (TweenState.COMPLETED, TweenState.CANCELLED):
            return
        self.state = TweenState.CANCELLED
        self._finish()

    def advance(self, dt: float) -> None:
        if self.state is not TweenState.PLAYING:
            return
        self.elapsed += max(0.0, dt)
        if self.elapsed + _EPSILON >= self.info.total_time:
            self._apply_end()
            self.state = TweenState.COMPLETED
            self._finish()
            self.completed.fire()
            return
        self._apply(self._alpha())

    # ------------------------------------------------------------------
    def _capture_start(self) -> None:
        self._start = self.camera.cframe.copy()
        for name, end in self.other_properties.items():
            current = getattr(self.camera, name, None)
            if _is_number(end) and _is_number(current):
                self._numeric[name] = (float(current), float(end))

    def _alpha(self) -> float:
        info = self.info
        t = self.elapsed - info.delay_time
        if t <= 0.0:
            return 0.0
        if info.time <= 0.0:
            return 1.0
        within = math.fmod(t, info.cycle_time)
        if info.reverses and within > info.time:
            phase = 1.0 - (within - info.time) / info.time
        else:
            phase = within / info.time
        return ease(phase, info.easing_style, info.easing_direction)

    def _apply(self, alpha: float) -> None:
        start = self._start
        end = self.target
        position = start.position + (end.position - start.position) * alpha
        rotation = start.rotation + (end.rotation - start.rotation) * alpha
        self.camera.cframe = CFrame(Vector3(position), Vector3(rotation))
        for name, (a, b) in self._numeric.items():
            setattr(self.camera, name, a + (b - a) * alpha)

    def _apply_end(self) -> None:
        if self.info.reverses:
            self.camera.cframe = self._start.copy()
            for name, (a, _) in self._numeric.items():
                setattr(self.camera, name, a)
            return
        self.camera.cframe = self.target.copy()
        for name, value in self.other_properties.items():
            setattr(self.camera, name, value)

    def _finish(self) -> None:
        if self._on_finished is not None:
            callback, self._on_finished = self._on_finished, None
            callback(self)


__all__ = [
    "CameraTween",
    "Connection",
    "TweenInfo",
    "TweenSignal",
    "TweenState",
]
