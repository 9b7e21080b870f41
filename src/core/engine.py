"""Frame loop driving registered scenes and tickers.

- start(): constructs every registered scene once.
- step(dt): ticks every registered ticker through its enable-gated entry.
- run(): start + a clock-paced step loop.

The engine owns timing only; it never draws. A renderer, if any, reads
primitive descriptors between steps (see ``on_frame``).
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

import pygame

from config import FPS
from core.registry import Registry

logger = logging.getLogger(__name__)


class FrameClock(Protocol):
    def tick(self, framerate: int = 0) -> int: ...


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        registry: Registry,
        *,
        clock: Optional[FrameClock] = None,
        fps: int = FPS,
        on_frame: Optional[Callable[[float], None]] = None,
    ):
        self.registry = registry
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.fps = fps
        self.on_frame = on_frame
        self.frame_count = 0
        self._started = False
        self._running = False

    @property
    def started(self) -> bool:
        return self._started

    # ------------------------------------------------------------------
    def start(self) -> None:
        if self._started:
            return
        scenes = self.registry.scenes()
        tickers = self.registry.tickers()
        logger.info("Engine.start(): registering %d scenes and %d tickers", len(scenes), len(tickers))
        for scene in scenes.values():
            scene._construct()
        self._started = True

    # ------------------------------------------------------------------
    def step(self, dt: float) -> None:
        dt = max(0.0, dt)
        for ticker in self.registry.tickers().values():
            ticker._tick(dt)
        self.frame_count += 1
        if self.on_frame is not None:
            self.on_frame(dt)

    # ------------------------------------------------------------------
    def stop(self) -> None:
        self._running = False

    def run(self, frames: Optional[int] = None) -> None:
        """Run until ``stop()`` or, when given, for ``frames`` frames."""
        self.start()
        self._running = True
        remaining = frames
        while self._running:
            if remaining is not None:
                if remaining <= 0:
                    break
                remaining -= 1
            dt = self.clock.tick(self.fps) / 1000.0
            self.step(dt)
        self._running = False


__all__ = ["Engine", "FrameClock"]
