"""Named lookup of scenes and per-frame update participants ("tickers").

A :class:`Registry` is an ordinary object owned by whoever builds the
engine, so separate registries never see each other's entries.
Registration checks once that the value can do what the engine will ask
of it; values that cannot are logged and skipped.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Tickable(Protocol):
    def tick(self, dt: float) -> None: ...

    def _tick(self, dt: float) -> None: ...


@runtime_checkable
class SceneLike(Protocol):
    def add(self, objects) -> None: ...

    def _construct(self) -> None: ...


class Registry:
    def __init__(self) -> None:
        self._scenes: Dict[str, SceneLike] = {}
        self._tickers: Dict[str, Tickable] = {}

    # ------------------------------------------------------------------
    # Scenes
    # ------------------------------------------------------------------
    def register_scene(self, name: str, scene) -> bool:
        if not isinstance(scene, SceneLike):
            logger.warning(
                "register_scene(): cannot register %r as %r, it has no add() / _construct()",
                scene,
                name,
            )
            return False
        logger.debug("register_scene(): registered %r", name)
        self._scenes[name] = scene
        return True

    def get_scene(self, name: str) -> Optional[SceneLike]:
        return self._scenes.get(name)

    def remove_scene(self, name: str) -> None:
        self._scenes.pop(name, None)

    def scenes(self) -> Dict[str, SceneLike]:
        return dict(self._scenes)

    def clear_scenes(self) -> None:
        self._scenes.clear()

    # ------------------------------------------------------------------
    # Tickers
    # ------------------------------------------------------------------
    def register_ticker(self, name: str, ticker) -> bool:
        if not isinstance(ticker, Tickable):
            logger.warning(
                "register_ticker(): cannot register %r as %r, it has no tick() / _tick()",
                ticker,
                name,
            )
            return False
        logger.debug("register_ticker(): registered %r", name)
        self._tickers[name] = ticker
        return True

    def get_ticker(self, name: str) -> Optional[Tickable]:
        return self._tickers.get(name)

    def remove_ticker(self, name: str) -> None:
        self._tickers.pop(name, None)

    def tickers(self) -> Dict[str, Tickable]:
        return dict(self._tickers)

    def clear_tickers(self) -> None:
        self._tickers.clear()


__all__ = ["Registry", "SceneLike", "Tickable"]
