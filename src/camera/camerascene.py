"""Scene that owns a single-slot camera animation.

At most one camera tween is in flight per scene: ``move_camera_to``
refuses to start another until the current one completes or is
cancelled. The tween is advanced from the scene's own tick.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from core.attributes import CFrame
from core.scene import Scene
from camera.easing import EasingDirection, EasingStyle
from camera.tween import CameraTween, TweenInfo

logger = logging.getLogger(__name__)


class SceneWithCamera(Scene):
    def __init__(self, params=None, *, camera=None, **kwargs) -> None:
        super().__init__(params, **kwargs)
        # Not owned: the camera outlives the scene
        self._camera = camera
        self._active_tween: Optional[CameraTween] = None

    @property
    def camera(self):
        return self._camera

    def set_camera(self, camera) -> None:
        self._camera = camera

    @property
    def camera_tween_playing(self) -> bool:
        return self._active_tween is not None

    @property
    def active_tween(self) -> Optional[CameraTween]:
        return self._active_tween

    def move_camera_to(
        self,
        cframe: CFrame,
        duration: float,
        easing: Optional[EasingStyle] = None,
        direction: Optional[EasingDirection] = None,
        repeat_count: int = 0,
        reverses: bool = False,
        other_properties: Optional[Dict[str, Any]] = None,
    ) -> Optional[CameraTween]:
        """Start animating the camera towards ``cframe`` over ``duration`` seconds.

        Returns the playing tween, or None when a tween is already in
        flight or no camera has been set.
        """
        if self._active_tween is not None:
            logger.info("move_camera_to(): a camera tween is already playing")
            return None
        if self._camera is None:
            logger.info("move_camera_to(): camera does not exist")
            return None

        info = TweenInfo(
            time=duration,
            easing_style=easing or EasingStyle.LINEAR,
            easing_direction=direction or EasingDirection.OUT,
            repeat_count=repeat_count or 0,
            reverses=bool(reverses),
        )
        tween = CameraTween(
            self._camera,
            cframe,
            info,
            other_properties=other_properties,
            on_finished=self._on_tween_finished,
        )
        self._active_tween = tween
        tween.play()
        return tween

    def _on_tween_finished(self, tween: CameraTween) -> None:
        if self._active_tween is tween:
            self._active_tween = None

    def tick(self, dt: float) -> None:
        if self._active_tween is not None:
            self._active_tween.advance(dt)
        self.tick_all_children(dt)

    def _release_resources(self) -> None:
        if self._active_tween is not None:
            self._active_tween.cancel()


__all__ = ["SceneWithCamera"]
