"""Entry point kept minimal by delegating to Engine.

Builds a registry, registers a small demo scene (axes plus an orbiting
vector, with a camera move) and runs the frame loop for a few seconds.
"""

import logging
import math

from pygame.math import Vector3

import colors
from camera import Camera, EasingDirection, EasingStyle, SceneWithCamera
from config import FPS, LOG_LEVEL
from core.attributes import CFrame
from core.engine import Engine
from core.log import setup_default_logging
from core.registry import Registry
from core.scene import SceneAttributes
from objects import Axes, AxesAttributes, Vector, VectorAttributes

logger = logging.getLogger(__name__)


class DemoScene(SceneWithCamera):
    def __init__(self):
        super().__init__(SceneAttributes(name="demo"), camera=Camera())
        self.elapsed = 0.0

    def construct(self):
        self.add(
            {
                "axes": Axes(
                    AxesAttributes(
                        sizes=(5, 4, 3),
                        colors=(colors.RED_C, colors.GREEN_C, colors.BLUE_C),
                    )
                ),
                "orbit": Vector(VectorAttributes(cframe=CFrame.at(3, 0, 0), color=colors.YELLOW_C)),
            }
        )
        self.move_camera_to(
            CFrame(Vector3(8, 6, -12), Vector3(-0.4, 0.6, 0)),
            2.0,
            EasingStyle.SINE,
            EasingDirection.IN_OUT,
        )

    def tick(self, dt):
        self.elapsed += dt
        orbit = self.get_child("orbit")
        orbit.set_param("cframe", CFrame.at(3 * math.cos(self.elapsed), 3 * math.sin(self.elapsed), 0))
        super().tick(dt)


def main(seconds: float = 3.0):  # small wrapper for clarity / debuggers
    setup_default_logging(LOG_LEVEL)
    registry = Registry()
    scene = DemoScene()
    registry.register_scene(scene.name, scene)
    registry.register_ticker(scene.name, scene)

    def report(dt):
        shaft = scene.get_child("orbit").line.native
        logger.debug("frame: shaft length %.3f, camera at %s", shaft.length, scene.camera.position)

    Engine(registry, on_frame=report).run(frames=int(seconds * FPS))
    scene.destroy()


if __name__ == "__main__":
    main()
