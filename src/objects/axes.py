from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from pygame.math import Vector3

from colors import WHITE, Color3
from core.attributes import Attributes, CFrame
from core.sceneobject import SceneObject
from objects.vector import Vector, VectorAttributes

_AXIS_NAMES = ("x_axis", "y_axis", "z_axis")


@dataclass
class AxesAttributes(Attributes):
    sizes: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    colors: Tuple[Color3, Color3, Color3] = (WHITE, WHITE, WHITE)
    origin: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))

    def __post_init__(self) -> None:
        if not isinstance(self.origin, Vector3):
            self.origin = Vector3(self.origin)


class Axes(SceneObject):
    """Three Vectors (X, Y, Z) sharing one origin.

    Axes has no derived state of its own; each child Vector computes its
    shaft and head every tick.
    """

    attributes_type = AxesAttributes

    def __init__(self, params: Optional[AxesAttributes] = None, **kwargs) -> None:
        super().__init__(params, **kwargs)
        self._vectors: Tuple[Vector, ...] = ()

    @property
    def x_vector(self) -> Optional[Vector]:
        return self._vectors[0] if self._vectors else None

    @property
    def y_vector(self) -> Optional[Vector]:
        return self._vectors[1] if self._vectors else None

    @property
    def z_vector(self) -> Optional[Vector]:
        return self._vectors[2] if self._vectors else None

    def construct(self) -> None:
        p = self.params
        origin = Vector3(p.origin)
        origin_cf = CFrame(Vector3(origin))

        vectors = []
        for axis, (name, size, color) in enumerate(zip(_AXIS_NAMES, p.sizes, p.colors)):
            offset = Vector3(0, 0, 0)
            offset[axis] = size
            vector = Vector(
                VectorAttributes(
                    origin=origin_cf,
                    cframe=CFrame(origin + offset),
                    color=color,
                    visible=p.visible,
                )
            )
            self.add_child(name, vector)
            vectors.append(vector)
        self._vectors = tuple(vectors)

    def tick(self, dt: float) -> None:
        self.tick_all_children(dt)


__all__ = ["Axes", "AxesAttributes"]
