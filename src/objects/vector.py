"""Vector: an arrow drawn as a Line (shaft) plus a Cone (head).

The renderer never special-cases vectors; it only ever sees the two
primitives this object owns and keeps updated.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from pygame.math import Vector3

from colors import WHITE, Color3
from core.attributes import Attributes, CFrame
from core.sceneobject import SceneObject
from objects.cone import Cone, ConeAttributes
from objects.line import Line, LineAttributes


@dataclass
class VectorAttributes(Attributes):
    """
    Parameters
    ----------
    cframe : CFrame
        Head of the arrow (its position is the tip).
    origin : CFrame | None
        Tail of the arrow; world origin when None.
    color : Color3
        Shared by shaft and head.
    true_midpoint : bool
        Anchor the shaft at the real midpoint of tail and head. Off by
        default: the shaft is anchored at ``tail + direction``, i.e. at
        the head, which is what existing scenes are laid out against.
    """

    cframe: CFrame = field(default_factory=CFrame)
    origin: Optional[CFrame] = None
    color: Color3 = WHITE
    true_midpoint: bool = False


class Vector(SceneObject):
    attributes_type = VectorAttributes

    def __init__(self, params: Optional[VectorAttributes] = None, **kwargs) -> None:
        super().__init__(params, **kwargs)
        self._line: Optional[Line] = None
        self._cone: Optional[Cone] = None

    @property
    def line(self) -> Optional[Line]:
        return self._line

    @property
    def cone(self) -> Optional[Cone]:
        return self._cone

    def construct(self) -> None:
        p = self.params
        self._line = Line(
            LineAttributes(length=0.0, color=p.color, cframe=p.cframe, visible=p.visible)
        )
        self._cone = Cone(ConeAttributes(color=p.color, cframe=p.cframe, visible=p.visible))
        self.add_child("line", self._line)
        self.add_child("cone", self._cone)

    def set_native_line(self, prop: str, value) -> None:
        if self._line is not None:
            self._line.set_native(prop, value)

    def set_native_cone(self, prop: str, value) -> None:
        if self._cone is not None:
            self._cone.set_native(prop, value)

    def tick(self, dt: float) -> None:
        if self._line is None or self._cone is None or self.is_destroyed:
            return

        p = self.params
        origin = p.origin if p.origin is not None else CFrame()
        tail = origin.position
        head = p.cframe.position

        direction = head - tail
        length = direction.length()
        if p.true_midpoint:
            mid = tail + direction * 0.5
        else:
            mid = tail + direction

        orient = Vector3(0, 0, 0)
        line_cf = CFrame(Vector3(mid), Vector3(orient.x - math.pi, orient.y, orient.z))
        cone_cf = CFrame(Vector3(head), Vector3(orient))

        self._line.set_native("length", length)
        self._line.set_native("cframe", line_cf)
        self._line.set_native("color", p.color)
        self._line.set_native("visible", p.visible)

        self._cone.set_native("cframe", cone_cf)
        self._cone.set_native("color", p.color)
        self._cone.set_native("visible", p.visible)


__all__ = ["Vector", "VectorAttributes"]
