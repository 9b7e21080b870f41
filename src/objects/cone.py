from __future__ import annotations

from dataclasses import dataclass, field

from colors import WHITE, Color3
from config import CONE_HEIGHT, CONE_RADIUS
from core.attributes import Attributes, CFrame
from objects.adornment import ConeAdornment
from objects.primitive import Primitive


@dataclass
class ConeAttributes(Attributes):
    radius: float = CONE_RADIUS
    height: float = CONE_HEIGHT
    color: Color3 = WHITE
    cframe: CFrame = field(default_factory=CFrame)


class Cone(Primitive):
    """Cone marker, used as the arrow head of a Vector."""

    attributes_type = ConeAttributes
    native_type = ConeAdornment

    def _sync_size(self, native: ConeAdornment) -> None:
        native.radius = self.params.radius
        native.height = self.params.height


__all__ = ["Cone", "ConeAttributes"]
