from __future__ import annotations

from dataclasses import dataclass, field

from colors import WHITE, Color3
from config import LINE_THICKNESS
from core.attributes import Attributes, CFrame
from objects.adornment import LineAdornment
from objects.primitive import Primitive


@dataclass
class LineAttributes(Attributes):
    length: float = 0.0
    thickness: float = LINE_THICKNESS
    color: Color3 = WHITE
    cframe: CFrame = field(default_factory=CFrame)


class Line(Primitive):
    """Straight segment of ``length`` placed and oriented by ``cframe``."""

    attributes_type = LineAttributes
    native_type = LineAdornment

    def _sync_size(self, native: LineAdornment) -> None:
        native.length = self.params.length
        native.thickness = self.params.thickness


__all__ = ["Line", "LineAttributes"]
