"""Backend-facing descriptors of the primitive objects.

A renderer reads these after each tick sweep; the scene objects only
write them. Field names mirror what a renderer needs to draw a line
segment or a cone marker, nothing more.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from colors import WHITE, Color3
from core.attributes import CFrame
from core.output import OutputTarget


@dataclass
class Adornment:
    color: Color3 = WHITE
    cframe: CFrame = field(default_factory=CFrame)
    transparency: float = 0.0
    visible: bool = True
    # Resolved output target the visuals attach to (None when detached)
    adornee: Optional[OutputTarget] = None
    destroyed: bool = False

    def destroy(self) -> None:
        self.adornee = None
        self.destroyed = True


@dataclass
class LineAdornment(Adornment):
    length: float = 0.0
    thickness: float = 0.0


@dataclass
class ConeAdornment(Adornment):
    radius: float = 0.0
    height: float = 0.0


__all__ = ["Adornment", "ConeAdornment", "LineAdornment"]
