"""Attribute store shared by every scene object.

Each object type declares its parameters as a dataclass deriving from
:class:`Attributes`. Objects keep a private full copy taken at
construction time and mutate it in place afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace

from pygame.math import Vector3


def _vec(value) -> Vector3:
    if isinstance(value, Vector3):
        return value
    return Vector3(value)


@dataclass
class CFrame:
    """Position plus Euler rotation (radians) of an object."""

    position: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    rotation: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))

    def __post_init__(self) -> None:
        # Accept plain (x, y, z) tuples from callers
        self.position = _vec(self.position)
        self.rotation = _vec(self.rotation)

    @classmethod
    def at(cls, x: float, y: float, z: float) -> "CFrame":
        return cls(Vector3(x, y, z))

    def copy(self) -> "CFrame":
        return CFrame(Vector3(self.position), Vector3(self.rotation))


@dataclass
class Attributes:
    """Base attribute set; every drawable has a visibility flag."""

    visible: bool = True

    def copy(self):
        """Return a full-valued copy, nested transforms included."""
        clone = replace(self)
        for f in fields(clone):
            value = getattr(clone, f.name)
            if isinstance(value, (CFrame, Vector3)):
                setattr(clone, f.name, value.copy())
        return clone


__all__ = ["Attributes", "CFrame"]
