"""Drawable scene objects.

Primitives (``Line``, ``Cone``) keep a backend descriptor in sync with
their attributes; composites (``Vector``, ``Axes``) build and drive
primitives::

    from objects import Vector, VectorAttributes
"""

from .adornment import Adornment, ConeAdornment, LineAdornment
from .axes import Axes, AxesAttributes
from .cone import Cone, ConeAttributes
from .line import Line, LineAttributes
from .primitive import Primitive
from .vector import Vector, VectorAttributes

__all__ = [
    "Adornment",
    "Axes",
    "AxesAttributes",
    "Cone",
    "ConeAdornment",
    "ConeAttributes",
    "Line",
    "LineAdornment",
    "LineAttributes",
    "Primitive",
    "Vector",
    "VectorAttributes",
]
