"""Easing curves for tweens.

Every style is defined once as an "in" curve on [0, 1]; the OUT and
IN_OUT directions are derived from it, so all of them satisfy
``ease(0) == 0`` and ``ease(1) == 1``.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict


class EasingStyle(Enum):
    LINEAR = "Linear"
    SINE = "Sine"
    BACK = "Back"
    QUAD = "Quad"
    QUART = "Quart"
    QUINT = "Quint"
    BOUNCE = "Bounce"
    ELASTIC = "Elastic"
    EXPONENTIAL = "Exponential"
    CIRCULAR = "Circular"
    CUBIC = "Cubic"


class EasingDirection(Enum):
    IN = "In"
    OUT = "Out"
    IN_OUT = "InOut"


_BACK_C1 = 1.70158
_ELASTIC_C4 = (2.0 * math.pi) / 3.0


def _bounce_out(t: float) -> float:
    n1 = 7.5625
    d1 = 2.75
    if t < 1.0 / d1:
        return n1 * t * t
    if t < 2.0 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    if t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


def _elastic_in(t: float) -> float:
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return -math.pow(2.0, 10.0 * t - 10.0) * math.sin((10.0 * t - 10.75) * _ELASTIC_C4)


def _exponential_in(t: float) -> float:
    if t <= 0.0:
        return 0.0
    return math.pow(2.0, 10.0 * t - 10.0) if t < 1.0 else 1.0


_IN_CURVES: Dict[EasingStyle, Callable[[float], float]] = {
    EasingStyle.LINEAR: lambda t: t,
    EasingStyle.SINE: lambda t: 1.0 - math.cos(t * math.pi / 2.0),
    EasingStyle.QUAD: lambda t: t ** 2,
    EasingStyle.CUBIC: lambda t: t ** 3,
    EasingStyle.QUART: lambda t: t ** 4,
    EasingStyle.QUINT: lambda t: t ** 5,
    EasingStyle.CIRCULAR: lambda t: 1.0 - math.sqrt(max(0.0, 1.0 - t * t)),
    EasingStyle.BACK: lambda t: (_BACK_C1 + 1.0) * t ** 3 - _BACK_C1 * t ** 2,
    EasingStyle.EXPONENTIAL: _exponential_in,
    EasingStyle.ELASTIC: _elastic_in,
    EasingStyle.BOUNCE: lambda t: 1.0 - _bounce_out(1.0 - t),
}


def ease(
    t: float,
    style: EasingStyle = EasingStyle.LINEAR,
    direction: EasingDirection = EasingDirection.OUT,
) -> float:
    """Map linear progress ``t`` (clamped to [0, 1]) through a curve.

    BACK and ELASTIC overshoot, so the result may leave [0, 1] in between.
    """
    t = min(1.0, max(0.0, float(t)))
    curve = _IN_CURVES[style]
    if direction is EasingDirection.IN:
        return curve(t)
    if direction is EasingDirection.OUT:
        return 1.0 - curve(1.0 - t)
    if t < 0.5:
        return curve(2.0 * t) / 2.0
    return 1.0 - curve(2.0 - 2.0 * t) / 2.0


__all__ = ["EasingDirection", "EasingStyle", "ease"]
