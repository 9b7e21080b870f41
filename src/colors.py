"""Palette constants and gradient helpers.

Colors are plain ``(r, g, b)`` float tuples in the 0..1 range, the same
shape as the float colors in ``config`` and what the primitives store in
their attributes.
"""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple

import numpy as np

Color3 = Tuple[float, float, float]

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def from_hex(value: str) -> Color3:
    """Parse ``#RRGGBB`` (leading ``#`` optional) into a float color."""
    m = _HEX_RE.match(value)
    if m is None:
        raise ValueError(f"Invalid hex color: {value!r}")
    return tuple(int(part, 16) / 255.0 for part in m.groups())  # type: ignore[return-value]


def linear_space(start: float, stop: float, num: int) -> List[float]:
    if num == 1:
        return [float(start)]
    return [float(v) for v in np.linspace(start, stop, num)]


def color_gradient(colors: Sequence[Color3], n: int) -> List[Color3]:
    """Return ``n`` colors spread evenly across ``colors``.

    Neighbouring stops are blended in squared (gamma) space, which keeps
    the midpoints from looking muddy.
    """
    if n == 0:
        return []
    if len(colors) == 0:
        raise ValueError("color_gradient() needs at least one color stop")
    stops = np.asarray(colors, dtype=np.float64)
    last = len(stops) - 1
    result: List[Color3] = []
    for alpha in linear_space(0.0, 1.0, n):
        idx = int(np.floor(alpha * last))
        f = alpha * last - idx
        c1 = stops[idx]
        c2 = stops[min(idx + 1, last)]
        mixed = np.sqrt((1.0 - f) * c1 * c1 + f * c2 * c2)
        result.append((float(mixed[0]), float(mixed[1]), float(mixed[2])))
    return result


# Blues
BLUE_E = from_hex("#1C758A")
BLUE_D = from_hex("#29ABCA")
BLUE_C = from_hex("#58C4DD")
BLUE_B = from_hex("#9CDCEB")
BLUE_A = from_hex("#C7E9F1")
# Teals
TEAL_E = from_hex("#49A88F")
TEAL_D = from_hex("#55C1A7")
TEAL_C = from_hex("#5CD0B3")
TEAL_B = from_hex("#76DDC0")
TEAL_A = from_hex("#ACEAD7")
# Greens
GREEN_E = from_hex("#699C52")
GREEN_D = from_hex("#77B05D")
GREEN_C = from_hex("#83C167")
GREEN_B = from_hex("#A6CF8C")
GREEN_A = from_hex("#C9E2AE")
# Yellows
YELLOW_E = from_hex("#E8C11C")
YELLOW_D = from_hex("#F4D345")
YELLOW_C = from_hex("#FFFF00")
YELLOW_B = from_hex("#FFEA94")
YELLOW_A = from_hex("#FFF1B6")
# Golds
GOLD_E = from_hex("#C78D46")
GOLD_D = from_hex("#E1A158")
GOLD_C = from_hex("#F0AC5F")
GOLD_B = from_hex("#F9B775")
GOLD_A = from_hex("#F7C797")
# Reds
RED_E = from_hex("#CF5044")
RED_D = from_hex("#E65A4C")
RED_C = from_hex("#FC6255")
RED_B = from_hex("#FF8080")
RED_A = from_hex("#F7A1A3")
# Maroons
MAROON_E = from_hex("#94424F")
MAROON_D = from_hex("#A24D61")
MAROON_C = from_hex("#C55F73")
MAROON_B = from_hex("#EC92AB")
MAROON_A = from_hex("#ECABC1")
# Purples
PURPLE_E = from_hex("#644172")
PURPLE_D = from_hex("#715582")
PURPLE_C = from_hex("#9A72AC")
PURPLE_B = from_hex("#B189C6")
PURPLE_A = from_hex("#CAA3E8")
# Greys
GREY_E = from_hex("#222222")
GREY_D = from_hex("#444444")
GREY_C = from_hex("#888888")
GREY_B = from_hex("#BBBBBB")
GREY_A = from_hex("#DDDDDD")
# Basics
WHITE = from_hex("#FFFFFF")
BLACK = from_hex("#000000")
GREY_BROWN = from_hex("#736357")
DARK_BROWN = from_hex("#8B4513")
LIGHT_BROWN = from_hex("#CD853F")
PINK = from_hex("#D147BD")
LIGHT_PINK = from_hex("#DC75CD")
GREEN_SCREEN = from_hex("#00FF00")
ORANGE = from_hex("#FF862F")
