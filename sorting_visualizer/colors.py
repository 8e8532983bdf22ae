from dataclasses import dataclass

import numpy as np

# ============================================================
# ======================= COLOR MAPPING ======================
# ============================================================

FALLBACK_COLOR = (255, 255, 255, 255)
COLOR_DOMAIN   = 100


@dataclass(frozen=True)
class Gradient:
    start: tuple = (252, 70, 107, 255)
    end:   tuple = (63, 94, 251, 255)

    def at(self, position: float) -> tuple:
        """RGBA at position in [0, 1], linearly between the two stops."""
        lo  = np.asarray(self.start, dtype=np.float64)
        hi  = np.asarray(self.end,   dtype=np.float64)
        rgba = lo + (hi - lo) * position
        return tuple(int(c) for c in np.clip(np.rint(rgba), 0, 255))


DEFAULT_GRADIENT = Gradient()


def value_to_color(value, gradient: Gradient = DEFAULT_GRADIENT,
                   max_value: int = COLOR_DOMAIN) -> tuple:
    if not 0 <= value <= max_value:
        return FALLBACK_COLOR
    return gradient.at(value / max_value)
