# =============================================================================
# georules_logger/colors.py - Background Color Scheduler
# =============================================================================
# Generates the background colors used to tint pretty log output.
#
# Each new color is picked so its hue is at least MIN_HUE_GAP degrees away
# from the previous one, which keeps consecutive log messages visually apart.
# Saturation and lightness are fixed, so hue alone decides the separation.
#
# Hues stay within [120, 240) (green through blue); warm hues are left to the
# level colors (warn/error/fatal).
#
# Usage:
#   scheduler = HueScheduler()
#   scheduler.generate()      # new color, once per log message
#   r, g, b = scheduler.latest()
# =============================================================================

import math
import random
import threading
from dataclasses import dataclass
from typing import NamedTuple


# =============================================================================
# Constants
# =============================================================================

HUE_RANGE_LB = 120  # Green
HUE_RANGE_UB = 240  # Blue
MIN_HUE_GAP = 20

# Low lightness gives a subtle dark tint that reads as transparency on dark
# terminals. 60% saturation: vibrant but not neon.
SATURATION = 60
LIGHTNESS = 8.25


# =============================================================================
# Data Classes
# =============================================================================

class RGB(NamedTuple):
    """An RGB color, each channel an integer in [0, 255]."""
    r: int
    g: int
    b: int


@dataclass
class HueState:
    """
    Mutable state of one scheduler.

    current_color is always hsl_to_rgb(last_hue, SATURATION, LIGHTNESS)
    whenever last_hue is set.
    """
    last_hue: int | None = None
    current_color: RGB | None = None


# =============================================================================
# Color Math
# =============================================================================

def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    """
    Convert HSL to RGB.

    Args:
        hue: Hue in degrees
        saturation: Saturation in percent (0-100)
        lightness: Lightness in percent (0-100)

    Returns:
        RGB triple with integer channels in [0, 255]
    """
    light = lightness / 100
    a = saturation * min(light, 1 - light) / 100

    def channel(n: int) -> int:
        k = (n + hue / 30) % 12
        color = light - a * max(min(k - 3, 9 - k, 1), -1)
        return _round_half_up(255 * color)

    return RGB(channel(0), channel(8), channel(4))


# =============================================================================
# Scheduler
# =============================================================================

class HueScheduler:
    """
    Produces background colors with "considerably different" hues.

    One instance owns its HueState; independent loggers can hold independent
    schedulers. Methods are serialized by an internal lock.

    Args:
        rng: Random source (inject a seeded random.Random for reproducibility)
        state: Initial state (defaults to empty: no color generated yet)
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        state: HueState | None = None,
    ):
        self._rng = rng or random.Random()
        self.state = state or HueState()
        self._lock = threading.Lock()

    @property
    def last_hue(self) -> int | None:
        return self.state.last_hue

    def latest(self) -> RGB:
        """
        Return the most recently generated color.

        Generates one first if none exists yet, so callers never see an
        untinted state.
        """
        with self._lock:
            if self.state.current_color is None:
                return self._generate()
            return self.state.current_color

    def generate(self) -> RGB:
        """Pick a new hue away from the last one and return its color."""
        with self._lock:
            return self._generate()

    def next_hue(self) -> int:
        """
        Draw a hue from the domain with the last hue's neighborhood excluded.

        The excluded zone is (last_hue - MIN_HUE_GAP, last_hue + MIN_HUE_GAP),
        clipped to the domain. Does not update state.
        """
        last_hue = self.state.last_hue
        if last_hue is None:
            left_gap = right_gap = 0
        else:
            left_gap = min(last_hue - HUE_RANGE_LB, MIN_HUE_GAP)
            right_gap = min(HUE_RANGE_UB - last_hue, MIN_HUE_GAP)

        span = HUE_RANGE_UB - HUE_RANGE_LB - left_gap - right_gap
        rand = self._rng.randrange(span) + HUE_RANGE_LB

        # Below the excluded zone: keep as-is, otherwise skip past it.
        # When last_hue is within MIN_HUE_GAP of the floor the first branch
        # cannot trigger and every draw is shifted.
        if last_hue is not None and rand < last_hue - MIN_HUE_GAP:
            return rand
        return rand + left_gap + right_gap

    def _generate(self) -> RGB:
        hue = self.next_hue()
        color = hsl_to_rgb(hue, SATURATION, LIGHTNESS)
        self.state.last_hue = hue
        self.state.current_color = color
        return color
