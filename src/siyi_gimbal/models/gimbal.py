"""Gimbal parameter types shared by commands and acknowledgments.

Angles on the wire are signed 16-bit integers in tenths of a degree
(a value of 10 means 1.0 degree).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum

# Command limits in tenths of a degree
YAW_LIMITS = (-1350, 1350)
PITCH_LIMITS = (-900, 250)

ZOOM_INTEGER_LIMITS = (1, 30)
ZOOM_FRACTION_LIMITS = (0, 9)


def clamp(value: int, low: int, high: int) -> int:
    """Saturate ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


@dataclass(frozen=True)
class ZoomFactor:
    """Absolute zoom level between 1.0x and 30.0x.

    Stored as an integer part (1-30) and a single decimal digit (0-9),
    which is how the camera expects it on the wire.
    """

    integer: int = 1
    fraction: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "integer", clamp(int(self.integer), *ZOOM_INTEGER_LIMITS))
        object.__setattr__(self, "fraction", clamp(int(self.fraction), *ZOOM_FRACTION_LIMITS))

    @classmethod
    def from_float(cls, value: float) -> ZoomFactor:
        """Build a zoom factor from a float, saturating out-of-range input.

        The integer part is the floor of ``value``; the fraction is the
        first decimal digit of what remains. ``4.5`` becomes ``(4, 5)``,
        ``0.3`` becomes ``(1, 3)`` and ``99.9`` becomes ``(30, 9)``.
        """
        if math.isnan(value):
            return cls(ZOOM_INTEGER_LIMITS[0], ZOOM_FRACTION_LIMITS[0])
        if math.isinf(value):
            if value > 0:
                return cls(ZOOM_INTEGER_LIMITS[1], ZOOM_FRACTION_LIMITS[1])
            return cls(ZOOM_INTEGER_LIMITS[0], ZOOM_FRACTION_LIMITS[0])

        whole = math.floor(value)
        # Negative input has no usable decimal digit
        remainder = value - math.trunc(value) if value > 0 else 0.0
        # Round away binary noise so 4.3 yields digit 3, not 2
        digit = int(round(remainder * 10, 6))
        return cls(integer=whole, fraction=digit)

    def __float__(self) -> float:
        return self.integer + self.fraction / 10

    def __repr__(self) -> str:
        return f"ZoomFactor({self.integer}.{self.fraction}x)"


class ZoomMode(IntEnum):
    """Continuous zoom direction. Encoded as a signed byte."""

    ZOOM_IN = 1
    STOP_ZOOM = 0
    ZOOM_OUT = -1


class CenterPos(IntEnum):
    """Re-centering target."""

    DEFAULT = 0
    POS_0 = 1


class GimbalMode(IntEnum):
    """Gimbal working mode."""

    LOCK = 0
    FOLLOW = 1
    FPV = 2


class AckResult(Enum):
    """Outcome reported by a result-style acknowledgment."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ControlAngles:
    """Orientation reported by the gimbal, in tenths of a degree."""

    yaw: int
    pitch: int
    roll: int

    def degrees(self) -> tuple[float, float, float]:
        """Return ``(yaw, pitch, roll)`` in degrees."""
        return (self.yaw / 10, self.pitch / 10, self.roll / 10)

    def to_dict(self) -> dict:
        return {"yaw": self.yaw, "pitch": self.pitch, "roll": self.roll}
