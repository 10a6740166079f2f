"""Data models for gimbal command parameters and reported state."""

from .gimbal import (
    AckResult,
    CenterPos,
    ControlAngles,
    GimbalMode,
    ZoomFactor,
    ZoomMode,
)
