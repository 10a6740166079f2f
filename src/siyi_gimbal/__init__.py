"""Codec for the SIYI gimbal serial control protocol."""

from .models.gimbal import (
    AckResult,
    CenterPos,
    ControlAngles,
    GimbalMode,
    ZoomFactor,
    ZoomMode,
)
from .protocol.commands import (
    AbsZoom,
    AutoZoom,
    Center,
    Command,
    CommandId,
    ControlAngle,
    WorkingMode,
    encode,
)
from .protocol.parser import Ack, AckId, CenterAck, ControlAngleAck, decode

__version__ = "0.1.0"
