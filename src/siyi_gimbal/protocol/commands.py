"""Command identifiers, command models and the frame encoder.

Each command is a small immutable value carrying just the parameters
needed for one frame. ``encode`` turns any of them into wire bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Union

from ..models.gimbal import (
    PITCH_LIMITS,
    YAW_LIMITS,
    CenterPos,
    GimbalMode,
    ZoomFactor,
    ZoomMode,
    clamp,
)
from .framing import build_frame


class CommandId(IntEnum):
    """Outbound command identifiers."""

    AUTO_ZOOM = 0x05
    CENTER = 0x08
    CONTROL_ANGLE = 0x0E
    ABS_ZOOM = 0x0F
    WORKING_MODE = 0x19


# Length field written for each command kind. The device expects these
# exact values, so they are never derived from the serialized payload.
PAYLOAD_LENGTHS: dict[CommandId, int] = {
    CommandId.CONTROL_ANGLE: 4,
    CommandId.ABS_ZOOM: 2,
    CommandId.AUTO_ZOOM: 1,
    CommandId.WORKING_MODE: 1,
    CommandId.CENTER: 1,
}


@dataclass(frozen=True)
class ControlAngle:
    """Point the gimbal at an absolute yaw/pitch, in tenths of a degree.

    Out-of-range angles are clamped when the frame is built: yaw to
    -135.0..135.0 degrees and pitch to -90.0..25.0 degrees.
    """

    command_id: ClassVar[CommandId] = CommandId.CONTROL_ANGLE
    yaw: int
    pitch: int

    @classmethod
    def from_degrees(cls, yaw: float, pitch: float) -> ControlAngle:
        return cls(yaw=round(yaw * 10), pitch=round(pitch * 10))

    def payload(self) -> bytes:
        yaw = clamp(int(self.yaw), *YAW_LIMITS)
        pitch = clamp(int(self.pitch), *PITCH_LIMITS)
        return yaw.to_bytes(2, "little", signed=True) + pitch.to_bytes(
            2, "little", signed=True
        )

    def to_bytes(self, seq: int = 0) -> bytes:
        return encode(self, seq)


@dataclass(frozen=True)
class AbsZoom:
    """Set an absolute zoom level."""

    command_id: ClassVar[CommandId] = CommandId.ABS_ZOOM
    zoom: ZoomFactor

    @classmethod
    def from_float(cls, value: float) -> AbsZoom:
        return cls(ZoomFactor.from_float(value))

    def payload(self) -> bytes:
        return bytes([self.zoom.integer, self.zoom.fraction])

    def to_bytes(self, seq: int = 0) -> bytes:
        return encode(self, seq)


@dataclass(frozen=True)
class AutoZoom:
    """Start zooming in or out, or stop."""

    command_id: ClassVar[CommandId] = CommandId.AUTO_ZOOM
    mode: ZoomMode

    def payload(self) -> bytes:
        return ZoomMode(self.mode).to_bytes(1, "big", signed=True)

    def to_bytes(self, seq: int = 0) -> bytes:
        return encode(self, seq)


@dataclass(frozen=True)
class WorkingMode:
    """Switch between lock, follow and FPV modes."""

    command_id: ClassVar[CommandId] = CommandId.WORKING_MODE
    mode: GimbalMode

    def payload(self) -> bytes:
        return bytes([GimbalMode(self.mode)])

    def to_bytes(self, seq: int = 0) -> bytes:
        return encode(self, seq)


@dataclass(frozen=True)
class Center:
    """Return the gimbal to its center position."""

    command_id: ClassVar[CommandId] = CommandId.CENTER
    position: CenterPos = CenterPos.DEFAULT

    def payload(self) -> bytes:
        return bytes([CenterPos(self.position)])

    def to_bytes(self, seq: int = 0) -> bytes:
        return encode(self, seq)


Command = Union[ControlAngle, AbsZoom, AutoZoom, WorkingMode, Center]


def encode(command: Command, seq: int = 0) -> bytes:
    """Serialize a command into a frame.

    Args:
        command: Any of the command models.
        seq: Sequence byte 0-255 echoed back by the device.

    Returns:
        The complete frame, checksum included.
    """
    command_id = command.command_id
    return build_frame(
        command_id.value,
        command.payload(),
        PAYLOAD_LENGTHS[command_id],
        seq,
    )
