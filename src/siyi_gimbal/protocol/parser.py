"""Acknowledgment parsing for device replies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from ..models.gimbal import AckResult, ControlAngles
from .framing import Frame, parse_frame

logger = logging.getLogger(__name__)


class AckId(IntEnum):
    """Identifiers of the replies this codec understands."""

    CENTER = 0x08
    CONTROL_ANGLE = 0x0E


@dataclass(frozen=True)
class CenterAck:
    """Parsed Center (0x08) acknowledgment."""

    result: AckResult

    @property
    def ok(self) -> bool:
        return self.result is AckResult.SUCCESS


@dataclass(frozen=True)
class ControlAngleAck:
    """Parsed ControlAngle (0x0E) acknowledgment with the current attitude."""

    angles: ControlAngles


Ack = Union[CenterAck, ControlAngleAck]


def parse_center(frame: Frame) -> CenterAck | None:
    """Parse a Center acknowledgment.

    The device reports a nonzero byte on success and zero on failure.
    """
    if frame.command != AckId.CENTER:
        return None
    if len(frame.payload) < 1:
        return None
    result = AckResult.SUCCESS if frame.payload[0] != 0 else AckResult.ERROR
    return CenterAck(result=result)


def parse_control_angle(frame: Frame) -> ControlAngleAck | None:
    """Parse a ControlAngle acknowledgment.

    The reply carries three big-endian signed 16-bit angles ordered
    pitch, yaw, roll. Note the order differs from the outbound command.
    """
    if frame.command != AckId.CONTROL_ANGLE:
        return None

    payload = frame.payload
    if len(payload) < 6:
        return None

    pitch = int.from_bytes(payload[0:2], "big", signed=True)
    yaw = int.from_bytes(payload[2:4], "big", signed=True)
    roll = int.from_bytes(payload[4:6], "big", signed=True)
    return ControlAngleAck(angles=ControlAngles(yaw=yaw, pitch=pitch, roll=roll))


_PARSERS = {
    AckId.CENTER: parse_center,
    AckId.CONTROL_ANGLE: parse_control_angle,
}


def parse_ack(frame: Frame) -> Ack | None:
    """Dispatch a validated frame to the parser for its identifier."""
    try:
        ack_id = AckId(frame.command)
    except ValueError:
        logger.debug("Rejected frame: unknown ack id 0x%02X", frame.command)
        return None

    ack = _PARSERS[ack_id](frame)
    if ack is None:
        logger.debug(
            "Rejected frame: payload too short for %s (%d bytes)",
            ack_id.name,
            len(frame.payload),
        )
    return ack


def decode(data: bytes) -> Ack | None:
    """Decode one received frame into an acknowledgment.

    Args:
        data: Exactly one frame as delivered by the transport.

    Returns:
        ``CenterAck`` or ``ControlAngleAck``, or ``None`` if the bytes are
        malformed or carry a reply kind this codec does not handle.
    """
    frame = parse_frame(data)
    if frame is None:
        return None
    return parse_ack(frame)
