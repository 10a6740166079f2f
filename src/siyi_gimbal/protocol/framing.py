"""Frame builder and parser for the gimbal serial protocol.

Frame layout::

    +---------+------+---------+-----+----------+---------+------------------+----------+
    |  Sync   | Ctrl | Length  | Seq | Reserved | Command |     Payload      | Checksum |
    | 2 bytes | 1 B  | 2 bytes | 1 B |   1 B    |   1 B   |  variable length |  2 bytes |
    +---------+------+---------+-----+----------+---------+------------------+----------+

- Sync: 0x55 0x66
- Ctrl: 0x01, acknowledgment requested
- Length: little-endian signed 16-bit payload length
- Seq: caller-supplied sequence byte
- Reserved: always 0x00
- Checksum: CRC-16 over every preceding byte, little-endian
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..utils.crc import crc16

logger = logging.getLogger(__name__)

SYNC = b"\x55\x66"
CTRL_NEED_ACK = 0x01
RESERVED = 0x00
HEADER_SIZE = 8  # sync(2) + ctrl(1) + length(2) + seq(1) + reserved(1) + cmd(1)
CHECKSUM_SIZE = 2
FRAME_OVERHEAD = HEADER_SIZE + CHECKSUM_SIZE
MAX_FRAME_SIZE = 255

# Header field offsets
OFF_CTRL = 2
OFF_LENGTH = 3
OFF_SEQ = 5
OFF_COMMAND = 7


@dataclass
class Frame:
    """A validated protocol frame."""

    command: int
    payload: bytes
    seq: int = 0
    ctrl: int = CTRL_NEED_ACK

    def __repr__(self) -> str:
        return (
            f"Frame(command=0x{self.command:02X}, seq={self.seq}, "
            f"payload={self.payload.hex(' ') if self.payload else '(empty)'})"
        )


def build_frame(command: int, payload: bytes, length: int, seq: int = 0) -> bytes:
    """Build a complete frame ready to write to the link.

    Args:
        command: Single-byte command identifier.
        payload: Serialized command parameters.
        length: Value written to the length field. Callers pass the fixed
            length declared for the command kind.
        seq: Sequence byte 0-255.

    Returns:
        The frame bytes, sync marker through checksum.
    """
    if not 0 <= seq <= 0xFF:
        raise ValueError(f"Sequence number must be 0-255, got {seq}")

    header = (
        SYNC
        + bytes([CTRL_NEED_ACK])
        + length.to_bytes(2, "little", signed=True)
        + bytes([seq, RESERVED, command])
    )
    body = header + payload
    frame = body + crc16(body).to_bytes(2, "little")
    if len(frame) > MAX_FRAME_SIZE:
        raise ValueError(f"Frame exceeds {MAX_FRAME_SIZE} bytes: {len(frame)}")
    return frame


def declared_length(data: bytes) -> int:
    """Read the signed little-endian length field of a frame header."""
    return int.from_bytes(data[OFF_LENGTH:OFF_LENGTH + 2], "little", signed=True)


def parse_frame(data: bytes) -> Frame | None:
    """Validate a complete frame and split it into its fields.

    Args:
        data: Exactly one frame, sync marker through checksum.

    Returns:
        A ``Frame``, or ``None`` if the sync marker, length field or
        checksum does not check out.
    """
    if len(data) < 2 or data[:2] != SYNC:
        logger.debug("Rejected frame: missing sync marker")
        return None

    if len(data) < HEADER_SIZE:
        logger.debug("Rejected frame: %d bytes is shorter than a header", len(data))
        return None

    length = declared_length(data)
    if length < 0 or length + FRAME_OVERHEAD != len(data):
        logger.debug(
            "Rejected frame: length field %d does not match %d bytes",
            length,
            len(data),
        )
        return None

    expected_checksum = int.from_bytes(data[-CHECKSUM_SIZE:], "little")
    actual_checksum = crc16(data[:-CHECKSUM_SIZE])
    if actual_checksum != expected_checksum:
        logger.debug(
            "Rejected frame: checksum 0x%04X, expected 0x%04X",
            actual_checksum,
            expected_checksum,
        )
        return None

    return Frame(
        command=data[OFF_COMMAND],
        payload=bytes(data[HEADER_SIZE:-CHECKSUM_SIZE]),
        seq=data[OFF_SEQ],
        ctrl=data[OFF_CTRL],
    )
