"""Tests for frame building and parsing."""

import pytest

from siyi_gimbal.protocol.framing import (
    CTRL_NEED_ACK,
    FRAME_OVERHEAD,
    HEADER_SIZE,
    SYNC,
    Frame,
    build_frame,
    declared_length,
    parse_frame,
)
from siyi_gimbal.utils.crc import crc16

# Center command as documented for the device, seq 0, payload 0x01
CENTER_FRAME = bytes.fromhex("55 66 01 01 00 00 00 08 01 d1 12")


def test_build_frame_layout():
    """Verify each header field of a built frame.

    Structure: 55 66 [ctrl] [len_lo len_hi] [seq] [reserved] [cmd] [payload] [crc_lo crc_hi]
    """
    frame = build_frame(0x08, b"\x01", 1, seq=7)
    assert frame[0:2] == SYNC
    assert frame[2] == CTRL_NEED_ACK
    assert frame[3] == 0x01  # length low byte
    assert frame[4] == 0x00  # length high byte
    assert frame[5] == 7     # sequence
    assert frame[6] == 0x00  # reserved
    assert frame[7] == 0x08  # command
    assert frame[8] == 0x01  # payload
    expected_crc = crc16(frame[:-2])
    assert frame[9] == expected_crc & 0xFF
    assert frame[10] == (expected_crc >> 8) & 0xFF


def test_build_frame_matches_device_capture():
    assert build_frame(0x08, b"\x01", 1) == CENTER_FRAME


def test_build_frame_uses_given_length():
    """The length field is written as given, not derived from the payload."""
    frame = build_frame(0x0E, b"\x00" * 4, 4)
    assert declared_length(frame) == 4
    assert len(frame) == FRAME_OVERHEAD + 4


def test_build_frame_sequence_bounds():
    with pytest.raises(ValueError):
        build_frame(0x08, b"\x01", 1, seq=256)
    with pytest.raises(ValueError):
        build_frame(0x08, b"\x01", 1, seq=-1)


def test_build_frame_too_large():
    with pytest.raises(ValueError):
        build_frame(0x08, b"\x00" * 250, 250)


def test_parse_device_frame():
    frame = parse_frame(CENTER_FRAME)
    assert frame is not None
    assert frame.command == 0x08
    assert frame.payload == b"\x01"
    assert frame.seq == 0
    assert frame.ctrl == CTRL_NEED_ACK


def test_roundtrip_parse():
    built = build_frame(0x0E, b"\x01\x02\x03\x04\x05\x06", 6, seq=200)
    frame = parse_frame(built)
    assert frame is not None
    assert frame.command == 0x0E
    assert frame.payload == b"\x01\x02\x03\x04\x05\x06"
    assert frame.seq == 200


def test_parse_empty_payload():
    frame = parse_frame(build_frame(0x08, b"", 0))
    assert frame is not None
    assert frame.payload == b""


def test_parse_accepts_bytearray():
    assert parse_frame(bytearray(CENTER_FRAME)) is not None


def test_parse_invalid_sync():
    bad = bytearray(CENTER_FRAME)
    bad[0] = 0x66
    bad[1] = 0x55
    assert parse_frame(bytes(bad)) is None


@pytest.mark.parametrize("size", range(0, HEADER_SIZE))
def test_parse_short_input(size):
    """Anything shorter than a header is rejected, whatever the content."""
    assert parse_frame(CENTER_FRAME[:size]) is None
    assert parse_frame(b"\xff" * size) is None


def test_parse_length_mismatch():
    frame = bytearray(build_frame(0x08, b"\x01", 2))
    assert parse_frame(bytes(frame)) is None
    # Extra trailing byte
    assert parse_frame(CENTER_FRAME + b"\x00") is None
    # Truncated body
    assert parse_frame(CENTER_FRAME[:-1]) is None


def test_parse_negative_length():
    body = SYNC + b"\x01" + (-2).to_bytes(2, "little", signed=True) + b"\x00\x00\x08"
    assert len(body) == HEADER_SIZE
    assert parse_frame(body) is None


def test_parse_bad_checksum():
    frame = bytearray(CENTER_FRAME)
    frame[-2] = 0x00
    frame[-1] = 0x00
    assert parse_frame(bytes(frame)) is None


def test_frame_repr():
    r = repr(Frame(command=0x0E, payload=b"\x02", seq=3))
    assert "0x0E" in r
    assert "seq=3" in r
