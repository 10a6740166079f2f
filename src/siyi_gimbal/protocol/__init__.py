"""Protocol layer: framing, checksum, command encoding and ack decoding."""

from .framing import Frame, build_frame, parse_frame
from .commands import (
    AbsZoom,
    AutoZoom,
    Center,
    Command,
    CommandId,
    ControlAngle,
    WorkingMode,
    encode,
)
from .parser import Ack, AckId, CenterAck, ControlAngleAck, decode
