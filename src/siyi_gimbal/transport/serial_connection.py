"""Serial (UART) connection to the gimbal.

A thin adapter that writes encoded command frames and reads back one
reply frame at a time. It does not retry, track outstanding commands or
match replies to requests; callers own that policy.
"""

from __future__ import annotations

import logging

import serial

from ..protocol.commands import Command, encode
from ..protocol.framing import CHECKSUM_SIZE, HEADER_SIZE, SYNC, declared_length
from ..protocol.parser import Ack, decode

logger = logging.getLogger(__name__)

DEFAULT_PORT = "/dev/ttyUSB0"
DEFAULT_BAUDRATE = 115200
READ_TIMEOUT = 1.0  # seconds


class SerialConnection:
    """Manages the serial link to the gimbal.

    Usage::

        conn = SerialConnection("/dev/ttyUSB0")
        conn.open()
        ack = conn.send_command(Center(), seq=1)
        conn.close()

    An already-configured port object (anything with ``read``, ``write``
    and ``close``) may be passed as ``port_handle`` instead of opening
    ``port`` by name.
    """

    def __init__(
        self,
        port: str = DEFAULT_PORT,
        baudrate: int = DEFAULT_BAUDRATE,
        timeout: float = READ_TIMEOUT,
        port_handle=None,
    ) -> None:
        self._port = port
        self._baudrate = baudrate
        self._timeout = timeout
        self._serial = port_handle
        self._connected = port_handle is not None

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def port(self) -> str:
        return self._port

    def open(self) -> None:
        """Open the serial port.

        Raises:
            ConnectionError: If the port cannot be opened.
        """
        if self._connected:
            return

        try:
            self._serial = serial.Serial(
                self._port,
                baudrate=self._baudrate,
                timeout=self._timeout,
            )
        except serial.SerialException as e:
            raise ConnectionError(
                f"Could not open gimbal port {self._port} at {self._baudrate} baud: {e}"
            ) from e

        self._connected = True
        logger.info("Connected to gimbal on %s at %d baud", self._port, self._baudrate)

    def close(self) -> None:
        """Close the serial port."""
        if not self._connected:
            return

        try:
            self._serial.close()
        except (serial.SerialException, OSError) as e:
            logger.warning("Error closing port: %s", e)
        finally:
            self._serial = None
            self._connected = False
            logger.info("Disconnected")

    def __enter__(self) -> SerialConnection:
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def write(self, data: bytes) -> int:
        """Write a raw frame to the gimbal.

        Raises:
            ConnectionError: If not connected.
        """
        if not self._connected:
            raise ConnectionError("Not connected to gimbal")

        logger.debug("TX %s", data.hex(" "))
        return self._serial.write(data)

    def read_frame(self) -> bytes | None:
        """Read one frame: the header, then the payload and checksum.

        Returns:
            The raw frame bytes, or ``None`` on timeout or if the header
            does not start with the sync marker. Validation of the length
            field and checksum is left to the decoder.

        Raises:
            ConnectionError: If not connected.
        """
        if not self._connected:
            raise ConnectionError("Not connected to gimbal")

        header = self._serial.read(HEADER_SIZE)
        if len(header) < HEADER_SIZE:
            logger.debug("Read timed out after %d header bytes", len(header))
            return None
        if header[:2] != SYNC:
            logger.debug("Discarding header without sync marker: %s", header.hex(" "))
            return None

        length = declared_length(header)
        if length < 0:
            logger.debug("Discarding header with negative length %d", length)
            return None

        remainder = self._serial.read(length + CHECKSUM_SIZE)
        if len(remainder) < length + CHECKSUM_SIZE:
            logger.debug("Read timed out inside frame body")
            return None

        frame = bytes(header) + bytes(remainder)
        logger.debug("RX %s", frame.hex(" "))
        return frame

    def send_command(self, command: Command, seq: int = 0) -> Ack | None:
        """Encode and send a command, then decode the next reply frame.

        Returns:
            The decoded acknowledgment, or ``None`` if nothing valid came back.
        """
        self.write(encode(command, seq))
        frame = self.read_frame()
        if frame is None:
            return None
        return decode(frame)
