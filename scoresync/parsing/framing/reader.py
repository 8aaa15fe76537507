"""
STX/ETX frame extraction for the scoreboard controller byte stream.

Frames travel as ``[0x02] payload [0x03]``. Bytes seen outside a frame are
line noise and are discarded; a new start marker abandons any partial frame.
"""
from __future__ import annotations

from typing import Optional, Protocol

from scoresync.core.text import decode_latin1

STX = 0x02
ETX = 0x03


class ByteSource(Protocol):
    def read(self, size: int = 1) -> bytes: ...


class FrameReadError(IOError):
    """Raised when the byte source fails while a frame is being read."""
    pass


class FrameReader:
    """
    Byte-at-a-time framing state machine.

    The reader is either idle (waiting for ``STX``) or in a frame
    (accumulating payload until ``ETX``). There is no size limit on the
    payload; a controller that never sends ``ETX`` grows the buffer for as
    long as bytes keep arriving.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._in_frame = False

    @property
    def in_frame(self) -> bool:
        return self._in_frame

    @property
    def pending(self) -> int:
        return len(self._buffer)

    def push(self, byte: int) -> Optional[str]:
        """
        Advance the state machine by one byte.

        Returns:
            The completed frame payload when ``byte`` closes a frame,
            otherwise ``None``.
        """
        if byte == STX:
            self._buffer.clear()
            self._in_frame = True
        elif byte == ETX:
            if self._in_frame:
                self._in_frame = False
                frame = decode_latin1(self._buffer)
                self._buffer.clear()
                return frame
        elif self._in_frame:
            self._buffer.append(byte)
        return None

    def feed(self, data: bytes) -> list[str]:
        frames: list[str] = []
        for byte in data:
            frame = self.push(byte)
            if frame is not None:
                frames.append(frame)
        return frames

    def read_frame(self, source: ByteSource) -> Optional[str]:
        """
        Block on ``source`` until one complete frame has been read.

        Args:
            source: Anything with a blocking ``read(1)``, such as a
                ``serial.Serial`` port or an in-memory stream.

        Returns:
            The frame payload, or ``None`` once the source reports end of
            stream by returning no bytes.

        Raises:
            FrameReadError: If the source raises while reading.
        """
        while True:
            try:
                chunk = source.read(1)
            except (OSError, ValueError) as exc:
                raise FrameReadError(f"Failed to read from byte source: {exc}") from exc
            if not chunk:
                return None
            frame = self.push(chunk[0])
            if frame is not None:
                return frame


def read_frame(source: ByteSource, reader: FrameReader | None = None) -> Optional[str]:
    return (reader or FrameReader()).read_frame(source)
