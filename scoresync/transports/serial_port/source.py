from __future__ import annotations

from typing import Optional

import serial
from serial.tools import list_ports

DEFAULT_BAUD_RATE = 9600


def available_ports() -> list[str]:
    return sorted(port.device for port in list_ports.comports())


def port_available(name: str, ports: Optional[list[str]] = None) -> bool:
    ports = available_ports() if ports is None else ports
    return any(port.lower() == name.lower() for port in ports)


class SerialByteSource:
    """
    Blocking byte source on a scoreboard controller serial line (8N1).

    ``read`` blocks until a byte arrives. When a read timeout is configured
    the source keeps waiting across timeouts instead of reporting end of
    stream, so callers only ever see data or an exception.
    """

    def __init__(self, port: str, baud_rate: int = DEFAULT_BAUD_RATE, timeout: Optional[float] = None) -> None:
        self.port = port
        self.baud_rate = baud_rate
        self.timeout = timeout
        self._serial: Optional[serial.Serial] = None

    def open(self) -> "SerialByteSource":
        if self._serial is None:
            self._serial = serial.Serial(
                port=self.port,
                baudrate=self.baud_rate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                timeout=self.timeout,
            )
        return self

    @property
    def is_open(self) -> bool:
        return self._serial is not None and self._serial.is_open

    def read(self, size: int = 1) -> bytes:
        if self._serial is None:
            raise serial.SerialException(f"Serial port {self.port} is not open")
        while True:
            data = self._serial.read(size)
            if data:
                return data

    def close(self) -> None:
        if self._serial is not None:
            self._serial.close()
            self._serial = None

    def __enter__(self) -> "SerialByteSource":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
