"""Tests for the pyserial byte source (serial port mocked)."""
from types import SimpleNamespace
from unittest.mock import patch

import pytest
import serial

from scoresync.transports.serial_port import SerialByteSource, available_ports, port_available


@patch("scoresync.transports.serial_port.source.serial.Serial")
def test_open_uses_fixed_line_settings(mock_serial):
    with SerialByteSource("/dev/ttyUSB0") as source:
        assert source.is_open
    mock_serial.assert_called_once_with(
        port="/dev/ttyUSB0",
        baudrate=9600,
        bytesize=serial.EIGHTBITS,
        parity=serial.PARITY_NONE,
        stopbits=serial.STOPBITS_ONE,
        timeout=None,
    )
    mock_serial.return_value.close.assert_called_once()


@patch("scoresync.transports.serial_port.source.serial.Serial")
def test_read_waits_through_timeouts(mock_serial):
    mock_serial.return_value.read.side_effect = [b"", b"", b"\x02"]
    source = SerialByteSource("COM3", timeout=0.1).open()
    assert source.read(1) == b"\x02"
    assert mock_serial.return_value.read.call_count == 3


def test_read_before_open_raises():
    with pytest.raises(serial.SerialException):
        SerialByteSource("COM3").read(1)


def test_close_is_idempotent():
    source = SerialByteSource("COM3")
    source.close()
    assert not source.is_open


@patch("scoresync.transports.serial_port.source.list_ports.comports")
def test_available_ports(mock_comports):
    mock_comports.return_value = [SimpleNamespace(device="COM4"), SimpleNamespace(device="COM1")]
    assert available_ports() == ["COM1", "COM4"]


def test_port_available_is_case_insensitive():
    assert port_available("com3", ["COM1", "COM3"])
    assert not port_available("COM9", ["COM1", "COM3"])
