from scoresync.transports.serial_port.source import DEFAULT_BAUD_RATE, SerialByteSource, available_ports, port_available

__all__ = ["DEFAULT_BAUD_RATE", "SerialByteSource", "available_ports", "port_available"]
