from __future__ import annotations

import socket
from typing import Optional

from scoresync.transports.base import DocumentPublisher, NullPublisher, PublishError

DISABLED_TARGET = "none"


def is_disabled_target(host: Optional[str]) -> bool:
    return host is None or host.strip().lower() == DISABLED_TARGET


class TcpPublisher(DocumentPublisher):
    """
    Sends each document over its own short-lived TCP connection.

    The connection is opened, written once and closed for every publish;
    nothing is kept between calls.
    """

    def __init__(self, host: str, port: int, timeout: Optional[float] = 5.0, encoding: str = "utf-8") -> None:
        if not 0 < port < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {port}")
        self.host = host
        self.port = port
        self.timeout = timeout
        self.encoding = encoding

    def publish(self, document: str) -> bool:
        data = document.encode(self.encoding)
        try:
            with socket.create_connection((self.host, self.port), timeout=self.timeout) as sock:
                sock.sendall(data)
        except (OSError, ValueError) as exc:
            raise PublishError(
                f"Failed to send data over TCP to {self.host}:{self.port}: {exc}",
                host=self.host,
                port=self.port,
            ) from exc
        return True

    def describe(self) -> str:
        return f"{self.host}:{self.port}"


def create_publisher(host: Optional[str], port: int, timeout: Optional[float] = 5.0) -> DocumentPublisher:
    if is_disabled_target(host):
        return NullPublisher()
    return TcpPublisher(host=host.strip(), port=port, timeout=timeout)
