"""Tests for the per-document TCP publisher."""
import socket
import threading
from unittest.mock import patch

import pytest

from scoresync.transports.base import NullPublisher, PublishError
from scoresync.transports.tcp import TcpPublisher, create_publisher, is_disabled_target

DOCUMENT = '{"type":"ocr","values":{}}\n'


@patch("scoresync.transports.tcp.transport.socket.create_connection")
def test_publish_opens_writes_and_closes(mock_connect):
    sock = mock_connect.return_value.__enter__.return_value
    publisher = TcpPublisher("scoreboard.local", 5000, timeout=2.0)

    assert publisher.publish(DOCUMENT) is True

    mock_connect.assert_called_once_with(("scoreboard.local", 5000), timeout=2.0)
    sock.sendall.assert_called_once_with(DOCUMENT.encode("utf-8"))
    mock_connect.return_value.__exit__.assert_called_once()


@patch("scoresync.transports.tcp.transport.socket.create_connection")
def test_new_connection_per_document(mock_connect):
    publisher = TcpPublisher("127.0.0.1", 5000)
    publisher.publish(DOCUMENT)
    publisher.publish(DOCUMENT)
    assert mock_connect.call_count == 2


@patch("scoresync.transports.tcp.transport.socket.create_connection")
def test_connect_failure_raises_publish_error(mock_connect):
    mock_connect.side_effect = ConnectionRefusedError("refused")
    publisher = TcpPublisher("10.1.1.1", 6000)
    with pytest.raises(PublishError) as excinfo:
        publisher.publish(DOCUMENT)
    assert excinfo.value.host == "10.1.1.1"
    assert excinfo.value.port == 6000
    assert "10.1.1.1:6000" in str(excinfo.value)


@patch("scoresync.transports.tcp.transport.socket.create_connection")
def test_write_failure_still_closes_connection(mock_connect):
    sock = mock_connect.return_value.__enter__.return_value
    sock.sendall.side_effect = BrokenPipeError("pipe")
    with pytest.raises(PublishError):
        TcpPublisher("127.0.0.1", 5000).publish(DOCUMENT)
    mock_connect.return_value.__exit__.assert_called_once()


def test_publish_over_loopback():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    server.settimeout(5)
    port = server.getsockname()[1]
    received = []

    def accept_one():
        conn, _ = server.accept()
        with conn:
            chunks = []
            while True:
                chunk = conn.recv(4096)
                if not chunk:
                    break
                chunks.append(chunk)
            received.append(b"".join(chunks))

    thread = threading.Thread(target=accept_one)
    thread.start()
    try:
        TcpPublisher("127.0.0.1", port).publish(DOCUMENT)
        thread.join(timeout=5)
    finally:
        server.close()
    assert received == [DOCUMENT.encode("utf-8")]


@pytest.mark.parametrize("host", ["none", "NONE", "None", " none ", None])
def test_disabled_target(host):
    assert is_disabled_target(host)
    assert isinstance(create_publisher(host, 5000), NullPublisher)


def test_create_publisher_for_real_host():
    publisher = create_publisher(" 192.168.1.20 ", 5000, timeout=1.0)
    assert isinstance(publisher, TcpPublisher)
    assert publisher.host == "192.168.1.20"
    assert publisher.describe() == "192.168.1.20:5000"


def test_null_publisher_reports_not_delivered():
    publisher = NullPublisher()
    assert publisher.publish(DOCUMENT) is False
    assert publisher.describe() == "none"


@pytest.mark.parametrize("port", [0, 70000, -1])
def test_invalid_port(port):
    with pytest.raises(ValueError):
        TcpPublisher("127.0.0.1", port)


def test_unencodable_hostname_raises_publish_error():
    host = "a" * 64 + ".example"
    with pytest.raises(PublishError) as excinfo:
        TcpPublisher(host, 5000).publish(DOCUMENT)
    assert excinfo.value.host == host
    assert isinstance(excinfo.value.__cause__, ValueError)


@patch("scoresync.transports.tcp.transport.socket.create_connection")
def test_encoding_error_during_connect_raises_publish_error(mock_connect):
    mock_connect.side_effect = UnicodeError("label empty or too long")
    with pytest.raises(PublishError):
        TcpPublisher("bad..host", 5000).publish(DOCUMENT)
