from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class PublishError(ConnectionError):
    """Raised when a document could not be delivered to the target."""

    def __init__(self, message: str, host: Optional[str] = None, port: Optional[int] = None) -> None:
        super().__init__(message)
        self.host = host
        self.port = port


class DocumentPublisher(ABC):
    @abstractmethod
    def publish(self, document: str) -> bool:
        """
        Deliver one serialized document.

        Returns:
            True if the document was written, False if publishing is disabled.

        Raises:
            PublishError: If the connection or the write failed.
        """

    @abstractmethod
    def describe(self) -> str: ...


class NullPublisher(DocumentPublisher):
    """Publisher used when the target is configured as ``none``."""

    def publish(self, document: str) -> bool:
        return False

    def describe(self) -> str:
        return "none"
