"""
Byte sources and document sinks: the serial line the controller talks on and
the TCP target the scoreboard documents are sent to.
"""
from scoresync.transports.base import DocumentPublisher, NullPublisher, PublishError

__all__ = ["DocumentPublisher", "NullPublisher", "PublishError"]
