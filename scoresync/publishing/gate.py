from __future__ import annotations

import logging
from typing import Optional

from scoresync.domain.state import ScoreboardState
from scoresync.publishing.document import serialize_state
from scoresync.transports.base import DocumentPublisher, PublishError


def publish_if_changed(
    state: ScoreboardState,
    last_sent: str,
    publisher: DocumentPublisher,
    logger: Optional[logging.Logger] = None,
) -> tuple[bool, str]:
    """
    Publish the serialized ``state`` unless it matches ``last_sent``.

    Returns:
        ``(sent, new_last_sent)``. On a publish failure the failure is logged,
        ``sent`` is False and ``last_sent`` is returned unchanged.
    """
    document = serialize_state(state)
    if document == last_sent:
        return False, last_sent
    try:
        delivered = publisher.publish(document)
    except PublishError as exc:
        if logger is not None:
            logger.error(
                "publish_failed",
                extra={"details": {"host": exc.host, "port": exc.port, "document": document, "error": str(exc)}},
            )
        return False, last_sent
    if not delivered:
        if logger is not None:
            logger.debug("publish_skipped", extra={"details": {"target": publisher.describe()}})
        return False, last_sent
    if logger is not None:
        logger.debug("document_sent", extra={"details": {"target": publisher.describe(), "bytes": len(document)}})
    return True, document


class ChangeGate:
    """Remembers the last document that reached the publisher."""

    def __init__(self, publisher: DocumentPublisher, logger: Optional[logging.Logger] = None) -> None:
        self.publisher = publisher
        self.logger = logger
        self.last_sent = ""

    def submit(self, state: ScoreboardState) -> bool:
        sent, self.last_sent = publish_if_changed(state, self.last_sent, self.publisher, self.logger)
        return sent
