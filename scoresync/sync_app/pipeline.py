"""
The read -> decode -> publish loop.

Everything runs on the calling thread: a frame is decoded and, if the state
changed, published before the next byte is read.
"""
from __future__ import annotations

import logging
from typing import Optional

from scoresync.domain.state import ScoreboardState
from scoresync.parsing.framing import ByteSource, FrameReader
from scoresync.parsing.layouts import PatternTable, build_pattern_table
from scoresync.publishing.gate import ChangeGate
from scoresync.sync_app.config import SyncSettings
from scoresync.sync_app.logging import redact
from scoresync.transports.base import DocumentPublisher
from scoresync.transports.tcp import create_publisher


class SyncPipeline:
    def __init__(
        self,
        source: ByteSource,
        publisher: DocumentPublisher,
        table: PatternTable,
        logger: logging.Logger,
        state: Optional[ScoreboardState] = None,
    ) -> None:
        self.source = source
        self.reader = FrameReader()
        self.table = table
        self.state = state if state is not None else ScoreboardState()
        self.gate = ChangeGate(publisher, logger)
        self.logger = logger
        self.frames_read = 0
        self.frames_unrecognized = 0
        self.documents_sent = 0

    @classmethod
    def from_settings(cls, settings: SyncSettings, source: ByteSource, logger: logging.Logger) -> "SyncPipeline":
        publisher = create_publisher(settings.target_host, settings.target_port, timeout=settings.connect_timeout)
        table = build_pattern_table(clock_format=settings.clock_format, trim_fields=settings.trim_fields)
        return cls(source=source, publisher=publisher, table=table, logger=logger)

    def process_frame(self, frame: str) -> bool:
        """
        Decode one frame into the state and publish it if it changed.

        Returns:
            True if a document was sent.
        """
        self.frames_read += 1
        if not self.table.dispatch(frame, self.state):
            self.frames_unrecognized += 1
            self.logger.warning("frame_unrecognized", extra={"details": redact({"frame": frame})})
            return False
        self.logger.debug("frame_decoded", extra={"details": redact({"frame": frame})})
        sent = self.gate.submit(self.state)
        if sent:
            self.documents_sent += 1
        return sent

    def step(self) -> bool:
        """
        Read and process the next frame.

        Returns:
            False once the source is exhausted, True otherwise.

        Raises:
            FrameReadError: If the source fails. The loop is not resumed.
        """
        frame = self.reader.read_frame(self.source)
        if frame is None:
            return False
        if frame:
            self.process_frame(frame)
        return True

    def run(self) -> None:
        while self.step():
            pass
        self.logger.info(
            "sync_stopped",
            extra={
                "details": {
                    "frames": self.frames_read,
                    "unrecognized": self.frames_unrecognized,
                    "sent": self.documents_sent,
                }
            },
        )
