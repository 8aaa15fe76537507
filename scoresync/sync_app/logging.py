import logging
import sys
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

MAX_DETAIL_LENGTH = 1024


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


class DetailsFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        details = getattr(record, "details", None)
        if details:
            line += " " + " ".join(f"{key}={value!r}" for key, value in details.items())
        return line


def create_logger(name: str, ring_size: int, level: str | int = logging.INFO, stream: bool = False) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    handler = RingBufferHandler(max_entries=ring_size)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    if stream:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(DetailsFormatter("%(asctime)s %(levelname)s %(message)s"))
        logger.addHandler(console)
    logger.propagate = False
    return logger


def ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def redact(details: Optional[dict]) -> dict:
    if not details:
        return {}
    cleaned = {}
    for key, value in details.items():
        if isinstance(value, str) and len(value) > MAX_DETAIL_LENGTH:
            cleaned[key] = value[:MAX_DETAIL_LENGTH] + f"...(+{len(value) - MAX_DETAIL_LENGTH})"
        else:
            cleaned[key] = value
    return cleaned
