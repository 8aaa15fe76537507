import uuid

import pytest

from scoresync.sync_app.logging import create_logger, ring_buffer


@pytest.fixture
def logger():
    log = create_logger(f"scoresync.test.{uuid.uuid4().hex}", ring_size=50)
    yield log
    for handler in list(log.handlers):
        log.removeHandler(handler)


@pytest.fixture
def events(logger):
    return ring_buffer(logger).get_events
