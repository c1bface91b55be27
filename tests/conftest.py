import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """
    Capture loguru records for the duration of a test.

    Returns a callable: log_messages() gives every message,
    log_messages("DEBUG") only those at that level.
    """
    records = []
    handler_id = logger.add(lambda msg: records.append(msg.record), level="TRACE", format="{message}")

    def messages(level: str = None):
        return [r["message"] for r in records if level is None or r["level"].name == level]

    yield messages
    logger.remove(handler_id)
