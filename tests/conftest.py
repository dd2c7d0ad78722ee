"""
Pytest configuration for service_readiness tests.

Async tests are marked explicitly with @pytest.mark.asyncio.
"""

import pytest

from service_readiness.logging.config import LoggingConfig
from tests.unit.mocks import RecordingFailurePolicy, RecordingSink


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as async"
    )


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failure_policy() -> RecordingFailurePolicy:
    return RecordingFailurePolicy()


@pytest.fixture(autouse=True)
def reset_logging_config():
    config = LoggingConfig()
    config.update(log_level="info", log_output="stdout", disabled_loggers=[])
    yield
    config.update(log_level="info", log_output="stdout", disabled_loggers=[])
