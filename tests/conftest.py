import pytest

from pos.infrastructure.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    configure_logging("WARNING")
