import pytest

from analytics.config import Config


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without I/O")


@pytest.fixture
def raw_config() -> Config:
    """
    A raw configuration with every field unset.
    """
    return Config()
