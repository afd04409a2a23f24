"""Pytest configuration.

Run pytest from this project's root. pythonpath in pyproject.toml puts src/
and the project root on sys.path so tests can import the package and the
shared helpers under tests/.
"""

import logging

import pytest

from checkstyle_exporter.infrastructure.di.container import ExporterContainer


@pytest.fixture(autouse=True)
def _reset_container():
    """Keep the global container from leaking configuration between tests."""
    ExporterContainer.reset()
    yield
    ExporterContainer.reset()


@pytest.fixture
def debug_logging(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="checkstyle_exporter")
    return caplog
