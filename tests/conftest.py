"""
Pytest configuration and shared fixtures.
"""

import io
import pytest
import tempfile
import shutil
from pathlib import Path
from unittest.mock import Mock

from institution_lab.application.services.dataset import build_institutions
from institution_lab.domain.interfaces.base import ILogger
from institution_lab.domain.models.entities import EducationalInstitution
from institution_lab.infrastructure.reporting.console import ConsoleReporter


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    logger = Mock(spec=ILogger)
    logger.debug = Mock()
    logger.info = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    logger.critical = Mock()
    return logger


@pytest.fixture(autouse=True)
def clean_lab_environment(monkeypatch):
    """Keep LAB_* variables from the developer's shell out of the tests."""
    for name in ("LAB_CONFIG_FILE", "LAB_LOG_LEVEL", "LAB_LOG_FILE", "LAB_SORT_IN_PLACE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def institutions():
    """The literal lab dataset in its original order."""
    return build_institutions()


@pytest.fixture
def tech_valley():
    """A fresh copy of the Tech Valley Institute record."""
    return EducationalInstitution("Tech Valley Institute", "Institute", 1992, 8500, 9.1)


@pytest.fixture
def output():
    """In-memory text stream for reporter output."""
    return io.StringIO()


@pytest.fixture
def reporter(output):
    """Console reporter writing to the in-memory stream."""
    return ConsoleReporter(output)
