"""Shared fixtures for the HillCore test suite."""

import pytest

from shared.config import HillCoreConfig
from shared.logger import HillLogger
from hill.core.cipher import HillCipher
from hill.core.engine import HillEngine


@pytest.fixture
def hill_cipher():
    """2x2 cipher keyed with HILL: K = [[7, 8], [11, 11]]."""
    return HillCipher("HILL", 2)


@pytest.fixture
def classic_cipher():
    """3x3 textbook cipher keyed with GYBNQKURP."""
    return HillCipher("GYBNQKURP", 3)


@pytest.fixture
def silent_logger():
    return HillLogger("hill.test", log_level="DEBUG", console_output=False)


@pytest.fixture
def engine(silent_logger):
    return HillEngine(HillCoreConfig(), logger=silent_logger)
