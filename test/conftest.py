"""Pytest configuration and fixtures

Every test starts from default settings: ``SANSU_*`` variables are removed
from the environment and the cached settings are dropped. Handlers installed
by ``setup_logging`` are removed again afterwards.
"""

import logging
import os
import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sansu.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in list(os.environ):
        if name.startswith("SANSU_"):
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def clean_logging():
    yield
    logger = logging.getLogger("sansu")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
