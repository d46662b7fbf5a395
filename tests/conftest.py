from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.spec_builder import SpecBuilder


@pytest.fixture
def spec_builder(tmp_path: Path) -> SpecBuilder:
    """Provide a reusable spec directory builder rooted at the pytest tmp_path."""
    return SpecBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_cmdgen_logger():
    yield
    logger = logging.getLogger("cmdgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
