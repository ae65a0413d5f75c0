"""Shared pytest fixtures for AIRS tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from omegaconf import OmegaConf

from airs.state import history


@pytest.fixture(autouse=True)
def _restore_airs_logger():
    """Undo handler changes made by setup_logging() so caplog keeps working."""
    root = logging.getLogger("airs")
    saved = (list(root.handlers), root.level, root.propagate)
    yield
    for handler in list(root.handlers):
        if handler not in saved[0]:
            handler.close()
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    root.propagate = saved[2]


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def config_path(project_root: Path) -> Path:
    return project_root / "config" / "default.yaml"


@pytest.fixture
def default_config(config_path: Path):
    return OmegaConf.load(config_path)


@pytest.fixture
def nav():
    """A fresh navigation history seeded with "homepage"."""
    return history("homepage")


@pytest.fixture
def received() -> list:
    """List to collect values delivered to an observer (``received.append``)."""
    return []
