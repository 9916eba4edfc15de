"""Shared pytest fixtures for the source builder test suite."""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import DEFAULT_CONFIG, VARIANTS_DIR, load_config  # noqa: E402
from core.registry import load_catalog  # noqa: E402
from core.store import InstanceStore  # noqa: E402


@pytest.fixture
def cfg():
    return load_config(DEFAULT_CONFIG)


@pytest.fixture
def catalog(cfg):
    return load_catalog(cfg)


@pytest.fixture
def store(catalog):
    return InstanceStore(catalog)


@pytest.fixture
def visit_cfg():
    return load_config(VARIANTS_DIR / "visit.toml")


@pytest.fixture
def visit_catalog(visit_cfg):
    return load_catalog(visit_cfg)
