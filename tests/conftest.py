"""Shared pytest fixtures for the miniyaml test suite."""

from pathlib import Path

import pytest

from miniyaml import Block, load

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    """Directory holding the ``testNN.yaml`` fixture documents."""
    return DATA_DIR


@pytest.fixture
def load_fixture():
    """Parse a fixture document by name, e.g. ``load_fixture("test02")``."""

    def _load(name: str, **kwargs) -> Block:
        return load(DATA_DIR / f"{name}.yaml", **kwargs)

    return _load
