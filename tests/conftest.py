"""Shared test fixtures."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from springpath.engine.pipeline import create_pipeline
from springpath.engine.config import StatConfig


# One horizontal connection of length 10: 5 revolutions at diameter 2, tension 1
SCENARIO_ROW = {"x": 0.0, "y": 0.0, "xend": 10.0, "yend": 0.0, "diameter": 2.0, "tension": 1.0}


@pytest.fixture
def scenario_rows() -> pd.DataFrame:
    return pd.DataFrame([SCENARIO_ROW])


@pytest.fixture
def connections() -> pd.DataFrame:
    """Three connections with extra attribute columns and a shared group."""
    return pd.DataFrame({
        "x": [0.0, 0.0, 5.0],
        "y": [0.0, 1.0, 5.0],
        "xend": [4.0, 0.0, 5.0],
        "yend": [3.0, 4.0, 5.0],
        "class": ["a", "b", "a"],
        "group": [-1, -1, -1],
    })


@pytest.fixture
def raw_connections() -> pd.DataFrame:
    """User-side table with its own column names, two facets and a missing row."""
    return pd.DataFrame({
        "from_x": [0.0, 2.0, 1.0, None],
        "from_y": [0.0, 0.0, 1.0, 1.0],
        "to_x": [3.0, 2.0, 5.0, 4.0],
        "to_y": [4.0, 6.0, 1.0, 1.0],
        "kind": ["a", "b", "a", "b"],
        "site": ["north", "south", "north", "south"],
    })


@pytest.fixture
def pipeline():
    return create_pipeline(StatConfig())
