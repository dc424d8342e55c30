"""Tests for the row normalization stages (S1.01, S1.02)."""

import numpy as np
import pandas as pd
import pytest

from springpath.engine.context import StatContext
from springpath.engine.registry import Stage
from springpath.engine.stages.s1_01_group_disambiguation import disambiguate_groups
from springpath.engine.stages.s1_02_shape_defaults import resolve_shape_defaults
from springpath.errors import ConfigurationError
from springpath.stat_spring import normalize_rows


def _rows(**extra):
    base = {"x": [0.0, 1.0], "y": [0.0, 1.0], "xend": [1.0, 2.0], "yend": [1.0, 2.0]}
    base.update(extra)
    return pd.DataFrame(base)


class TestGroupDisambiguation:
    def test_duplicates_rewritten_with_row_index(self):
        out = disambiguate_groups(_rows(group=["g1", "g1"]))
        assert out["group"].tolist() == ["g1-1", "g1-2"]

    def test_every_row_rewritten_when_any_duplicate(self):
        rows = pd.DataFrame({"x": [0] * 3, "y": [0] * 3, "xend": [1] * 3, "yend": [1] * 3,
                             "group": ["a", "b", "a"]})
        assert disambiguate_groups(rows)["group"].tolist() == ["a-1", "b-2", "a-3"]

    def test_unique_groups_untouched(self):
        rows = _rows(group=[3, 4])
        out = disambiguate_groups(rows)
        assert out["group"].tolist() == [3, 4]

    def test_no_group_column(self):
        rows = _rows()
        assert disambiguate_groups(rows) is rows

    def test_input_not_mutated(self):
        rows = _rows(group=[-1, -1])
        disambiguate_groups(rows)
        assert rows["group"].tolist() == [-1, -1]

    def test_index_is_batch_local(self):
        rows = _rows(group=["g", "g"])
        rows.index = [10, 20]
        assert disambiguate_groups(rows)["group"].tolist() == ["g-1", "g-2"]


class TestShapeDefaults:
    def test_missing_columns_defaulted(self):
        out = resolve_shape_defaults(_rows())
        assert out["diameter"].tolist() == [1.0, 1.0]
        assert out["tension"].tolist() == [0.75, 0.75]

    def test_missing_cells_defaulted_per_row(self):
        out = resolve_shape_defaults(_rows(diameter=[2.0, np.nan], tension=[np.nan, 3.0]))
        assert out["diameter"].tolist() == [2.0, 1.0]
        assert out["tension"].tolist() == [0.75, 3.0]

    def test_zero_diameter_fails_batch(self):
        with pytest.raises(ConfigurationError, match="diameter of 0 is not permitted"):
            resolve_shape_defaults(_rows(diameter=[1.0, 0.0]))

    @pytest.mark.parametrize("bad", [0.0, -0.1])
    def test_non_positive_tension_fails_batch(self, bad):
        with pytest.raises(ConfigurationError, match="tension must be greater than 0"):
            resolve_shape_defaults(_rows(tension=[bad, 1.0]))

    def test_diameter_checked_before_tension(self):
        with pytest.raises(ConfigurationError, match="diameter"):
            resolve_shape_defaults(_rows(diameter=[0.0, 1.0], tension=[0.0, 1.0]))


def test_normalize_rows_runs_all_steps():
    out = normalize_rows(_rows(group=["g", "g"], diameter=[np.nan, 2.0]))
    assert out["group"].tolist() == ["g-1", "g-2"]
    assert out["diameter"].tolist() == [1.0, 2.0]
    assert out["tension"].tolist() == [0.75, 0.75]


def test_rows_stage_updates_context(pipeline):
    ctx = StatContext(params={"n": 50}, data=_rows(group=[1, 1]))
    pipeline.run_stage(ctx, Stage.ROWS)
    assert ctx.data["group"].tolist() == ["1-1", "1-2"]
    assert {"S1.01", "S1.02"} <= ctx.completed_stages
