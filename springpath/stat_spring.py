"""StatSpring — the spring stat as seen by the layering system.

The layer calls it in three steps per panel:

    params = stat.setup_params(params)           # once per call
    rows = stat.setup_data(rows, params)         # defaults + validation
    points = stat.compute_panel(rows, params)    # fan-out / fan-in

Validation always finishes for the whole batch before any path is built,
so a bad row fails the call without partial output. A layer with a single
panel goes through every stage in one ``Pipeline.run`` call.
"""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from springpath.engine.context import StatContext
from springpath.engine.pipeline import Pipeline, create_pipeline
from springpath.engine.registry import Stage
from springpath.engine.stages.s0_01_parameter_defaults import normalize_params
from springpath.engine.stages.s1_01_group_disambiguation import disambiguate_groups
from springpath.engine.stages.s1_02_shape_defaults import resolve_shape_defaults
from springpath.engine.stages.s2_01_spring_paths import compute_panel

logger = logging.getLogger(__name__)

__all__ = ["StatSpring", "normalize_params", "normalize_rows", "compute_panel"]


def normalize_rows(rows: pd.DataFrame) -> pd.DataFrame:
    """Disambiguate groups, then default and validate diameter and tension."""
    return resolve_shape_defaults(disambiguate_groups(rows))


class StatSpring:
    """Turns connection rows into spring polylines."""

    required_aes = ("x", "y", "xend", "yend")
    optional_aes = ("diameter", "tension")
    extra_params = ("n", "na_rm")

    def __init__(self, pipeline: Pipeline | None = None) -> None:
        self.pipeline = pipeline or create_pipeline()

    def setup_params(self, params: dict[str, Any]) -> dict[str, Any]:
        ctx = StatContext(params=params)
        return self.pipeline.run_stage(ctx, Stage.PARAMETERS).params

    def setup_data(self, data: pd.DataFrame, params: dict[str, Any], panel: Any = None) -> pd.DataFrame:
        ctx = StatContext(params=params, data=data, panel=panel)
        return self.pipeline.run_stage(ctx, Stage.ROWS).data

    def compute_panel(self, data: pd.DataFrame, params: dict[str, Any], panel: Any = None) -> pd.DataFrame:
        ctx = StatContext(params=params, data=data, panel=panel)
        return self.pipeline.run_stage(ctx, Stage.PANEL).result

    def compute_layer(self, data: pd.DataFrame, params: dict[str, Any]) -> pd.DataFrame:
        """Run the full computation once per ``PANEL`` and stack the panels."""
        if "PANEL" not in data.columns or data.empty:
            panels = [(None, data)]
        else:
            panels = list(data.groupby("PANEL", sort=True, observed=True))

        if len(panels) == 1:
            panel, rows = panels[0]
            ctx = self.pipeline.run(StatContext(params=params, data=rows, panel=panel))
            combined, n = ctx.result, ctx.params["n"]
        else:
            params = self.setup_params(params)
            # Every panel is validated before any panel is expanded.
            prepared = [(panel, self.setup_data(rows, params, panel)) for panel, rows in panels]
            results = [self.compute_panel(rows, params, panel) for panel, rows in prepared]
            combined, n = pd.concat(results, ignore_index=True), params["n"]

        logger.info(
            "stat_spring: %d rows in %d panel(s) -> %d points (n=%d)",
            len(data),
            len(panels),
            len(combined),
            n,
        )
        return combined
