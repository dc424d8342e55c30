"""S2.01 — Spring Paths.

Fans every connection row out to the spring generator and fans the point
arrays back in as one table. Non-positional columns are copied onto each
generated point, and points stay in row order, then traversal order.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial

import numpy as np
import pandas as pd

from springpath.engine.context import StatContext
from springpath.engine.registry import Stage, stage
from springpath.utils.geometry import spring_path

logger = logging.getLogger(__name__)

GEOMETRY_COLUMNS = ("x", "y", "xend", "yend")


def compute_panel(rows: pd.DataFrame, n: int, max_workers: int = 1) -> pd.DataFrame:
    """Expand connection rows into the point table for one panel."""
    extra_columns = [c for c in rows.columns if c not in GEOMETRY_COLUMNS]

    path = partial(spring_path, n=n)
    columns = [rows[c].to_numpy() for c in ("x", "y", "xend", "yend", "diameter", "tension")]
    if max_workers > 1 and len(rows) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            paths = list(pool.map(path, *columns))
    else:
        paths = list(map(path, *columns))

    counts = np.array([len(p) for p in paths], dtype=np.intp)
    points = np.concatenate(paths) if paths else np.empty((0, 2))

    result = rows[extra_columns].iloc[np.repeat(np.arange(len(rows)), counts)]
    result = result.reset_index(drop=True)
    result.insert(0, "y", points[:, 1])
    result.insert(0, "x", points[:, 0])

    logger.debug("Expanded %d rows into %d points (n=%d)", len(rows), len(result), n)
    return result


@stage(
    id="S2.01",
    stage=Stage.PANEL,
    dependencies=["S1.02"],
    description="Generate spring polylines for every row of the panel",
)
def spring_paths(ctx: StatContext) -> None:
    ctx.result = compute_panel(ctx.data, ctx.params["n"], ctx.config.max_workers)
    if ctx.panel is not None:
        logger.debug("Panel %s: %d rows -> %d points", ctx.panel, ctx.num_rows, ctx.num_points)
