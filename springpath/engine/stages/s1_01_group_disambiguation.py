"""S1.01 — Group Disambiguation.

Rows sharing a ``group`` value would be joined into one polyline by the
renderer. When any value repeats, every row gets ``<group>-<row index>``
(1-based, batch-local) so each connection draws as its own path.
"""

from __future__ import annotations

import pandas as pd

from springpath.engine.context import StatContext
from springpath.engine.registry import Stage, stage


def disambiguate_groups(data: pd.DataFrame) -> pd.DataFrame:
    if "group" not in data.columns or not data["group"].duplicated().any():
        return data

    data = data.copy()
    index = range(1, len(data) + 1)
    data["group"] = [f"{g}-{i}" for g, i in zip(data["group"], index)]
    return data


@stage(
    id="S1.01",
    stage=Stage.ROWS,
    dependencies=["S0.01"],
    description="Make duplicated group identifiers unique within the batch",
)
def group_disambiguation(ctx: StatContext) -> None:
    ctx.data = disambiguate_groups(ctx.data)
