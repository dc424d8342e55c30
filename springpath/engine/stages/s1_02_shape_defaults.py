"""S1.02 — Shape Defaults.

Fills in ``diameter`` and ``tension`` per row and rejects the whole batch
if any row ends up with a zero diameter or a non-positive tension.
"""

from __future__ import annotations

import logging

import pandas as pd

from springpath.engine.config import StatConfig
from springpath.engine.context import StatContext
from springpath.engine.registry import Stage, stage
from springpath.errors import ConfigurationError

logger = logging.getLogger(__name__)


def resolve_shape_defaults(data: pd.DataFrame, config: StatConfig | None = None) -> pd.DataFrame:
    config = config or StatConfig()
    data = data.copy()

    for column, default in (("diameter", config.default_diameter), ("tension", config.default_tension)):
        if column not in data.columns:
            data[column] = default
        else:
            missing = data[column].isna()
            if missing.any():
                logger.debug("Defaulting %s on %d rows", column, int(missing.sum()))
                data[column] = data[column].fillna(default)

    if (data["diameter"] == 0).any():
        raise ConfigurationError("diameter of 0 is not permitted")
    if (data["tension"] <= 0).any():
        raise ConfigurationError("tension must be greater than 0")

    return data


@stage(
    id="S1.02",
    stage=Stage.ROWS,
    dependencies=["S1.01"],
    description="Default and validate per-row diameter and tension",
)
def shape_defaults(ctx: StatContext) -> None:
    ctx.data = resolve_shape_defaults(ctx.data, ctx.config)
