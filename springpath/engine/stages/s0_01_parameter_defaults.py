"""S0.01 — Parameter Defaults.

Resolves the batch-level point density ``n`` once per computation call,
before any row is looked at.
"""

from __future__ import annotations

from typing import Any

from springpath.engine.config import StatConfig
from springpath.engine.context import StatContext
from springpath.engine.registry import Stage, stage
from springpath.errors import ConfigurationError


def normalize_params(params: dict[str, Any], config: StatConfig | None = None) -> dict[str, Any]:
    """Return a copy of ``params`` with ``n`` defaulted and validated."""
    config = config or StatConfig()
    params = dict(params)
    if params.get("n") is None:
        params["n"] = config.default_n
    elif params["n"] <= 0:
        raise ConfigurationError("n must be greater than 0")
    return params


@stage(
    id="S0.01",
    stage=Stage.PARAMETERS,
    description="Default and validate the point density n",
)
def parameter_defaults(ctx: StatContext) -> None:
    ctx.params = normalize_params(ctx.params, ctx.config)
