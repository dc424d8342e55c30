"""StatContext — the single mutable state object flowing through all stages.

Batch-level values → StatContext.params
Per-row values → StatContext.data (one row per connection)
Generated points → StatContext.result
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from springpath.engine.config import StatConfig


@dataclass
class StatContext:
    """Shared state for one computation call over one panel."""

    # Call-level parameters (``n``), normalized by the PARAMETERS stage
    params: dict[str, Any] = field(default_factory=dict)
    # Connection rows: x, y, xend, yend plus any extra columns
    data: pd.DataFrame = field(default_factory=pd.DataFrame)
    # Expanded point table, populated by the PANEL stage
    result: pd.DataFrame | None = None
    # Panel identifier the rows belong to (informational)
    panel: Any = None
    config: StatConfig = field(default_factory=StatConfig)

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    timings_ms: dict[str, float] = field(default_factory=dict)

    @property
    def num_rows(self) -> int:
        return len(self.data)

    @property
    def num_points(self) -> int:
        return 0 if self.result is None else len(self.result)
