"""Pipeline orchestrator — runs stages in dependency order, failing atomically."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from springpath.config import settings
from springpath.engine.config import StatConfig
from springpath.engine.context import StatContext
from springpath.engine.registry import Stage, StageRegistry, StageSpec, get_registry

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the stage pipeline.

    A stage that raises stops the run: nothing after it executes and the
    exception reaches the caller unchanged.
    """

    def __init__(
        self,
        registry: StageRegistry | None = None,
        config: StatConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or StatConfig()

    def run(self, ctx: StatContext) -> StatContext:
        """Run every registered stage on the given context."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        logger.debug("Pipeline: %d stages queued for %d rows", len(ordered), ctx.num_rows)
        self._execute(ctx, ordered)

        logger.debug(
            "Pipeline complete: %d rows -> %d points in %.1fms",
            ctx.num_rows,
            ctx.num_points,
            (time.perf_counter() - start) * 1000,
        )
        return ctx

    def run_stage(self, ctx: StatContext, stage: Stage) -> StatContext:
        """Run only the stages registered for one step of the computation."""
        self._execute(ctx, self.registry.get_stage(stage))
        return ctx

    def _execute(self, ctx: StatContext, specs: list[StageSpec]) -> None:
        ctx.config = self.config
        for spec in specs:
            t0 = time.perf_counter()
            spec.fn(ctx)
            ctx.completed_stages.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            ctx.timings_ms[spec.id] = elapsed
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    package = importlib.import_module("springpath.engine.stages")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")


def create_pipeline(config: StatConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline over the registered stages."""
    register_stages()
    if config is None:
        config = StatConfig(max_workers=settings.springpath_max_workers)
    return Pipeline(config=config)
