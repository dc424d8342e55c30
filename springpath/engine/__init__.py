"""Spring path stat engine."""

from springpath.engine.registry import stage, Stage, get_registry
from springpath.engine.context import StatContext
from springpath.engine.config import StatConfig
from springpath.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "stage",
    "Stage",
    "get_registry",
    "StatContext",
    "StatConfig",
    "Pipeline",
    "create_pipeline",
]
