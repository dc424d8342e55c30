"""Stat configuration — defaults and fan-out behavior."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StatConfig:
    """Controls defaults applied by the normalizers and how rows fan out."""

    # Points per revolution when the caller gives no ``n``
    default_n: int = 50

    # Per-row shape defaults
    default_diameter: float = 1.0
    default_tension: float = 0.75

    # >1 runs the per-row generator on a thread pool (order is preserved)
    max_workers: int = 1
