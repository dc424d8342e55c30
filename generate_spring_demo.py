"""Generate a PNG showing spring layers with a few diameter / tension settings.

Usage:
    python generate_spring_demo.py [output.png]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from springpath import Arrow, aes, geom_spring
from springpath.log import configure_logging

logger = logging.getLogger("generate_spring_demo")

OUT_PATH = Path(__file__).resolve().parent / "spring_demo.png"

# ── Style ───────────────────────────────────────────────────────────

BG = "#0f0f1a"
PANEL_BG = "#161625"
TEXT = "#eee"


def hide(ax):
    for s in ax.spines.values():
        s.set_visible(False)
    ax.set_xticks([])
    ax.set_yticks([])


def demo_data() -> pd.DataFrame:
    rng = np.random.default_rng(7)
    k = 8
    return pd.DataFrame({
        "x0": rng.uniform(0, 10, k),
        "y0": rng.uniform(0, 10, k),
        "x1": rng.uniform(0, 10, k),
        "y1": rng.uniform(0, 10, k),
        "kind": ["a", "b"] * (k // 2),
        "size": np.linspace(0.3, 1.2, k),
        "pull": np.linspace(0.4, 2.0, k),
    })


def main(out_path: Path = OUT_PATH) -> Path:
    configure_logging()
    df = demo_data()
    base = aes(x="x0", y="y0", xend="x1", yend="y1", colour="kind")

    panels = [
        ("defaults", geom_spring(data=df)),
        ("diameter mapped", geom_spring(aes(diameter="size"), data=df)),
        ("tension mapped", geom_spring(aes(tension="pull"), data=df, n=80)),
        ("arrows", geom_spring(data=df, arrow=Arrow(type="closed"), lineend="round", show_legend=True)),
    ]

    fig, axes = plt.subplots(1, len(panels), figsize=(4 * len(panels), 4), facecolor=BG)
    for ax, (title, layer) in zip(axes, panels):
        ax.set_facecolor(PANEL_BG)
        layer.draw(ax, plot_mapping=base)
        ax.set_aspect("equal")
        ax.set_title(title, color=TEXT, fontsize=11)
        hide(ax)

    fig.tight_layout()
    fig.savefig(out_path, dpi=150, facecolor=BG)
    plt.close(fig)
    logger.info("Saved %s", out_path)
    return out_path


if __name__ == "__main__":
    main(Path(sys.argv[1]) if len(sys.argv) > 1 else OUT_PATH)
