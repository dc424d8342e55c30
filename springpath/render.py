"""Matplotlib rendering of expanded point tables — one polyline per group."""

from __future__ import annotations

import math
from typing import Any

import matplotlib as mpl
import numpy as np
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.colors import is_color_like
from matplotlib.lines import Line2D
from matplotlib.patches import FancyArrowPatch

from springpath.models.params import Arrow

# ── Style mapping from layer parameters to matplotlib ──

CAPSTYLES = {"butt": "butt", "round": "round", "square": "projecting"}
JOINSTYLES = {"round": "round", "mitre": "miter", "bevel": "bevel"}

DEFAULT_COLOUR = "black"
DEFAULT_LINEWIDTH = 1.0
DEFAULT_ALPHA = 1.0

# Head length as a fraction of the mutation scale (Arrow.length)
_ARROW_HEAD_LENGTH = 0.4


def _colour_column(table: pd.DataFrame) -> str | None:
    for column in ("colour", "color"):
        if column in table.columns:
            return column
    return None


def colour_lookup(values: pd.Series) -> dict[Any, Any]:
    """Map colour values to matplotlib colours.

    Values that already are colours pass through; anything else (labels,
    numbers) is assigned the property-cycle colours in sorted order.
    """
    unique = pd.unique(values)
    if all(is_color_like(v) for v in unique):
        return {v: v for v in unique}
    cycle = mpl.rcParams["axes.prop_cycle"].by_key()["color"]
    ordered = sorted(unique, key=str)
    return {v: cycle[i % len(cycle)] for i, v in enumerate(ordered)}


def _first(group: pd.DataFrame, column: str, default):
    if column in group.columns:
        return group[column].iloc[0]
    return default


def _arrowstyle(arrow: Arrow) -> str:
    head_width = _ARROW_HEAD_LENGTH * math.tan(math.radians(arrow.angle))
    kind = "->" if arrow.type == "open" else "-|>"
    return f"{kind},head_length={_ARROW_HEAD_LENGTH},head_width={head_width:.4f}"


def _add_arrows(ax: Axes, points: np.ndarray, arrow: Arrow, colour, linewidth: float) -> list[FancyArrowPatch]:
    ends = []
    if arrow.ends in ("last", "both"):
        ends.append((points[-2], points[-1]))
    if arrow.ends in ("first", "both"):
        ends.append((points[1], points[0]))

    patches = []
    for tail, head in ends:
        patch = FancyArrowPatch(
            tuple(tail),
            tuple(head),
            arrowstyle=_arrowstyle(arrow),
            mutation_scale=arrow.length,
            color=colour,
            linewidth=linewidth,
            shrinkA=0,
            shrinkB=0,
        )
        ax.add_patch(patch)
        patches.append(patch)
    return patches


def draw_paths(
    ax: Axes,
    table: pd.DataFrame,
    lineend: str = "butt",
    linejoin: str = "round",
    arrow: Arrow | None = None,
    show_legend: bool | None = None,
) -> list[Line2D]:
    """Draw every group of ``table`` as a polyline in emission order.

    Groups are drawn in order of first appearance. Groups with fewer than
    two points are skipped.
    """
    lines: list[Line2D] = []
    if table.empty:
        return lines

    colour_column = _colour_column(table)
    lookup = colour_lookup(table[colour_column]) if colour_column else {}

    # Group ids restart in every panel
    keys = ["PANEL", "group"] if "PANEL" in table.columns else ["group"]

    labelled: set = set()
    for _, group in table.groupby(keys, sort=False):
        if len(group) < 2:
            continue
        value = group[colour_column].iloc[0] if colour_column else None
        colour = lookup.get(value, DEFAULT_COLOUR)
        linewidth = float(_first(group, "linewidth", DEFAULT_LINEWIDTH))
        alpha = float(_first(group, "alpha", DEFAULT_ALPHA))

        label = None
        if show_legend and colour_column and value not in labelled:
            labelled.add(value)
            label = str(value)

        (line,) = ax.plot(
            group["x"].to_numpy(),
            group["y"].to_numpy(),
            color=colour,
            linewidth=linewidth,
            alpha=alpha,
            solid_capstyle=CAPSTYLES[lineend],
            solid_joinstyle=JOINSTYLES[linejoin],
            label=label,
        )
        lines.append(line)

        if arrow is not None:
            _add_arrows(ax, group[["x", "y"]].to_numpy(), arrow, colour, linewidth)

    if labelled:
        ax.legend()
    return lines
