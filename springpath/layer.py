"""User-facing construction surface: ``aes`` and ``geom_spring``.

    layer = geom_spring(aes(x="x0", y="y0", xend="x1", yend="y1", colour="kind"), data=df)
    points = layer.compute()
    layer.draw(ax)

Shape attributes are per-row only: map ``diameter`` / ``tension`` to
columns. They are not accepted as call-level constants.
"""

from __future__ import annotations

import logging

import pandas as pd
from matplotlib.axes import Axes
from matplotlib.lines import Line2D

from springpath.errors import ConfigurationError
from springpath.models.params import Arrow, SpringParams
from springpath.render import draw_paths
from springpath.stat_spring import StatSpring

logger = logging.getLogger(__name__)

# Group id for rows with no discrete aesthetic to split on
NO_GROUP = -1


def aes(**bindings: str) -> dict[str, str]:
    """Map aesthetic names to data column names."""
    return dict(bindings)


def _is_discrete(series: pd.Series) -> bool:
    return (
        isinstance(series.dtype, pd.CategoricalDtype)
        or pd.api.types.is_object_dtype(series)
        or pd.api.types.is_string_dtype(series)
        or pd.api.types.is_bool_dtype(series)
    )


def add_group(frame: pd.DataFrame) -> pd.DataFrame:
    """Assign ``group`` from the interaction of discrete aesthetics."""
    if "group" in frame.columns:
        return frame

    discrete = [c for c in frame.columns if c != "PANEL" and _is_discrete(frame[c])]
    frame = frame.copy()
    if not discrete or frame.empty:
        frame["group"] = NO_GROUP
    else:
        codes = frame.groupby(discrete, sort=True, dropna=False).ngroup()
        frame["group"] = codes.to_numpy() + 1
    return frame


def add_panel(frame: pd.DataFrame, data: pd.DataFrame, facet: str | None) -> pd.DataFrame:
    if facet is None:
        frame["PANEL"] = 1
        return frame
    if facet not in data.columns:
        raise ConfigurationError(f"facet column '{facet}' not found in data")
    codes, _ = pd.factorize(data[facet], sort=True)
    frame["PANEL"] = codes + 1
    return frame


class SpringLayer:
    """A spring layer: data, aesthetic mapping, the spring stat and line params."""

    def __init__(
        self,
        mapping: dict[str, str] | None,
        data: pd.DataFrame | None,
        params: SpringParams,
        stat: StatSpring | None = None,
    ) -> None:
        self.mapping = dict(mapping or {})
        self.data = data
        self.params = params
        self.stat = stat or StatSpring()

    def __repr__(self) -> str:
        return f"<SpringLayer aes={sorted(self.mapping)} n={self.params.n}>"

    def resolve_mapping(self, plot_mapping: dict[str, str] | None = None) -> dict[str, str]:
        if self.params.inherit_aes and plot_mapping:
            return {**plot_mapping, **self.mapping}
        return dict(self.mapping)

    def build_frame(
        self,
        data: pd.DataFrame | None = None,
        plot_mapping: dict[str, str] | None = None,
        facet: str | None = None,
    ) -> pd.DataFrame:
        """Evaluate the mapping against the data into an aesthetic frame."""
        data = self.data if self.data is not None else data
        if data is None:
            raise ConfigurationError("geom_spring has no data")
        mapping = self.resolve_mapping(plot_mapping)

        missing = [a for a in self.stat.required_aes if a not in mapping]
        if missing:
            raise ConfigurationError(
                f"geom_spring requires the following missing aesthetics: {', '.join(missing)}"
            )
        unknown = {a: c for a, c in mapping.items() if c not in data.columns}
        if unknown:
            detail = ", ".join(f"{a}={c!r}" for a, c in unknown.items())
            raise ConfigurationError(f"mapped columns not found in data: {detail}")

        frame = pd.DataFrame({a: data[c].reset_index(drop=True) for a, c in mapping.items()})
        frame = add_panel(frame, data.reset_index(drop=True), facet)
        return add_group(frame)

    def handle_na(self, frame: pd.DataFrame) -> pd.DataFrame:
        complete = frame[list(self.stat.required_aes)].notna().all(axis=1)
        dropped = int((~complete).sum())
        if dropped == 0:
            return frame
        if not self.params.na_rm:
            logger.warning("Removed %d rows containing missing values (geom_spring).", dropped)
        return frame[complete].reset_index(drop=True)

    def compute(
        self,
        data: pd.DataFrame | None = None,
        plot_mapping: dict[str, str] | None = None,
        facet: str | None = None,
    ) -> pd.DataFrame:
        """Return the expanded point table, one polyline per ``group``."""
        frame = self.handle_na(self.build_frame(data, plot_mapping, facet))
        return self.stat.compute_layer(frame, self.params.stat_params())

    def draw(
        self,
        ax: Axes,
        data: pd.DataFrame | None = None,
        plot_mapping: dict[str, str] | None = None,
        facet: str | None = None,
    ) -> list[Line2D]:
        table = self.compute(data, plot_mapping, facet)
        return draw_paths(
            ax,
            table,
            lineend=self.params.lineend,
            linejoin=self.params.linejoin,
            arrow=self.params.arrow,
            show_legend=self.params.show_legend,
        )


def geom_spring(
    mapping: dict[str, str] | None = None,
    data: pd.DataFrame | None = None,
    *,
    n: int | None = 50,
    arrow: Arrow | None = None,
    lineend: str = "butt",
    linejoin: str = "round",
    na_rm: bool = False,
    show_legend: bool | None = None,
    inherit_aes: bool = True,
) -> SpringLayer:
    """Draw a spring between (x, y) and (xend, yend) for every row.

    Args:
        mapping: Aesthetic bindings from :func:`aes`. ``x, y, xend, yend``
            are required; ``diameter`` and ``tension`` are optional per-row
            shape attributes. Anything else (``colour``, ``linewidth``,
            ``alpha``, ``group``...) is carried onto every generated point.
        data: Connection table. Falls back to the data given to ``compute``.
        n: Points per revolution of the coil.
        arrow: Optional :class:`Arrow` decoration.
        lineend: ``butt``, ``round`` or ``square``.
        linejoin: ``round``, ``mitre`` or ``bevel``.
        na_rm: Drop rows with missing positions without a warning.
        show_legend: Add legend entries for the ``colour`` aesthetic.
        inherit_aes: Merge the plot-level mapping under this one.
    """
    params = SpringParams(
        n=n,
        arrow=arrow,
        lineend=lineend,
        linejoin=linejoin,
        na_rm=na_rm,
        show_legend=show_legend,
        inherit_aes=inherit_aes,
    )
    return SpringLayer(mapping, data, params)
