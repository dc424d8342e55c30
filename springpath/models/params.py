"""Call-level parameter models for the spring layer."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class Arrow(BaseModel):
    angle: float = Field(default=30.0, gt=0, lt=90, description="Half-angle of the head in degrees")
    length: float = Field(default=10.0, gt=0, description="Head length in points")
    ends: Literal["last", "first", "both"] = Field(default="last", description="Which path ends get a head")
    type: Literal["open", "closed"] = Field(default="open", description="Open chevron or filled triangle")


class SpringParams(BaseModel):
    n: int | None = Field(default=50, description="Points per revolution")
    arrow: Arrow | None = Field(default=None, description="Arrow decoration, None for plain lines")
    lineend: Literal["butt", "round", "square"] = Field(default="butt", description="Line cap style")
    linejoin: Literal["round", "mitre", "bevel"] = Field(default="round", description="Line join style")
    na_rm: bool = Field(default=False, description="Drop rows with missing positions silently")
    show_legend: bool | None = Field(default=None, description="Legend entries for the colour column")
    inherit_aes: bool = Field(default=True, description="Merge the plot-level mapping into this layer")

    def stat_params(self) -> dict:
        """Parameters the stat consumes."""
        return {"n": self.n, "na_rm": self.na_rm}
