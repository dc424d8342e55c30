"""springpath — spring/coil paths between pairs of points for layered plots."""

from springpath.errors import ConfigurationError
from springpath.utils.geometry import spring_path
from springpath.stat_spring import StatSpring, normalize_params, normalize_rows, compute_panel
from springpath.models.params import Arrow, SpringParams
from springpath.layer import SpringLayer, aes, geom_spring

__all__ = [
    "ConfigurationError",
    "spring_path",
    "StatSpring",
    "normalize_params",
    "normalize_rows",
    "compute_panel",
    "Arrow",
    "SpringParams",
    "SpringLayer",
    "aes",
    "geom_spring",
]
