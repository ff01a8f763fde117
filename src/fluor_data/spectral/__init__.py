"""Spectral lookup and color calculations."""

from fluor_data.spectral.lookup import (
    intensity_at,
    first_max_wavelength,
    scale_intensity,
)
from fluor_data.spectral.color import (
    color_at,
    VISIBLE_MIN,
    VISIBLE_MAX,
)

__all__ = [
    "intensity_at",
    "first_max_wavelength",
    "scale_intensity",
    "color_at",
    "VISIBLE_MIN",
    "VISIBLE_MAX",
]
