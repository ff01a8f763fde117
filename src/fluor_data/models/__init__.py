"""Data models for fluorophore spectra and instrument optics."""

from fluor_data.models.color import Color
from fluor_data.models.spectrum import Meta, Spectrum
from fluor_data.models.cache import CacheSpectrum
from fluor_data.models.instrument import (
    Filter,
    FilterType,
    Instrument,
    InstrumentID,
    Laser,
    LaserLine,
)

__all__ = [
    "Color",
    "Meta",
    "Spectrum",
    "CacheSpectrum",
    "Filter",
    "FilterType",
    "Instrument",
    "InstrumentID",
    "Laser",
    "LaserLine",
]
