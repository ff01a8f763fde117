"""Fluor Data - fluorophore spectra, alias resolution and wavelength colors."""

__version__ = "0.1.0"

from fluor_data.models.color import Color
from fluor_data.models.spectrum import Meta, Spectrum
from fluor_data.models.cache import CacheSpectrum
from fluor_data.spectral.color import color_at
from fluor_data.data.fluorophores import FluorophoreCatalog
from fluor_data.data.instruments import InstrumentReader

__all__ = [
    "Color",
    "Meta",
    "Spectrum",
    "CacheSpectrum",
    "color_at",
    "FluorophoreCatalog",
    "InstrumentReader",
    "__version__",
]
