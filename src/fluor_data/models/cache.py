"""Cache entry combining a spectrum with its plotting state."""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from fluor_data.models.spectrum import Meta, Spectrum


@dataclass(eq=False)
class CacheSpectrum:
    """A spectrum as held in the plotting cache.

    Attributes:
        index: Build order of the entry.
        spectrum: The underlying spectrum data.
        name: Display name; defaults to the spectrum id.
        names: All display names of the fluorophore.
        meta: Catalog metadata, if known.
        visible_excitation: Whether the excitation curve is plotted.
        visible_emission: Whether the emission curve is plotted.
        intensity_cutoff: Emission scale at or below which the curve is zeroed.
    """

    index: int
    spectrum: Spectrum
    name: Optional[str] = None
    names: list[str] = field(default_factory=list)
    meta: Optional[Meta] = None
    visible_excitation: bool = False
    visible_emission: bool = True
    intensity_cutoff: float = 0.0

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"Cache index must be non-negative, got {self.index}")
        if self.name is None:
            self.name = self.spectrum.id

    @property
    def id(self) -> str:
        return self.spectrum.id

    def excitation_max(self) -> float:
        """Excitation peak from metadata, else computed from the curve."""
        if self.meta is not None and self.meta.excitation_max:
            return float(self.meta.excitation_max)
        return self.spectrum.excitation_max()

    def emission_max(self) -> float:
        """Emission peak from metadata, else computed from the curve."""
        if self.meta is not None and self.meta.emission_max:
            return float(self.meta.emission_max)
        return self.spectrum.emission_max()

    def excitation_wavelength(self) -> np.ndarray:
        return self.spectrum.excitation_wavelength.copy()

    def excitation_intensity(self) -> np.ndarray:
        return self.spectrum.excitation_intensity.copy()

    def emission_wavelength(self) -> np.ndarray:
        return self.spectrum.emission_wavelength.copy()

    def emission_intensity(self, scale: Optional[float] = None) -> np.ndarray:
        """Emission curve, optionally scaled with the entry's cutoff applied."""
        if scale is None:
            return self.spectrum.emission_intensity.copy()
        return self.spectrum.get_emission_intensity(scale, self.intensity_cutoff)
