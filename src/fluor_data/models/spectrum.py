"""Spectrum data model for fluorophore excitation/emission curves."""

from dataclasses import dataclass, field

import numpy as np

from fluor_data.models.color import Color
from fluor_data.spectral.color import color_at
from fluor_data.spectral.lookup import first_max_wavelength, intensity_at, scale_intensity


def _as_curve(values) -> np.ndarray:
    return np.asarray(values, dtype=np.float64).reshape(-1)


@dataclass(frozen=True)
class Meta:
    """Catalog metadata of a fluorophore.

    Attributes:
        excitation_max: Excitation peak wavelength in nm (0 = unspecified).
        emission_max: Emission peak wavelength in nm (0 = unspecified).
    """

    excitation_max: int = 0
    emission_max: int = 0


@dataclass(eq=False)
class Spectrum:
    """Excitation and emission curves of one fluorophore.

    Each curve is a pair of parallel arrays. The wavelength arrays are assumed
    to be sorted ascending; this is not re-validated on every query. A Spectrum
    with missing or mismatched curves can be constructed, but `is_valid()`
    must be checked before handing it to consumers.

    Attributes:
        fluor_id: Canonical id of the fluorophore.
        excitation_wavelength: Excitation wavelengths in nm.
        excitation_intensity: Excitation intensities.
        emission_wavelength: Emission wavelengths in nm.
        emission_intensity: Emission intensities.
        is_absorption: True if the excitation curve is an absorption curve.
        is_fallback: True for the all-zero substitute of unusable data; such
            a spectrum answers every query with 0 but never reports valid.
    """

    fluor_id: str
    excitation_wavelength: np.ndarray = field(default_factory=lambda: np.empty(0))
    excitation_intensity: np.ndarray = field(default_factory=lambda: np.empty(0))
    emission_wavelength: np.ndarray = field(default_factory=lambda: np.empty(0))
    emission_intensity: np.ndarray = field(default_factory=lambda: np.empty(0))
    is_absorption: bool = False
    is_fallback: bool = False

    def __post_init__(self):
        """Coerce curves to float arrays. No validity checking."""
        self.excitation_wavelength = _as_curve(self.excitation_wavelength)
        self.excitation_intensity = _as_curve(self.excitation_intensity)
        self.emission_wavelength = _as_curve(self.emission_wavelength)
        self.emission_intensity = _as_curve(self.emission_intensity)

    @property
    def id(self) -> str:
        """Fluorophore id of the spectrum."""
        return self.fluor_id

    def is_valid(self) -> bool:
        """Check whether both curves are present and length-matched."""
        if self.is_fallback:
            return False
        if len(self.excitation_wavelength) == 0 or len(self.excitation_intensity) == 0:
            return False
        if len(self.emission_wavelength) == 0 or len(self.emission_intensity) == 0:
            return False
        if len(self.excitation_wavelength) != len(self.excitation_intensity):
            return False
        if len(self.emission_wavelength) != len(self.emission_intensity):
            return False
        return True

    def set_excitation(self, wavelength, intensity) -> None:
        """Replace the excitation curve, without validity checking."""
        self.excitation_wavelength = _as_curve(wavelength)
        self.excitation_intensity = _as_curve(intensity)

    def set_emission(self, wavelength, intensity) -> None:
        """Replace the emission curve, without validity checking."""
        self.emission_wavelength = _as_curve(wavelength)
        self.emission_intensity = _as_curve(intensity)

    def curves(self) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Copies of the four curve arrays (ex wl, ex int, em wl, em int)."""
        return (
            self.excitation_wavelength.copy(),
            self.excitation_intensity.copy(),
            self.emission_wavelength.copy(),
            self.emission_intensity.copy(),
        )

    # All queries below assume a valid object

    def excitation_at(self, wavelength: int) -> float:
        """Excitation intensity at a wavelength (0 outside the measured range)."""
        return intensity_at(self.excitation_wavelength, self.excitation_intensity, wavelength)

    def emission_at(self, wavelength: int) -> float:
        """Emission intensity at a wavelength (0 outside the measured range)."""
        return intensity_at(self.emission_wavelength, self.emission_intensity, wavelength)

    def excitation_max(self) -> float:
        """Wavelength of the (first) maximum excitation intensity."""
        return first_max_wavelength(self.excitation_wavelength, self.excitation_intensity)

    def emission_max(self) -> float:
        """Wavelength of the (first) maximum emission intensity."""
        return first_max_wavelength(self.emission_wavelength, self.emission_intensity)

    def get_emission_intensity(self, scale: float, cutoff: float = 0.0) -> np.ndarray:
        """Emission intensity scaled to a percentage.

        Args:
            scale: Intensity percentage, 0-100.
            cutoff: Scales at or below this value return an all-zero curve.

        Returns:
            The scaled emission curve. At exactly 100 the stored curve is
            returned unchanged.
        """
        return scale_intensity(self.emission_intensity, scale, cutoff)

    @staticmethod
    def color(wavelength: float) -> Color:
        """Approximate visible color of a wavelength."""
        return color_at(wavelength)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.fluor_id,
            "excitation_wavelength": self.excitation_wavelength.tolist(),
            "excitation_intensity": self.excitation_intensity.tolist(),
            "emission_wavelength": self.emission_wavelength.tolist(),
            "emission_intensity": self.emission_intensity.tolist(),
            "is_absorption": self.is_absorption,
            "is_fallback": self.is_fallback,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Spectrum":
        """Create Spectrum from dictionary."""
        return cls(
            fluor_id=data["id"],
            excitation_wavelength=data.get("excitation_wavelength", []),
            excitation_intensity=data.get("excitation_intensity", []),
            emission_wavelength=data.get("emission_wavelength", []),
            emission_intensity=data.get("emission_intensity", []),
            is_absorption=data.get("is_absorption", False),
            is_fallback=data.get("is_fallback", False),
        )
