"""Instrument optics: lasers and detector filters grouped into laser lines."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class FilterType(str, Enum):
    """Detector filter types, valued by their data file abbreviation."""

    BAND_PASS = "BP"
    LONG_PASS = "LP"
    SHORT_PASS = "SP"


@dataclass(frozen=True, order=True)
class Laser:
    """An excitation laser; lasers compare by wavelength only.

    Attributes:
        wavelength: Central wavelength in nm.
        name: Optional name (e.g., 'Blue').
    """

    wavelength: float
    name: str = field(default="", compare=False)


@dataclass(frozen=True)
class Filter:
    """A detector filter in a laser line.

    Attributes:
        type: Band pass, long pass or short pass.
        wavelength: Central (band pass) or edge (long/short pass) wavelength in nm.
        fwhm: Full width at half maximum in nm, band pass only.
        name: Optional detector name (e.g., 'FITC').
    """

    type: FilterType
    wavelength: float
    fwhm: float = 0.0
    name: str = ""

    @property
    def wavelength_min(self) -> float:
        """Lowest transmitted wavelength in nm."""
        if self.type is FilterType.BAND_PASS:
            return self.wavelength - 0.5 * self.fwhm
        if self.type is FilterType.LONG_PASS:
            return self.wavelength
        return 0.0

    @property
    def wavelength_max(self) -> float:
        """Highest transmitted wavelength in nm (inf for a long pass)."""
        if self.type is FilterType.BAND_PASS:
            return self.wavelength + 0.5 * self.fwhm
        if self.type is FilterType.LONG_PASS:
            return math.inf
        return self.wavelength

    def __str__(self) -> str:
        if self.type is FilterType.BAND_PASS:
            return f"BP{self.wavelength:g}/{self.fwhm:g}"
        return f"{self.type.value}{self.wavelength:g}"


@dataclass
class LaserLine:
    """Lasers and filters sharing one light path."""

    lasers: list[Laser] = field(default_factory=list)
    filters: list[Filter] = field(default_factory=list)

    def is_valid(self) -> bool:
        """At least one laser, no zero wavelengths, band passes with a width."""
        if not self.lasers:
            return False
        if any(laser.wavelength == 0 for laser in self.lasers):
            return False
        for filter_ in self.filters:
            if filter_.wavelength == 0:
                return False
            if filter_.type is FilterType.BAND_PASS and filter_.fwhm == 0:
                return False
        return True

    def sort(self) -> None:
        """Sort lasers and filters by wavelength, low to high."""
        self.lasers.sort()
        self.filters.sort(key=lambda filter_: filter_.wavelength)


@dataclass(frozen=True)
class InstrumentID:
    """Id and display name of an instrument in the data file."""

    id: str
    name: str


@dataclass
class Instrument:
    """An optical instrument (cytometer).

    Attributes:
        id: Key of the instrument in the data file.
        name: Display name; defaults to the id.
        optics: Laser lines of the instrument.
    """

    id: str = ""
    name: str = ""
    optics: list[LaserLine] = field(default_factory=list)

    def is_valid(self) -> bool:
        return all(line.is_valid() for line in self.optics)

    def is_empty(self) -> bool:
        return not self.optics

    def sort(self) -> None:
        """Sort each laser line, then the lines by their lowest laser.

        Requires a valid instrument (every line has a laser).
        """
        for line in self.optics:
            line.sort()
        self.optics.sort(key=lambda line: line.lasers[0])

    def find_laser(self, wavelength: float) -> tuple[Optional[LaserLine], Optional[Laser]]:
        """Find the laser with exactly this wavelength and the line it is in.

        Returns:
            (laser line, laser), or (None, None) if no laser matches.
        """
        for line in self.optics:
            for laser in line.lasers:
                if laser.wavelength == wavelength:
                    return line, laser
        return None, None
