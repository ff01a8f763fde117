"""Point and peak queries on sampled spectral curves.

Curves are parallel wavelength/intensity arrays with the wavelengths sorted
ascending. Point queries use a step-function policy: a wavelength that falls
between two samples returns the intensity of the next higher sample. No
interpolation is performed.
"""

import numpy as np


def intensity_at(
    wavelengths: np.ndarray,
    intensities: np.ndarray,
    at_wavelength: float,
) -> float:
    """Get the intensity of a curve at a specific wavelength.

    Args:
        wavelengths: Ascending wavelength samples in nm.
        intensities: Intensity samples, same length as wavelengths.
        at_wavelength: Wavelength to query.

    Returns:
        Intensity of the first sample whose wavelength is >= at_wavelength.
        0.0 when at_wavelength lies outside the sampled range, or when the
        curve is empty.
    """
    if len(wavelengths) == 0 or len(intensities) == 0:
        return 0.0

    if at_wavelength < wavelengths[0] or at_wavelength > wavelengths[-1]:
        return 0.0

    # lower bound; always found since the range check passed
    index = int(np.searchsorted(wavelengths, at_wavelength, side="left"))
    if index >= len(intensities):
        return 0.0

    return float(intensities[index])


def first_max_wavelength(wavelengths: np.ndarray, intensities: np.ndarray) -> float:
    """Get the wavelength of the (first) maximum intensity.

    Ties resolve to the lowest index.

    Returns:
        Wavelength in nm, or 0.0 for an empty curve.
    """
    if len(wavelengths) == 0 or len(intensities) == 0:
        return 0.0

    index = int(np.argmax(intensities))
    if index >= len(wavelengths):
        return 0.0

    return float(wavelengths[index])


def scale_intensity(
    intensities: np.ndarray,
    scale: float,
    cutoff: float = 0.0,
) -> np.ndarray:
    """Scale a curve by a percentage.

    Args:
        intensities: Intensity samples.
        scale: Scale percentage (100 = unchanged).
        cutoff: Scales at or below this percentage produce an all-zero curve.

    Returns:
        The scaled curve. At exactly 100 a read-only view of the input is
        returned, so the stored curve cannot be changed through it.
    """
    if scale <= cutoff:
        return np.zeros(len(intensities), dtype=np.float64)

    if scale == 100.0:
        view = intensities.view()
        view.flags.writeable = False
        return view

    return intensities * (scale / 100.0)
