"""Approximate visible color of a wavelength.

Piecewise-linear visible-spectrum model: a hue model assigns red/green/blue
fractions in six bands between 380 and 780 nm, and an intensity model fades
the color out towards both ends of the visible range. This is a display
approximation, not a colorimetric transform.
"""

from fluor_data.models.color import Color


VISIBLE_MIN = 380.0
VISIBLE_MAX = 780.0


def _hue(wavelength: float) -> tuple[float, float, float]:
    """Raw (red, green, blue) fractions for a wavelength."""
    if 380.0 <= wavelength < 440.0:
        return (-(wavelength - 440.0) / (440.0 - 350.0), 0.0, 1.0)
    elif 440.0 <= wavelength < 490.0:
        return (0.0, (wavelength - 440.0) / (490.0 - 440.0), 1.0)
    elif 490.0 <= wavelength < 510.0:
        return (0.0, 1.0, -(wavelength - 510.0) / (510.0 - 490.0))
    elif 510.0 <= wavelength < 580.0:
        return ((wavelength - 510.0) / (580.0 - 490.0), 1.0, 0.0)
    elif 580.0 <= wavelength < 645.0:
        return (1.0, -(wavelength - 645.0) / (645.0 - 580.0), 0.0)
    elif 645.0 <= wavelength <= 780.0:
        return (1.0, 0.0, 0.0)
    return (0.0, 0.0, 0.0)


def _falloff(wavelength: float) -> float:
    """Intensity correction towards the edges of the visible range."""
    if 380.0 <= wavelength < 420.0:
        return 0.3 + 0.7 * (wavelength - 350.0) / (420.0 - 350.0)
    elif 420.0 <= wavelength <= 700.0:
        return 1.0
    elif 700.0 < wavelength <= 780.0:
        return 0.3 + 0.7 * (780.0 - wavelength) / (780.0 - 700.0)
    return 0.0


def color_at(wavelength: float) -> Color:
    """Map a wavelength to an approximate RGB color.

    Args:
        wavelength: Wavelength in nm.

    Returns:
        Color with 0-255 channels; black outside 380-780 nm.
    """
    red, green, blue = _hue(wavelength)
    intensity = _falloff(wavelength) * 255.0

    # channels are truncated, not rounded
    return Color(
        red=int(intensity * red),
        green=int(intensity * green),
        blue=int(intensity * blue),
    )
