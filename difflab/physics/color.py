"""Approximate display color of a visible wavelength.

Piecewise-linear violet-to-red mapping over 380-781 nm with an alpha
taper towards both ends of the visible band. No gamma correction.
"""

import math
from typing import NamedTuple, Tuple

__all__ = ["RGBA", "wavelength_to_rgba"]


class RGBA(NamedTuple):
    """Display color with 8-bit channels and a fractional alpha."""

    r: int
    g: int
    b: int
    alpha: float

    def to_css(self) -> str:
        """Format as a CSS ``rgba(...)`` string."""
        return f"rgba({self.r}, {self.g}, {self.b}, {self.alpha})"

    def to_mpl(self) -> Tuple[float, float, float, float]:
        """Return an (r, g, b, a) float tuple in [0, 1] for matplotlib."""
        return (self.r / 255, self.g / 255, self.b / 255, self.alpha)


def _channels(wl: float) -> Tuple[float, float, float]:
    if 380 <= wl < 440:
        return -(wl - 440) / (440 - 380), 0.0, 1.0
    if 440 <= wl < 490:
        return 0.0, (wl - 440) / (490 - 440), 1.0
    if 490 <= wl < 510:
        return 0.0, 1.0, -(wl - 510) / (510 - 490)
    if 510 <= wl < 580:
        return (wl - 510) / (580 - 510), 1.0, 0.0
    if 580 <= wl < 645:
        return 1.0, -(wl - 645) / (645 - 580), 0.0
    if 645 <= wl < 781:
        return 1.0, 0.0, 0.0
    return 0.0, 0.0, 0.0


def _alpha(wl: float) -> float:
    # Intensity falls off near the limits of vision
    if 380 <= wl < 420:
        return 0.3 + 0.7 * (wl - 380) / (420 - 380)
    if 420 <= wl < 701:
        return 1.0
    if 701 <= wl < 781:
        return 0.3 + 0.7 * (781 - wl) / (781 - 701)
    return 0.0


def _to_byte(value: float) -> int:
    # Round half up
    return int(math.floor(value * 255 + 0.5))


def wavelength_to_rgba(wavelength_nm: float) -> RGBA:
    """Map a wavelength to an approximate perceptual color.

    Args:
        wavelength_nm: Wavelength in nm.

    Returns:
        RGBA with channels in 0-255 and alpha in [0, 1]. Wavelengths outside
        [380, 781) nm (and nan) give fully transparent black.

    Example:
        >>> wavelength_to_rgba(550)
        RGBA(r=146, g=255, b=0, alpha=1.0)
        >>> wavelength_to_rgba(550).to_css()
        'rgba(146, 255, 0, 1.0)'
    """
    wl = float(wavelength_nm)
    r, g, b = _channels(wl)
    return RGBA(_to_byte(r), _to_byte(g), _to_byte(b), float(_alpha(wl)))
