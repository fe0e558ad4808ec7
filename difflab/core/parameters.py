"""Diffraction experiment parameters and unit conversions.

Public functions take wavelength in nanometers, slit width in micrometers,
distance in meters and screen position in millimeters. Everything is
converted to SI meters before any physics is evaluated.
"""

import math
from dataclasses import dataclass, replace as _replace
from typing import Tuple

__all__ = [
    "NM",
    "UM",
    "MM",
    "nm_to_m",
    "um_to_m",
    "mm_to_m",
    "WAVELENGTH_RANGE_NM",
    "SLIT_WIDTH_RANGE_UM",
    "DISTANCE_RANGE_M",
    "DiffractionParameters",
]

# Unit scale factors (multiply to get meters)
NM = 1e-9
UM = 1e-6
MM = 1e-3

# Interactive ranges of the original slider controls (min, max)
WAVELENGTH_RANGE_NM: Tuple[float, float] = (400.0, 700.0)
SLIT_WIDTH_RANGE_UM: Tuple[float, float] = (50.0, 500.0)
DISTANCE_RANGE_M: Tuple[float, float] = (0.01, 2.0)


def nm_to_m(value):
    """Convert nanometers to meters."""
    return value * NM


def um_to_m(value):
    """Convert micrometers to meters."""
    return value * UM


def mm_to_m(value):
    """Convert millimeters to meters."""
    return value * MM


@dataclass(frozen=True)
class DiffractionParameters:
    """Immutable single-slit experiment parameters.

    Attributes:
        wavelength: Illumination wavelength (nm).
        slit_width: Slit width (μm).
        distance: Slit-to-screen propagation distance (m).

    The record is never modified in place; use replace() to derive a new
    one when a parameter changes.

    Example:
        ```python
        params = DiffractionParameters(wavelength=550, slit_width=200, distance=0.5)
        params.fresnel_number  # -> ~0.145
        closer = params.replace(distance=0.05)
        ```
    """

    wavelength: float = 550.0
    slit_width: float = 200.0
    distance: float = 0.5

    def __post_init__(self) -> None:
        """Validate that all parameters are finite and strictly positive."""
        for name in ("wavelength", "slit_width", "distance"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(
                    f"{name.replace('_', ' ').capitalize()} must be positive "
                    f"and finite, got {value}"
                )

    def replace(self, **changes) -> "DiffractionParameters":
        """Return a copy with the given fields changed."""
        return _replace(self, **changes)

    @property
    def wavelength_m(self) -> float:
        """Wavelength in meters."""
        return nm_to_m(self.wavelength)

    @property
    def slit_width_m(self) -> float:
        """Slit width in meters."""
        return um_to_m(self.slit_width)

    @property
    def distance_m(self) -> float:
        """Propagation distance in meters."""
        return self.distance

    @property
    def fresnel_number(self) -> float:
        """Fresnel number a²/(zλ) of this configuration."""
        from ..physics.regime import fresnel_number

        return fresnel_number(self.wavelength, self.slit_width, self.distance)

    @property
    def regime(self):
        """Diffraction regime (Regime enum member) of this configuration."""
        from ..physics.regime import classify_regime

        return classify_regime(self.fresnel_number)
