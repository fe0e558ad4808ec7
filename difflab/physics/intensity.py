"""Single-slit intensity under the Fraunhofer and Fresnel models.

Theory:
    Fraunhofer (far field):
        I(x) = (sin β / β)²,   β = π a x / (λ z)

    Fresnel (general case, Cornu spiral):
        v₁ = √(2 / (λ z)) (x − a/2)
        v₂ = √(2 / (λ z)) (x + a/2)
        I(x) ∝ ½ [(C(v₂) − C(v₁))² + (S(v₂) − S(v₁))²]

The Fresnel value is returned unnormalized. Dividing a sampled profile by
its own peak is done by the caller (see difflab.profile).

Degenerate inputs (zero distance or wavelength) are not rejected; they
produce inf/nan values instead of raising.
"""

from typing import NamedTuple

import numpy as np

from ..core.parameters import mm_to_m, nm_to_m, um_to_m
from .fresnel import DEFAULT_STEPS, fresnel_integrals

__all__ = [
    "Intensity",
    "intensity",
    "fraunhofer_intensity",
    "fresnel_intensity",
]


class Intensity(NamedTuple):
    """Intensities at one screen position.

    Attributes:
        fraunhofer: Far-field sinc² intensity, 1 on axis.
        fresnel: Raw (unnormalized) near-field intensity.
    """

    fraunhofer: float
    fresnel: float


def fraunhofer_intensity(x_mm, wavelength_nm, slit_width_um, distance_m):
    """Far-field sinc² intensity, normalized to 1 at x = 0.

    Args:
        x_mm: Screen position(s) in mm. Scalar or array.
        wavelength_nm: Wavelength in nm.
        slit_width_um: Slit width in μm.
        distance_m: Slit-to-screen distance in m.

    Returns:
        Intensity with the shape of x_mm. Exactly 1 where x_mm == 0.
    """
    lam = nm_to_m(np.float64(wavelength_nm))
    a = um_to_m(np.float64(slit_width_um))
    z = np.float64(distance_m)
    x = mm_to_m(np.asarray(x_mm, dtype=np.float64))

    with np.errstate(divide="ignore", invalid="ignore"):
        beta = np.pi * a * x / (lam * z)
        sinc = np.sin(beta) / beta
        return np.where(x == 0, 1.0, sinc * sinc)


def fresnel_intensity(
    x_mm, wavelength_nm, slit_width_um, distance_m, steps: int = DEFAULT_STEPS
):
    """Raw near-field intensity from the Cornu spiral chord.

    Args:
        x_mm: Screen position(s) in mm. Scalar or array.
        wavelength_nm: Wavelength in nm.
        slit_width_um: Slit width in μm.
        distance_m: Slit-to-screen distance in m.
        steps: Quadrature step count for the Fresnel integrals.

    Returns:
        0.5 * (ΔC² + ΔS²) with the shape of x_mm. Not normalized.
    """
    lam = nm_to_m(np.float64(wavelength_nm))
    a = um_to_m(np.float64(slit_width_um))
    z = np.float64(distance_m)
    x = mm_to_m(np.asarray(x_mm, dtype=np.float64))

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        k = np.sqrt(2 / (lam * z))
        v1 = k * (x - a / 2)
        v2 = k * (x + a / 2)

        c1, s1 = fresnel_integrals(v1, steps=steps)
        c2, s2 = fresnel_integrals(v2, steps=steps)

        dc = c2 - c1
        ds = s2 - s1
        return 0.5 * (dc * dc + ds * ds)


def intensity(
    x_mm: float,
    wavelength_nm: float,
    slit_width_um: float,
    distance_m: float,
    steps: int = DEFAULT_STEPS,
) -> Intensity:
    """Evaluate both diffraction models at one screen position.

    Args:
        x_mm: Screen position in mm (0 is on axis).
        wavelength_nm: Wavelength in nm.
        slit_width_um: Slit width in μm.
        distance_m: Slit-to-screen distance in m.
        steps: Quadrature step count. Default 100.

    Returns:
        Intensity(fraunhofer, fresnel) with fresnel unnormalized.

    Example:
        >>> intensity(0.0, 550, 200, 0.5).fraunhofer
        1.0
    """
    return Intensity(
        fraunhofer=float(
            fraunhofer_intensity(x_mm, wavelength_nm, slit_width_um, distance_m)
        ),
        fresnel=float(
            fresnel_intensity(
                x_mm, wavelength_nm, slit_width_um, distance_m, steps=steps
            )
        ),
    )
