"""Fresnel number and diffraction regime classification."""

from enum import Enum

import numpy as np

from ..core.parameters import nm_to_m, um_to_m

__all__ = [
    "FRAUNHOFER_LIMIT",
    "FRESNEL_LIMIT",
    "Regime",
    "fresnel_number",
    "classify_regime",
    "regime_for",
]

# Regime breakpoints on the Fresnel number
FRAUNHOFER_LIMIT = 0.1
FRESNEL_LIMIT = 10.0


class Regime(Enum):
    """Diffraction regime derived from the Fresnel number F."""

    FRAUNHOFER = "fraunhofer"
    FRESNEL = "fresnel"
    TRANSITION = "transition"

    @property
    def label(self) -> str:
        """Short display label."""
        return {
            Regime.FRAUNHOFER: "Fraunhofer (far field)",
            Regime.FRESNEL: "Fresnel (near field)",
            Regime.TRANSITION: "Transition",
        }[self]

    @property
    def description(self) -> str:
        """What the pattern looks like in this regime."""
        return {
            Regime.FRAUNHOFER: (
                "The screen is far from the slit (or the slit is narrow). "
                "The rays are effectively parallel and the sinc² "
                "approximation is very accurate."
            ),
            Regime.FRESNEL: (
                "The screen is very close to the slit. The geometric shadow "
                "of the slit is clearly visible, with intricate diffraction "
                "fringes at its edges. The Fraunhofer approximation fails "
                "completely."
            ),
            Regime.TRANSITION: (
                "Near-field Fresnel diffraction. The pattern is complex and "
                "changes quickly with distance; the central maximum can even "
                "show a dip."
            ),
        }[self]


def fresnel_number(
    wavelength_nm: float, slit_width_um: float, distance_m: float
) -> float:
    """Compute the Fresnel number F = a² / (z λ).

    Args:
        wavelength_nm: Wavelength in nm.
        slit_width_um: Slit width in μm.
        distance_m: Slit-to-screen distance in m.

    Returns:
        Dimensionless Fresnel number. inf or nan when distance or
        wavelength is zero.

    Example:
        >>> round(fresnel_number(550, 200, 0.5), 4)
        0.1455
    """
    a = um_to_m(np.float64(slit_width_um))
    z = np.float64(distance_m)
    lam = nm_to_m(np.float64(wavelength_nm))
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(a * a / (z * lam))


def classify_regime(f: float) -> Regime:
    """Map a Fresnel number to a Regime.

    F < 0.1 is Fraunhofer, F > 10 is deep Fresnel, anything else
    (both breakpoints included) is the transition band.
    """
    if f < FRAUNHOFER_LIMIT:
        return Regime.FRAUNHOFER
    if f > FRESNEL_LIMIT:
        return Regime.FRESNEL
    return Regime.TRANSITION


def regime_for(
    wavelength_nm: float, slit_width_um: float, distance_m: float
) -> Regime:
    """Classify the regime directly from the experiment parameters."""
    return classify_regime(fresnel_number(wavelength_nm, slit_width_um, distance_m))
