"""Single-slit diffraction physics.

Pure functions of wavelength (nm), slit width (μm), distance (m) and screen
position (mm).

Example:
    >>> from difflab.physics import intensity, fresnel_number, classify_regime
    >>> intensity(0.0, 550, 200, 0.5).fraunhofer
    1.0
    >>> classify_regime(fresnel_number(550, 200, 0.5))
    <Regime.TRANSITION: 'transition'>
"""

# Fresnel integrals
from .fresnel import (
    DEFAULT_STEPS,
    FresnelIntegralResult,
    fresnel_integral,
    fresnel_integrals,
    fresnel_integral_reference,
    cornu_spiral,
)

# Intensity models
from .intensity import (
    Intensity,
    intensity,
    fraunhofer_intensity,
    fresnel_intensity,
)

# Regime classification
from .regime import (
    FRAUNHOFER_LIMIT,
    FRESNEL_LIMIT,
    Regime,
    fresnel_number,
    classify_regime,
    regime_for,
)

# Display color
from .color import RGBA, wavelength_to_rgba

__all__ = [
    # Fresnel integrals
    "DEFAULT_STEPS",
    "FresnelIntegralResult",
    "fresnel_integral",
    "fresnel_integrals",
    "fresnel_integral_reference",
    "cornu_spiral",
    # Intensity models
    "Intensity",
    "intensity",
    "fraunhofer_intensity",
    "fresnel_intensity",
    # Regime classification
    "FRAUNHOFER_LIMIT",
    "FRESNEL_LIMIT",
    "Regime",
    "fresnel_number",
    "classify_regime",
    "regime_for",
    # Display color
    "RGBA",
    "wavelength_to_rgba",
]
