"""difflab - Single-slit diffraction in the Fraunhofer and Fresnel regimes.

Computes single-slit intensity patterns with the far-field sinc²
approximation and with the general near-field solution via the Fresnel
integrals (Cornu spiral), classifies the regime by the Fresnel number, and
maps wavelengths to display colors.

The library is organized into:

- **core**: Experiment parameters and unit conventions
- **physics**: Fresnel integrals, intensity models, regime, color
- **profile**: Intensity profiles sampled across the screen
- **plotting**: Matplotlib rendering (optional, import explicitly)

Units: wavelength in nm, slit width in μm, distance in m, screen position
in mm.

Example:
    >>> from difflab import DiffractionParameters, sample_profile
    >>> params = DiffractionParameters(wavelength=550, slit_width=200, distance=0.5)
    >>> params.regime
    <Regime.TRANSITION: 'transition'>
    >>> profile = sample_profile(params)
    >>> len(profile)
    201
"""

__version__ = "0.1.0"

# =============================================================================
# Core - Parameters and units
# =============================================================================
from .core import (
    DiffractionParameters,
    nm_to_m,
    um_to_m,
    mm_to_m,
)

# =============================================================================
# Physics - Pure functions of the experiment parameters
# =============================================================================
from .physics import (
    FresnelIntegralResult,
    fresnel_integral,
    fresnel_integrals,
    fresnel_integral_reference,
    cornu_spiral,
    Intensity,
    intensity,
    fraunhofer_intensity,
    fresnel_intensity,
    Regime,
    fresnel_number,
    classify_regime,
    regime_for,
    RGBA,
    wavelength_to_rgba,
)

# =============================================================================
# Profile - Sampling across the screen
# =============================================================================
from .profile import (
    IntensitySample,
    IntensityProfile,
    sample_profile,
    profile_correlation,
    screen_pattern,
)

# Note: plotting requires matplotlib, import explicitly:
#   from difflab.plotting import plot_profile, plot_screen, plot_cornu_spiral

__all__ = [
    # Version
    "__version__",
    # Core
    "DiffractionParameters",
    "nm_to_m",
    "um_to_m",
    "mm_to_m",
    # Fresnel integrals
    "FresnelIntegralResult",
    "fresnel_integral",
    "fresnel_integrals",
    "fresnel_integral_reference",
    "cornu_spiral",
    # Intensity
    "Intensity",
    "intensity",
    "fraunhofer_intensity",
    "fresnel_intensity",
    # Regime
    "Regime",
    "fresnel_number",
    "classify_regime",
    "regime_for",
    # Color
    "RGBA",
    "wavelength_to_rgba",
    # Profile
    "IntensitySample",
    "IntensityProfile",
    "sample_profile",
    "profile_correlation",
    "screen_pattern",
]
