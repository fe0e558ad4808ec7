"""Sampled intensity profiles across the observation screen.

A profile evaluates both diffraction models on a fixed, symmetric range of
screen positions. It is rebuilt from scratch for every parameter set; there
is no incremental update or caching.
"""

from dataclasses import dataclass
from typing import List, NamedTuple

import numpy as np

from .core.parameters import DiffractionParameters
from .physics.color import wavelength_to_rgba
from .physics.fresnel import DEFAULT_STEPS
from .physics.intensity import fraunhofer_intensity, fresnel_intensity

__all__ = [
    "DEFAULT_POINTS",
    "DEFAULT_RANGE_MM",
    "IntensitySample",
    "IntensityProfile",
    "sample_profile",
    "profile_correlation",
    "screen_pattern",
]

DEFAULT_POINTS = 200
DEFAULT_RANGE_MM = 20.0


class IntensitySample(NamedTuple):
    """Both model intensities at one screen position.

    Attributes:
        position: Screen position (mm).
        fraunhofer: Far-field intensity in [0, 1].
        fresnel_raw: Unnormalized near-field intensity.
    """

    position: float
    fraunhofer: float
    fresnel_raw: float


@dataclass(frozen=True)
class IntensityProfile:
    """Intensity profile sampled across the screen.

    Attributes:
        params: Parameters the profile was computed for.
        positions: Screen positions (mm), shape (n,).
        fraunhofer: Far-field intensity, 1 on axis, shape (n,).
        fresnel_raw: Unnormalized near-field intensity, shape (n,).
    """

    params: DiffractionParameters
    positions: np.ndarray
    fraunhofer: np.ndarray
    fresnel_raw: np.ndarray

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def max_fresnel(self) -> float:
        """Largest raw Fresnel intensity in the profile."""
        return float(np.max(self.fresnel_raw))

    @property
    def fresnel(self) -> np.ndarray:
        """Fresnel intensity normalized to its own peak (zeros if the peak is 0)."""
        peak = self.max_fresnel
        if peak > 0:
            return self.fresnel_raw / peak
        return np.zeros_like(self.fresnel_raw)

    def samples(self) -> List[IntensitySample]:
        """Return the profile as a list of IntensitySample records."""
        return [
            IntensitySample(float(x), float(fh), float(fr))
            for x, fh, fr in zip(self.positions, self.fraunhofer, self.fresnel_raw)
        ]


def sample_profile(
    params: DiffractionParameters,
    points: int = DEFAULT_POINTS,
    range_mm: float = DEFAULT_RANGE_MM,
    steps: int = DEFAULT_STEPS,
    verbose: bool = False,
) -> IntensityProfile:
    """Sample both intensity models across the screen.

    Positions are x_i = -range_mm/2 + i * (range_mm / points) for
    i = 0..points, giving points + 1 samples from -range_mm/2 to
    +range_mm/2.

    Args:
        params: Experiment parameters.
        points: Number of intervals across the screen. Default 200.
        range_mm: Total screen width in mm. Default 20 (±10 mm).
        steps: Quadrature step count for the Fresnel integrals.
        verbose: Print a short summary of the computed profile.

    Returns:
        IntensityProfile with raw Fresnel values; use its `fresnel` property
        for the peak-normalized curve.

    Example:
        >>> profile = sample_profile(DiffractionParameters())
        >>> len(profile)
        201
    """
    if int(points) != points or points < 1:
        raise ValueError(f"Number of points must be a positive integer, got {points}")
    if not range_mm > 0:
        raise ValueError(f"Screen range must be positive, got {range_mm}")

    points = int(points)
    step = range_mm / points
    positions = -range_mm / 2 + np.arange(points + 1) * step

    args = (params.wavelength, params.slit_width, params.distance)
    fraunhofer = fraunhofer_intensity(positions, *args)
    fresnel_raw = fresnel_intensity(positions, *args, steps=steps)

    profile = IntensityProfile(
        params=params,
        positions=positions,
        fraunhofer=fraunhofer,
        fresnel_raw=fresnel_raw,
    )

    if verbose:
        print("Single-slit intensity profile")
        print(
            f"  λ = {params.wavelength} nm, a = {params.slit_width} μm, "
            f"z = {params.distance} m"
        )
        print(f"  F = {params.fresnel_number:.3f} ({params.regime.label})")
        print(f"  Samples: {len(profile)} over ±{range_mm / 2:g} mm, steps: {steps}")
        print(f"  Peak raw Fresnel intensity: {profile.max_fresnel:.4e}")

    return profile


def profile_correlation(profile: IntensityProfile) -> float:
    """Pearson correlation between the normalized Fresnel and Fraunhofer curves.

    Approaches 1 as the Fresnel pattern converges to the far-field sinc².
    """
    return float(np.corrcoef(profile.fresnel, profile.fraunhofer)[0, 1])


def screen_pattern(profile: IntensityProfile, width: int = 800) -> np.ndarray:
    """Render the simulated screen as a strip of RGBA pixels.

    Each pixel column takes the wavelength color, with opacity equal to the
    normalized Fresnel intensity of the nearest-below profile sample.

    Args:
        profile: Sampled profile.
        width: Number of pixel columns.

    Returns:
        Float array of shape (width, 4), values in [0, 1].
    """
    if width < 1:
        raise ValueError(f"Width must be positive, got {width}")

    color = wavelength_to_rgba(profile.params.wavelength)
    rgb = np.array(color.to_mpl()[:3])

    index = np.floor(np.arange(width) / width * len(profile)).astype(int)
    alpha = profile.fresnel[index]

    pattern = np.empty((width, 4))
    pattern[:, :3] = rgb
    pattern[:, 3] = alpha
    return pattern
