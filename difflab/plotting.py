"""Matplotlib rendering of diffraction profiles.

Requires matplotlib (``pip install difflab[plot]``).

Example:
    ```python
    import matplotlib.pyplot as plt
    from difflab import DiffractionParameters, sample_profile
    from difflab.plotting import plot_profile, plot_screen

    profile = sample_profile(DiffractionParameters(distance=0.05))
    fig, (ax_screen, ax_profile) = plt.subplots(2, 1, height_ratios=(1, 3))
    plot_screen(profile, ax=ax_screen)
    plot_profile(profile, ax=ax_profile)
    plt.show()
    ```
"""

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from .core.parameters import DiffractionParameters, mm_to_m, nm_to_m, um_to_m
from .physics.color import wavelength_to_rgba
from .physics.fresnel import DEFAULT_STEPS, cornu_spiral, fresnel_integral
from .profile import IntensityProfile, screen_pattern

__all__ = ["plot_profile", "plot_screen", "plot_cornu_spiral"]

SCREEN_BACKGROUND = "#0f172a"


def plot_profile(profile: IntensityProfile, ax: Optional[plt.Axes] = None) -> plt.Axes:
    """Plot normalized Fresnel and Fraunhofer intensity against position.

    The Fresnel curve is drawn in the wavelength's display color, the
    Fraunhofer approximation as a dashed reference.

    Args:
        profile: Sampled profile.
        ax: Axes to draw into. A new figure is created if None.

    Returns:
        The axes drawn into.
    """
    if ax is None:
        _, ax = plt.subplots()

    params = profile.params
    color = wavelength_to_rgba(params.wavelength)

    ax.plot(
        profile.positions,
        profile.fresnel,
        color=color.to_mpl()[:3],
        linewidth=2.5,
        label="Fresnel (numerical)",
    )
    ax.plot(
        profile.positions,
        profile.fraunhofer,
        color="0.5",
        linestyle="--",
        linewidth=1,
        label="Fraunhofer (approximation)",
    )

    ax.set_xlabel("Position (mm)")
    ax.set_ylabel("Normalized intensity")
    ax.set_ylim(0, 1.1)
    ax.set_title(f"F = {params.fresnel_number:.3f}, {params.regime.label}")
    ax.legend(loc="upper right")
    return ax


def plot_screen(
    profile: IntensityProfile,
    ax: Optional[plt.Axes] = None,
    width: int = 800,
    height: int = 100,
) -> plt.Axes:
    """Draw the simulated screen as seen by an observer.

    Args:
        profile: Sampled profile.
        ax: Axes to draw into. A new figure is created if None.
        width: Horizontal pixel count of the strip.
        height: Vertical pixel count of the strip.

    Returns:
        The axes drawn into.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 1))

    strip = screen_pattern(profile, width=width)
    image = np.broadcast_to(strip, (height, width, 4))

    extent = (profile.positions[0], profile.positions[-1], 0, 1)
    ax.set_facecolor(SCREEN_BACKGROUND)
    ax.imshow(image, extent=extent, aspect="auto", interpolation="nearest")
    ax.axvline(0.0, color="white", alpha=0.2, linestyle="--")
    ax.set_yticks([])
    ax.set_xlabel("Position (mm)")
    return ax


def plot_cornu_spiral(
    u_max: float = 5.0,
    ax: Optional[plt.Axes] = None,
    params: Optional[DiffractionParameters] = None,
    x_mm: float = 0.0,
    steps: int = DEFAULT_STEPS,
) -> plt.Axes:
    """Draw the Cornu spiral, optionally with the chord for one screen point.

    The near-field intensity at x is proportional to the squared length of
    the chord between parameters v1 and v2 on the spiral.

    Args:
        u_max: Spiral parameter range [-u_max, u_max].
        ax: Axes to draw into. A new figure is created if None.
        params: If given, mark the chord for screen position x_mm.
        x_mm: Screen position of the chord (mm).
        steps: Quadrature step count.

    Returns:
        The axes drawn into.
    """
    if ax is None:
        _, ax = plt.subplots()

    c, s = cornu_spiral(u_max=u_max, steps=steps)
    ax.plot(c, s, color="0.3", linewidth=1)

    if params is not None:
        lam = nm_to_m(params.wavelength)
        a = um_to_m(params.slit_width)
        x = mm_to_m(x_mm)
        k = np.sqrt(2 / (lam * params.distance))

        p1 = fresnel_integral(k * (x - a / 2), steps=steps)
        p2 = fresnel_integral(k * (x + a / 2), steps=steps)
        color = wavelength_to_rgba(params.wavelength).to_mpl()[:3]
        ax.plot([p1.C, p2.C], [p1.S, p2.S], color=color, marker="o", linewidth=2)

    ax.set_xlabel("C(u)")
    ax.set_ylabel("S(u)")
    ax.set_aspect("equal")
    return ax
