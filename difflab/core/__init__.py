"""Core data structures and unit conventions."""

from .parameters import (
    NM,
    UM,
    MM,
    nm_to_m,
    um_to_m,
    mm_to_m,
    WAVELENGTH_RANGE_NM,
    SLIT_WIDTH_RANGE_UM,
    DISTANCE_RANGE_M,
    DiffractionParameters,
)

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
