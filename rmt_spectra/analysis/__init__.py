"""
Statistics of caller-supplied eigenvalue spectra.
"""

from .spectral_statistics import (
    level_spacing_ratios, mean_spacing_ratio,
    empirical_spectral_density, stieltjes_transform
)

__all__ = [
    "level_spacing_ratios", "mean_spacing_ratio",
    "empirical_spectral_density", "stieltjes_transform"
]
