"""
rmt_spectra
===========

Reference implementation of random matrix theory spectral statistics,
for sanity-checking the spectra of covariance matrices, neural-network
weight matrices, or graph Laplacians:

- Limiting densities: Marchenko-Pastur and Wigner semicircle
- Ensembles whose spectra converge to them: Wishart and GOE
- Spectrum statistics: level-spacing ratios, empirical density,
  Stieltjes transform
- Strict variants that raise instead of returning sentinels

Eigendecomposition is left to the caller (e.g. ``np.linalg.eigvalsh``).
"""

import logging

__version__ = "0.1.0"

from . import random_matrix
from . import analysis
from .errors import RandomMatrixError, InvalidRatio, DimensionMismatch, OutsideSupport
from .random_matrix import (
    marchenko_pastur_density, marchenko_pastur_support,
    wigner_semicircle_density, sample_wishart, sample_goe
)
from .analysis import (
    level_spacing_ratios, mean_spacing_ratio,
    empirical_spectral_density, stieltjes_transform
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "random_matrix", "analysis",
    "RandomMatrixError", "InvalidRatio", "DimensionMismatch", "OutsideSupport",
    "marchenko_pastur_density", "marchenko_pastur_support",
    "wigner_semicircle_density", "sample_wishart", "sample_goe",
    "level_spacing_ratios", "mean_spacing_ratio",
    "empirical_spectral_density", "stieltjes_transform"
]
