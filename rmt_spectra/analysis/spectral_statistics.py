"""
Descriptive statistics of an eigenvalue spectrum.

These functions take an already computed eigenvalue sequence (from any
source: a sampled ensemble, a covariance matrix, a weight matrix, a
graph Laplacian) and summarize it:

1. Level-spacing ratios: level repulsion vs. uncorrelated levels
2. Empirical spectral density: normalized histogram
3. Stieltjes transform: (1/N) Σ 1/(λ_i - z)

All are total functions. Insufficient or degenerate data yields
documented sentinels rather than exceptions.

References:
- Oganesyan & Huse (2007), "Localization of interacting fermions at
  high temperature"
- Atas, Bogomolny, Giraud & Roux (2013), "Distribution of the ratio of
  consecutive level spacings in random matrix ensembles"
"""

import logging
from typing import Tuple, Union

import numpy as np

from ..config import DEFAULT_BINS, DEGENERATE_RANGE_TOL

logger = logging.getLogger(__name__)


def level_spacing_ratios(eigenvalues: np.ndarray) -> np.ndarray:
    """
    Ratios of consecutive level spacings.

    r_i = min(s_i, s_{i+1}) / max(s_i, s_{i+1}),  s_i = λ_{i+1} - λ_i

    Indices where either spacing is not strictly positive (degenerate
    levels) are skipped, so every ratio lies in (0, 1].

    Parameters
    ----------
    eigenvalues : np.ndarray
        Eigenvalues sorted ascending. Sorting is not checked.

    Returns
    -------
    np.ndarray
        Spacing ratios, empty for fewer than 3 eigenvalues.
    """
    eigenvalues = np.asarray(eigenvalues, dtype=float)
    if len(eigenvalues) < 3:
        return np.array([], dtype=float)

    spacings = np.diff(eigenvalues)
    s1 = spacings[:-1]
    s2 = spacings[1:]

    valid = (s1 > 0) & (s2 > 0)
    return np.minimum(s1[valid], s2[valid]) / np.maximum(s1[valid], s2[valid])


def mean_spacing_ratio(eigenvalues: np.ndarray) -> float:
    """
    Mean level-spacing ratio <r>.

    Reference values: GOE ≈ 0.5307, Poisson ≈ 0.3863
    (see :mod:`rmt_spectra.config`).

    Returns 0.0 when no ratio can be formed (fewer than 3 eigenvalues,
    or every spacing degenerate). That 0.0 is a sentinel for
    "insufficient data", not a Poisson-like or any other measured value.
    """
    ratios = level_spacing_ratios(eigenvalues)
    if len(ratios) == 0:
        return 0.0
    return float(np.mean(ratios))


def empirical_spectral_density(eigenvalues: np.ndarray, bins: int = DEFAULT_BINS
                               ) -> Tuple[np.ndarray, np.ndarray]:
    """
    Empirical spectral density via a fixed-width histogram.

    Bins span [min, max] and are closed on both ends: the bin index is
    floor((λ - min) / width), clamped so that a value equal to the
    maximum falls in the last bin.

    Parameters
    ----------
    eigenvalues : np.ndarray
        Eigenvalue samples, any order.
    bins : int
        Number of equal-width bins.

    Returns
    -------
    centers : np.ndarray
        Bin centers.
    densities : np.ndarray
        count / (N · bin_width), so Σ density · bin_width = 1.

    Notes
    -----
    Empty input or ``bins == 0`` returns two empty arrays. A spectrum
    whose range is below 1e-10 returns ``([min], [1.0])``. NaN values are
    ignored for the range, counted in the first bin, and included in N.
    """
    eigenvalues = np.asarray(eigenvalues, dtype=float).ravel()
    if len(eigenvalues) == 0 or bins == 0:
        return np.array([], dtype=float), np.array([], dtype=float)

    lo = float(np.nanmin(eigenvalues))
    hi = float(np.nanmax(eigenvalues))

    if abs(hi - lo) < DEGENERATE_RANGE_TOL:
        logger.debug("Degenerate spectrum (range %.3g); returning single point", hi - lo)
        return np.array([lo]), np.array([1.0])

    bin_width = (hi - lo) / bins

    with np.errstate(invalid="ignore", over="ignore"):
        scaled = np.floor((eigenvalues - lo) / bin_width)
    # NaN offsets (NaN input, or an inf/inf width) land in the first bin.
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=bins - 1, neginf=0.0)
    idx = np.clip(scaled, 0, bins - 1).astype(int)
    counts = np.bincount(idx, minlength=bins)

    centers = lo + (np.arange(bins) + 0.5) * bin_width
    densities = counts / (len(eigenvalues) * bin_width)

    return centers, densities


def stieltjes_transform(eigenvalues: np.ndarray, z: Union[float, complex]
                        ) -> Union[float, complex]:
    """
    Empirical Stieltjes transform m(z) = (1/N) Σ 1/(λ_i - z).

    No guard against z equal to an eigenvalue: the sum becomes infinite
    and numpy emits a divide warning. Evaluate off the spectrum, either
    with real z outside it or with complex z (Im z ≠ 0). An empty
    spectrum gives nan.

    Parameters
    ----------
    eigenvalues : np.ndarray
        Eigenvalues.
    z : float or complex
        Evaluation point.

    Returns
    -------
    float or complex
        m(z); complex iff z is complex.
    """
    eigenvalues = np.asarray(eigenvalues, dtype=float)
    m = np.mean(1.0 / (eigenvalues - z))

    if np.iscomplexobj(m):
        return complex(m)
    return float(m)
