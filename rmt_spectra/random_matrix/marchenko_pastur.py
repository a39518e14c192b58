"""
Marchenko-Pastur distribution analysis.

The Marchenko-Pastur law describes the limiting eigenvalue distribution
of sample covariance matrices. For an n×p matrix X with i.i.d. entries
of variance σ², the eigenvalues of (1/n)XᵀX converge to the MP
distribution as n, p → ∞ with p/n → γ.

Only the continuous part of the law is modeled. The aspect ratio is
folded, γ_eff = min(γ, 1/γ), since the nonzero spectrum of XᵀX and XXᵀ
coincide.

References:
- Marchenko & Pastur (1967), "Distribution of eigenvalues for some
  sets of random matrices"
- Johnstone (2001), "On the distribution of the largest eigenvalue in
  principal components analysis"
"""

import logging
from dataclasses import dataclass
from typing import Tuple, Optional

import numpy as np
from scipy import stats
from scipy.integrate import quad

from ..config import DEFAULT_SIGMA_SQ
from ..validation import check_ratio, check_dimensions, check_positive

logger = logging.getLogger(__name__)


def _effective_ratio(ratio: float) -> float:
    # γ = 0 is the classical limit: the support collapses to σ².
    if ratio == 0:
        return 0.0
    return min(ratio, 1.0 / ratio)


def marchenko_pastur_support(ratio: float, sigma_sq: float = DEFAULT_SIGMA_SQ
                             ) -> Tuple[float, float]:
    """
    Support bounds [λ₋, λ₊] of the MP distribution.

    λ_± = σ²(1 ± √γ_eff)², invariant under γ → 1/γ.

    Parameters
    ----------
    ratio : float
        Aspect ratio γ = p/n.
    sigma_sq : float
        Variance of matrix entries.

    Returns
    -------
    lambda_minus : float
        Lower bound of support.
    lambda_plus : float
        Upper bound of support.
    """
    gamma = _effective_ratio(ratio)
    sqrt_gamma = np.sqrt(gamma)

    lambda_minus = sigma_sq * (1 - sqrt_gamma) ** 2
    lambda_plus = sigma_sq * (1 + sqrt_gamma) ** 2

    return float(lambda_minus), float(lambda_plus)


def marchenko_pastur_density(lam: float, ratio: float,
                             sigma_sq: float = DEFAULT_SIGMA_SQ) -> float:
    """
    Marchenko-Pastur density at a single point λ.

    p(λ) = √((λ₊-λ)(λ-λ₋)) / (2πσ²γλ)  for λ ∈ [λ₋, λ₊], else 0.

    Non-positive ``ratio`` or ``lam`` give 0 rather than an error.

    Parameters
    ----------
    lam : float
        Eigenvalue at which to evaluate the density.
    ratio : float
        Aspect ratio γ = p/n.
    sigma_sq : float
        Variance of matrix entries.

    Returns
    -------
    float
        Density ρ(λ), 0 outside the support.

    Examples
    --------
    >>> marchenko_pastur_density(1.5, 0.5) > 0
    True
    >>> marchenko_pastur_density(10.0, 0.5)
    0.0
    """
    if ratio <= 0 or lam <= 0:
        return 0.0

    gamma = _effective_ratio(ratio)
    lambda_minus, lambda_plus = marchenko_pastur_support(gamma, sigma_sq)

    if lam < lambda_minus or lam > lambda_plus:
        return 0.0

    sqrt_term = np.sqrt((lambda_plus - lam) * (lam - lambda_minus))
    return float(sqrt_term / (2 * np.pi * sigma_sq * gamma * lam))


def marchenko_pastur_pdf(x: np.ndarray, ratio: float,
                         sigma_sq: float = DEFAULT_SIGMA_SQ) -> np.ndarray:
    """
    Vectorized Marchenko-Pastur density.

    Parameters
    ----------
    x : np.ndarray
        Points to evaluate density.
    ratio : float
        Aspect ratio γ = p/n.
    sigma_sq : float
        Variance of matrix entries.

    Returns
    -------
    np.ndarray
        Density at each x, same shape as x.
    """
    x = np.asarray(x, dtype=float)
    pdf = np.zeros_like(x)

    if ratio <= 0:
        return pdf

    gamma = _effective_ratio(ratio)
    lambda_minus, lambda_plus = marchenko_pastur_support(gamma, sigma_sq)

    mask = (x >= lambda_minus) & (x <= lambda_plus) & (x > 0)

    if np.any(mask):
        x_valid = x[mask]
        pdf[mask] = (np.sqrt((lambda_plus - x_valid) * (x_valid - lambda_minus)) /
                     (2 * np.pi * gamma * sigma_sq * x_valid))

    return pdf


def marchenko_pastur_cdf(x: np.ndarray, ratio: float,
                         sigma_sq: float = DEFAULT_SIGMA_SQ) -> np.ndarray:
    """
    Marchenko-Pastur cumulative distribution function.

    Computed via numerical integration of the continuous density from λ₋.

    Parameters
    ----------
    x : np.ndarray
        Points to evaluate CDF.
    ratio : float
        Aspect ratio γ = p/n.
    sigma_sq : float
        Variance of matrix entries.

    Returns
    -------
    np.ndarray
        CDF values in [0, 1], same shape as x.
    """
    x = np.asarray(x, dtype=float)
    cdf = np.zeros_like(x)

    if ratio <= 0:
        return cdf

    lambda_minus, lambda_plus = marchenko_pastur_support(ratio, sigma_sq)

    def integrand(t):
        return marchenko_pastur_density(t, ratio, sigma_sq)

    flat = cdf.reshape(-1)
    for i, xi in enumerate(x.reshape(-1)):
        if xi <= lambda_minus:
            flat[i] = 0.0
        elif xi >= lambda_plus:
            flat[i] = 1.0
        else:
            integral, _ = quad(integrand, lambda_minus, xi, limit=100)
            flat[i] = min(integral, 1.0)

    return cdf


def marchenko_pastur_condition_number(ratio: float) -> float:
    """
    Expected condition number of a Gaussian data matrix.

    κ = √(λ₊/λ₋) = (1 + √γ)/(1 - √γ)  with γ = γ_eff ≤ 1.

    Parameters
    ----------
    ratio : float
        Aspect ratio γ = p/n.

    Returns
    -------
    float
        Expected condition number, inf for square matrices.
    """
    gamma = _effective_ratio(ratio)

    if gamma >= 1:
        return np.inf

    sqrt_gamma = np.sqrt(gamma)
    return float((1 + sqrt_gamma) / (1 - sqrt_gamma))


@dataclass
class MarchenkoPasturComparison:
    """
    Goodness-of-fit of an observed spectrum against the MP law.

    Attributes
    ----------
    ratio : float
        Aspect ratio used for the reference law.
    sigma_sq : float
        Variance used for the reference law.
    lambda_minus, lambda_plus : float
        Support bounds.
    n_eigenvalues : int
        Number of positive eigenvalues compared.
    n_spikes : int
        Eigenvalues above λ₊ (candidate signal components).
    fraction_outside : float
        Fraction of eigenvalues outside [λ₋, λ₊].
    ks_statistic : float
        Kolmogorov-Smirnov statistic against the MP CDF.
    ks_pvalue : float
        KS test p-value.
    """
    ratio: float
    sigma_sq: float
    lambda_minus: float
    lambda_plus: float
    n_eigenvalues: int
    n_spikes: int
    fraction_outside: float
    ks_statistic: float
    ks_pvalue: float


def compare_to_marchenko_pastur(eigenvalues: np.ndarray, ratio: float,
                                sigma_sq: float = DEFAULT_SIGMA_SQ,
                                n_features: Optional[int] = None
                                ) -> MarchenkoPasturComparison:
    """
    Compare observed eigenvalues to the Marchenko-Pastur law.

    Eigenvalues should already be normalized, e.g. eigenvalues of W/n
    for a Wishart matrix W = XᵀX. Non-positive eigenvalues are dropped
    before the comparison.

    Parameters
    ----------
    eigenvalues : np.ndarray
        Observed eigenvalues.
    ratio : float
        Aspect ratio γ = p/n.
    sigma_sq : float
        Variance of matrix entries.
    n_features : int, optional
        If given, the number of eigenvalues must equal it.

    Returns
    -------
    MarchenkoPasturComparison
        Comparison statistics.

    Raises
    ------
    InvalidRatio
        If ratio is not positive and finite.
    DimensionMismatch
        If ``n_features`` differs from the number of eigenvalues.
    ValueError
        If sigma_sq is not positive, or no positive eigenvalues remain.
    """
    check_ratio(ratio)
    check_positive(sigma_sq, "sigma_sq")

    eigenvalues = np.asarray(eigenvalues, dtype=float).ravel()
    if n_features is not None:
        check_dimensions(len(eigenvalues), n_features)

    positive = eigenvalues[eigenvalues > 0]
    n_dropped = len(eigenvalues) - len(positive)
    if n_dropped:
        logger.debug("Dropped %d non-positive eigenvalues before MP comparison",
                     n_dropped)
    if len(positive) == 0:
        raise ValueError("No positive eigenvalues to compare")

    lambda_minus, lambda_plus = marchenko_pastur_support(ratio, sigma_sq)

    ks = stats.kstest(positive, lambda t: marchenko_pastur_cdf(t, ratio, sigma_sq))

    outside = (positive < lambda_minus) | (positive > lambda_plus)

    return MarchenkoPasturComparison(
        ratio=ratio,
        sigma_sq=sigma_sq,
        lambda_minus=lambda_minus,
        lambda_plus=lambda_plus,
        n_eigenvalues=len(positive),
        n_spikes=int(np.sum(positive > lambda_plus)),
        fraction_outside=float(np.mean(outside)),
        ks_statistic=float(ks.statistic),
        ks_pvalue=float(ks.pvalue)
    )
