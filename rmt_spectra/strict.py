"""
Strict variants of the density formulas.

The plain functions return 0 outside the support and for invalid
ratios. The variants here validate first and raise the error kinds in
:mod:`rmt_spectra.errors`, then fall through to the same computation.
"""

from .config import DEFAULT_SIGMA, DEFAULT_SIGMA_SQ
from .random_matrix.marchenko_pastur import (
    marchenko_pastur_density, marchenko_pastur_support
)
from .random_matrix.wigner import wigner_semicircle_density
from .validation import check_ratio, check_in_support, check_positive, strict


def _validate_mp_density(lam, ratio, sigma_sq=DEFAULT_SIGMA_SQ):
    check_ratio(ratio)
    check_positive(sigma_sq, "sigma_sq")
    check_in_support(lam, *marchenko_pastur_support(ratio, sigma_sq))


def _validate_mp_support(ratio, sigma_sq=DEFAULT_SIGMA_SQ):
    check_ratio(ratio)
    check_positive(sigma_sq, "sigma_sq")


def _validate_semicircle_density(lam, sigma=DEFAULT_SIGMA):
    check_positive(sigma, "sigma")
    check_in_support(lam, -2 * sigma, 2 * sigma)


strict_marchenko_pastur_density = strict(_validate_mp_density)(marchenko_pastur_density)
strict_marchenko_pastur_support = strict(_validate_mp_support)(marchenko_pastur_support)
strict_wigner_semicircle_density = strict(_validate_semicircle_density)(wigner_semicircle_density)

__all__ = [
    "strict_marchenko_pastur_density",
    "strict_marchenko_pastur_support",
    "strict_wigner_semicircle_density",
]
