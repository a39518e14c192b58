"""
Limiting spectral laws and the random matrix ensembles that follow them.
"""

from .marchenko_pastur import (
    marchenko_pastur_density, marchenko_pastur_support, marchenko_pastur_pdf,
    marchenko_pastur_cdf, marchenko_pastur_condition_number,
    compare_to_marchenko_pastur, MarchenkoPasturComparison
)
from .wigner import (
    wigner_semicircle_density, wigner_semicircle_pdf, wigner_semicircle_cdf,
    wigner_semicircle_stieltjes
)
from .ensembles import sample_wishart, sample_goe

__all__ = [
    "marchenko_pastur_density", "marchenko_pastur_support", "marchenko_pastur_pdf",
    "marchenko_pastur_cdf", "marchenko_pastur_condition_number",
    "compare_to_marchenko_pastur", "MarchenkoPasturComparison",
    "wigner_semicircle_density", "wigner_semicircle_pdf", "wigner_semicircle_cdf",
    "wigner_semicircle_stieltjes",
    "sample_wishart", "sample_goe"
]
