"""
Package-wide numeric constants and defaults.

Every function that needs one of these takes it as a keyword default,
so callers can override per call without touching module state.
"""

# Variance of matrix entries assumed by the Marchenko-Pastur formulas
# when the caller does not supply one.
DEFAULT_SIGMA_SQ = 1.0

# Entry standard deviation for the Wigner semicircle (radius 2 * sigma).
DEFAULT_SIGMA = 1.0

# Histogram bins for the empirical spectral density.
DEFAULT_BINS = 50

# Spectra whose range is below this are treated as a single point by
# the histogram, which would otherwise divide by a zero bin width.
DEGENERATE_RANGE_TOL = 1e-10

# Reference values of the mean level-spacing ratio <r>.
# GOE: level repulsion. Poisson: uncorrelated levels.
GOE_MEAN_SPACING_RATIO = 0.5307
POISSON_MEAN_SPACING_RATIO = 0.3863
