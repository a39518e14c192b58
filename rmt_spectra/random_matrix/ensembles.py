"""
Random matrix ensembles.

Samplers whose eigenvalue spectra converge to the limiting laws in this
package:

1. Wishart W = XᵀX: eigenvalues of W/n follow Marchenko-Pastur
2. Gaussian Orthogonal Ensemble: eigenvalues follow the semicircle

The random source is always an explicit ``np.random.Generator``; there
is no module-level generator. Each thread should own its own ``rng``.

The samplers do not eigendecompose. Use ``np.linalg.eigvalsh`` on the
result and feed the eigenvalues to :mod:`rmt_spectra.analysis`.
"""

import logging
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


def sample_wishart(n: int, p: int, rng: Optional[np.random.Generator] = None
                   ) -> np.ndarray:
    """
    Sample a Wishart matrix W = XᵀX with X an n×p standard Gaussian matrix.

    The eigenvalues of W/n follow the Marchenko-Pastur distribution with
    γ = p/n as n, p → ∞ at fixed ratio. Consumes n·p normal draws.

    Parameters
    ----------
    n : int
        Number of samples (rows of X).
    p : int
        Number of features (columns of X).
    rng : np.random.Generator, optional
        Random number generator.

    Returns
    -------
    np.ndarray
        p×p symmetric positive semi-definite matrix.

    Examples
    --------
    >>> W = sample_wishart(100, 50, np.random.default_rng(0))
    >>> W.shape
    (50, 50)
    """
    if rng is None:
        rng = np.random.default_rng()

    X = rng.standard_normal((n, p))
    logger.debug("Sampled %dx%d Gaussian data matrix for Wishart", n, p)

    return X.T @ X


def sample_goe(n: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Sample a GOE (Gaussian Orthogonal Ensemble) matrix.

    Construction:
    1. Diagonal entries H_ii ~ N(0, 2), drawn first
    2. Off-diagonal H_ij ~ N(0, 1) for i < j, one draw per pair in
       row-major order, mirrored to H_ji
    3. Scale the whole matrix by 1/√n

    The scaling makes the spectrum converge to the semicircle with σ = 1
    (radius 2). Consumes n + n(n-1)/2 normal draws.

    Parameters
    ----------
    n : int
        Matrix dimension.
    rng : np.random.Generator, optional
        Random number generator.

    Returns
    -------
    np.ndarray
        n×n exactly symmetric matrix.

    Examples
    --------
    >>> H = sample_goe(10, np.random.default_rng(0))
    >>> np.array_equal(H, H.T)
    True
    """
    if rng is None:
        rng = np.random.default_rng()

    H = np.zeros((n, n))
    if n == 0:
        return H

    H[np.diag_indices(n)] = rng.standard_normal(n) * np.sqrt(2)

    rows, cols = np.triu_indices(n, k=1)
    off_diagonal = rng.standard_normal(len(rows))
    H[rows, cols] = off_diagonal
    H[cols, rows] = off_diagonal

    logger.debug("Sampled %dx%d GOE matrix (%d draws)", n, n, n + len(rows))

    return H / np.sqrt(n)
