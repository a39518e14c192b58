"""
Error kinds for spectral validation.

The numerical entry points are total functions: out-of-support
densities evaluate to zero and insufficient data yields sentinels.
These exceptions are raised only by the strict layer in
:mod:`rmt_spectra.validation` and by comparison helpers that cannot
produce a meaningful result from malformed input.
"""


class RandomMatrixError(ValueError):
    """Base class for all spectral validation failures."""


class InvalidRatio(RandomMatrixError):
    """
    Aspect ratio gamma = p/n outside (0, inf).

    Parameters
    ----------
    value : float
        The offending ratio.
    """

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"invalid ratio: {value} (must be in (0, inf))")


class DimensionMismatch(RandomMatrixError):
    """
    Two sizes that were expected to be equal differ.

    Parameters
    ----------
    a, b : int
        The two sizes.
    """

    def __init__(self, a: int, b: int):
        self.a = a
        self.b = b
        super().__init__(f"dimension mismatch: {a} vs {b}")


class OutsideSupport(RandomMatrixError):
    """
    Value outside the support interval [low, high] of a limiting law.

    Parameters
    ----------
    value : float
        The offending eigenvalue.
    low, high : float
        Support bounds.
    """

    def __init__(self, value: float, low: float, high: float):
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"eigenvalue {value} outside support [{low}, {high}]")
