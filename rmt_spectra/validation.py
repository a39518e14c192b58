"""
Input checks shared by the strict layer and the comparison helpers.

Each check returns ``None`` on success and raises one of the kinds in
:mod:`rmt_spectra.errors` otherwise. :func:`strict` turns a check into a
decorator that runs before a total function.
"""

import functools
from typing import Callable

import numpy as np

from .errors import InvalidRatio, DimensionMismatch, OutsideSupport


def check_ratio(ratio: float) -> None:
    """Raise :class:`InvalidRatio` unless ``ratio`` is finite and positive."""
    if not np.isfinite(ratio) or ratio <= 0:
        raise InvalidRatio(ratio)


def check_positive(value: float, name: str) -> None:
    """Raise ``ValueError`` unless ``value`` is finite and positive."""
    if not np.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def check_dimensions(a: int, b: int) -> None:
    """Raise :class:`DimensionMismatch` if ``a != b``."""
    if a != b:
        raise DimensionMismatch(a, b)


def check_in_support(value: float, low: float, high: float) -> None:
    """Raise :class:`OutsideSupport` if ``value`` is not in ``[low, high]``."""
    if value < low or value > high:
        raise OutsideSupport(value, low, high)


def check_square(matrix: np.ndarray) -> None:
    """
    Require a square 2-D matrix.

    Raises
    ------
    ValueError
        If ``matrix`` is not two-dimensional.
    DimensionMismatch
        If the row and column counts differ.
    """
    matrix = np.asarray(matrix)
    if matrix.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got {matrix.ndim} dimensions")
    check_dimensions(matrix.shape[0], matrix.shape[1])


def strict(validator: Callable) -> Callable:
    """
    Decorator factory: validate the arguments, then call the function.

    The validator receives exactly the arguments of the wrapped call and
    raises on bad input; its return value is ignored.

    Examples
    --------
    >>> @strict(lambda ratio: check_ratio(ratio))
    ... def half(ratio):
    ...     return ratio / 2
    >>> half(1.0)
    0.5
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            validator(*args, **kwargs)
            return func(*args, **kwargs)
        return wrapper
    return decorator
