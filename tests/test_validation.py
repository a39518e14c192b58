"""
Unit tests for the error model, input checks, and strict variants
"""
import pytest
import numpy as np

from rmt_spectra.errors import (
    RandomMatrixError, InvalidRatio, DimensionMismatch, OutsideSupport
)
from rmt_spectra.validation import (
    check_ratio, check_dimensions, check_in_support, check_positive, check_square, strict
)
from rmt_spectra.random_matrix.ensembles import sample_goe, sample_wishart
from rmt_spectra.random_matrix.marchenko_pastur import (
    marchenko_pastur_density, marchenko_pastur_support
)
from rmt_spectra.random_matrix.wigner import wigner_semicircle_density
from rmt_spectra.strict import (
    strict_marchenko_pastur_density, strict_marchenko_pastur_support,
    strict_wigner_semicircle_density
)


class TestErrors:

    @pytest.mark.parametrize("error", [
        InvalidRatio(-1.0), DimensionMismatch(3, 4), OutsideSupport(5.0, 0.0, 4.0)
    ])
    def test_hierarchy(self, error):
        assert isinstance(error, RandomMatrixError)
        assert isinstance(error, ValueError)

    def test_carries_values(self):
        assert InvalidRatio(-1.0).value == -1.0
        mismatch = DimensionMismatch(3, 4)
        assert (mismatch.a, mismatch.b) == (3, 4)
        outside = OutsideSupport(5.0, 0.0, 4.0)
        assert (outside.value, outside.low, outside.high) == (5.0, 0.0, 4.0)

    def test_messages(self):
        assert str(DimensionMismatch(3, 4)) == "dimension mismatch: 3 vs 4"
        assert str(OutsideSupport(5.0, 0.0, 4.0)) == "eigenvalue 5.0 outside support [0.0, 4.0]"
        assert "invalid ratio: -1.0" in str(InvalidRatio(-1.0))


class TestChecks:

    @pytest.mark.parametrize("ratio", [1e-6, 0.5, 1.0, 3.0])
    def test_valid_ratio(self, ratio):
        check_ratio(ratio)

    @pytest.mark.parametrize("ratio", [0.0, -0.5, np.inf, np.nan])
    def test_invalid_ratio(self, ratio):
        with pytest.raises(InvalidRatio):
            check_ratio(ratio)

    def test_dimensions(self):
        check_dimensions(4, 4)
        with pytest.raises(DimensionMismatch):
            check_dimensions(4, 5)

    def test_in_support_closed_interval(self):
        check_in_support(0.0, 0.0, 1.0)
        check_in_support(1.0, 0.0, 1.0)
        with pytest.raises(OutsideSupport):
            check_in_support(1.0001, 0.0, 1.0)

    def test_positive(self):
        check_positive(0.5, "sigma")
        for value in [0.0, -1.0, np.inf]:
            with pytest.raises(ValueError, match="sigma"):
                check_positive(value, "sigma")

    def test_square(self):
        check_square(sample_goe(4))
        check_square(sample_wishart(10, 3))
        with pytest.raises(DimensionMismatch):
            check_square(np.zeros((3, 4)))
        with pytest.raises(ValueError):
            check_square(np.zeros(3))

    def test_strict_decorator(self):
        @strict(lambda x: check_ratio(x))
        def double(x):
            """Double it."""
            return 2 * x

        assert double(1.5) == 3.0
        assert double.__name__ == "double"
        with pytest.raises(InvalidRatio):
            double(-1.0)


class TestStrictMarchenkoPastur:

    def test_matches_total_inside_support(self):
        assert strict_marchenko_pastur_density(1.2, 0.5, 1.0) == marchenko_pastur_density(1.2, 0.5, 1.0)
        assert strict_marchenko_pastur_support(0.5, 2.0) == marchenko_pastur_support(0.5, 2.0)

    def test_outside_support_raises(self):
        lo, hi = marchenko_pastur_support(0.5)
        with pytest.raises(OutsideSupport) as exc:
            strict_marchenko_pastur_density(5.0, 0.5)
        assert exc.value.value == 5.0
        assert exc.value.low == pytest.approx(lo)
        assert exc.value.high == pytest.approx(hi)
        # total variant falls back to zero
        assert marchenko_pastur_density(5.0, 0.5) == 0.0

    def test_invalid_ratio_raises(self):
        with pytest.raises(InvalidRatio):
            strict_marchenko_pastur_density(1.0, -0.5)
        with pytest.raises(InvalidRatio):
            strict_marchenko_pastur_support(0.0)
        assert marchenko_pastur_density(1.0, -0.5) == 0.0

    def test_nonpositive_variance(self):
        with pytest.raises(ValueError):
            strict_marchenko_pastur_support(0.5, 0.0)

    def test_keyword_arguments(self):
        assert strict_marchenko_pastur_density(1.2, ratio=0.5, sigma_sq=1.0) > 0


class TestStrictSemicircle:

    def test_matches_total_inside_support(self):
        assert strict_wigner_semicircle_density(0.0, 1.0) == wigner_semicircle_density(0.0, 1.0)
        assert strict_wigner_semicircle_density(2.0) == 0.0

    def test_outside_support_raises(self):
        with pytest.raises(OutsideSupport) as exc:
            strict_wigner_semicircle_density(2.5, 1.0)
        assert (exc.value.low, exc.value.high) == (-2.0, 2.0)
        assert wigner_semicircle_density(2.5, 1.0) == 0.0

    def test_nonpositive_sigma(self):
        with pytest.raises(ValueError):
            strict_wigner_semicircle_density(0.0, -1.0)
