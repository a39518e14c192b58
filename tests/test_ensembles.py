"""
Unit tests for the Wishart and GOE samplers
"""
import pytest
import numpy as np

from rmt_spectra.random_matrix.ensembles import sample_wishart, sample_goe
from rmt_spectra.random_matrix.marchenko_pastur import marchenko_pastur_support
from rmt_spectra.random_matrix.wigner import wigner_semicircle_pdf, wigner_semicircle_stieltjes
from rmt_spectra.analysis.spectral_statistics import (
    empirical_spectral_density, mean_spacing_ratio, stieltjes_transform
)


class TestWishart:

    def test_shape(self):
        assert sample_wishart(100, 50).shape == (50, 50)

    def test_symmetric_psd(self):
        W = sample_wishart(30, 20, np.random.default_rng(0))
        np.testing.assert_allclose(W, W.T, atol=1e-10)
        assert np.linalg.eigvalsh(W).min() > -1e-8

    def test_draws_from_supplied_rng(self):
        """n·p draws in row-major order from the caller's generator"""
        W = sample_wishart(7, 4, np.random.default_rng(3))
        X = np.random.default_rng(3).standard_normal((7, 4))
        np.testing.assert_allclose(W, X.T @ X)

    def test_reproducible(self):
        W1 = sample_wishart(20, 10, np.random.default_rng(1))
        W2 = sample_wishart(20, 10, np.random.default_rng(1))
        np.testing.assert_array_equal(W1, W2)

    def test_spectrum_within_mp_support(self):
        n, p = 1000, 250
        eigenvalues = np.linalg.eigvalsh(sample_wishart(n, p, np.random.default_rng(42)) / n)
        lo, hi = marchenko_pastur_support(p / n)
        assert eigenvalues.min() > lo - 0.1
        assert eigenvalues.max() < hi + 0.2

    def test_empty_dimensions(self):
        assert sample_wishart(0, 3).shape == (3, 3)
        np.testing.assert_array_equal(sample_wishart(0, 3), np.zeros((3, 3)))
        assert sample_wishart(5, 0).shape == (0, 0)


class TestGOE:

    def test_shape(self):
        assert sample_goe(10).shape == (10, 10)

    def test_symmetric(self):
        H = sample_goe(10)
        for i in range(10):
            for j in range(10):
                assert abs(H[i, j] - H[j, i]) < 1e-10

    def test_exactly_symmetric(self):
        H = sample_goe(50, np.random.default_rng(5))
        np.testing.assert_array_equal(H, H.T)

    def test_draw_order(self):
        """Diagonal first, then one draw per pair i < j in row-major order"""
        n = 5
        H = sample_goe(n, np.random.default_rng(11))

        rng = np.random.default_rng(11)
        diagonal = rng.standard_normal(n) * np.sqrt(2)
        off_diagonal = rng.standard_normal(n * (n - 1) // 2)

        expected = np.diag(diagonal)
        k = 0
        for i in range(n):
            for j in range(i + 1, n):
                expected[i, j] = expected[j, i] = off_diagonal[k]
                k += 1

        np.testing.assert_allclose(H, expected / np.sqrt(n))

    def test_entry_variances(self):
        n = 400
        H = sample_goe(n, np.random.default_rng(42))
        diag_var = np.var(np.diag(H))
        off_var = np.var(H[np.triu_indices(n, k=1)])
        assert diag_var == pytest.approx(2 / n, rel=0.25)
        assert off_var == pytest.approx(1 / n, rel=0.05)

    def test_empty(self):
        assert sample_goe(0).shape == (0, 0)

    def test_spectrum_follows_semicircle(self):
        n = 1000
        eigenvalues = np.linalg.eigvalsh(sample_goe(n, np.random.default_rng(42)))
        assert np.abs(eigenvalues).max() < 2.2

        centers, densities = empirical_spectral_density(eigenvalues, 20)
        width = centers[1] - centers[0]
        l1 = np.sum(np.abs(densities - wigner_semicircle_pdf(centers))) * width
        assert l1 < 0.15

        assert 0.49 < mean_spacing_ratio(eigenvalues) < 0.57

        m_limit = wigner_semicircle_stieltjes(3.0).real
        assert stieltjes_transform(eigenvalues, 3.0) == pytest.approx(m_limit, abs=0.02)
