"""
Unit tests for Box-Muller draws and correlated sampling.
"""

import unittest

import numpy as np

from gpseq.core import NotPositiveDefiniteError
from gpseq.core.sampling import (
    standard_normal,
    sample_from_factor,
    sample_multivariate_normal,
)


class TestStandardNormal(unittest.TestCase):

    def test_scalar_and_shape(self):
        self.assertIsInstance(standard_normal(np.random.default_rng(0)), float)
        self.assertEqual(standard_normal(0, 3, 4).shape, (3, 4))

    def test_reproducible(self):
        np.testing.assert_array_equal(standard_normal(5, 10), standard_normal(5, 10))

    def test_moments(self):
        z = standard_normal(np.random.default_rng(123), 50000)
        self.assertTrue(np.all(np.isfinite(z)))
        self.assertAlmostEqual(z.mean(), 0.0, delta=0.03)
        self.assertAlmostEqual(z.std(), 1.0, delta=0.03)


class TestMultivariate(unittest.TestCase):

    def test_covariance_recovered(self):
        cov = np.array([[1.0, 0.8, 0.2], [0.8, 1.0, 0.5], [0.2, 0.5, 1.0]])
        mean = np.array([1.0, -2.0, 0.5])
        samples = sample_multivariate_normal(mean, cov, nb_paths=40000, rng=7)
        self.assertEqual(samples.shape, (40000, 3))
        np.testing.assert_allclose(samples.mean(axis=0), mean, atol=0.03)
        np.testing.assert_allclose(np.cov(samples.T), cov, atol=0.03)

    def test_scalar_mean_broadcast(self):
        L = np.eye(4) * 1e-12
        samples = sample_from_factor(3.0, L, nb_paths=2, rng=0)
        np.testing.assert_allclose(samples, 3.0)

    def test_indefinite_covariance(self):
        with self.assertRaises(NotPositiveDefiniteError):
            sample_multivariate_normal([0.0, 0.0], [[1.0, 2.0], [2.0, 1.0]])


if __name__ == "__main__":
    unittest.main()
