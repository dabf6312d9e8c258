# gpseq/core/sampling.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian draws for the regressor and the sequence generator.

This module provides:
- Standard normal draws by the Box-Muller transform, from an explicit
  `numpy.random.Generator`.
- Correlated draws ``mean + L z`` from a covariance matrix or from its
  Cholesky factor.
"""
import gpseq.num as gnp
from .errors import MatrixShapeError
from .linalg import cholesky
from .matrix import Matrix


def standard_normal(rng, *shape):
    """Draw N(0, 1) samples with the Box-Muller transform.

    Each value uses two independent uniform draws u1 in (0, 1] and
    u2 in [0, 1): ``sqrt(-2 log u1) cos(2 pi u2)``.

    Parameters
    ----------
    rng : numpy.random.Generator, int or None
        Generator (or seed) providing the uniform draws.
    *shape : int
        Output shape. With no shape, a Python float is returned.
    """
    rng = gnp.as_rng(rng)
    u1 = 1.0 - gnp.uniform(rng, *shape)
    u2 = gnp.uniform(rng, *shape)
    z = gnp.sqrt(-2.0 * gnp.log(u1)) * gnp.cos(2.0 * gnp.pi * u2)
    if not shape:
        return float(z)
    return z


def sample_from_factor(mean, L, nb_paths=1, rng=None):
    """Draw ``mean + L z`` with z ~ N(0, I).

    Parameters
    ----------
    mean : array_like, shape (n,) or scalar
    L : Matrix or ndarray, shape (n, n)
        Lower-triangular factor of the covariance matrix.
    nb_paths : int
        Number of independent draws.
    rng : numpy.random.Generator, int or None

    Returns
    -------
    ndarray, shape (nb_paths, n)
    """
    C = L.to_numpy() if isinstance(L, Matrix) else gnp.asdouble(L)
    n = C.shape[0]
    m = gnp.asdouble(mean).reshape(-1)
    if m.shape[0] == 1:
        m = gnp.full((n,), m[0])
    elif m.shape[0] != n:
        raise MatrixShapeError(f"mean has length {m.shape[0]}, covariance has size {n}")
    z = standard_normal(rng, n, nb_paths)
    return (m.reshape(-1, 1) + gnp.matmul(gnp.tril(C), z)).T


def sample_multivariate_normal(mean, covariance, nb_paths=1, rng=None):
    """Jointly correlated draws from N(mean, covariance).

    The covariance is factored once with `cholesky`; a factorization
    failure propagates as `NotPositiveDefiniteError`.

    Returns
    -------
    ndarray, shape (nb_paths, n)
    """
    L = cholesky(covariance)
    return sample_from_factor(mean, L, nb_paths, rng)
