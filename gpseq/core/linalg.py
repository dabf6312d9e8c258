# gpseq/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Cholesky factorization and triangular solves.

These routines are shared by the regressor (solving for the
coefficient vector, reducing the posterior variance) and by the
samplers (correlated draws from a factor). They accept `Matrix`
objects or 2-D arrays and never modify their inputs.
"""
import gpseq.num as gnp
from gpseq.config import get_logger
from .errors import MatrixShapeError, NotPositiveDefiniteError
from .matrix import Matrix

_logger = get_logger()


def _as_square(K):
    A = K.to_numpy() if isinstance(K, Matrix) else gnp.asdouble(K)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise MatrixShapeError(
            f"Matrix must be square for Cholesky decomposition, got shape {A.shape}"
        )
    return A


def cholesky(K) -> Matrix:
    """Cholesky-Banachiewicz factorization K = L Lᵀ.

    Parameters
    ----------
    K : Matrix or array_like, shape (n, n)
        Symmetric positive definite matrix. Only the lower triangle is read.

    Returns
    -------
    L : Matrix, shape (n, n)
        Lower-triangular factor; entries above the diagonal are exactly 0.

    Raises
    ------
    NotPositiveDefiniteError
        If a diagonal radicand ``K[j, j] - sum_k L[j, k]^2`` is <= 0 (or NaN).
    MatrixShapeError
        If K is not square.
    """
    A = _as_square(K)
    n = A.shape[0]
    L = gnp.zeros((n, n))
    _logger.debug("Cholesky factorization of a %d x %d matrix", n, n)

    for i in range(n):
        for j in range(i + 1):
            s = gnp.dot(L[i, :j], L[j, :j])
            if i == j:
                radicand = A[j, j] - s
                if not radicand > 0.0:
                    raise NotPositiveDefiniteError(j, j, float(radicand))
                L[j, j] = gnp.sqrt(radicand)
            else:
                L[i, j] = (A[i, j] - s) / L[j, j]

    return Matrix._wrap(L)


def _factor_array(L):
    L = L.to_numpy() if isinstance(L, Matrix) else gnp.asdouble(L)
    if L.ndim != 2 or L.shape[0] != L.shape[1]:
        raise MatrixShapeError(f"Triangular factor must be square, got shape {L.shape}")
    return L


def _rhs_array(b, n):
    b = gnp.array(b.to_numpy() if isinstance(b, Matrix) else b, dtype=gnp.float64)
    if b.shape[0] != n:
        raise MatrixShapeError(
            f"Right-hand side has {b.shape[0]} rows, factor has {n}"
        )
    return b


def forward_substitution(L, b):
    """Solve L z = b for z, L lower-triangular.

    `b` may be a vector (n,) or a matrix (n, k) of right-hand sides.
    """
    L = _factor_array(L)
    b = _rhs_array(b, L.shape[0])
    return gnp.solve_triangular(L, b, lower=True)


def back_substitution(L, z):
    """Solve Lᵀ x = z for x, L lower-triangular."""
    L = _factor_array(L)
    z = _rhs_array(z, L.shape[0])
    return gnp.solve_triangular(L.T, z, lower=False)


def cho_solve(L, b):
    """Solve L Lᵀ x = b given the Cholesky factor L."""
    return back_substitution(L, forward_substitution(L, b))


def cholesky_solve(K, b):
    """Solve K x = b by Cholesky factorization.

    Returns
    -------
    x : ndarray
        Solution, same shape as b.
    L : Matrix
        Cholesky factor of K.
    """
    L = cholesky(K)
    return cho_solve(L, b), L
