# gpseq/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpseq package.

This subpackage contains the numerical routines of the sequence
engine: the dense matrix container, Cholesky factorization and
triangular solves, Gaussian sampling, and the Gaussian process
regressor.

Public API
----------
Matrix : class
    Bounds-checked dense matrix.
GaussianProcessRegressor : class
    Posterior mean, standard deviation and samples for a fixed kernel.
cholesky, forward_substitution, back_substitution, cho_solve, cholesky_solve
    Factorization and solves.
"""

from .errors import (
    MatrixShapeError,
    NotPositiveDefiniteError,
    FitError,
    NotFittedError,
)
from .matrix import Matrix, ensure_2d
from .linalg import (
    cholesky,
    forward_substitution,
    back_substitution,
    cho_solve,
    cholesky_solve,
)
from .sampling import standard_normal, sample_from_factor, sample_multivariate_normal
from .regressor import GaussianProcessRegressor

__all__ = [
    "Matrix",
    "ensure_2d",
    "cholesky",
    "forward_substitution",
    "back_substitution",
    "cho_solve",
    "cholesky_solve",
    "standard_normal",
    "sample_from_factor",
    "sample_multivariate_normal",
    "GaussianProcessRegressor",
    "MatrixShapeError",
    "NotPositiveDefiniteError",
    "FitError",
    "NotFittedError",
]
