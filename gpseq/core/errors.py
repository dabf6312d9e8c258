# gpseq/core/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by gpseq.core.

Out-of-bounds element access uses the built-in ``IndexError``.
"""
import gpseq.num as gnp


class MatrixShapeError(ValueError):
    """Inconsistent row lengths or incompatible operand shapes."""


class NotPositiveDefiniteError(gnp.LinAlgError):
    """Cholesky factorization met a non-positive diagonal radicand.

    Attributes
    ----------
    row, column : int
        Position of the offending diagonal entry.
    radicand : float
        Value found under the square root.
    """

    def __init__(self, row, column, radicand=None):
        self.row = row
        self.column = column
        self.radicand = radicand
        super().__init__(
            f"Matrix is not positive definite at position ({row}, {column})"
        )


class FitError(RuntimeError):
    """Gaussian process fitting failed (training covariance not factorizable)."""


class NotFittedError(RuntimeError):
    """Model used before a successful call to ``fit``."""
