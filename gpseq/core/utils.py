# gpseq/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gpseq.core` modules.

This file hosts shape/type validation and conversion helpers for
training points, targets and query points.
"""
import gpseq.num as gnp
from .matrix import Matrix, ensure_2d


def ensure_shapes_and_type(*, X=None, y=None, Xt=None):
    """Validate and convert training points, targets and query points.

    Parameters
    ----------
    X : array_like or Matrix, optional
        Training points (n, d); 1-D input is promoted to (n, 1).
    y : array_like, optional
        Targets (n,) or (n, 1).
    Xt : array_like or Matrix, optional
        Query points (m, d); 1-D input is promoted to (m, 1).

    Returns
    -------
    tuple
        (X, y, Xt) as (Matrix, ndarray (n,), Matrix), None where not given.

    Raises
    ------
    ValueError
        On empty training data, a non-vector y, or mismatched sizes.
    """
    if X is not None:
        X = ensure_2d(X)
        if X.rows == 0:
            raise ValueError("X must contain at least one point")

    if y is not None:
        y = gnp.asdouble(y.to_numpy() if isinstance(y, Matrix) else y)
        if y.ndim == 2:
            if y.shape[1] != 1:
                raise ValueError("y should only have one column if it's a 2D array")
            y = y.reshape(-1)
        elif y.ndim != 1:
            raise ValueError("y should be 1D or a 2D column array")
        y = gnp.array(y, dtype=gnp.float64)

    if Xt is not None:
        Xt = ensure_2d(Xt)

    if X is not None and y is not None and X.rows != y.shape[0]:
        raise ValueError(
            f"X and y must have the same number of rows ({X.rows} != {y.shape[0]})"
        )
    if X is not None and Xt is not None and X.columns != Xt.columns:
        raise ValueError(
            f"X and Xt must have the same number of columns ({X.columns} != {Xt.columns})"
        )
    return X, y, Xt


def check_positive_int(name, value):
    if int(value) != value or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return int(value)
