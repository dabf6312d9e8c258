# gpseq/kernel/base.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernel base class.

A kernel provides ``compute(x1, x2)``, the covariance between two
points given as sequences of scalars. Kernels whose `compute` works on
the last axis of broadcast stacks of points set ``vectorized = True``;
`covariance_matrix` then fills the whole (n, m) matrix in one call,
otherwise it evaluates `compute` pair by pair.

Hyperparameters are stored in a named mapping (``params``) and are
never modified by `compute`; a kernel can be shared by several
regressors.
"""
import gpseq.num as gnp
from gpseq.core.matrix import Matrix, ensure_2d
from gpseq.core.errors import MatrixShapeError


class Kernel:
    """Base class for covariance functions.

    Subclasses implement `compute` and declare the names of their
    hyperparameters in ``param_names``.
    """

    param_names = ()
    # compute accepts broadcast stacks of points
    vectorized = False

    def __init__(self, **params):
        self.params = dict(params)

    def __getattr__(self, name):
        # hyperparameters are read through the params mapping
        params = self.__dict__.get("params")
        if params is not None and name in params:
            return params[name]
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{type(self).__name__}({args})"

    # ------------------------------------------------------------- parameters
    def get_params(self):
        """Return a copy of the hyperparameter mapping."""
        return dict(self.params)

    def set_params(self, **params):
        """Update hyperparameters; unknown names raise ValueError."""
        unknown = set(params) - set(self.param_names)
        if unknown:
            raise ValueError(
                f"Unknown parameter(s) for {type(self).__name__}: {sorted(unknown)}"
            )
        self.params.update(params)
        return self

    # ------------------------------------------------------------- evaluation
    def compute(self, x1, x2):
        """Covariance k(x1, x2) over the last axis of x1 and x2."""
        raise NotImplementedError

    def covariance_matrix(self, XA, XB=None) -> Matrix:
        """Pairwise covariance matrix K[i, j] = compute(XA[i], XB[j]).

        Parameters
        ----------
        XA : array_like or Matrix, shape (n, d)
            First point set (1-D input is one feature per point).
        XB : array_like or Matrix, shape (m, d), optional
            Second point set; defaults to XA.

        Returns
        -------
        Matrix, shape (n, m)
        """
        xa = ensure_2d(XA).to_numpy()
        xb = xa if XB is None else ensure_2d(XB).to_numpy()
        if xa.shape[1] != xb.shape[1]:
            raise MatrixShapeError(
                f"Point sets have {xa.shape[1]} and {xb.shape[1]} features"
            )
        n, m = xa.shape[0], xb.shape[0]
        if self.vectorized:
            K = self.compute(xa[:, None, :], xb[None, :, :])
        else:
            K = [[self.compute(a, b) for b in xb] for a in xa]
        return Matrix._wrap(gnp.array(K, dtype=gnp.float64).reshape(n, m))

    __call__ = covariance_matrix

    def diag(self, X):
        """Vector of k(x_i, x_i)."""
        x = ensure_2d(X).to_numpy()
        if self.vectorized:
            return gnp.asdouble(self.compute(x, x)).reshape(-1)
        return gnp.array([self.compute(a, a) for a in x], dtype=gnp.float64)

    # ------------------------------------------------------------- distances
    @staticmethod
    def squared_euclidean_distance(x1, x2):
        d = gnp.asdouble(x1) - gnp.asdouble(x2)
        return gnp.sum(d * d, axis=-1)

    @staticmethod
    def euclidean_distance(x1, x2):
        return gnp.sqrt(Kernel.squared_euclidean_distance(x1, x2))
