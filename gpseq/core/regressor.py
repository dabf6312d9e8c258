# gpseq/core/regressor.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian process regressor.
"""
import gpseq.num as gnp
from gpseq.config import get_logger

from . import utils
from .errors import FitError, NotFittedError, NotPositiveDefiniteError
from .linalg import cholesky, cho_solve, forward_substitution
from .matrix import Matrix
from .sampling import sample_from_factor, standard_normal

_logger = get_logger()


class GaussianProcessRegressor:
    """Zero-mean Gaussian process regression with a fixed kernel.

    The kernel hyperparameters are used as given; they are not
    optimized.

    Attributes
    ----------
    kernel : gpseq.kernel.Kernel
        Covariance function. It is only read, so it can be shared.
    alpha : float
        Jitter added to the diagonal of the training covariance.
    X_train : Matrix or None
        Training points (n, d).
    y_train : ndarray or None
        Training targets (n,).
    L : Matrix or None
        Cholesky factor of ``K(X_train, X_train) + alpha I``.
    alpha_ : ndarray or None
        Coefficients solving ``(K + alpha I) alpha_ = y_train``.

    The four training fields are set together by `fit`; they are either
    all None (unfitted) or all set (fitted).

    Examples
    --------
    >>> from gpseq.kernel import RBF
    >>> gpr = GaussianProcessRegressor(RBF(1.0, 1.0))
    >>> gpr = gpr.fit([[0.0], [1.0], [2.0]], [0.0, 1.0, 0.0])
    >>> mean, std = gpr.predict([[0.5], [1.5]], return_std=True)
    """

    def __init__(self, kernel, alpha=1e-10, random_state=None):
        """
        Parameters
        ----------
        kernel : gpseq.kernel.Kernel
            Covariance function.
        alpha : float, optional
            Diagonal jitter, default 1e-10.
        random_state : int, numpy.random.Generator or None, optional
            Seed or generator for the regressor-owned generator used
            by the sampling methods.
        """
        self.kernel = kernel
        self.alpha = alpha
        self.rng = gnp.default_rng(random_state)
        self.X_train = None
        self.y_train = None
        self.L = None
        self.alpha_ = None

    def __repr__(self):
        return f"GaussianProcessRegressor(kernel={self.kernel!r}, alpha={self.alpha!r})"

    @property
    def is_fitted(self):
        return self.alpha_ is not None

    def _check_fitted(self, what):
        if not self.is_fitted:
            raise NotFittedError(f"Model must be fitted before {what}")

    # ------------------------------------------------------------------
    # Fitting
    # ------------------------------------------------------------------
    def fit(self, X, y):
        """Fit the posterior to training points X (n, d) and targets y (n,).

        Raises
        ------
        FitError
            If the regularized training covariance is not positive
            definite. The previous state of the regressor is kept.
        """
        X, y, _ = utils.ensure_shapes_and_type(X=X, y=y)

        K = self.kernel(X)
        K.add_to_diagonal(self.alpha)

        try:
            L = cholesky(K)
        except NotPositiveDefiniteError as e:
            raise FitError(f"Failed to compute Cholesky decomposition: {e}") from e

        self.X_train = X
        self.y_train = y
        self.L = L
        self.alpha_ = cho_solve(L, y)
        _logger.debug("Fitted GP on %d points (alpha=%g)", X.rows, self.alpha)
        return self

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------
    def predict(self, X, return_std=False):
        """Posterior mean (and standard deviation) at query points X.

        Returns
        -------
        mean : ndarray, shape (m,)
        std : ndarray, shape (m,)
            Only if ``return_std`` is True. Negative variances due to
            rounding are set to zero.
        """
        self._check_fitted("prediction")
        _, _, Xt = utils.ensure_shapes_and_type(X=self.X_train, Xt=X)

        K_cross = self.kernel(self.X_train, Xt).to_numpy()  # (n, m)
        mean = gnp.einsum("ji,j->i", K_cross, self.alpha_)

        if not return_std:
            return mean

        # v = L^{-1} k_star for every query column at once
        v = forward_substitution(self.L, K_cross)
        variance = self.kernel.diag(Xt) - gnp.sum(v * v, axis=0)
        std = gnp.sqrt(gnp.maximum(variance, 0.0))
        return mean, std

    def predict_interval(self, X, level=0.95):
        """Pointwise Gaussian credible bounds ``mean -/+ q * std``.

        Parameters
        ----------
        X : array_like, shape (m, d)
        level : float in (0, 1)
            Coverage of each marginal interval.

        Returns
        -------
        lower, upper : ndarray, shape (m,)
        """
        if not 0.0 < level < 1.0:
            raise ValueError(f"level must be in (0, 1), got {level}")
        self._check_fitted("computing intervals")
        mean, std = self.predict(X, return_std=True)
        q = gnp.normal.ppf(0.5 + level / 2.0)
        return mean - q * std, mean + q * std

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------
    def sample_y(self, X, n_samples=1, rng=None):
        """Draw posterior samples, each query point independently.

        Every value is ``mean[i] + std[i] * z`` with z a standard normal
        draw, so the samples follow the posterior marginals but not the
        posterior correlations (see `sample_y_joint`).

        Returns
        -------
        ndarray, shape (n_samples, m)
        """
        self._check_fitted("sampling")
        n_samples = utils.check_positive_int("n_samples", n_samples)
        rng = self.rng if rng is None else gnp.as_rng(rng)
        mean, std = self.predict(X, return_std=True)
        z = standard_normal(rng, n_samples, mean.shape[0])
        return mean[None, :] + std[None, :] * z

    def sample_y_joint(self, X, n_samples=1, rng=None, jitter=1e-8):
        """Draw posterior samples jointly over the query points.

        The posterior covariance ``K(Xt, Xt) - Vᵀ V`` with ``V = L^{-1}
        K(X_train, Xt)``, regularized by ``jitter`` on its diagonal, is
        factored and used as in `gpseq.core.sampling.sample_from_factor`.

        Returns
        -------
        ndarray, shape (n_samples, m)

        Raises
        ------
        NotPositiveDefiniteError
            If the regularized posterior covariance cannot be factored.
        """
        self._check_fitted("sampling")
        n_samples = utils.check_positive_int("n_samples", n_samples)
        rng = self.rng if rng is None else gnp.as_rng(rng)
        _, _, Xt = utils.ensure_shapes_and_type(X=self.X_train, Xt=X)

        K_cross = self.kernel(self.X_train, Xt).to_numpy()
        mean = gnp.einsum("ji,j->i", K_cross, self.alpha_)
        v = forward_substitution(self.L, K_cross)
        posterior_cov = Matrix._wrap(
            self.kernel(Xt).to_numpy() - gnp.matmul(v.T, v)
        ).add_to_diagonal(jitter)
        C = cholesky(posterior_cov)
        return sample_from_factor(mean, C, n_samples, rng)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def log_marginal_likelihood(self):
        """Log-likelihood of the training targets.

        .. math::
            -\\frac{1}{2} y^T \\alpha - \\sum_i \\log L_{ii} - \\frac{n}{2} \\log(2\\pi)
        """
        self._check_fitted("computing log marginal likelihood")
        n = self.y_train.shape[0]
        diagL = gnp.diag(self.L.to_numpy())
        return float(
            -0.5 * gnp.dot(self.y_train, self.alpha_)
            - gnp.sum(gnp.log(diagL))
            - 0.5 * n * gnp.log(2.0 * gnp.pi)
        )
