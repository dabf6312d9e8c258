# gpseq/kernel/rational_quadratic.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from .base import Kernel


class RationalQuadratic(Kernel):
    """Rational quadratic kernel, a scale mixture of RBF kernels.

    .. math::
        k(x, y) = \\sigma^2 \\left(1 + \\frac{\\|x - y\\|^2}{2 \\alpha \\ell^2}\\right)^{-\\alpha}
    """

    param_names = ("length_scale", "alpha", "variance")
    vectorized = True

    def __init__(self, length_scale=1.0, alpha=1.0, variance=1.0):
        super().__init__(length_scale=length_scale, alpha=alpha, variance=variance)

    def compute(self, x1, x2):
        d2 = self.squared_euclidean_distance(x1, x2)
        return self.variance * (1.0 + d2 / (2.0 * self.alpha * self.length_scale**2)) ** (
            -self.alpha
        )
