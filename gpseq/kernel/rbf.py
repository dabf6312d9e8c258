# gpseq/kernel/rbf.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpseq.num as gnp
from .base import Kernel


class RBF(Kernel):
    """Squared-exponential (RBF) kernel.

    .. math::
        k(x, y) = \\sigma^2 \\exp\\left(-\\frac{1}{2}\\left(\\frac{\\|x - y\\|}{\\ell}\\right)^2\\right)

    Parameters
    ----------
    length_scale : float
        Length scale :math:`\\ell`, strictly positive (not checked).
    variance : float
        Variance :math:`\\sigma^2`, strictly positive (not checked).
    """

    param_names = ("length_scale", "variance")
    vectorized = True

    def __init__(self, length_scale=1.0, variance=1.0):
        super().__init__(length_scale=length_scale, variance=variance)

    def compute(self, x1, x2):
        h = self.euclidean_distance(x1, x2) / self.length_scale
        return self.variance * gnp.exp(-0.5 * h**2)
