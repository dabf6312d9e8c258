# gpseq/kernel/periodic.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpseq.num as gnp
from .base import Kernel


class Periodic(Kernel):
    """Periodic (exp-sine-squared) kernel.

    .. math::
        k(x, y) = \\sigma^2 \\exp\\left(-2 \\left(\\frac{\\sin(\\pi \\|x - y\\| / p)}{\\ell}\\right)^2\\right)
    """

    param_names = ("length_scale", "periodicity", "variance")
    vectorized = True

    def __init__(self, length_scale=1.0, periodicity=1.0, variance=1.0):
        super().__init__(
            length_scale=length_scale, periodicity=periodicity, variance=variance
        )

    def compute(self, x1, x2):
        d = self.euclidean_distance(x1, x2)
        s = gnp.sin(gnp.pi * d / self.periodicity) / self.length_scale
        return self.variance * gnp.exp(-2.0 * s**2)
