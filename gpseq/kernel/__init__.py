# gpseq/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance functions for Gaussian process sequence generation.

Modules
-------
base
    Kernel base class (pairwise covariance matrix, parameter access).
rbf
    Squared-exponential kernel.
periodic
    Periodic (exp-sine-squared) kernel.
rational_quadratic
    Rational quadratic kernel.

Public API
-----------
- Kernel, RBF, Periodic, RationalQuadratic
- make_kernel
"""

from .base import Kernel
from .rbf import RBF
from .periodic import Periodic
from .rational_quadratic import RationalQuadratic

_KERNELS = {
    "rbf": RBF,
    "periodic": Periodic,
    "rational_quadratic": RationalQuadratic,
}


def make_kernel(name, **params):
    """Build a kernel from its name ('rbf', 'periodic', 'rational_quadratic')."""
    try:
        cls = _KERNELS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown kernel {name!r}. Supported kernels are {sorted(_KERNELS)}."
        ) from None
    return cls(**params)


__all__ = [
    "Kernel",
    "RBF",
    "Periodic",
    "RationalQuadratic",
    "make_kernel",
]
