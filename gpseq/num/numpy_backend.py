# gpseq/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for gpseq.

This module defines the NumPy implementation of the gpseq.num API.
"""

from typing import Any, Optional, Union
from gpseq.config import get_rng

Scalar = Union[int, float]
ArrayLike = Any


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy

_np_dtype = numpy.float64

from numpy import (
    isscalar,
    diag,
    arange,
    floor,
    sqrt,
    exp,
    log,
    sin,
    cos,
    sum,
    min,
    max,
    maximum,
    clip,
    einsum,
    matmul,
    dot,
    all,
    tril,
)
from numpy.linalg import LinAlgError
from numpy import pi
from numpy import float64
from scipy.linalg import solve_triangular
from scipy.stats import norm as normal

# ..................................................

def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.floating):
        return out.astype(_np_dtype, copy=False)
    return out

def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        return x
    elif isinstance(x, (int, float)):
        dt = _np_dtype if isinstance(x, float) else None
        return numpy.array([x], dtype=dt)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.floating):
            return out.astype(_np_dtype, copy=False)
        return out

def asdouble(x):
    return numpy.asarray(x).astype(float64, copy=False)

def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)

def full(shape, fill_value, dtype=None):
    return numpy.full(
        shape, fill_value, dtype=_np_dtype if dtype is None else dtype
    )

def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start,
        stop,
        num=num,
        endpoint=endpoint,
        dtype=_np_dtype if dtype is None else dtype,
    )

def isarray(x):
    return isinstance(x, numpy.ndarray)

# ..................................................

def default_rng(seed: Optional[Any] = None) -> numpy.random.Generator:
    """Build a generator owned by the caller.

    An existing Generator is returned as is. Without a seed, the new
    generator is seeded from the package generator (see
    `gpseq.config.set_seed`), so that owners built after a `set_seed`
    are reproducible and still draw independent streams.
    """
    if isinstance(seed, numpy.random.Generator):
        return seed
    if seed is None:
        seed = int(get_rng().integers(numpy.iinfo(numpy.int64).max))
    return numpy.random.default_rng(seed=seed)

def as_rng(rng) -> numpy.random.Generator:
    """Generator for a single sampling call.

    Accepts a Generator, an integer seed, or None for the package
    generator.
    """
    if isinstance(rng, numpy.random.Generator):
        return rng
    if rng is None:
        return get_rng()
    return numpy.random.default_rng(seed=rng)

def uniform(rng: numpy.random.Generator, *shape: int) -> ArrayLike:
    return rng.random(shape, dtype=_np_dtype)
