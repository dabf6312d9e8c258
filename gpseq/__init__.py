# gpseq/__init__.py

from . import config
from . import num
from . import core
from . import kernel
from . import sequence
from .core import GaussianProcessRegressor, Matrix
from .kernel import RBF, Periodic, RationalQuadratic, make_kernel
from .sequence import KernelGenerator

__version__ = config.__version__

__all__ = [
    "num",
    "core",
    "kernel",
    "sequence",
    "Matrix",
    "GaussianProcessRegressor",
    "RBF",
    "Periodic",
    "RationalQuadratic",
    "make_kernel",
    "KernelGenerator",
    "__version__",
]
