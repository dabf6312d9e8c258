# gpseq/config.py
import os
import logging

import numpy

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"


class _GPSEQConfig:
    """Package-wide settings: version, random seeding and the logger.

    `rng` is the package generator. It serves sampling calls made
    without a generator, and it seeds the generators owned by
    regressors and sequence generators built without a
    `random_state`. `set_seed` replaces it, so that everything drawn
    afterwards is reproducible.
    """

    def __init__(self):
        self.version = __version__
        self.seed = None
        self.rng = numpy.random.default_rng(self.seed)
        # logger lives in config
        self.logger = logging.getLogger("gpseq")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return f"GPSEQConfig(version={self.version}, seed={self.seed})"

    def __repr__(self):
        return f"<GPSEQConfig version={self.version!r}, seed={self.seed!r}>"

    def reseed(self, seed):
        self.seed = seed
        self.rng = numpy.random.default_rng(seed)
        self.logger.debug("Package generator reseeded (seed=%r)", seed)
        return self


_config = _GPSEQConfig()


def get_config():
    return _config


def set_seed(seed):
    """Reseed the package generator (None = fresh OS entropy)."""
    _config.reseed(seed)


def get_rng():
    return _config.rng


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
