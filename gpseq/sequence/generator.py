# gpseq/sequence/generator.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian process sequence generator.

`KernelGenerator` draws numeric sequences over an index axis and turns
them into note records. Without training data it samples the prior
(jointly, through the Cholesky factor of the axis covariance). With
training data ``[(index, value), ...]`` it fits a
`gpseq.core.GaussianProcessRegressor` and samples the posterior on a
uniform axis spanning the training indices.
"""
import gpseq.num as gnp
from gpseq.config import get_logger
from gpseq.core import GaussianProcessRegressor
from gpseq.core.sampling import sample_multivariate_normal
from gpseq.core.utils import check_positive_int
from gpseq.kernel import RBF
from . import notes as _notes
from .timing import DEFAULT_TIMING_CONFIG, notes_to_track

_logger = get_logger()


class KernelGenerator:
    """Prior or posterior Gaussian process sampler over an index axis.

    Parameters
    ----------
    data : sequence of (index, value), optional
        Training pairs. When empty, `generate` samples the prior.
    length_scale, amplitude : float
        RBF hyperparameters used when `kernel` is not given.
    noise_level : float
        Diagonal regularization of the prior axis covariance. Prior mode
        only; conditioned mode regularizes with `alpha`.
    walk_around : float or bool
        Constant offset of the prior mean (False for 0).
    kernel : gpseq.kernel.Kernel, optional
        Covariance function; defaults to ``RBF(length_scale, amplitude)``.
    alpha : float
        Jitter of the regressor in conditioned mode.
    timing_config : dict
        Used for "bars:beats:ticks" times.
    random_state : int, numpy.random.Generator or None
        Seed or generator owned by this instance.
    """

    def __init__(
        self,
        data=None,
        length_scale=1.0,
        amplitude=1.0,
        noise_level=0.1,
        walk_around=False,
        kernel=None,
        alpha=1e-10,
        timing_config=DEFAULT_TIMING_CONFIG,
        random_state=None,
    ):
        self.data = [tuple(p) for p in data] if data is not None else []
        self.length_scale = length_scale
        self.amplitude = amplitude
        self.noise_level = noise_level
        self.walk_around = walk_around
        self.kernel = kernel
        self.alpha = alpha
        self.timing_config = dict(timing_config)
        self.rng = gnp.default_rng(random_state)
        self.gpr = None

    @property
    def is_fitted(self):
        return self.gpr is not None and self.gpr.is_fitted

    # ------------------------------------------------------------- accessors
    def set_data(self, data):
        self.data = [tuple(p) for p in data]
        self.gpr = None

    def get_data(self):
        return list(self.data)

    def set_length_scale(self, length_scale):
        self.length_scale = length_scale

    def set_amplitude(self, amplitude):
        self.amplitude = amplitude

    def set_noise_level(self, noise_level):
        self.noise_level = noise_level

    def _kernel(self, length_scale=None, amplitude=None):
        if self.kernel is not None and length_scale is None and amplitude is None:
            return self.kernel
        return RBF(
            self.length_scale if length_scale is None else length_scale,
            self.amplitude if amplitude is None else amplitude,
        )

    # ------------------------------------------------------------- generation
    def generate(
        self,
        length=100,
        n_samples=1,
        seed=None,
        length_scale=None,
        amplitude=None,
        noise_level=None,
        joint=False,
    ):
        """Generate one or several sequences.

        Parameters
        ----------
        length : int
            Number of values per sequence.
        n_samples : int
            Number of sequences.
        seed : int, optional
            Seed for this call only; otherwise the instance generator is used.
        length_scale, amplitude, noise_level : float, optional
            Per-call overrides. Giving `length_scale` or `amplitude`
            replaces a custom kernel by an RBF kernel. `noise_level`
            has no effect in conditioned mode.
        joint : bool
            Conditioned mode only: sample the posterior jointly
            (`GaussianProcessRegressor.sample_y_joint`) instead of
            point by point.

        Returns
        -------
        Prior mode: ndarray (length,) if n_samples == 1, else
        (n_samples, length).
        Conditioned mode: ``(time_points, samples)`` with the same
        convention for `samples`.
        """
        length = check_positive_int("length", length)
        n_samples = check_positive_int("n_samples", n_samples)
        rng = self.rng if seed is None else gnp.default_rng(seed)
        kernel = self._kernel(length_scale, amplitude)

        if self.data:
            return self._generate_conditioned(kernel, length, n_samples, rng, joint)
        noise_level = self.noise_level if noise_level is None else noise_level
        return self._generate_prior(kernel, length, n_samples, noise_level, rng)

    def _generate_prior(self, kernel, length, n_samples, noise_level, rng):
        _logger.debug("Prior sampling: length=%d, n_samples=%d", length, n_samples)
        X = gnp.arange(length, dtype=gnp.float64).reshape(-1, 1)
        K = kernel(X).add_to_diagonal(noise_level)
        mean = gnp.full((length,), float(self.walk_around or 0.0))
        samples = sample_multivariate_normal(mean, K, n_samples, rng)
        return samples[0] if n_samples == 1 else samples

    def _generate_conditioned(self, kernel, length, n_samples, rng, joint):
        _logger.debug(
            "Conditioned sampling on %d points: length=%d, n_samples=%d",
            len(self.data),
            length,
            n_samples,
        )
        X_train = gnp.array([[float(p[0])] for p in self.data])
        y_train = gnp.array([float(p[1]) for p in self.data])

        self.gpr = GaussianProcessRegressor(kernel, alpha=self.alpha, random_state=rng)
        self.gpr.fit(X_train, y_train)

        time_points = gnp.linspace(gnp.min(X_train), gnp.max(X_train), length)
        X_pred = time_points.reshape(-1, 1)
        if joint:
            samples = self.gpr.sample_y_joint(X_pred, n_samples)
        else:
            samples = self.gpr.sample_y(X_pred, n_samples)
        return time_points, samples[0] if n_samples == 1 else samples

    # ------------------------------------------------------------- notes
    def to_jmon_notes(
        self,
        samples,
        durations=(1,),
        time_points=None,
        use_string_time=False,
        map_to_scale=None,
        scale_range=_notes.DEFAULT_SCALE_RANGE,
        quantize=False,
    ):
        """Convert generated samples into note records.

        See `gpseq.sequence.notes.to_jmon_notes`; the generator's timing
        configuration is used for string times.
        """
        return _notes.to_jmon_notes(
            samples,
            durations=durations,
            time_points=time_points,
            use_string_time=use_string_time,
            map_to_scale=map_to_scale,
            scale_range=scale_range,
            quantize=quantize,
            timing_config=self.timing_config,
        )

    def generate_track(
        self,
        length=100,
        n_samples=1,
        seed=None,
        durations=(1,),
        use_string_time=False,
        map_to_scale=None,
        scale_range=_notes.DEFAULT_SCALE_RANGE,
        quantize=False,
        label="gaussian-process",
        midi_channel=0,
        synth=None,
        length_scale=None,
        amplitude=None,
        noise_level=None,
        joint=False,
    ):
        """Generate sequences and wrap the resulting notes into a track record.

        The generation arguments (`length`, `n_samples`, `seed`, the
        hyperparameter overrides and `joint`) are passed to `generate`;
        the note arguments to `to_jmon_notes`.
        """
        result = self.generate(
            length=length,
            n_samples=n_samples,
            seed=seed,
            length_scale=length_scale,
            amplitude=amplitude,
            noise_level=noise_level,
            joint=joint,
        )
        if self.data:
            time_points, samples = result
        else:
            time_points, samples = None, result
        notes = self.to_jmon_notes(
            samples,
            durations=durations,
            time_points=time_points,
            use_string_time=use_string_time,
            map_to_scale=map_to_scale,
            scale_range=scale_range,
            quantize=quantize,
        )
        return notes_to_track(
            notes,
            label=label,
            midi_channel=midi_channel,
            synth=synth,
            timing_config=self.timing_config,
        )
