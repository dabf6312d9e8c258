# gpseq/sequence/notes.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Mapping of numeric traces to note records.

Each trace is normalized against its own minimum and maximum, then
either rescaled linearly into a pitch range or snapped to a degree of
a discrete scale. Note records are plain dicts
``{"pitch", "duration", "time"}``.
"""
import math
import warnings

import gpseq.num as gnp
from .timing import DEFAULT_TIMING_CONFIG, offset_to_time

DEFAULT_SCALE_RANGE = (60, 72)


def normalize_trace(trace):
    """Rescale a trace to [0, 1] with its own min/max.

    A constant trace maps to 0.5 everywhere and a RuntimeWarning is
    emitted.
    """
    values = gnp.asdouble(trace).reshape(-1)
    lo, hi = gnp.min(values), gnp.max(values)
    if not hi > lo:
        warnings.warn(
            "Constant trace: min == max, mapping every value to the midpoint.",
            RuntimeWarning,
        )
        return gnp.full(values.shape, 0.5)
    return (values - lo) / (hi - lo)


def map_trace(trace, scale_range=DEFAULT_SCALE_RANGE, map_to_scale=None, quantize=False):
    """Map one numeric trace to pitch values.

    Parameters
    ----------
    trace : array_like, shape (n,)
    scale_range : (float, float)
        Target range used when `map_to_scale` is None.
    map_to_scale : sequence, optional
        Discrete scale; the normalized value selects the degree
        ``floor(u * len(scale))``, clamped to the last degree.
    quantize : bool
        Round the mapped values to integers.

    Returns
    -------
    list of float or int
    """
    u = normalize_trace(trace)
    if map_to_scale is not None:
        scale = list(map_to_scale)
        if not scale:
            raise ValueError("map_to_scale must not be empty")
        idx = gnp.clip(gnp.floor(u * len(scale)).astype(int), 0, len(scale) - 1)
        values = [scale[i] for i in idx]
    else:
        lo, hi = scale_range
        values = [lo + v * (hi - lo) for v in u.tolist()]
    if quantize:
        values = [int(math.floor(v + 0.5)) for v in values]
    return values


def to_jmon_notes(
    samples,
    durations=(1,),
    time_points=None,
    use_string_time=False,
    map_to_scale=None,
    scale_range=DEFAULT_SCALE_RANGE,
    quantize=False,
    timing_config=DEFAULT_TIMING_CONFIG,
):
    """Convert one or several numeric traces into note records.

    Parameters
    ----------
    samples : array_like, shape (n,) or (n_samples, n)
        A single trace gives single-pitch notes; several traces give
        chords (a list of pitches per note, one per trace).
    durations : sequence of float
        Durations, assigned cyclically.
    time_points : sequence of float, optional
        Explicit note times (conditioned generation). When omitted,
        each note starts when the previous one ends, from 0.
    use_string_time : bool
        Emit times as "bars:beats:ticks" strings.
    map_to_scale, scale_range, quantize
        See `map_trace`.
    timing_config : dict
        Used for string times.

    Returns
    -------
    list of dict
    """
    durations = list(durations)
    if not durations:
        raise ValueError("durations must not be empty")

    traces = gnp.asdouble(samples)
    if traces.ndim == 1:
        traces = traces.reshape(1, -1)
    n = traces.shape[1]
    if time_points is not None:
        time_points = gnp.asdouble(time_points).reshape(-1).tolist()
        if len(time_points) != n:
            raise ValueError(
                f"time_points has {len(time_points)} entries, samples have {n}"
            )

    pitches = [map_trace(t, scale_range, map_to_scale, quantize) for t in traces]

    notes = []
    current_time = 0.0
    for i in range(n):
        duration = durations[i % len(durations)]
        time_value = time_points[i] if time_points is not None else current_time
        chord = [p[i] for p in pitches]
        notes.append(
            {
                "pitch": chord[0] if len(chord) == 1 else chord,
                "duration": duration,
                "time": offset_to_time(time_value, timing_config)
                if use_string_time
                else time_value,
            }
        )
        current_time += duration
    return notes
