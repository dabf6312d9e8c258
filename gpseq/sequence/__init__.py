# gpseq/sequence/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Sequence generation and note mapping.

Modules
-------
generator
    KernelGenerator: prior / conditioned sampling over an index axis.
notes
    Self-normalized mapping of numeric traces to note records.
timing
    Beat offsets <-> "bars:beats:ticks" strings, track records.
"""

from .generator import KernelGenerator
from .notes import normalize_trace, map_trace, to_jmon_notes
from .timing import (
    DEFAULT_TIMING_CONFIG,
    offset_to_time,
    time_to_offset,
    is_valid_time_string,
    notes_to_track,
)

__all__ = [
    "KernelGenerator",
    "normalize_trace",
    "map_trace",
    "to_jmon_notes",
    "DEFAULT_TIMING_CONFIG",
    "offset_to_time",
    "time_to_offset",
    "is_valid_time_string",
    "notes_to_track",
]
