# gpseq/sequence/timing.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Conversions between beat offsets and "bars:beats:ticks" strings.

A timing configuration is a mapping with keys ``time_signature``
(numerator, denominator) and ``ticks_per_quarter_note``. Offsets are
counted in quarter-note beats.
"""
import math
import re
from types import MappingProxyType

# Read-only; generators keep their own copy of the configuration they are given.
DEFAULT_TIMING_CONFIG = MappingProxyType(
    {
        "time_signature": (4, 4),
        "ticks_per_quarter_note": 480,
    }
)

_TIME_STRING = re.compile(r"^\d+:\d+(\.\d+)?:\d+$")


def beats_per_bar(config=DEFAULT_TIMING_CONFIG):
    numerator, denominator = config["time_signature"]
    return numerator * 4.0 / denominator


def offset_to_time(offset, config=DEFAULT_TIMING_CONFIG):
    """Convert an offset in beats to a "bars:beats:ticks" string.

    Ticks are rounded to the nearest integer; a rounding that reaches a
    full beat carries into the beat (and bar) count.

    >>> offset_to_time(5.5)
    '1:1:240'
    >>> offset_to_time(0.9999)
    '0:1:0'
    """
    bpb = beats_per_bar(config)
    ticks_per_beat = config["ticks_per_quarter_note"]
    bars = math.floor(offset / bpb)
    remaining = offset - bars * bpb
    beats = math.floor(remaining)
    ticks = math.floor((remaining - beats) * ticks_per_beat + 0.5)
    if ticks >= ticks_per_beat:
        ticks -= ticks_per_beat
        beats += 1
        if beats >= bpb:
            beats = 0
            bars += 1
    return f"{bars}:{beats}:{ticks}"


def time_to_offset(time_string, config=DEFAULT_TIMING_CONFIG):
    """Convert a "bars:beats:ticks" string to an offset in beats.

    >>> time_to_offset("1:1:240")
    5.5
    """
    parts = str(time_string).split(":")
    if len(parts) != 3:
        raise ValueError(f"Invalid bars:beats:ticks format: {time_string}")
    try:
        bars = int(parts[0])
        beats = float(parts[1])
        ticks = int(parts[2])
    except ValueError:
        raise ValueError(
            f"Invalid numeric values in bars:beats:ticks: {time_string}"
        ) from None
    return bars * beats_per_bar(config) + beats + ticks / config["ticks_per_quarter_note"]


def is_valid_time_string(time_string):
    return isinstance(time_string, str) and _TIME_STRING.match(time_string) is not None


def notes_to_track(
    notes,
    label="track",
    midi_channel=0,
    synth=None,
    timing_config=DEFAULT_TIMING_CONFIG,
):
    """Wrap note records into a track record with numeric times.

    String times ("bars:beats:ticks") are converted back to beats; the
    input notes are not modified.

    Returns
    -------
    dict
        ``{"label", "midi_channel", "synth", "notes"}``
    """
    track_notes = []
    for note in notes:
        note = dict(note)
        if isinstance(note.get("time"), str) and ":" in note["time"]:
            note["time"] = time_to_offset(note["time"], timing_config)
        track_notes.append(note)
    return {
        "label": label,
        "midi_channel": midi_channel,
        "synth": {"type": "Synth"} if synth is None else synth,
        "notes": track_notes,
    }
