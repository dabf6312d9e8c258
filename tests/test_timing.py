"""
Unit tests for beat offset / bars:beats:ticks conversions.
"""

import unittest

from gpseq.sequence.timing import (
    DEFAULT_TIMING_CONFIG,
    offset_to_time,
    time_to_offset,
    is_valid_time_string,
    notes_to_track,
)


class TestTiming(unittest.TestCase):

    def test_offset_to_time(self):
        self.assertEqual(offset_to_time(0), "0:0:0")
        self.assertEqual(offset_to_time(5.5), "1:1:240")
        self.assertEqual(offset_to_time(9), "2:1:0")

    def test_ticks_carry_into_beats_and_bars(self):
        self.assertEqual(offset_to_time(0.9999), "0:1:0")
        self.assertEqual(offset_to_time(3.9999), "1:0:0")
        self.assertEqual(offset_to_time(1.0004), "0:1:0")
        self.assertEqual(time_to_offset(offset_to_time(6.99995)), 7.0)

    def test_default_config_is_read_only(self):
        with self.assertRaises(TypeError):
            DEFAULT_TIMING_CONFIG["ticks_per_quarter_note"] = 960
        self.assertEqual(DEFAULT_TIMING_CONFIG["ticks_per_quarter_note"], 480)

    def test_time_to_offset(self):
        self.assertEqual(time_to_offset("1:1:240"), 5.5)
        self.assertEqual(time_to_offset("0:2.5:0"), 2.5)

    def test_three_four(self):
        config = {"time_signature": (3, 4), "ticks_per_quarter_note": 480}
        self.assertEqual(offset_to_time(4.0, config), "1:1:0")
        self.assertEqual(time_to_offset("1:1:0", config), 4.0)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            time_to_offset("1:2")
        with self.assertRaises(ValueError):
            time_to_offset("a:b:c")
        self.assertTrue(is_valid_time_string("3:1.5:120"))
        self.assertFalse(is_valid_time_string("3:1"))
        self.assertFalse(is_valid_time_string(3))

    def test_notes_to_track(self):
        notes = [
            {"pitch": 60, "duration": 1, "time": "0:1:0"},
            {"pitch": 62, "duration": 1, "time": 2.0},
        ]
        track = notes_to_track(notes, label="melody")
        self.assertEqual(track["label"], "melody")
        self.assertEqual(track["midi_channel"], 0)
        self.assertEqual(track["synth"], {"type": "Synth"})
        self.assertEqual([n["time"] for n in track["notes"]], [1.0, 2.0])
        self.assertEqual(notes[0]["time"], "0:1:0")


if __name__ == "__main__":
    unittest.main()
