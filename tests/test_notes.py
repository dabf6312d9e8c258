"""
Unit tests for the mapping of numeric traces to note records.
"""

import unittest
import warnings

import numpy as np

from gpseq.sequence.notes import normalize_trace, map_trace, to_jmon_notes


class TestMapping(unittest.TestCase):

    def test_normalize_self(self):
        np.testing.assert_allclose(normalize_trace([2.0, 4.0, 3.0]), [0.0, 1.0, 0.5])

    def test_pitch_range(self):
        rng = np.random.default_rng(0)
        for _ in range(20):
            trace = rng.normal(scale=rng.uniform(0.01, 100.0), size=30)
            pitches = map_trace(trace, scale_range=(60, 72))
            self.assertGreaterEqual(min(pitches), 60)
            self.assertLessEqual(max(pitches), 72)
            self.assertAlmostEqual(min(pitches), 60)
            self.assertAlmostEqual(max(pitches), 72)

    def test_scale_degrees(self):
        scale = [60, 62, 64, 65]
        pitches = map_trace([0.0, 0.3, 0.6, 1.0], map_to_scale=scale)
        self.assertEqual(pitches, [60, 62, 64, 65])

    def test_quantize(self):
        pitches = map_trace([0.0, 0.5, 1.0], scale_range=(60, 65), quantize=True)
        self.assertEqual(pitches, [60, 63, 65])
        self.assertTrue(all(isinstance(p, int) for p in pitches))

    def test_constant_trace_maps_to_midpoint(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            pitches = map_trace([1.5, 1.5, 1.5], scale_range=(60, 72))
        self.assertEqual(pitches, [66.0, 66.0, 66.0])
        self.assertTrue(any(issubclass(w.category, RuntimeWarning) for w in caught))
        with self.assertWarns(RuntimeWarning):
            degrees = map_trace([0.0, 0.0], map_to_scale=[60, 62, 64])
        self.assertEqual(degrees, [62, 62])

    def test_empty_scale(self):
        with self.assertRaises(ValueError):
            map_trace([0.0, 1.0], map_to_scale=[])


class TestNotes(unittest.TestCase):

    def test_sequential_times(self):
        notes = to_jmon_notes([0.0, 1.0, 0.5, 2.0], durations=[1, 0.5])
        self.assertEqual([n["time"] for n in notes], [0.0, 1.0, 1.5, 2.5])
        self.assertEqual([n["duration"] for n in notes], [1, 0.5, 1, 0.5])
        self.assertEqual(notes[1]["pitch"], 66.0)

    def test_explicit_time_points(self):
        notes = to_jmon_notes([0.0, 1.0, 2.0], durations=[1], time_points=[0.0, 2.5, 5.0])
        self.assertEqual([n["time"] for n in notes], [0.0, 2.5, 5.0])

    def test_string_time(self):
        notes = to_jmon_notes([0.0, 1.0, 2.0, 3.0, 4.0], durations=[2], use_string_time=True)
        self.assertEqual([n["time"] for n in notes], ["0:0:0", "0:2:0", "1:0:0", "1:2:0", "2:0:0"])

    def test_chords_from_several_samples(self):
        samples = np.array([[0.0, 1.0, 2.0], [2.0, 1.0, 0.0]])
        notes = to_jmon_notes(samples, scale_range=(60, 72))
        self.assertEqual(len(notes), 3)
        self.assertEqual(notes[0]["pitch"], [60.0, 72.0])
        self.assertEqual(notes[2]["pitch"], [72.0, 60.0])

    def test_bad_arguments(self):
        with self.assertRaises(ValueError):
            to_jmon_notes([0.0, 1.0], durations=[])
        with self.assertRaises(ValueError):
            to_jmon_notes([0.0, 1.0], time_points=[0.0])


if __name__ == "__main__":
    unittest.main()
