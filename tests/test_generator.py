"""
Unit tests for KernelGenerator (prior and conditioned generation).
"""

import unittest

import numpy as np

from gpseq.core import FitError, NotPositiveDefiniteError
from gpseq.kernel import RBF, Periodic
from gpseq.sequence import KernelGenerator


class TestPriorGeneration(unittest.TestCase):

    def test_end_to_end(self):
        generator = KernelGenerator(length_scale=2.0, amplitude=1.0, noise_level=0.01)
        trace = generator.generate(length=10, seed=0)
        self.assertEqual(trace.shape, (10,))
        self.assertTrue(np.all(np.isfinite(trace)))

        notes = generator.to_jmon_notes(trace, durations=[1], scale_range=(60, 72))
        self.assertEqual(len(notes), 10)
        self.assertEqual([n["time"] for n in notes], list(range(10)))
        for note in notes:
            self.assertGreaterEqual(note["pitch"], 60)
            self.assertLessEqual(note["pitch"], 72)
            self.assertEqual(note["duration"], 1)

    def test_multiple_samples(self):
        generator = KernelGenerator(random_state=1)
        samples = generator.generate(length=8, n_samples=3)
        self.assertEqual(samples.shape, (3, 8))
        self.assertFalse(np.allclose(samples[0], samples[1]))

    def test_seed_reproducible(self):
        generator = KernelGenerator(length_scale=3.0)
        np.testing.assert_array_equal(
            generator.generate(length=12, seed=5), generator.generate(length=12, seed=5)
        )

    def test_samples_are_correlated(self):
        generator = KernelGenerator(length_scale=5.0, noise_level=1e-6)
        samples = generator.generate(length=4, n_samples=20000, seed=3)
        corr = np.corrcoef(samples.T)
        self.assertAlmostEqual(corr[0, 1], np.exp(-0.5 / 25.0), delta=0.02)
        self.assertGreater(corr[0, 1], corr[0, 3])

    def test_walk_around_offset(self):
        generator = KernelGenerator(walk_around=50.0, noise_level=0.01)
        samples = generator.generate(length=5, n_samples=5000, seed=11)
        self.assertAlmostEqual(samples.mean(), 50.0, delta=0.1)

    def test_custom_kernel_and_overrides(self):
        generator = KernelGenerator(kernel=Periodic(1.0, 4.0, 1.0), noise_level=0.01)
        self.assertIs(generator._kernel(), generator.kernel)
        override = generator._kernel(length_scale=2.0)
        self.assertIsInstance(override, RBF)
        self.assertEqual(override.get_params(), {"length_scale": 2.0, "variance": 1.0})
        self.assertEqual(generator.generate(length=6, seed=0).shape, (6,))

    def test_singular_prior_fails(self):
        generator = KernelGenerator(length_scale=1.0, noise_level=0.0)
        with self.assertRaises(NotPositiveDefiniteError):
            generator.generate(length=3, noise_level=-0.5)

    def test_invalid_length(self):
        with self.assertRaises(ValueError):
            KernelGenerator().generate(length=0)


class TestConditionedGeneration(unittest.TestCase):

    def setUp(self):
        self.data = [(0, 60.0), (2, 64.0), (4, 62.0), (8, 67.0)]

    def test_time_axis_and_values(self):
        generator = KernelGenerator(data=self.data, length_scale=1.5, amplitude=4.0)
        time_points, trace = generator.generate(length=17, seed=0)
        np.testing.assert_allclose(time_points, np.linspace(0.0, 8.0, 17))
        self.assertEqual(trace.shape, (17,))
        self.assertTrue(generator.is_fitted)
        # the axis hits every training index
        for index, value in self.data:
            self.assertAlmostEqual(trace[int(index * 2)], value, delta=1e-3)

    def test_several_samples(self):
        generator = KernelGenerator(data=self.data, random_state=4)
        time_points, samples = generator.generate(length=9, n_samples=2)
        self.assertEqual(samples.shape, (2, 9))
        self.assertEqual(time_points.shape, (9,))

    def test_joint_sampling(self):
        generator = KernelGenerator(data=self.data, length_scale=1.0, amplitude=4.0)
        time_points, samples = generator.generate(length=9, n_samples=3, seed=1, joint=True)
        self.assertEqual(samples.shape, (3, 9))
        np.testing.assert_allclose(samples[:, 0], 60.0, atol=1e-2)

    def test_notes_use_training_times(self):
        generator = KernelGenerator(data=self.data)
        time_points, trace = generator.generate(length=5, seed=2)
        notes = generator.to_jmon_notes(trace, durations=[0.5], time_points=time_points)
        self.assertEqual([n["time"] for n in notes], [0.0, 2.0, 4.0, 6.0, 8.0])

    def test_fit_failure_propagates(self):
        generator = KernelGenerator(data=[(1, 0.0), (1, 1.0)], alpha=0.0)
        with self.assertRaises(FitError):
            generator.generate(length=4, seed=0)
        self.assertFalse(generator.is_fitted)

    def test_data_accessors(self):
        generator = KernelGenerator()
        generator.set_data(self.data)
        self.assertEqual(generator.get_data(), [tuple(p) for p in self.data])
        generator.set_length_scale(3.0)
        generator.set_amplitude(2.0)
        generator.set_noise_level(0.2)
        self.assertEqual(
            (generator.length_scale, generator.amplitude, generator.noise_level),
            (3.0, 2.0, 0.2),
        )


class TestTrack(unittest.TestCase):

    def test_prior_track(self):
        generator = KernelGenerator(length_scale=2.0, noise_level=0.01)
        track = generator.generate_track(
            length=6, seed=3, durations=[1, 2], use_string_time=True, quantize=True
        )
        self.assertEqual(track["label"], "gaussian-process")
        self.assertEqual(track["synth"], {"type": "Synth"})
        self.assertEqual([n["time"] for n in track["notes"]], [0.0, 1.0, 3.0, 4.0, 6.0, 7.0])
        self.assertTrue(all(60 <= n["pitch"] <= 72 for n in track["notes"]))

    def test_track_passes_generation_options(self):
        generator = KernelGenerator(data=[(0, 1.0), (2, -1.0), (6, 0.5)])
        track = generator.generate_track(
            length=7, seed=3, joint=True, length_scale=2.0, amplitude=3.0
        )
        time_points, trace = generator.generate(
            length=7, seed=3, joint=True, length_scale=2.0, amplitude=3.0
        )
        notes = generator.to_jmon_notes(trace, time_points=time_points)
        self.assertEqual(
            [n["pitch"] for n in track["notes"]], [n["pitch"] for n in notes]
        )
        self.assertEqual(generator.gpr.kernel.get_params(), {"length_scale": 2.0, "variance": 3.0})

    def test_timing_config_is_copied(self):
        timing = {"time_signature": (3, 4), "ticks_per_quarter_note": 480}
        generator = KernelGenerator(timing_config=timing)
        timing["time_signature"] = (4, 4)
        notes = generator.to_jmon_notes([0.0, 1.0], durations=[3], use_string_time=True)
        self.assertEqual([n["time"] for n in notes], ["0:0:0", "1:0:0"])

    def test_conditioned_track(self):
        generator = KernelGenerator(data=[(0, 1.0), (4, -1.0)])
        track = generator.generate_track(length=3, seed=0, map_to_scale=[60, 64, 67])
        self.assertEqual([n["time"] for n in track["notes"]], [0.0, 2.0, 4.0])
        self.assertTrue(all(n["pitch"] in (60, 64, 67) for n in track["notes"]))


if __name__ == "__main__":
    unittest.main()
