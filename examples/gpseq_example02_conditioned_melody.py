"""
Variations on a sparse melody

The generator is conditioned on five (time, pitch) pairs. Posterior
samples are drawn point by point (default) and jointly, and the first
variation is printed with "bars:beats:ticks" times.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpseq as gs


def generate_data():
    return [(0, 60), (2, 65), (4, 62), (6, 67), (8, 64)]


def main():
    generator = gs.KernelGenerator(
        data=generate_data(), length_scale=1.5, amplitude=4.0, random_state=0
    )

    time_points, samples = generator.generate(length=17, n_samples=3)
    _, joint_samples = generator.generate(length=17, n_samples=3, joint=True)

    notes = generator.to_jmon_notes(
        samples[0],
        durations=[0.5],
        time_points=time_points,
        use_string_time=True,
        map_to_scale=[60, 62, 64, 65, 67, 69, 71, 72],
    )
    print("Per-point samples:\n", samples.round(2))
    print("Joint samples:\n", joint_samples.round(2))
    for note in notes:
        print(note)
    return notes


if __name__ == "__main__":
    main()
