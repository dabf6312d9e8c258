"""
Chords from several prior samples, packed into a track record

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpseq as gs


def main():
    kernel = gs.make_kernel("rational_quadratic", length_scale=3.0, alpha=0.5)
    generator = gs.KernelGenerator(kernel=kernel, noise_level=0.05, walk_around=2.0)
    track = generator.generate_track(
        length=12,
        n_samples=3,
        seed=7,
        durations=[1, 1, 2],
        map_to_scale=[48, 50, 52, 53, 55, 57, 59, 60],
        use_string_time=True,
    )
    print(track["label"], track["midi_channel"], track["synth"])
    for note in track["notes"]:
        print(note)
    return track


if __name__ == "__main__":
    main()
