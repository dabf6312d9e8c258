"""
Prior sample of a Gaussian process over an index axis, mapped to notes

A sequence of 16 values is drawn jointly from a zero-mean GP with an
RBF kernel, then rescaled into the pitch range [60, 72].

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpseq as gs


def main():
    generator = gs.KernelGenerator(length_scale=2.0, amplitude=1.0, noise_level=0.01)
    trace = generator.generate(length=16, seed=1234)

    notes = generator.to_jmon_notes(
        trace, durations=[1, 0.5, 0.5], scale_range=(60, 72), quantize=True
    )
    for note in notes:
        print(note)
    return notes


if __name__ == "__main__":
    main()
