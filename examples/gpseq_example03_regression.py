"""
Gaussian process regression with uncertainty

Fit a regressor with a periodic kernel on one cycle of an arpeggio,
then print the posterior mean, 95% intervals and the log marginal
likelihood of the training data.

Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
"""

import gpseq.num as gnp
import gpseq as gs


def generate_data():
    xi = gnp.array([[0.0], [1.0], [2.0], [3.0]])
    zi = gnp.array([60.0, 64.0, 67.0, 64.0]) - 63.75
    return xi, zi


def main():
    xi, zi = generate_data()
    kernel = gs.make_kernel("periodic", length_scale=1.0, periodicity=4.0, variance=9.0)
    gpr = gs.GaussianProcessRegressor(kernel, alpha=1e-6).fit(xi, zi)

    xt = gnp.linspace(0.0, 8.0, 17).reshape(-1, 1)
    zpm, zpstd = gpr.predict(xt, return_std=True)
    lower, upper = gpr.predict_interval(xt, level=0.95)

    for x, m, lo, up in zip(xt[:, 0], zpm + 63.75, lower + 63.75, upper + 63.75):
        print(f"t={x:4.1f}  mean={m:6.2f}  [{lo:6.2f}, {up:6.2f}]")
    print("log marginal likelihood:", gpr.log_marginal_likelihood())
    return zpm, zpstd


if __name__ == "__main__":
    main()
