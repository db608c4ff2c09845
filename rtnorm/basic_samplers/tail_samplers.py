"""
Analytic rejection samplers for the standard normal truncated to [a, b].

These cover the regimes where the stripe table is either not defined
(deep tails) or too coarse to be efficient (narrow intervals).
"""

import math

from rtnorm.basic_samplers.protocols import RandomSource


def rtexp(rng: RandomSource, a: float, b: float) -> float:
    """Rejection sampler with a truncated exponential proposal.

    The proposal is an exponential of rate ``a`` shifted to start at ``a``
    and truncated to ``[a, b]``; a candidate is accepted with probability
    ``exp(-(x - a)^2 / 2)``, the ratio of the Gaussian to the proposal.

    Arguments
    ---------
        rng (RandomSource): Source of uniform draws.
        a (float): Left bound, nonzero. Efficient for large ``a``.
        b (float): Right bound, ``b > a``. May be ``inf``.

    Returns
    -------
        float: A draw from N(0, 1) truncated to [a, b].
    """
    twoasq = 2 * a * a
    expab = math.expm1(-a * (b - a))
    while True:
        z = math.log1p(rng.uniform() * expab)
        e = -math.log1p(-rng.uniform())
        if twoasq * e > z * z:
            return a - z / a


def gaussian_rejection(rng: RandomSource, a: float, b: float) -> float:
    """Naive rejection from the untruncated standard normal.

    Only used when [a, b] covers most of the mass, so few draws are wasted.
    """
    while True:
        r = rng.standard_normal()
        if a <= r <= b:
            return r


def uniform_rejection(rng: RandomSource, a: float, b: float) -> float:
    """Rejection from a uniform proposal on a short interval [a, b].

    The envelope is the density at the point of [a, b] closest to the mode.
    Used for narrow intervals starting at the mode, where the exponential
    rate of ``rtexp`` degenerates.
    """
    peak = max(a, min(b, 0.0))
    width = b - a
    while True:
        r = a + width * rng.uniform()
        e = -math.log1p(-rng.uniform())
        # accept with probability exp(-(r^2 - peak^2) / 2)
        if 2 * e >= (r - peak) * (r + peak):
            return r
