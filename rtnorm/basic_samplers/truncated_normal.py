"""
Pseudorandom numbers from a truncated Gaussian distribution.

This implements the extension of Chopin's algorithm by G. Dollé and
V. Mazet: the Gaussian N(mu, sigma^2) truncated to [a, b] is sampled at
O(1) expected cost for any interval.

Examples
--------
>>> import numpy as np
>>> rng = np.random.default_rng(42)
>>> x = rtnorm(1.0, 9.0, mu=2.0, sigma=3.0, rng=rng)
>>> 1.0 <= x <= 9.0
True
>>> rtnorm(-1.0, 1.0, size=1000, rng=rng).shape
(1000,)
"""

import logging
import math

import numpy as np

from rtnorm.basic_samplers.dispatch import draw, select_region
from rtnorm.basic_samplers.protocols import RandomSource
from rtnorm.basic_samplers.scaling import standardize, unstandardize
from rtnorm.support_utils.density import truncated_normal_pdf
from rtnorm.tables import load_chopin_table

logger = logging.getLogger(__name__)


def _as_random_source(rng: RandomSource | int | None) -> RandomSource:
    """Resolve the ``rng`` argument: None and seeds give a numpy Generator."""
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return np.random.default_rng(rng)
    if not isinstance(rng, RandomSource):
        raise TypeError(
            "rng must provide uniform() and standard_normal(), "
            f"got {type(rng).__name__}"
        )
    return rng


def _clip(x: float, a: float, b: float) -> float:
    # the affine map back to (mu, sigma) can round one ulp past a bound
    return float(min(max(x, a), b))


def sample(
    a: float,
    b: float,
    mu: float = 0.0,
    sigma: float = 1.0,
    rng: RandomSource | int | None = None,
) -> float:
    """Draw one variate from N(mu, sigma^2) truncated to [a, b].

    Arguments
    ---------
        a (float): Left bound. May be ``-inf``.
        b (float): Right bound, ``b > a``. May be ``inf``.
        mu (float, optional): Mean of the untruncated Gaussian. Defaults to 0.
        sigma (float, optional): Its standard deviation, > 0. Defaults to 1.
        rng (RandomSource, int or None, optional): Random source exposing
            ``uniform()`` and ``standard_normal()``, such as a
            ``np.random.Generator``. An int seeds a new Generator; None
            uses fresh OS entropy.

    Returns
    -------
        float: The random variate.

    Raises
    ------
        InvalidIntervalError: If ``not a < b``.
        ValueError: If sigma is not a positive finite number.
        TypeError: If rng lacks the required methods.
    """
    rng = _as_random_source(rng)
    table = load_chopin_table()
    sa, sb = standardize(a, b, mu, sigma)
    r = draw(select_region(sa, sb, table), rng, table)
    return _clip(unstandardize(r, mu, sigma), a, b)


def rtnorm(
    a: float,
    b: float,
    mu: float = 0.0,
    sigma: float = 1.0,
    size: int | tuple[int, ...] | None = None,
    rng: RandomSource | int | None = None,
) -> float | np.ndarray:
    """Draw variates from N(mu, sigma^2) truncated to [a, b].

    Same arguments as :func:`sample`, plus ``size``: None returns a float,
    otherwise an array of that shape filled with independent draws.
    """
    if size is None:
        return sample(a, b, mu, sigma, rng)

    shape = (size,) if isinstance(size, (int, np.integer)) else tuple(size)
    if any(dim < 0 for dim in shape):
        raise ValueError(f"size must be non-negative, got {size!r}.")

    rng = _as_random_source(rng)
    table = load_chopin_table()
    sa, sb = standardize(a, b, mu, sigma)
    route = select_region(sa, sb, table)
    n = math.prod(shape)
    logger.debug("Drawing %d variates on [%g, %g] (%s)", n, a, b, route.region.value)

    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        out[i] = _clip(unstandardize(draw(route, rng, table), mu, sigma), a, b)
    return out.reshape(shape)


def sample_with_density(
    a: float,
    b: float,
    mu: float = 0.0,
    sigma: float = 1.0,
    rng: RandomSource | int | None = None,
) -> tuple[float, float]:
    """Draw one variate and return it with the truncated density at it.

    Returns
    -------
        tuple[float, float]: ``(x, p(x))``.
    """
    x = sample(a, b, mu, sigma, rng)
    return x, truncated_normal_pdf(x, a, b, mu, sigma)
