"""
Chopin's table-driven sampler for the bulk of the standard normal.

A cell is picked uniformly among ``ka..kb``. Since all cells have the same
area, a point drawn uniformly under the cell's rectangle is a draw from the
stripe envelope; it is accepted when it also falls under the density. Most
of the time the point lies under the lower envelope ``yl(k)`` and is
accepted without evaluating the density.
"""

import math

from rtnorm.basic_samplers.protocols import RandomSource
from rtnorm.config import ALPHA
from rtnorm.tables import ChopinTable


def _tail_excess(rng: RandomSource, lbound: float) -> float:
    """Draw ``z = x - lbound`` for x ~ N(0, 1) conditioned on ``x > lbound``."""
    while True:
        z = -math.log1p(-rng.uniform()) / lbound
        e = -math.log1p(-rng.uniform())
        if z * z <= 2 * e:
            return z


def chopin_bulk(
    rng: RandomSource, table: ChopinTable, a: float, b: float, ka: int, kb: int
) -> float:
    """Sample N(0, 1) truncated to [a, b] from the stripe table.

    Arguments
    ---------
        rng (RandomSource): Source of uniform draws.
        table (ChopinTable): The stripe table.
        a (float): Left bound, inside ``[table.xmin, table.xmax]``.
        b (float): Right bound.
        ka (int): Cell holding ``a`` or the one left of it.
        kb (int): Cell holding ``b``, or ``table.n_cells`` if ``b >= xmax``.

    Returns
    -------
        float: The accepted draw.
    """
    x = table.x
    yu = table.yu
    n = table.n_cells
    xmax = table.xmax
    lbound = x[-1]

    while True:
        k = math.floor(rng.uniform() * (kb - ka + 1)) + ka

        if k == n:
            # Right tail beyond the last boundary. Its mass equals the area of
            # a cell, so draw from it exactly and keep the draw if it is below b
            z = _tail_excess(rng, lbound)
            if z < b - lbound:
                return lbound + z

        elif k <= ka + 1 or (k >= kb - 1 and b < xmax):
            # Two leftmost and rightmost cells may stick out of [a, b]
            sim = x[k] + (x[k + 1] - x[k]) * rng.uniform()
            if a <= sim <= b:
                simy = yu[k] * rng.uniform()
                if simy < table.yl(k) or sim * sim + 2 * math.log(simy) + ALPHA < 0:
                    return sim

        else:
            u = rng.uniform()
            simy = yu[k] * u
            d = x[k + 1] - x[k]
            ylk = table.yl(k)
            if simy < ylk:
                # That's what happens most of the time
                return x[k] + u * d * yu[k] / ylk
            sim = x[k] + d * rng.uniform()
            if sim * sim + 2 * math.log(simy) + ALPHA < 0:
                return sim
