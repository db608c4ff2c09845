"""
Choice of the sampling algorithm for a standardized interval [a, b].

The interval is first folded so that ``|a| <= |b|``: the standard normal
is symmetric, so a draw on [-b, -a] negated is a draw on [a, b]. After
the fold there are four regimes:

    right tail   a > xmax                  exponential proposal (rtexp)
    left tail    a < xmin                  plain Gaussian proposal
    narrow       fewer than kmin cells     exponential proposal (rtexp)
    bulk         otherwise                 Chopin's stripe table
"""

from dataclasses import dataclass
from enum import Enum

from rtnorm.basic_samplers.bulk_sampler import chopin_bulk
from rtnorm.basic_samplers.protocols import RandomSource
from rtnorm.basic_samplers.scaling import validate_interval
from rtnorm.basic_samplers.tail_samplers import (
    gaussian_rejection,
    rtexp,
    uniform_rejection,
)
from rtnorm.config import MIN_EXP_RATE
from rtnorm.tables import ChopinTable, load_chopin_table


class Region(str, Enum):
    RIGHT_TAIL = "right_tail"
    LEFT_TAIL = "left_tail"
    NARROW = "narrow"
    BULK = "bulk"


@dataclass(frozen=True)
class Route:
    """Outcome of the dispatch for one interval.

    Attributes
    ----------
    region : Region
        Selected regime.
    a, b : float
        Bounds after the symmetry fold.
    flipped : bool
        Whether the draw must be negated to undo the fold.
    ka, kb : int or None
        Table cells spanned by [a, b], only set when the table was consulted.
    """

    region: Region
    a: float
    b: float
    flipped: bool = False
    ka: int | None = None
    kb: int | None = None


def select_region(a: float, b: float, table: ChopinTable | None = None) -> Route:
    """Classify a standardized interval without drawing anything.

    Arguments
    ---------
        a (float): Left bound on the standard normal scale.
        b (float): Right bound on the standard normal scale.
        table (ChopinTable, optional): Stripe table. Defaults to the
            packaged one.

    Returns
    -------
        Route: Region, folded bounds and cell span.

    Raises
    ------
        InvalidIntervalError: If ``not a < b``.
    """
    validate_interval(a, b)
    if table is None:
        table = load_chopin_table()

    flipped = abs(a) > abs(b)
    if flipped:
        a, b = -b, -a

    if a > table.xmax:
        return Route(Region.RIGHT_TAIL, a, b, flipped)
    if a < table.xmin:
        return Route(Region.LEFT_TAIL, a, b, flipped)

    ka = table.cell_of(a)
    if b >= table.xmax:
        kb = table.n_cells
    else:
        kb = table.cell_of(b)
        # ncell gives the cell at the left edge of the bin holding b
        while b >= table.x[kb + 1]:
            kb += 1

    region = Region.NARROW if abs(kb - ka) < table.kmin else Region.BULK
    return Route(region, a, b, flipped, ka, kb)


def draw(route: Route, rng: RandomSource, table: ChopinTable | None = None) -> float:
    """Draw once from N(0, 1) truncated to the routed interval."""
    a, b = route.a, route.b
    if route.region is Region.RIGHT_TAIL:
        r = rtexp(rng, a, b)
    elif route.region is Region.LEFT_TAIL:
        r = gaussian_rejection(rng, a, b)
    elif route.region is Region.NARROW:
        if abs(a) < MIN_EXP_RATE:
            r = uniform_rejection(rng, a, b)
        else:
            r = rtexp(rng, a, b)
    else:
        if table is None:
            table = load_chopin_table()
        r = chopin_bulk(rng, table, a, b, route.ka, route.kb)
    return -r if route.flipped else r


def sample_standard(
    a: float, b: float, rng: RandomSource, table: ChopinTable | None = None
) -> float:
    """Draw from N(0, 1) truncated to [a, b]."""
    if table is None:
        table = load_chopin_table()
    return draw(select_region(a, b, table), rng, table)
