"""Design constants for the truncated Gaussian sampler.

Variables:
---------
INVH: float
    Inverse of the width of the two cells touching the mode. Also the
    resolution of the quantized lookup into ``ncell``.
N_CELLS_LEFT, N_CELLS_RIGHT: int
    Number of equal-area stripes left and right of the mode.
KMIN: int
    If the interval spans fewer cells than this, the table is abandoned in
    favour of the exponential rejection sampler.
ALPHA: float
    log(2 * pi), used in the exact density comparison.
"""

import math

INVH = 1631.73284006
N_CELLS_LEFT = 1954
N_CELLS_RIGHT = 2047
KMIN = 5
MIN_EXP_RATE = 1e-8  # below this |a|, narrow intervals use a uniform proposal
ALPHA = math.log(2.0 * math.pi)

SQRT_2PI = math.sqrt(2.0 * math.pi)


def table_data_files() -> dict:
    """File names of the packaged Chopin table, keyed by array name."""
    return {
        "x": "chopin_x.txt",
        "yu": "chopin_yu.txt",
        "ncell": "chopin_ncell.txt",
    }


def get_default_cli_config() -> dict:
    """Get the default configuration of the ``rtnorm-generate`` driver.

    Returns
    -------
    dict
        Truncation bounds, location/scale and run size. Matches the example
        shipped in ``rtnorm/cli/config_rtnorm.yaml``.
    """
    return {
        "a": 1.0,  # left bound
        "b": 9.0,  # right bound
        "mu": 2.0,
        "sigma": 3.0,
        "n_samples": 100_000,
        "seed": None,
    }
