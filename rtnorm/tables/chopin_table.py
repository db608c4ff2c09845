"""
Precomputed stripe table for Chopin's truncated Gaussian sampler.

The standard normal density between ``xmin`` and ``xmax`` is covered by
N rectangles ("cells") of equal area. Cell k spans ``[x[k], x[k+1]]`` and
its height ``yu[k]`` is the largest value the density takes on the cell.
Because the density is monotone on either side of the mode, the height of
the neighbouring cell on the side of the mode is a lower bound for the
density on cell k, which gives the cheap accept test of the sampler.

``ncell`` maps a quantized abscissa ``I0 + floor(v * INVH)`` to the cell
holding the left edge of that quantization bin, or to the sentinel N
("right tail, beyond the table").

The table is shipped as text data in ``rtnorm/tables/data`` and is only
read at runtime. ``build_chopin_table`` recomputes it from its defining
constants (see ``scripts/generate_table.py``):

    A = phi(0) / INVH
    right of the mode:  x[k+1] = x[k] + A / phi(x[k])      (N_CELLS_RIGHT cells)
    left of the mode:   x[k]   = x[k+1] - A / phi(x[k+1])  (N_CELLS_LEFT cells)

References:
 - N. Chopin, "Fast simulation of truncated Gaussian distributions",
   Stat Comput (2011) 21:275-288.
"""

import functools
import logging
import math
from dataclasses import dataclass
from importlib.resources import as_file, files

import numpy as np

from rtnorm.config import (
    INVH,
    KMIN,
    N_CELLS_LEFT,
    N_CELLS_RIGHT,
    SQRT_2PI,
    table_data_files,
)

logger = logging.getLogger(__name__)


def _std_density(v: float) -> float:
    return math.exp(-0.5 * v * v) / SQRT_2PI


@dataclass(frozen=True, eq=False)
class ChopinTable:
    """Immutable stripe table plus the constants derived from it.

    Attributes
    ----------
    x : np.ndarray
        Cell boundaries, strictly increasing, length N + 1.
    yu : np.ndarray
        Upper bound of the density on each cell, length N.
    ncell : np.ndarray
        Quantized abscissa -> cell index in [0, N].
    invh : float
        Inverse width of the quantization bins.
    kmin : int
        Minimum cell span for the table method to be used.
    i0 : int
        Offset of the quantized index, ``-floor(xmin * invh)``.
    n_cells : int
        N, also the index of the right tail sentinel cell.
    split : int
        Last cell left of the mode.
    yl0, yln : float
        Lower density bound of the leftmost and rightmost cell.
    """

    x: np.ndarray
    yu: np.ndarray
    ncell: np.ndarray
    invh: float
    kmin: int
    i0: int
    n_cells: int
    split: int
    yl0: float
    yln: float

    @property
    def xmin(self) -> float:
        return float(self.x[0])

    @property
    def xmax(self) -> float:
        return float(self.x[-1])

    @classmethod
    def from_arrays(
        cls,
        x: np.ndarray,
        yu: np.ndarray,
        ncell: np.ndarray,
        invh: float = INVH,
        kmin: int = KMIN,
    ) -> "ChopinTable":
        """Derive the table constants and check the table invariants.

        Raises
        ------
        ValueError
            If the arrays do not describe a valid stripe table.
        """
        x = np.array(x, dtype=np.float64)
        yu = np.array(yu, dtype=np.float64)
        ncell = np.array(ncell, dtype=np.intp)
        n_cells = len(yu)

        if x.ndim != 1 or len(x) != n_cells + 1:
            raise ValueError(
                f"Expected {n_cells + 1} cell boundaries for {n_cells} cells, got {len(x)}."
            )
        if not np.all(np.diff(x) > 0):
            raise ValueError("Cell boundaries must be strictly increasing.")
        if len(ncell) == 0 or ncell.min() < 0 or ncell.max() > n_cells:
            raise ValueError(f"Cell index table must map into [0, {n_cells}].")

        for arr in (x, yu, ncell):
            arr.setflags(write=False)

        table = cls(
            x=x,
            yu=yu,
            ncell=ncell,
            invh=float(invh),
            kmin=int(kmin),
            i0=-math.floor(x[0] * invh),
            n_cells=n_cells,
            # the two cells touching the mode share the largest height
            split=int(np.argmax(yu)),
            yl0=_std_density(x[0]),
            yln=_std_density(x[-1]),
        )

        lower = np.array([table.yl(k) for k in range(n_cells)])
        if not np.all(lower <= yu):
            bad = int(np.argmax(lower > yu))
            raise ValueError(f"Lower density bound exceeds upper bound in cell {bad}.")
        return table

    def quantize(self, v: float) -> int:
        """Index of ``v`` into ``ncell``."""
        return self.i0 + math.floor(v * self.invh)

    def cell_of(self, v: float) -> int:
        """Cell holding the left edge of the quantization bin of ``v``."""
        return int(self.ncell[self.quantize(v)])

    def yl(self, k: int) -> float:
        """Lower bound of the density on cell ``k``."""
        if k == 0:
            return self.yl0
        elif k == self.n_cells - 1:
            return self.yln
        elif k <= self.split:
            return self.yu[k - 1]
        else:
            return self.yu[k + 1]


def build_chopin_table(
    invh: float = INVH,
    n_left: int = N_CELLS_LEFT,
    n_right: int = N_CELLS_RIGHT,
    kmin: int = KMIN,
) -> ChopinTable:
    """Recompute the stripe table from its defining constants.

    Arguments
    ---------
        invh (float): Inverse width of the two cells touching the mode.
        n_left (int): Number of cells left of the mode.
        n_right (int): Number of cells right of the mode.
        kmin (int): Minimum cell span for the table method.

    Returns
    -------
        ChopinTable: The table, identical to the packaged data for the
        default arguments.
    """
    area = _std_density(0.0) / invh

    right = [0.0]
    v = 0.0
    for _ in range(n_right):
        v = v + area / _std_density(v)
        right.append(v)

    left = [0.0]
    v = 0.0
    for _ in range(n_left):
        v = v - area / _std_density(v)
        left.append(v)

    x = np.array(left[::-1] + right[1:])
    density = [_std_density(v) for v in x]
    yu = np.array(density[1 : n_left + 1] + density[n_left:-1])

    i0 = -math.floor(x[0] * invh)
    size = i0 + math.floor(x[-1] * invh) + 1
    ncell = np.searchsorted(x[1:] * invh, np.arange(size) - i0, side="right")

    return ChopinTable.from_arrays(x, yu, ncell, invh=invh, kmin=kmin)


@functools.lru_cache(maxsize=None)
def load_chopin_table() -> ChopinTable:
    """Load the packaged stripe table (once per process).

    Raises
    ------
    ValueError
        If a data file is missing or the table is invalid.
    """
    data = files("rtnorm.tables") / "data"
    arrays = {}
    for name, filename in table_data_files().items():
        dtype = np.intp if name == "ncell" else np.float64
        try:
            with as_file(data / filename) as path:
                arrays[name] = np.loadtxt(path, dtype=dtype, ndmin=1)
        except (OSError, ValueError) as e:
            raise ValueError(f"Could not read Chopin table data file '{filename}'") from e

    table = ChopinTable.from_arrays(arrays["x"], arrays["yu"], arrays["ncell"])
    logger.debug(
        "Loaded Chopin table: %d cells on [%.6f, %.6f], %d index bins",
        table.n_cells,
        table.xmin,
        table.xmax,
        len(table.ncell),
    )
    return table
