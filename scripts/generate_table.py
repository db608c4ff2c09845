#!/usr/bin/env python
"""Regenerate the packaged Chopin stripe table from its defining constants.

Usage:
    python scripts/generate_table.py                  # Write into rtnorm/tables/data
    python scripts/generate_table.py --output /tmp/t  # Write somewhere else
"""

import argparse
from pathlib import Path

import numpy as np

from rtnorm.config import INVH, N_CELLS_LEFT, N_CELLS_RIGHT, table_data_files
from rtnorm.tables import build_chopin_table

DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent / "rtnorm" / "tables" / "data"

HEADER = (
    f"Chopin stripe table, generated by scripts/generate_table.py "
    f"(INVH={INVH}, {N_CELLS_LEFT} cells left and {N_CELLS_RIGHT} cells right of the mode)"
)

DESCRIPTIONS = {
    "x": "cell boundaries x[0..N]",
    "yu": "density upper bound yu[k] on [x[k], x[k+1]]",
    "ncell": "cell holding the left edge of bin i, i = I0 + floor(v*INVH)",
}


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--output", type=Path, default=DEFAULT_OUTPUT, help="Output directory"
    )
    args = parser.parse_args()

    table = build_chopin_table()
    args.output.mkdir(parents=True, exist_ok=True)

    for name, filename in table_data_files().items():
        # %.17g round-trips every double exactly
        fmt = "%d" if name == "ncell" else "%.17g"
        np.savetxt(
            args.output / filename,
            getattr(table, name),
            fmt=fmt,
            header=f"{HEADER}\n{DESCRIPTIONS[name]}",
        )
        print(f"Wrote {args.output / filename}")

    print(
        f"N={table.n_cells} I0={table.i0} xmin={table.xmin!r} xmax={table.xmax!r}"
    )


if __name__ == "__main__":
    main()
