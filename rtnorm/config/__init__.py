from .config import (
    INVH,
    N_CELLS_LEFT,
    N_CELLS_RIGHT,
    KMIN,
    MIN_EXP_RATE,
    ALPHA,
    SQRT_2PI,
    table_data_files,
    get_default_cli_config,
)

__all__ = [
    "INVH",
    "N_CELLS_LEFT",
    "N_CELLS_RIGHT",
    "KMIN",
    "MIN_EXP_RATE",
    "ALPHA",
    "SQRT_2PI",
    "table_data_files",
    "get_default_cli_config",
]
