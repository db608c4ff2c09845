__version__ = "0.1.0"

from .basic_samplers import (
    InvalidIntervalError,
    RandomSource,
    rtnorm,
    sample,
    sample_with_density,
)
from .support_utils import truncated_normal_moments, truncated_normal_pdf
from .tables import ChopinTable, build_chopin_table, load_chopin_table

__all__ = [
    "InvalidIntervalError",
    "RandomSource",
    "rtnorm",
    "sample",
    "sample_with_density",
    "truncated_normal_moments",
    "truncated_normal_pdf",
    "ChopinTable",
    "build_chopin_table",
    "load_chopin_table",
]
