from .scaling import (
    InvalidIntervalError,
    standardize,
    unstandardize,
    validate_interval,
)
from .protocols import RandomSource
from .tail_samplers import gaussian_rejection, rtexp, uniform_rejection
from .bulk_sampler import chopin_bulk
from .dispatch import Region, Route, draw, sample_standard, select_region
from .truncated_normal import rtnorm, sample, sample_with_density

__all__ = [
    "InvalidIntervalError",
    "standardize",
    "unstandardize",
    "validate_interval",
    "RandomSource",
    "gaussian_rejection",
    "rtexp",
    "uniform_rejection",
    "chopin_bulk",
    "Region",
    "Route",
    "draw",
    "sample_standard",
    "select_region",
    "rtnorm",
    "sample",
    "sample_with_density",
]
