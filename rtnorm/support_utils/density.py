"""Closed forms of the truncated normal distribution."""

import numpy as np
from scipy.stats import truncnorm  # type: ignore

from rtnorm.basic_samplers.scaling import standardize, validate_interval


def _frozen(a: float, b: float, mu: float, sigma: float):
    alpha, beta = standardize(a, b, mu, sigma)
    validate_interval(alpha, beta)
    return truncnorm(alpha, beta, loc=mu, scale=sigma)


def truncated_normal_pdf(
    x: float | np.ndarray, a: float, b: float, mu: float = 0.0, sigma: float = 1.0
) -> float | np.ndarray:
    """Density of N(mu, sigma^2) truncated to [a, b].

    Arguments
    ---------
        x (float or np.ndarray): Evaluation point(s).
        a (float): Left bound.
        b (float): Right bound.
        mu (float, optional): Mean of the untruncated Gaussian. Defaults to 0.
        sigma (float, optional): Its standard deviation. Defaults to 1.

    Returns
    -------
        float or np.ndarray: Density, zero outside [a, b] (scalar if x is scalar).
    """
    p = _frozen(a, b, mu, sigma).pdf(x)
    if np.ndim(p) == 0:
        return float(p)
    return p


def truncated_normal_moments(
    a: float, b: float, mu: float = 0.0, sigma: float = 1.0
) -> tuple[float, float]:
    """Mean and variance of N(mu, sigma^2) truncated to [a, b]."""
    mean, var = _frozen(a, b, mu, sigma).stats(moments="mv")
    return float(mean), float(var)
