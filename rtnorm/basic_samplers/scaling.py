"""Affine standardization of the truncation problem and interval checks."""

import math


class InvalidIntervalError(ValueError):
    """Raised when the truncation interval is empty (``not a < b``)."""

    def __init__(self, a: float, b: float):
        self.a = a
        self.b = b
        super().__init__(f"B must be greater than A, got a={a!r}, b={b!r}.")


def validate_interval(a: float, b: float) -> None:
    """Check that ``a < b``.

    NaN bounds fail the comparison and are rejected as well.

    Raises
    ------
    InvalidIntervalError
        If the interval is empty or a bound is NaN.
    """
    if not a < b:
        raise InvalidIntervalError(a, b)


def validate_scale(sigma: float) -> None:
    """Check that the standard deviation is strictly positive and finite."""
    if not (sigma > 0 and math.isfinite(sigma)):
        raise ValueError(f"sigma must be a positive finite number, got {sigma!r}.")


def standardize(
    a: float, b: float, mu: float = 0.0, sigma: float = 1.0
) -> tuple[float, float]:
    """Map the bounds to the standard normal scale.

    Arguments
    ---------
        a (float): Left bound.
        b (float): Right bound.
        mu (float, optional): Mean of the untruncated Gaussian. Defaults to 0.
        sigma (float, optional): Standard deviation. Defaults to 1.

    Returns
    -------
        tuple[float, float]: ``((a - mu) / sigma, (b - mu) / sigma)``, or the
        bounds unchanged when ``(mu, sigma) == (0, 1)``.
    """
    validate_scale(sigma)
    if mu != 0 or sigma != 1:
        a = (a - mu) / sigma
        b = (b - mu) / sigma
    return a, b


def unstandardize(r: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Map a standardized draw back to the original scale."""
    if mu != 0 or sigma != 1:
        r = r * sigma + mu
    return r
