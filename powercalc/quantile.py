"""
powercalc/quantile.py

Standard normal distribution helpers.

norm_ppf uses Acklam's rational approximation to the inverse CDF:
  - lower tail  (p < 0.02425):   q = sqrt(-2 ln p),      ratio of c/d polynomials in q
  - upper tail  (p > 0.97575):   mirror of the lower tail, negated
  - central region:              q = p - 0.5, r = q^2,   q * ratio of a/b polynomials in r
Absolute error is about 1.15e-9 over the whole domain. No refinement step is applied.
"""

from __future__ import annotations

import math

from .errors import DomainError

# Coefficients must stay exactly as published.
_A = (
    -3.969683028665376e+01,
    2.209460984245205e+02,
    -2.759285104469687e+02,
    1.383577518672690e+02,
    -3.066479806614716e+01,
    2.506628277459239e+00,
)
_B = (
    -5.447609879822406e+01,
    1.615858368580409e+02,
    -1.556989798598866e+02,
    6.680131188771972e+01,
    -1.328068155288572e+01,
)
_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e+00,
    -2.549732539343734e+00,
    4.374664141464968e+00,
    2.938163982698783e+00,
)
_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e+00,
    3.754408661907416e+00,
)

P_LOW = 0.02425
P_HIGH = 1 - P_LOW


def norm_cdf(x: float) -> float:
    return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))


def _tail(q: float) -> float:
    c1, c2, c3, c4, c5, c6 = _C
    d1, d2, d3, d4 = _D
    return (((((c1 * q + c2) * q + c3) * q + c4) * q + c5) * q + c6) / \
        ((((d1 * q + d2) * q + d3) * q + d4) * q + 1)


def norm_ppf(p: float) -> float:
    """
    z such that P(Z <= z) = p for Z ~ Normal(0, 1).

    Raises DomainError unless 0 < p < 1.
    """
    if not (0.0 < p < 1.0):
        raise DomainError(f"p must be in (0,1), got {p!r}")

    if p < P_LOW:
        return _tail(math.sqrt(-2.0 * math.log(p)))

    if p > P_HIGH:
        return -_tail(math.sqrt(-2.0 * math.log(1.0 - p)))

    a1, a2, a3, a4, a5, a6 = _A
    b1, b2, b3, b4, b5 = _B
    q = p - 0.5
    r = q * q
    return (((((a1 * r + a2) * r + a3) * r + a4) * r + a5) * r + a6) * q / \
        (((((b1 * r + b2) * r + b3) * r + b4) * r + b5) * r + 1)
