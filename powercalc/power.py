"""
powercalc/power.py

Sample size for a two-group comparison of means (normal approximation).

  n1 = (z_alpha + z_beta)^2 * sigma^2 * (1 + 1/k) / delta^2
  n2 = n1 * k

where k = n2 / n1 is the allocation ratio. Both group sizes are rounded up.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import logging
import math

from .errors import InvalidParameterError
from .quantile import norm_ppf

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DesignParameters:
    effect_size: float = 0.5
    std_dev: float = 1.0
    alpha: float = 0.05
    power: float = 0.8
    two_sided: bool = True
    allocation_ratio: float = 1.0   # n2 / n1

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "two_sided":
                continue
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise InvalidParameterError(f.name, value, "must be finite")
        if self.std_dev <= 0:
            raise InvalidParameterError("std_dev", self.std_dev, "must be > 0")
        if self.allocation_ratio <= 0:
            raise InvalidParameterError("allocation_ratio", self.allocation_ratio, "must be > 0")
        if not (0 < self.alpha < 1):
            raise InvalidParameterError("alpha", self.alpha, "must be in (0,1)")
        if not (0 < self.power < 1):
            raise InvalidParameterError("power", self.power, "must be in (0,1)")


DEFAULT_DESIGN = DesignParameters()


@dataclass(frozen=True)
class SampleSizeResult:
    """
    Group sizes for a design.

    critical_value_alpha / critical_value_beta are rounded to 3 decimals and are
    meant for display only.
    """
    n1: int
    n2: int
    total_n: int
    critical_value_alpha: float
    critical_value_beta: float


ZERO_RESULT = SampleSizeResult(0, 0, 0, 0.0, 0.0)


def z_alpha(alpha: float, two_sided: bool = True) -> float:
    a = alpha / 2.0 if two_sided else alpha
    # lower tail keeps tiny alphas representable
    return abs(norm_ppf(a))


def z_beta(power: float) -> float:
    return abs(norm_ppf(power))


def compute_sample_size(params: DesignParameters) -> SampleSizeResult:
    """
    Required n1, n2 for detecting params.effect_size.

    A zero effect size has no finite requirement; ZERO_RESULT is returned instead.
    """
    if params.effect_size == 0:
        return ZERO_RESULT

    za = z_alpha(params.alpha, params.two_sided)
    zb = z_beta(params.power)
    k = params.allocation_ratio

    factor = (1.0 + 1.0 / k)
    ratio = (za + zb) * params.std_dev / params.effect_size
    n1_exact = ratio * ratio * factor
    n2_exact = n1_exact * k
    logger.debug("z_alpha=%.6f z_beta=%.6f n1_exact=%.4f n2_exact=%.4f", za, zb, n1_exact, n2_exact)
    if not (math.isfinite(n1_exact) and math.isfinite(n2_exact)):
        raise InvalidParameterError("effect_size", params.effect_size,
                                    "no finite sample size for this design")

    n1 = math.ceil(n1_exact)
    n2 = math.ceil(n2_exact)
    return SampleSizeResult(
        n1=n1,
        n2=n2,
        total_n=n1 + n2,
        critical_value_alpha=round(za, 3),
        critical_value_beta=round(zb, 3),
    )


def design_from_means(mean1: float, mean2: float, std_dev: float, **overrides) -> DesignParameters:
    """
    Design whose effect size is the raw difference between two group means.

    Remaining fields come from DEFAULT_DESIGN unless given in overrides.
    """
    diff = round(abs(mean1 - mean2), 4)
    return replace(DEFAULT_DESIGN, effect_size=diff, std_dev=std_dev, **overrides)
