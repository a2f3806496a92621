"""
powercalc/utils.py

Formatting helpers for reports:
  - dataclass -> plain dict (JSON/printing)
  - number formatting
  - text summary of a design and its sample size
  - text table of a sensitivity curve
"""

from __future__ import annotations
from dataclasses import asdict, is_dataclass
from typing import Dict, Optional, Sequence
import math

from .curve import CurvePoint
from .power import DesignParameters, SampleSizeResult, z_alpha
from .quantile import norm_cdf


# -------------------------
# Reporting / formatting
# -------------------------

def as_report_dict(obj) -> Dict:
    """
    Convert dataclass or dict-like result to a plain dict for JSON/printing.
    """
    if is_dataclass(obj):
        return asdict(obj)
    if isinstance(obj, dict):
        return obj
    raise TypeError("Expected dataclass or dict.")

def fmt_pct(x: float, digits: int = 1) -> str:
    return f"{100.0 * x:.{digits}f}%"

def fmt_float(x: float, digits: int = 4) -> str:
    return f"{x:.{digits}f}"

def fmt_ratio(k: float) -> str:
    return f"1:{k:g}"


# -------------------------
# Summary
# -------------------------

def achieved_power(params: DesignParameters, result: SampleSizeResult) -> Optional[float]:
    """
    Power actually delivered by the rounded-up group sizes, or None when
    the result is the zero-effect sentinel.
    """
    if result.n1 <= 0 or result.n2 <= 0:
        return None
    se = params.std_dev * math.sqrt(1.0 / result.n1 + 1.0 / result.n2)
    za = z_alpha(params.alpha, params.two_sided)
    return norm_cdf(abs(params.effect_size) / se - za)

def format_summary(params: DesignParameters, result: SampleSizeResult) -> str:
    power = achieved_power(params, result)
    lines = [
        f"Effect size (delta):   {params.effect_size:g}",
        f"Std. deviation:        {params.std_dev:g}",
        f"Alpha:                 {params.alpha:g}",
        f"Power (1-beta):        {fmt_pct(params.power)}",
        f"Test type:             {'Two-sided' if params.two_sided else 'One-sided'}",
        f"Allocation ratio:      {fmt_ratio(params.allocation_ratio)}",
        "",
        f"Group 1 (n1):          {result.n1}",
        f"Group 2 (n2):          {result.n2}",
        f"Total N:               {result.total_n}",
        f"z_alpha:               {fmt_float(result.critical_value_alpha, 3)}",
        f"z_beta:                {fmt_float(result.critical_value_beta, 3)}",
        f"Achieved power:        {'n/a' if power is None else fmt_pct(power)}",
    ]
    return "\n".join(lines)

def format_curve(points: Sequence[CurvePoint]) -> str:
    rows = [f"{'effect_size':>12}  {'total_n':>10}"]
    for p in points:
        rows.append(f"{fmt_float(p.effect_size, 3):>12}  {p.sample_size:>10}")
    return "\n".join(rows)
