"""
powercalc/curve.py

Sensitivity curve: total sample size as the assumed effect size varies
between MIN_SCALE and MAX_SCALE times the design's effect size.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import List

import numpy as np
import pandas as pd

from .power import DesignParameters, compute_sample_size

logger = logging.getLogger(__name__)

CURVE_STEPS = 20
MIN_SCALE = 0.2
MAX_SCALE = 2.5


@dataclass(frozen=True)
class CurvePoint:
    effect_size: float   # rounded to 3 decimals
    sample_size: int     # total_n at this effect size


def generate_curve(params: DesignParameters) -> List[CurvePoint]:
    """
    CURVE_STEPS + 1 points, increasing in effect size.
    Empty when params.effect_size is 0.
    """
    if params.effect_size == 0:
        return []

    min_es = abs(params.effect_size) * MIN_SCALE
    max_es = abs(params.effect_size) * MAX_SCALE
    step = (max_es - min_es) / CURVE_STEPS
    logger.debug("curve sweep: %.6g..%.6g in %d steps", min_es, max_es, CURVE_STEPS)

    points: List[CurvePoint] = []
    for es in min_es + np.arange(CURVE_STEPS + 1) * step:
        res = compute_sample_size(replace(params, effect_size=float(es)))
        points.append(CurvePoint(effect_size=round(float(es), 3), sample_size=res.total_n))
    return points


def curve_frame(params: DesignParameters) -> pd.DataFrame:
    """Curve as a table with columns effect_size, sample_size."""
    points = generate_curve(params)
    return pd.DataFrame(
        {
            "effect_size": [p.effect_size for p in points],
            "sample_size": [p.sample_size for p in points],
        },
        columns=["effect_size", "sample_size"],
    )
