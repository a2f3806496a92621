"""
powercalc: sample size and sensitivity curves for two-group comparisons of means.

Public API is re-exported here for convenience.
"""

from importlib.metadata import PackageNotFoundError, version as _version

# ---- Version ----
try:
    __version__ = _version("powercalc")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# ---- Re-exports ----
# Errors
from .errors import DomainError, InvalidParameterError  # noqa: F401

# Normal distribution
from .quantile import norm_cdf, norm_ppf  # noqa: F401

# Sample size
from .power import (  # noqa: F401
    DEFAULT_DESIGN,
    DesignParameters,
    SampleSizeResult,
    compute_sample_size,
    design_from_means,
    z_alpha,
    z_beta,
)

# Sensitivity curve
from .curve import CurvePoint, curve_frame, generate_curve  # noqa: F401

__all__ = [
    "__version__",
    # errors
    "DomainError",
    "InvalidParameterError",
    # normal distribution
    "norm_cdf",
    "norm_ppf",
    # sample size
    "DEFAULT_DESIGN",
    "DesignParameters",
    "SampleSizeResult",
    "compute_sample_size",
    "design_from_means",
    "z_alpha",
    "z_beta",
    # curve
    "CurvePoint",
    "curve_frame",
    "generate_curve",
]
