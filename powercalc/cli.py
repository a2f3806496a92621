from __future__ import annotations

import argparse
import json
import logging
from typing import Optional, Sequence

from .curve import curve_frame, generate_curve
from .errors import InvalidParameterError
from .power import DEFAULT_DESIGN, DesignParameters, compute_sample_size, design_from_means
from .utils import as_report_dict, format_curve, format_summary

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    d = DEFAULT_DESIGN
    ap = argparse.ArgumentParser(prog="powercalc", description="Sample size for a two-group comparison of means.")
    ap.add_argument("--effect-size", type=float, default=d.effect_size, help="Minimum detectable difference (delta)")
    ap.add_argument("--std-dev", type=float, default=d.std_dev, help="Common standard deviation (sigma)")
    ap.add_argument("--alpha", type=float, default=d.alpha, help="Significance level")
    ap.add_argument("--power", type=float, default=d.power, help="Target power (1-beta)")
    ap.add_argument("--one-sided", action="store_true", help="Use a one-sided test")
    ap.add_argument("--ratio", type=float, default=d.allocation_ratio, help="Allocation ratio n2/n1")
    ap.add_argument("--means", type=float, nargs=2, metavar=("M1", "M2"),
                    help="Derive the effect size from two group means (overrides --effect-size)")
    ap.add_argument("--curve", action="store_true", help="Print the sensitivity curve")
    ap.add_argument("--csv", type=str, default=None, help="Write the sensitivity curve to this CSV file")
    ap.add_argument("--json", action="store_true", help="Print results as JSON")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def _design_from_args(args: argparse.Namespace) -> DesignParameters:
    design = DesignParameters(
        effect_size=args.effect_size,
        std_dev=args.std_dev,
        alpha=args.alpha,
        power=args.power,
        two_sided=not args.one_sided,
        allocation_ratio=args.ratio,
    )
    if args.means is not None:
        m1, m2 = args.means
        rest = as_report_dict(design)
        del rest["effect_size"], rest["std_dev"]
        design = design_from_means(m1, m2, args.std_dev, **rest)
    return design


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        design = _design_from_args(args)
    except InvalidParameterError as e:
        ap.error(str(e))

    res = compute_sample_size(design)
    logger.info("total_n=%d for effect_size=%g", res.total_n, design.effect_size)
    points = generate_curve(design) if (args.curve or args.json) else []

    if args.json:
        print(json.dumps({
            "params": as_report_dict(design),
            "result": as_report_dict(res),
            "curve": [as_report_dict(p) for p in points],
        }, indent=2))
    else:
        print(format_summary(design, res))
        if args.curve:
            print()
            print(format_curve(points))

    if args.csv:
        curve_frame(design).to_csv(args.csv, index=False)
        logger.info("wrote curve to %s", args.csv)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
