# tests/test_utils.py
from dataclasses import replace

import pytest

from powercalc.curve import generate_curve
from powercalc.power import DEFAULT_DESIGN, compute_sample_size
from powercalc.utils import (
    achieved_power,
    as_report_dict,
    fmt_pct,
    fmt_ratio,
    format_curve,
    format_summary,
)


def test_as_report_dict():
    d = as_report_dict(compute_sample_size(DEFAULT_DESIGN))
    assert d["total_n"] == 126
    assert as_report_dict({"a": 1}) == {"a": 1}
    with pytest.raises(TypeError):
        as_report_dict(42)


def test_formatters():
    assert fmt_pct(0.8) == "80.0%"
    assert fmt_ratio(1.0) == "1:1"
    assert fmt_ratio(2.5) == "1:2.5"


def test_achieved_power_meets_target():
    res = compute_sample_size(DEFAULT_DESIGN)
    p = achieved_power(DEFAULT_DESIGN, res)
    assert DEFAULT_DESIGN.power <= p < 0.82


def test_achieved_power_none_for_zero_result():
    design = replace(DEFAULT_DESIGN, effect_size=0.0)
    assert achieved_power(design, compute_sample_size(design)) is None


def test_format_summary():
    text = format_summary(DEFAULT_DESIGN, compute_sample_size(DEFAULT_DESIGN))
    assert "Total N:               126" in text
    assert "Two-sided" in text
    assert "1.960" in text
    assert "1:1" in text


def test_format_summary_zero_effect():
    design = replace(DEFAULT_DESIGN, effect_size=0.0, two_sided=False)
    text = format_summary(design, compute_sample_size(design))
    assert "One-sided" in text
    assert "n/a" in text


def test_format_curve():
    text = format_curve(generate_curve(DEFAULT_DESIGN))
    lines = text.splitlines()
    assert len(lines) == 22
    assert lines[1].split() == ["0.100", str(generate_curve(DEFAULT_DESIGN)[0].sample_size)]
