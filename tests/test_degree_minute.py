"""
Tests for DegreeMinuteFormatter.

Covers the reference values for positive and negative inputs, the NaN and
infinity labels, the integer entry point and the rounding helper, plus
property-based checks of the label shape and sign symmetry.
"""

import math
import re
import sys

import numpy as np
import pytest
from hypothesis import given, strategies as st

from formatting.degree_minute import (
    DegreeMinuteFormatter,
    format_degree_minute,
    round_half_away_from_zero,
)
from formatting.number_formatter import NumberFormatter

LABEL_RE = re.compile(r"^(-?)(\d+)°(?:(\d+)')?$")


@pytest.fixture
def fmt():
    return DegreeMinuteFormatter()


# ============================================================================
# Reference values
# ============================================================================

@pytest.mark.parametrize("value, expected", [
    (4, "4°"),
    (4.501, "4°30'"),
    (4.499, "4°30'"),
    (0.251, "0°15'"),
    (0.001, "0°"),
    (-4, "-4°"),
    (-4.501, "-4°30'"),
    (-4.499, "-4°30'"),
    (-0.251, "-0°15'"),
    (-0.001, "0°"),
])
def test_reference_values(fmt, value, expected):
    assert fmt.format(value) == expected


def test_nan(fmt):
    assert fmt.format(float("nan")) == "NaN"
    assert fmt.format(np.nan) == "NaN"


def test_infinity(fmt):
    assert fmt.format(math.inf) == "Infinity"
    assert fmt.format(-math.inf) == "-Infinity"


def test_zero_has_no_sign(fmt):
    assert fmt.format(0.0) == "0°"
    assert fmt.format(-0.0) == "0°"


def test_whole_degrees_after_rounding(fmt):
    # 59.6 minutes rounds up to a full degree
    assert fmt.format(0.9935) == "1°"
    assert fmt.format(-0.9935) == "-1°"


def test_large_values(fmt):
    assert fmt.format(359.75) == "359°45'"
    assert fmt.format(-179.5) == "-179°30'"


@pytest.mark.parametrize("value", [1e308, -1e308, sys.float_info.max, -sys.float_info.max, 2.0 ** 52, -(2.0 ** 60)])
def test_extreme_finite_values_are_whole_degrees(fmt, value):
    assert fmt.format(value) == f"{int(value)}°"


def test_large_value_keeps_minutes(fmt):
    # Fractional minutes survive well below the whole-number range
    assert fmt.format(2.0 ** 40 + 0.5) == f"{2 ** 40}°30'"


@pytest.mark.parametrize("value", ["4.5", b"4.5", None, [4.5]])
def test_rejects_non_numbers(fmt, value):
    with pytest.raises(TypeError):
        fmt.format(value)


def test_numpy_scalars(fmt):
    assert fmt.format(np.float64(4.501)) == "4°30'"
    assert fmt.format(np.float32(0.25)) == "0°15'"
    assert fmt.format(np.int64(-4)) == "-4°"


def test_integer_entry_point(fmt):
    assert fmt.format_integer(4) == "4°"
    assert fmt.format_integer(-12) == "-12°"


def test_formatter_is_callable(fmt):
    assert fmt(4.501) == "4°30'"
    assert isinstance(fmt, NumberFormatter)


def test_module_level_helper():
    assert format_degree_minute(-4.499) == "-4°30'"


# ============================================================================
# Collections
# ============================================================================

def test_format_many_keeps_order(fmt):
    assert fmt.format_many([4, 0.251, float("nan")]) == ["4°", "0°15'", "NaN"]


def test_format_many_flattens_arrays(fmt):
    values = np.array([[4.0, -4.0], [0.5, -0.5]])
    assert fmt.format_many(values) == ["4°", "-4°", "0°30'", "-0°30'"]


def test_format_array_keeps_shape(fmt):
    values = np.array([[4.501, -0.001], [np.nan, -0.251]])
    labels = fmt.format_array(values)
    assert labels.shape == (2, 2)
    assert labels.dtype == object
    assert labels.tolist() == [["4°30'", "0°"], ["NaN", "-0°15'"]]


def test_format_array_rejects_strings(fmt):
    with pytest.raises(TypeError):
        fmt.format_array(np.array(["4.5", "3.0"]))


# ============================================================================
# Rounding helper
# ============================================================================

@pytest.mark.parametrize("value, expected", [
    (0.5, 1),
    (1.5, 2),
    (2.5, 3),
    (-0.5, -1),
    (-2.5, -3),
    (2.4999, 2),
    (-2.4999, -2),
    (0.49999999999999994, 0),
    (0.0, 0),
])
def test_round_half_away_from_zero(value, expected):
    assert round_half_away_from_zero(value) == expected


# ============================================================================
# Properties
# ============================================================================

any_finite_degrees = st.floats(allow_nan=False, allow_infinity=False)
plottable_degrees = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


@given(any_finite_degrees)
def test_label_shape(value):
    match = LABEL_RE.match(DegreeMinuteFormatter().format(value))
    assert match is not None
    sign, degrees, minutes = match.groups()
    if minutes is not None:
        assert 1 <= int(minutes) <= 59
    if sign:
        assert int(degrees) > 0 or minutes is not None


@given(any_finite_degrees)
def test_negation_only_flips_sign(value):
    fmt = DegreeMinuteFormatter()
    positive = fmt.format(abs(value))
    negative = fmt.format(-abs(value))
    if positive == "0°":
        assert negative == "0°"
    else:
        assert negative == "-" + positive


@given(plottable_degrees)
def test_label_matches_rounded_minutes(value):
    match = LABEL_RE.match(DegreeMinuteFormatter().format(value))
    sign, degrees, minutes = match.groups()
    total = int(degrees) * 60 + int(minutes or 0)
    assert abs(total - abs(value) * 60) <= 0.5 + 1e-6
    assert (sign == "-") == (round_half_away_from_zero(value * 60) < 0)


@given(st.integers(min_value=-10**9, max_value=10**9))
def test_integer_delegates_to_float(n):
    fmt = DegreeMinuteFormatter()
    assert fmt.format(n) == fmt.format(float(n)) == f"{n}°"
