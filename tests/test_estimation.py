"""
Tests for the estimation package.

These tests verify:
1. Sample statistics are the unbiased estimators
2. Intervals are symmetric around the mean and contain it
3. The margin scales as z * s / sqrt(n)
4. Column summaries report the expected fields
"""

import math

import numpy as np
import pandas as pd
import pytest
from scipy import stats

from distributions import make_distribution
from estimation import (
    IntervalEstimate,
    column_interval,
    confidence_interval,
    critical_value,
    interval_from_statistics,
    margin_of_error,
    sample_statistics,
    summarize_column,
    summarize_table,
    table_intervals,
)


# =============================================================================
# POINT ESTIMATE TESTS
# =============================================================================

class TestSampleStatistics:
    """Test mean / standard deviation estimators."""

    def test_unbiased_estimators(self):
        s = sample_statistics([1.0, 2.0, 3.0, 4.0, 5.0])

        assert s.n == 5
        assert s.mean == pytest.approx(3.0)
        assert s.std == pytest.approx(math.sqrt(2.5))
        assert s.standard_error == pytest.approx(math.sqrt(2.5) / math.sqrt(5))

    def test_nans_are_dropped(self):
        s = sample_statistics([1.0, np.nan, 3.0])
        assert s.n == 2
        assert s.mean == pytest.approx(2.0)

    def test_too_few_observations(self):
        with pytest.raises(ValueError, match="at least 2"):
            sample_statistics([1.0])

    def test_infinite_values_rejected(self):
        with pytest.raises(ValueError, match="must be finite"):
            sample_statistics([1.0, 2.0, np.inf])

    def test_infinite_values_rejected_by_interval(self):
        with pytest.raises(ValueError, match="infinite"):
            confidence_interval([1.0, 2.0, -np.inf])

    def test_too_few_after_dropping_nans(self):
        with pytest.raises(ValueError, match="at least 2"):
            sample_statistics([np.nan, 4.0])


# =============================================================================
# CRITICAL VALUE TESTS
# =============================================================================

class TestCriticalValue:
    """Test the (1 - alpha/2)-quantile lookup."""

    def test_normal_95(self):
        assert critical_value(0.95) == pytest.approx(1.959964, abs=1e-6)

    def test_t_uses_n_minus_one_df(self):
        assert critical_value(0.95, "t", n=10) == pytest.approx(stats.t.ppf(0.975, 9))

    def test_t_requires_n(self):
        with pytest.raises(ValueError, match="t reference"):
            critical_value(0.95, "t")

    def test_spec_reference_matches_named_normal(self):
        spec = make_distribution("normal", 0, 1)
        assert critical_value(0.9, spec) == pytest.approx(critical_value(0.9, "normal"))

    def test_unknown_reference(self):
        with pytest.raises(ValueError, match="Unknown reference"):
            critical_value(0.95, "cauchy")

    @pytest.mark.parametrize("confidence", [0.0, 1.0, -0.1, 1.5])
    def test_confidence_must_be_open_unit_interval(self, confidence):
        with pytest.raises(ValueError, match="confidence"):
            critical_value(confidence)


# =============================================================================
# INTERVAL TESTS
# =============================================================================

class TestConfidenceInterval:
    """Test interval construction and its invariants."""

    def test_worked_example(self, standardized_values):
        """Mean 0, sd 1, n = 400 at 95% gives roughly (-0.098, 0.098)."""
        ci = confidence_interval(standardized_values, confidence=0.95)

        assert ci.n == 400
        assert ci.mean == pytest.approx(0.0, abs=1e-12)
        assert ci.std == pytest.approx(1.0)
        assert ci.lower == pytest.approx(-0.098, abs=1e-3)
        assert ci.upper == pytest.approx(0.098, abs=1e-3)

    def test_from_statistics_example(self):
        ci = interval_from_statistics(0.0, 1.0, 400, 0.95)
        assert ci.as_tuple() == pytest.approx((-0.098, 0.098), abs=1e-3)

    def test_symmetric_and_contains_mean(self, small_table):
        ci = confidence_interval(small_table["b"], 0.9)

        assert ci.lower <= ci.mean <= ci.upper
        assert (ci.upper - ci.mean) == pytest.approx(ci.mean - ci.lower)
        assert ci.contains(ci.mean)
        assert ci.width == pytest.approx(2 * ci.margin)

    def test_margin_formula(self):
        m = margin_of_error(2.5, 36, 0.99)
        assert m == pytest.approx(stats.norm.ppf(0.995) * 2.5 / 6.0)

    def test_margin_strictly_decreases_with_n(self):
        margins = [margin_of_error(1.0, n, 0.95) for n in (10, 40, 160, 640)]
        assert all(a > b for a, b in zip(margins, margins[1:]))

    def test_margin_halves_when_n_quadruples(self):
        assert margin_of_error(1.0, 400) == pytest.approx(margin_of_error(1.0, 100) / 2)

    def test_margin_non_decreasing_with_confidence(self):
        margins = [margin_of_error(1.0, 50, c) for c in (0.5, 0.8, 0.9, 0.95, 0.99)]
        assert all(a <= b for a, b in zip(margins, margins[1:]))

    def test_t_interval_wider_than_normal_for_small_n(self, small_table):
        z = confidence_interval(small_table["a"], 0.95, "normal")
        t = confidence_interval(small_table["a"], 0.95, "t")

        assert t.margin > z.margin
        assert t.reference == "t(df=4)"
        assert z.reference == "normal"

    def test_zero_spread_gives_zero_width(self):
        ci = confidence_interval([2.0, 2.0, 2.0])
        assert ci.lower == ci.upper == 2.0

    def test_invalid_inputs(self):
        with pytest.raises(ValueError, match="n must be"):
            margin_of_error(1.0, 0)
        with pytest.raises(ValueError, match="std"):
            margin_of_error(-1.0, 10)

    def test_repr(self):
        ci = interval_from_statistics(1.0, 0.5, 25)
        assert isinstance(ci, IntervalEstimate)
        assert "95% CI" in repr(ci)


# =============================================================================
# TABLE-LEVEL TESTS
# =============================================================================

class TestColumnIntervals:
    """Test intervals computed from table columns."""

    def test_column_interval(self, small_table):
        ci = column_interval(small_table, "a")
        assert ci.mean == pytest.approx(3.0)

    def test_column_interval_missing_column(self, small_table):
        with pytest.raises(ValueError, match="Missing required columns"):
            column_interval(small_table, "zzz")

    def test_column_interval_non_numeric(self):
        df = pd.DataFrame({"name": ["x", "y", "z"]})
        with pytest.raises(ValueError, match="not numeric"):
            column_interval(df, "name")

    def test_table_intervals_one_row_per_numeric_column(self):
        df = pd.DataFrame({
            "a": [1.0, 2.0, 3.0],
            "flag": [True, False, True],
            "b": [4.0, 5.0, 9.0],
        })
        out = table_intervals(df)

        assert list(out["Column"]) == ["a", "b"]
        assert list(out.columns)[:3] == ["Column", "N", "Mean"]
        assert (out["Lower"] <= out["Mean"]).all()
        assert (out["Mean"] <= out["Upper"]).all()


# =============================================================================
# SUMMARY TESTS
# =============================================================================

class TestSummaries:
    """Test column summaries."""

    def test_summarize_column(self):
        row = summarize_column([1.0, 2.0, 3.0, 4.0, 5.0])

        assert row["N"] == 5
        assert row["Mean"] == pytest.approx(3.0)
        assert row["Std Dev"] == pytest.approx(math.sqrt(2.5))
        assert row["Min"] == 1.0
        assert row["P50"] == pytest.approx(3.0)
        assert row["Max"] == 5.0

    def test_summarize_column_custom_percentiles(self):
        row = summarize_column(np.arange(101.0), percentiles=(0.1, 0.9))
        assert row["P10"] == pytest.approx(10.0)
        assert row["P90"] == pytest.approx(90.0)
        assert "P50" not in row

    def test_summarize_all_nan_raises(self):
        with pytest.raises(ValueError, match="No non-null"):
            summarize_column([np.nan, np.nan])

    def test_summarize_table(self, small_table):
        out = summarize_table(small_table)

        assert list(out["Column"]) == ["a", "b"]
        assert out.loc[0, "Mean"] == pytest.approx(3.0)
