"""
Tests for the workflows package.

These tests verify:
1. Each guide workflow runs on its own
2. run_guide chains sample → summarize → estimate → persist
3. The report table describes the run
"""

import pandas as pd
import pytest

from core.config import GuideConfig, IntervalConfig, SamplingConfig, TableIOConfig
from distributions import SampledTable, make_distribution
from estimation import IntervalEstimate
from workflows import (
    GuideReport,
    build_report,
    generate_guide_report,
    run_guide,
    run_inspection_workflow,
    run_interval_workflow,
    run_persistence_workflow,
    run_sampling_workflow,
)


# =============================================================================
# SINGLE WORKFLOW TESTS
# =============================================================================

class TestWorkflows:
    """Test the four workflows individually."""

    def test_sampling_workflow(self, standard_normal):
        table = run_sampling_workflow(standard_normal, SamplingConfig(n_samples=40, n_columns=2))

        assert isinstance(table, SampledTable)
        assert table.n_rows == 40
        assert table.columns == ("x1", "x2")

    def test_sampling_workflow_is_seeded(self, standard_normal):
        cfg = SamplingConfig(n_samples=10, seed=123)
        a = run_sampling_workflow(standard_normal, cfg).data
        b = run_sampling_workflow(standard_normal, cfg).data
        assert a.equals(b)

    def test_persistence_workflow(self, tmp_path, small_table):
        back = run_persistence_workflow(small_table, tmp_path / "t.csv")

        assert (tmp_path / "t.csv").exists()
        pd.testing.assert_frame_equal(back, small_table)

    def test_persistence_workflow_with_index(self, tmp_path, small_table):
        back = run_persistence_workflow(small_table, tmp_path / "t.csv", TableIOConfig(index=True))
        assert list(back.columns) == ["a", "b"]

    def test_interval_workflow(self, small_table):
        ci = run_interval_workflow(small_table, "a", IntervalConfig(confidence=0.9, reference="t"))

        assert isinstance(ci, IntervalEstimate)
        assert ci.confidence == 0.9
        assert ci.reference == "t(df=4)"

    def test_interval_workflow_accepts_sampled_table(self, standard_normal):
        table = run_sampling_workflow(standard_normal, SamplingConfig(n_samples=30))
        ci = run_interval_workflow(table, "x1")
        assert ci.n == 30

    def test_interval_workflow_missing_column(self, small_table):
        with pytest.raises(ValueError, match="cannot be used"):
            run_interval_workflow(small_table, "zzz")

    def test_interval_workflow_too_few_rows(self):
        with pytest.raises(ValueError, match="need at least 2"):
            run_interval_workflow(pd.DataFrame({"a": [1.0]}), "a")

    def test_interval_workflow_non_numeric_column(self):
        df = pd.DataFrame({"a": ["x", "y", "z"]})
        with pytest.raises(ValueError, match="not numeric"):
            run_interval_workflow(df, "a")

    def test_inspection_workflow_with_queries(self, standard_normal):
        result = run_inspection_workflow(standard_normal, x=0.0, p=0.975, curve_points=50)

        assert result.params == {"mu": 0.0, "sigma": 1.0}
        assert result.mean == pytest.approx(0.0)
        assert result.std == pytest.approx(1.0)
        assert result.cdf == pytest.approx(0.5)
        assert result.quantile == pytest.approx(1.959964, abs=1e-6)
        assert len(result.curve) == 50

    def test_inspection_workflow_near_degenerate_poisson(self):
        """A tiny Poisson mean still yields a one-point density curve."""
        result = run_inspection_workflow(make_distribution("poisson", 0.0005), x=0)

        assert result.curve["x"].tolist() == [0.0]
        assert result.cdf == pytest.approx(1.0, abs=1e-3)

    def test_inspection_workflow_without_queries(self):
        result = run_inspection_workflow(make_distribution("exponential", 1))

        assert result.cdf is None
        assert result.pdf is None
        assert result.quantile is None
        assert list(result.curve.columns) == ["x", "density"]


# =============================================================================
# CHAIN TESTS
# =============================================================================

class TestRunGuide:
    """Test the end-to-end chain."""

    def test_run_guide(self, tmp_path, standard_normal):
        config = GuideConfig(sampling=SamplingConfig(n_samples=400, n_columns=3, seed=8))
        result = run_guide(standard_normal, tmp_path / "out.csv", config)

        assert result.path.exists()
        assert result.column == "x1"
        assert result.interval.n == 400
        assert list(result.summary["Column"]) == ["x1", "x2", "x3"]
        assert list(result.reloaded.columns) == ["x1", "x2", "x3"]
        assert len(result.reloaded) == 400

    def test_run_guide_named_column(self, tmp_path, standard_normal):
        config = GuideConfig(sampling=SamplingConfig(n_samples=20, n_columns=2))
        result = run_guide(standard_normal, tmp_path / "out.csv", config, column="x2")
        assert result.column == "x2"

    def test_report(self, tmp_path):
        spec = make_distribution("poisson", 4)
        config = GuideConfig(sampling=SamplingConfig(n_samples=200, seed=1))
        result = run_guide(spec, tmp_path / "counts.csv", config)

        report = generate_guide_report(result)
        assert isinstance(report, GuideReport)
        assert report.round_trip_ok
        assert report.true_mean == pytest.approx(4.0)
        assert report.distribution == "poisson(4)"

        table = build_report(result)
        assert list(table.columns) == ["Metric", "Value"]
        assert "Margin of Error" in set(table["Metric"])
        assert table.loc[table["Metric"] == "Round Trip", "Value"].item() == "ok"

    def test_report_flags_small_normal_sample(self, tmp_path, standard_normal):
        config = GuideConfig(sampling=SamplingConfig(n_samples=10, seed=2))
        result = run_guide(standard_normal, tmp_path / "small.csv", config)

        report = generate_guide_report(result)
        assert any(f.startswith("SMALL_SAMPLE") for f in report.flags)
        assert "FLAGS" in set(report.to_dataframe()["Metric"])
