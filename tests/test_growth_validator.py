"""Tests for growth-rate validation."""

from __future__ import annotations

import math

import pytest

import growth_validator as gv


def _rows(exponent: float, sizes=(10, 20, 40, 80, 160), scale: float = 0.001):
    return [(n, scale * n ** exponent, 0) for n in sizes]


class TestEstimateGrowthExponent:
    @pytest.mark.parametrize("exponent", [0, 1, 2])
    def test_recovers_exact_exponent(self, exponent: int) -> None:
        assert gv.estimate_growth_exponent(_rows(exponent)) == pytest.approx(exponent, abs=1e-9)

    def test_zero_timings_are_ignored(self) -> None:
        rows = [(10, 0.0, 0)] + _rows(2)
        assert gv.estimate_growth_exponent(rows) == pytest.approx(2.0)

    def test_not_enough_points(self) -> None:
        assert math.isnan(gv.estimate_growth_exponent([(10, 0.0, 0), (100, 0.0, 0)]))
        assert math.isnan(gv.estimate_growth_exponent([(10, 1.0, 0), (10, 2.0, 0)]))


class TestCalculateErrorMetrics:
    def test_perfect_quadratic(self) -> None:
        metrics = gv.calculate_error_metrics(_rows(2), "quadratic")
        assert metrics["fitted_exponent"] == pytest.approx(2.0)
        assert metrics["MAE"] == pytest.approx(0.0, abs=1e-12)
        assert metrics["MAPE"] == pytest.approx(0.0, abs=1e-12)
        assert metrics["Spearman_ρ"] == pytest.approx(1.0)
        assert gv.matches_expected_growth(metrics)

    def test_linear_timings_against_quadratic_model(self) -> None:
        metrics = gv.calculate_error_metrics(_rows(1), "quadratic")
        assert metrics["MAPE"] > 0.1
        assert not gv.matches_expected_growth(metrics)

    def test_constant_timings_have_no_rank_correlation(self) -> None:
        metrics = gv.calculate_error_metrics(_rows(0), "constant")
        assert math.isnan(metrics["Spearman_ρ"])
        assert gv.matches_expected_growth(metrics)

    def test_too_few_points(self) -> None:
        metrics = gv.calculate_error_metrics([(10, 0.0, 0)], "linear")
        assert metrics["points"] == 0
        assert math.isnan(metrics["MAE"])
        assert not gv.matches_expected_growth(metrics)

    def test_unknown_class(self) -> None:
        with pytest.raises(ValueError, match="Unknown complexity class"):
            gv.calculate_error_metrics(_rows(1), "cubic")


class TestGrowthSummary:
    def test_summary_frame_and_text(self) -> None:
        summary = gv.build_growth_summary({
            "linear": _rows(1),
            "quadratic": _rows(2),
            "constant": [(10, 0.0, 100)],
        })
        assert list(summary.index) == ["linear", "quadratic", "constant"]
        assert bool(summary.loc["linear", "matches_expected"]) is True
        text = gv.generate_growth_summary_text(summary)
        assert "consistent with the expected n^2" in text
        assert "too fast" in text
        assert text.endswith("2 of 3 classes matched their theoretical growth rate.")

    def test_empty(self) -> None:
        summary = gv.build_growth_summary({})
        assert summary.empty
        assert gv.generate_growth_summary_text(summary) == "No measurements were available for growth analysis."

    def test_plot(self, tmp_path) -> None:
        output = tmp_path / "growth.png"
        assert gv.plot_prediction_vs_measured(_rows(2), "quadratic", "Quadratic", str(output))
        assert output.exists()
        assert not gv.plot_prediction_vs_measured([], "quadratic", "Quadratic", str(tmp_path / "x.png"))
