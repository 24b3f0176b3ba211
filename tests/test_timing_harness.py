"""Tests for the timing harness."""

from __future__ import annotations

import json
import types

import complexity_tester as ct
import experiment_config as ec
import timing_harness as th


class TestRunTimed:
    def test_linear_results_in_order(self) -> None:
        rows = list(th.run_timed(ct.linear_time, [10, 100, 1000]))
        assert [row.n for row in rows] == [10, 100, 1000]
        assert [row.result for row in rows] == [45, 4950, 499500]

    def test_rows_unpack_as_triples(self) -> None:
        for n, elapsed_ms, result in th.run_timed(ct.constant_time, [3, 4]):
            assert elapsed_ms >= 0
            assert result == n * n

    def test_is_lazy(self) -> None:
        calls = []

        def fn(n: int) -> int:
            calls.append(n)
            return n

        rows = th.run_timed(fn, [1, 2, 3])
        assert isinstance(rows, types.GeneratorType)
        assert calls == []
        next(rows)
        assert calls == [1]

    def test_restartable(self) -> None:
        first = [row.result for row in th.run_timed(ct.quadratic_time, [5, 10])]
        second = [row.result for row in th.run_timed(ct.quadratic_time, [5, 10])]
        assert first == second == [100, 900]

    def test_array_mode_passes_one_to_n(self) -> None:
        rows = list(th.run_timed(ct.linear_sum, [0, 4], use_array=True))
        assert [row.result for row in rows] == [0, 10]
        rows = list(th.run_timed(ct.quadratic_cross, [2], use_array=True))
        assert rows[0].result == 9

    def test_empty_sizes(self) -> None:
        assert list(th.run_timed(ct.linear_time, [])) == []


class TestMakeInputArray:
    def test_contents(self) -> None:
        assert th.make_input_array(4) == [1, 2, 3, 4]
        assert th.make_input_array(0) == []


class TestRunExperiments:
    def test_runs_each_class_with_its_sizes(self) -> None:
        config = ec.default_configuration()
        config["sizes"] = {"constant": [2, 3], "linear": [4], "quadratic": [1, 2, 3]}
        rows_by_class = th.run_experiments(config)
        assert list(rows_by_class) == ["constant", "linear", "quadratic"]
        assert [row.result for row in rows_by_class["constant"]] == [4, 9]
        assert [row.result for row in rows_by_class["linear"]] == [6]
        assert [row.result for row in rows_by_class["quadratic"]] == [0, 4, 18]


class TestMain:
    def _write_config(self, tmp_path, **overrides) -> str:
        data = {"sizes": {"constant": [10], "linear": [10, 100], "quadratic": [10]}}
        data.update(overrides)
        path = tmp_path / "experiments.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    def test_prints_report(self, tmp_path, capsys) -> None:
        assert th.main(self._write_config(tmp_path)) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Algorithm Complexity Timing Experiments"
        assert "O(n) - Linear Time Complexity" in lines
        assert lines[-1] == "All timing experiments completed!"
        linear_rows = [line for line in lines if line.startswith("100 ")]
        assert linear_rows and linear_rows[0].endswith("\t4950")

    def test_default_run_without_config_file(self, tmp_path, monkeypatch, capsys) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(th, "TIMED_FUNCTIONS", {
            "constant": ct.constant_time,
            "linear": ct.linear_time,
            "quadratic": lambda n: ct.quadratic_time(min(n, 10)),
        })
        assert th.main() == 0
        out = capsys.readouterr().out
        assert not out.startswith("Warning")
        assert "100000    \t" in out

    def test_saves_reports_when_enabled(self, tmp_path, capsys) -> None:
        report_dir = tmp_path / "reports"
        config_file = self._write_config(tmp_path, save_reports=True, report_dir=str(report_dir))
        th.main(config_file)
        assert (report_dir / "timing_measurements.csv").exists()
        assert "[Report] Measurements saved to" in capsys.readouterr().out


class TestRegistryWiring:
    def test_timed_functions_come_from_registry(self) -> None:
        expected = {class_key: fn for class_key, fn in ct.algorithms_collection.values()}
        assert th.TIMED_FUNCTIONS == expected
        assert list(th.TIMED_FUNCTIONS) == ["constant", "linear", "quadratic"]


class TestRunArrayExperiments:
    def test_times_each_array_variant(self) -> None:
        config = ec.default_configuration()
        config["sizes"] = {"constant": [1], "linear": [0, 4], "quadratic": [2, 3]}
        rows_by_name = th.run_array_experiments(config)
        assert list(rows_by_name) == list(ct.array_algorithms_collection)
        assert [row.result for row in rows_by_name["Linear_O(n)_ArraySum"]] == [0, 10]
        # (1 + 2)^2 and (1 + 2 + 3)^2
        assert [row.result for row in rows_by_name["Quadratic_O(n^2)_CrossProducts"]] == [9, 36]
