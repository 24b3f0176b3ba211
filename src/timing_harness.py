# timing_harness.py

import os
import time
from typing import Any, Callable, Dict, Iterator, List, NamedTuple, Optional, Sequence

# Import our project modules
import complexity_tester as ct
import experiment_config as ec
import report_formatter as rf


class MeasurementRow(NamedTuple):
    """One timed call: input size, elapsed wall-clock time in ms, returned value."""
    n: int
    elapsed_ms: float
    result: int


# Function timed for each class in the default run, in run order.
TIMED_FUNCTIONS = {class_key: fn for class_key, fn in ct.algorithms_collection.values()}


def make_input_array(n: int) -> List[int]:
    """Deterministic input for the sequence variants: [1, 2, ..., n]."""
    return list(range(1, n + 1))


def run_timed(fn: Callable[[Any], int], sizes: Sequence[int],
              use_array: bool = False) -> Iterator[MeasurementRow]:
    """
    Times one call of fn per size and yields a MeasurementRow for each, in order.

    The generator is lazy and keeps no state between calls; calling run_timed
    again re-measures everything from scratch.

    Args:
        fn: Function under test, taking a size (or an array when use_array is set)
        sizes: Input sizes, measured in the given order
        use_array: Pass make_input_array(n) instead of n

    Yields:
        MeasurementRow(n, elapsed_ms, result)
    """
    for n in sizes:
        # Built outside the timed region so only fn itself is measured.
        argument = make_input_array(n) if use_array else n
        start = time.perf_counter_ns()
        result = fn(argument)
        elapsed_ns = time.perf_counter_ns() - start
        yield MeasurementRow(n, elapsed_ns / 1_000_000, result)


def run_experiments(config: Optional[Dict[str, Any]] = None) -> Dict[str, List[MeasurementRow]]:
    """
    Runs every complexity class over its configured sizes.

    Returns:
        Measurement rows keyed by complexity class, in run order
    """
    config = config if config is not None else ec.default_configuration()
    rows_by_class = {}
    for class_key, fn in TIMED_FUNCTIONS.items():
        sizes = config["sizes"][class_key]
        rows_by_class[class_key] = list(run_timed(fn, sizes))
    return rows_by_class


def run_array_experiments(config: Optional[Dict[str, Any]] = None) -> Dict[str, List[MeasurementRow]]:
    """
    Runs the sequence variants over [1..n] inputs, using each class's configured sizes.

    Returns:
        Measurement rows keyed by algorithm name from ct.array_algorithms_collection
    """
    config = config if config is not None else ec.default_configuration()
    rows_by_name = {}
    for name, (class_key, fn) in ct.array_algorithms_collection.items():
        sizes = config["sizes"][class_key]
        rows_by_name[name] = list(run_timed(fn, sizes, use_array=True))
    return rows_by_name


def report_sections(rows_by_class: Dict[str, List[MeasurementRow]]) -> List[tuple]:
    """Pairs each class's rows with its table title."""
    return [(rf.CLASS_TITLES[class_key], rows) for class_key, rows in rows_by_class.items()]


def save_reports(rows_by_class: Dict[str, List[MeasurementRow]], report_dir: str) -> None:
    """Writes the measurements CSV and the timing chart into report_dir."""
    csv_path = rf.save_measurements_csv(rows_by_class, "timing_measurements.csv", report_dir)
    print(f"[Report] Measurements saved to {csv_path}")
    chart_path = os.path.join(report_dir, "timing_chart.png")
    if rf.create_timing_chart(rows_by_class, chart_path):
        print(f"[Report] Chart saved to {chart_path}")


def main(config_file: Optional[str] = None) -> int:
    """Process entry point: runs all experiments and prints the report."""
    config = ec.load_configuration(config_file)
    rows_by_class = run_experiments(config)

    for line in rf.build_report(report_sections(rows_by_class)):
        print(line)

    if config["save_reports"]:
        save_reports(rows_by_class, config["report_dir"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
