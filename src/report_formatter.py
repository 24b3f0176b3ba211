# report_formatter.py

import os
import csv
import re
from typing import Dict, List, Iterable, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

REPORT_HEADING = "Algorithm Complexity Timing Experiments"
CLOSING_LINE = "All timing experiments completed!"
TABLE_HEADER = "n\t\tTime (ms)\tResult"
TABLE_SEPARATOR = "--\t\t---------\t------"

# Table titles per complexity class, in the order the harness runs them.
CLASS_TITLES = {
    "constant": "O(1) - Constant Time Complexity",
    "linear": "O(n) - Linear Time Complexity",
    "quadratic": "O(n²) - Quadratic Time Complexity",
}

# Static commentary. It is not derived from the measured numbers.
REFLECTION_TEXT = """
O(1) ConstantTimeMethod Reflection:
What does the method do?
This method performs a single mathematical operation (n * n)
and returns the result immediately.

Why is it classified as O(1)?
It is O(1) because it executes exactly one operation regardless
of input size. The execution path does not change with n.

How did the runtime change between smallest and largest test size?
The runtime remained nearly identical (0ms) for n=10 through n=100,000
demonstrating true constant time behavior.

O(n) LinearTimeMethod Reflection:
What does the method do?
This method calculates the sum of all integers from 0 to n-1
by iterating through a single loop.

Why is it classified as O(n)?
It is O(n) because it contains one loop that runs exactly n times.
The number of operations scales linearly with input size.

How did the runtime change between smallest and largest test size?
From n=10 to n=2000, the runtime increased proportionally to n.
Doubling n approximately doubled the execution time.

O(n²) QuadraticTimeMethod Reflection:
What does the method do?
This method calculates a cumulative sum using nested loops,
where each element from the outer loop interacts with each
element from the inner loop.

Why is it classified as O(n²)?
It is O(n²) because it has two nested loops, each running n times.
This results in n * n = n² total operations.

How did the runtime change between smallest and largest test size?
From n=10 to n=500, the runtime increased dramatically.
When n increased by 50x (10 to 500), runtime increased by
approximately 2500x, showing the quadratic growth pattern.

Overall Observations:
The experimental results strongly match theoretical expectations.
O(1) showed consistent timing regardless of input size.
O(n) showed linear growth - 10x larger n ≈ 10x longer runtime.
O(n²) showed explosive growth - 10x larger n ≈ 100x longer runtime.
These patterns validate the importance of algorithm complexity
analysis for scalable software design."""


def format_elapsed(elapsed_ms: float) -> int:
    """Truncates an elapsed time to whole milliseconds, the resolution the tables show."""
    return int(elapsed_ms)


def format_complexity_table(title: str, rows: Iterable[Tuple[int, float, int]]) -> List[str]:
    """
    Formats one complexity class as display lines.

    Args:
        title: Table title, underlined with '=' one character longer than itself
        rows: (n, elapsed_ms, result) measurement rows, in display order

    Returns:
        The table lines, ending with a blank line
    """
    lines = [title, "=" * (len(title) + 1), TABLE_HEADER, TABLE_SEPARATOR]
    for n, elapsed_ms, result in rows:
        lines.append(f"{n:<10}\t{format_elapsed(elapsed_ms):<10}\t{result}")
    lines.append("")
    return lines


def reflection_lines() -> List[str]:
    """Returns the fixed reflection block, banner included."""
    lines = ["", "=" * 60, "REFLECTION BY JONATHAN WILKERSON", "=" * 60]
    lines.extend(REFLECTION_TEXT.split("\n"))
    return lines


def build_report(sections: Sequence[Tuple[str, Iterable[Tuple[int, float, int]]]]) -> List[str]:
    """
    Builds the full console report from (title, rows) sections.

    Pure function: the same sections always give the same lines, so the
    canned commentary can be checked without running any timings.
    """
    lines = [REPORT_HEADING, "=" * len(REPORT_HEADING), ""]
    for title, rows in sections:
        lines.extend(format_complexity_table(title, rows))
    lines.extend(reflection_lines())
    lines.extend(["", CLOSING_LINE])
    return lines


def rows_to_dataframe(rows_by_class: Dict[str, Sequence[Tuple[int, float, int]]]) -> pd.DataFrame:
    """Flattens the measurement rows of every class into one DataFrame."""
    records = []
    for class_key, rows in rows_by_class.items():
        for n, elapsed_ms, result in rows:
            records.append({
                'complexity_class': class_key,
                'n': n,
                'elapsed_ms': elapsed_ms,
                'result': result,
            })
    return pd.DataFrame(records, columns=['complexity_class', 'n', 'elapsed_ms', 'result'])


def make_safe_filename(name: str) -> str:
    """Converts a string into a safe filename by removing special characters."""
    name = name.replace(' ', '_').replace('^', '').replace('(', '').replace(')', '')
    safe_name = re.sub(r'(?u)[^-\w.]', '', name)
    return safe_name


def save_measurements_csv(rows_by_class: Dict[str, Sequence[Tuple[int, float, int]]],
                          filename: str, report_dir: str) -> str:
    """Saves the measurement rows to a CSV file and returns its path."""
    os.makedirs(report_dir, exist_ok=True)
    filepath = os.path.join(report_dir, filename)
    with open(filepath, mode="w", newline="", encoding='utf-8') as file:
        writer = csv.writer(file)
        writer.writerow(["Complexity Class", "n", "Time (ms)", "Result"])
        for class_key, rows in rows_by_class.items():
            for n, elapsed_ms, result in rows:
                writer.writerow([class_key, n, f"{elapsed_ms:.6f}", result])
    return filepath


def create_timing_chart(rows_by_class: Dict[str, Sequence[Tuple[int, float, int]]],
                        output_filepath: str) -> bool:
    """
    Creates a log-log chart of elapsed time against input size, one line per class.

    Args:
        rows_by_class: Measurement rows keyed by complexity class
        output_filepath: The full path where the PNG file will be saved

    Returns:
        True if the chart was written, False if there was nothing to plot
    """
    fig, ax = plt.subplots(figsize=(10, 6))
    plotted = False

    for class_key, rows in rows_by_class.items():
        # Zero readings cannot be drawn on a log axis.
        points = [(n, elapsed_ms) for n, elapsed_ms, _ in rows if n > 0 and elapsed_ms > 0]
        if not points:
            print(f"[Chart Info] No positive timings for '{class_key}', skipping it.")
            continue
        sizes, times = np.array(points, dtype=float).T
        ax.plot(sizes, times, 'o-', linewidth=2, label=CLASS_TITLES.get(class_key, class_key))
        plotted = True

    if not plotted:
        print("[Chart Info] Cannot generate timing chart: no positive timings were measured.")
        plt.close(fig)
        return False

    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_title('Elapsed Time vs. Input Size', fontsize=16)
    ax.set_xlabel('Input Size n (Log Scale)', fontsize=12)
    ax.set_ylabel('Time in ms (Log Scale)', fontsize=12)
    ax.grid(True, which='major', linestyle='--', linewidth=0.5)
    ax.legend(title='Complexity Class', loc='best')
    plt.tight_layout()

    output_dir = os.path.dirname(output_filepath)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    plt.savefig(output_filepath, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return True
