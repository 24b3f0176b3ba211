# growth_validator.py

import math
import os
from typing import Dict, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from scipy.stats import spearmanr
from sklearn.metrics import mean_absolute_error, mean_absolute_percentage_error

# Exponent k of the theoretical cost model n**k for each complexity class.
THEORETICAL_EXPONENTS = {
    "constant": 0,
    "linear": 1,
    "quadratic": 2,
}

# How far the fitted exponent may drift from k before the class is flagged.
EXPONENT_TOLERANCE = 0.5


def _usable_points(rows: Sequence[Tuple[int, float, int]]) -> Tuple[np.ndarray, np.ndarray]:
    """Sizes and timings of the rows a log-log fit can use (both strictly positive)."""
    points = [(n, elapsed_ms) for n, elapsed_ms, _ in rows if n > 0 and elapsed_ms > 0]
    if not points:
        return np.array([], dtype=float), np.array([], dtype=float)
    sizes, times = np.array(points, dtype=float).T
    return sizes, times


def estimate_growth_exponent(rows: Sequence[Tuple[int, float, int]]) -> float:
    """
    Estimates the empirical growth exponent from measured rows.

    Fits log(time) = k * log(n) + c by least squares and returns k.
    Returns nan when fewer than two distinct sizes have a positive timing.
    """
    sizes, times = _usable_points(rows)
    if len(np.unique(sizes)) < 2:
        return float('nan')
    slope, _ = np.polyfit(np.log(sizes), np.log(times), 1)
    return float(slope)


def theoretical_costs(sizes: np.ndarray, class_key: str) -> np.ndarray:
    """Unscaled theoretical cost n**k for each size."""
    if class_key not in THEORETICAL_EXPONENTS:
        raise ValueError(f"Unknown complexity class: {class_key}. Available: {list(THEORETICAL_EXPONENTS.keys())}")
    return np.power(sizes, THEORETICAL_EXPONENTS[class_key])


def calculate_error_metrics(rows: Sequence[Tuple[int, float, int]], class_key: str) -> Dict[str, float]:
    """
    Compares measured timings with the theoretical model of their class.

    The model n**k is scaled so its total matches the measured total, then
    MAE, MAPE and the Spearman rank correlation between size and time are
    computed. Metrics that cannot be computed are nan.
    """
    sizes, measured = _usable_points(rows)
    metrics = {
        'points': float(len(sizes)),
        'expected_exponent': float(THEORETICAL_EXPONENTS.get(class_key, float('nan'))),
        'fitted_exponent': estimate_growth_exponent(rows),
        'MAE': float('nan'),
        'MAPE': float('nan'),
        'Spearman_ρ': float('nan'),
    }
    predictions = theoretical_costs(sizes, class_key)
    if len(sizes) < 2:
        return metrics

    # Scale predictions to match measured values for error calculation
    scale_factor = measured.sum() / predictions.sum()
    scaled_predictions = predictions * scale_factor

    metrics['MAE'] = float(mean_absolute_error(measured, scaled_predictions))
    metrics['MAPE'] = float(mean_absolute_percentage_error(measured, scaled_predictions))
    # A constant input (e.g. one repeated size) has no rank correlation.
    if len(np.unique(sizes)) > 1 and len(np.unique(measured)) > 1:
        corr, _ = spearmanr(sizes, measured)
        metrics['Spearman_ρ'] = float(corr)
    return metrics


def matches_expected_growth(metrics: Dict[str, float]) -> bool:
    """True when the fitted exponent lies within EXPONENT_TOLERANCE of the expected one."""
    fitted = metrics['fitted_exponent']
    if math.isnan(fitted):
        return False
    return abs(fitted - metrics['expected_exponent']) <= EXPONENT_TOLERANCE


def build_growth_summary(rows_by_class: Dict[str, Sequence[Tuple[int, float, int]]]) -> pd.DataFrame:
    """One row of growth metrics per complexity class, indexed by class."""
    print("[Growth] Fitting measured timings against theoretical models...")
    records = []
    for class_key, rows in rows_by_class.items():
        metrics = calculate_error_metrics(rows, class_key)
        metrics['matches_expected'] = matches_expected_growth(metrics)
        metrics['complexity_class'] = class_key
        records.append(metrics)
    if not records:
        return pd.DataFrame()
    return pd.DataFrame(records).set_index('complexity_class')


def plot_prediction_vs_measured(rows: Sequence[Tuple[int, float, int]], class_key: str,
                                title: str, output_path: str) -> bool:
    """Generates and saves a scatter plot of scaled theoretical vs. measured timings."""
    sizes, measured = _usable_points(rows)
    if len(sizes) < 2:
        print(f"[Chart Info] Not enough positive timings to plot '{class_key}'.")
        return False

    predictions = theoretical_costs(sizes, class_key)
    predictions = predictions * (measured.sum() / predictions.sum())

    plt.figure(figsize=(8, 6))
    plt.scatter(measured, predictions, alpha=0.7, edgecolors='k')
    plt.plot([measured.min(), measured.max()], [measured.min(), measured.max()],
             color='black', linestyle='-', label='Ideal y=x line')

    plt.title(title)
    plt.xlabel("Measured Time (ms)")
    plt.ylabel("Predicted Time (ms)")
    plt.grid(True)
    plt.legend()
    plt.tight_layout()

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    plt.savefig(output_path)
    plt.close()
    return True


def generate_growth_summary_text(summary_df: pd.DataFrame) -> str:
    """Generates a short English summary of how well the timings follow their classes."""
    if summary_df.empty:
        return "No measurements were available for growth analysis."

    sentences = []
    for class_key, row in summary_df.iterrows():
        fitted = row['fitted_exponent']
        if math.isnan(fitted):
            sentences.append(
                f"The {class_key} class ran too fast to fit a growth exponent at millisecond-level timings."
            )
            continue
        verdict = "consistent with" if row['matches_expected'] else "deviating from"
        sentences.append(
            f"The {class_key} class grew as n^{fitted:.2f}, {verdict} the expected n^{int(row['expected_exponent'])}."
        )

    matched = int(summary_df['matches_expected'].sum())
    sentences.append(f"{matched} of {len(summary_df)} classes matched their theoretical growth rate.")
    return " ".join(sentences)
