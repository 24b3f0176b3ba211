# complexity_tester.py

from typing import Sequence

# A collection of functions shaped to exhibit one growth class each.
# The loop structure is the point: closed forms would defeat the timings.


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"Input size must be non-negative, got {n}")


def constant_time(n: int) -> int:
    """Constant time O(1) - A single multiplication, independent of n."""
    _check_size(n)
    return n * n


def linear_time(n: int) -> int:
    """Linear time O(n) - Sum of 0..n-1 with one loop of exactly n steps."""
    _check_size(n)
    total = 0
    for i in range(n):
        total += i
    return total


def quadratic_time(n: int) -> int:
    """Quadratic time O(n^2) - Nested loops, each element of the outer loop
    meets each element of the inner loop (n * n additions).
    """
    _check_size(n)
    total = 0
    for i in range(n):
        for j in range(n):
            total += i + j
    return total


def linear_sum(numbers: Sequence[int]) -> int:
    """Linear time O(n) - Sums a sequence in a single pass."""
    total = 0
    for num in numbers:
        total += num
    return total


def quadratic_cross(numbers: Sequence[int]) -> int:
    """Quadratic time O(n^2) - Sum of every pairwise product xs[i] * xs[j]."""
    total = 0
    for i in range(len(numbers)):
        for j in range(len(numbers)):
            total += numbers[i] * numbers[j]
    return total


# --- Dictionaries to store all algorithms ---
# Key: human-readable name, Value: (complexity class key, function reference)
algorithms_collection = {
    "Constant_O(1)_Square": ("constant", constant_time),
    "Linear_O(n)_RangeSum": ("linear", linear_time),
    "Quadratic_O(n^2)_NestedSum": ("quadratic", quadratic_time),
}

# Sequence-driven variants. constant_time has no sequence form, it always takes a scalar.
array_algorithms_collection = {
    "Linear_O(n)_ArraySum": ("linear", linear_sum),
    "Quadratic_O(n^2)_CrossProducts": ("quadratic", quadratic_cross),
}
