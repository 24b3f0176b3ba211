"""Shared test setup."""

import matplotlib

# Headless backend so chart tests can write PNG files without a display.
matplotlib.use("Agg")
