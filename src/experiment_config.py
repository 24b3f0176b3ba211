# experiment_config.py

import os
import json
from typing import Dict, List, Any, Optional
from types import MappingProxyType

# --- Configuration defaults ---

DEFAULT_CONFIG_PATH = "./timing_config/experiments.json"
DEFAULT_REPORT_DIR = "./timing_reports"
SAVING_FLAG = False

# Input sizes per complexity class. Quadratic sizes stay small on purpose.
DEFAULT_SIZE_PROFILES = MappingProxyType({
    "constant": (10, 100, 1000, 10000, 100000),
    "linear": (10, 100, 500, 1000, 2000),
    "quadratic": (10, 50, 100, 200, 500),
})

COMPLEXITY_CLASSES = tuple(DEFAULT_SIZE_PROFILES.keys())


def default_configuration() -> Dict[str, Any]:
    """Returns a fresh configuration dictionary built from the module defaults."""
    return {
        "sizes": {name: list(sizes) for name, sizes in DEFAULT_SIZE_PROFILES.items()},
        "save_reports": SAVING_FLAG,
        "report_dir": DEFAULT_REPORT_DIR,
    }


def validate_sizes(class_key: str, sizes: Any) -> List[int]:
    """
    Checks that a size list is a non-empty list of non-negative integers.

    Args:
        class_key: Complexity class the sizes belong to (used in messages)
        sizes: Raw value read from the configuration

    Returns:
        The sizes as a list of ints

    Raises:
        ValueError: If the value is not a list of non-negative integers
    """
    if not isinstance(sizes, (list, tuple)) or not sizes:
        raise ValueError(f"Sizes for '{class_key}' must be a non-empty list, got {sizes!r}")
    for n in sizes:
        # bool is an int subclass, but true/false in JSON is a config mistake
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValueError(f"Sizes for '{class_key}' must be non-negative integers, got {n!r}")
    return list(sizes)


def load_configuration(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads the timing configuration from a JSON file, on top of the defaults.

    A missing file is not an error: the defaults are used. A warning is printed
    only when the missing file was named explicitly.

    Args:
        config_file: Path to configuration file, None for DEFAULT_CONFIG_PATH

    Returns:
        dict: Configuration with 'sizes', 'save_reports' and 'report_dir' keys

    Raises:
        ValueError: If the file is not valid JSON or holds values of the wrong type
        KeyError: If the file names an unknown complexity class
    """
    config = default_configuration()
    explicit = config_file is not None
    config_file = config_file if explicit else DEFAULT_CONFIG_PATH

    if not os.path.exists(config_file):
        if explicit:
            print(f"Warning: Configuration file not found at path {config_file}. Using default values.")
        return config

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON format in configuration file '{config_file}': {e}")

    if not isinstance(config_data, dict):
        raise ValueError(f"Configuration file '{config_file}' must contain a JSON object")

    sizes_data = config_data.get("sizes", {})
    if not isinstance(sizes_data, dict):
        raise ValueError(f"'sizes' in '{config_file}' must be a JSON object")

    for class_key, sizes in sizes_data.items():
        if class_key not in DEFAULT_SIZE_PROFILES:
            raise KeyError(f"Unknown complexity class in '{config_file}': {class_key}. "
                           f"Available: {list(COMPLEXITY_CLASSES)}")
        config["sizes"][class_key] = validate_sizes(class_key, sizes)

    if "save_reports" in config_data:
        save_reports = config_data["save_reports"]
        if not isinstance(save_reports, bool):
            raise ValueError(f"'save_reports' in '{config_file}' must be true or false, got {save_reports!r}")
        config["save_reports"] = save_reports
    if "report_dir" in config_data:
        report_dir = config_data["report_dir"]
        if not isinstance(report_dir, str) or not report_dir:
            raise ValueError(f"'report_dir' in '{config_file}' must be a non-empty string, got {report_dir!r}")
        config["report_dir"] = report_dir

    return config
