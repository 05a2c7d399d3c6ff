"""Configuration management for the file sorter."""

import copy
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from filesort.path_utils import validate_safe_path


DEFAULT_CONFIG = {
    # Directory levels for `sort` (1-3)
    "nesting_level": 2,

    # Use alternate category names where the table has them
    "use_alternate": False,

    # Print every move to stdout
    "verbose": False,

    # Append every move to the move log
    "log": False,

    # Move log location, relative to the input directory
    "log_dir_name": "sorter-logs",
    "log_file_name": "sorter.log",
    "log_encoding": "utf-8",

    # Benchmark parameters
    "benchmark_file_count": 10000,
    "benchmark_output_dir": "benchmark",

    # Extra or replacement extension table entries, e.g.
    #   extensions:
    #     heif: {category: image, alternate_name: photo}
    "extensions": {},
}

CONFIG_SUFFIXES = ('.yaml', '.yml')


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config_path doesn't exist
        ValueError: If config_path is not a YAML file
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = validate_safe_path(config_path, must_exist=True)

        if not config_path.is_file():
            raise ValueError(f"Configuration path is not a file: {config_path}")

        if config_path.suffix.lower() not in CONFIG_SUFFIXES:
            raise ValueError(f"Configuration file must be YAML (.yaml or .yml): {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            user_config = yaml.safe_load(f)

        if user_config:
            if not isinstance(user_config, dict):
                raise ValueError(f"Configuration file must contain a mapping: {config_path}")
            config.update(user_config)

    return config


def save_config(config: Dict[str, Any], output_path: Path) -> None:
    """
    Save configuration to YAML file.

    Args:
        config: Configuration dictionary
        output_path: Path to save configuration
    """
    output_path = validate_safe_path(output_path, must_exist=False)

    if output_path.suffix.lower() not in CONFIG_SUFFIXES:
        raise ValueError(f"Configuration file must be YAML (.yaml or .yml): {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.dump(config, f, default_flow_style=False)
