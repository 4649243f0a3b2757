"""
Default configuration and YAML overrides
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from contour_sketch.exceptions import ConfigError

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "preprocessing": {
        "axis_extent": 400,  # drawing surface height
        "smooth_window": 2,
        "flip_axis": True
    },
    "scoring": {
        "threshold": 0.1,
        "epsilon": 0.0001
    },
    "playback": {
        "note_duration": 0.3,  # seconds
        "ramp_time": 0.1  # seconds
    },
    "feedback": {
        "min_frequency": 100.0,
        "max_frequency": 600.0
    },
    "guide": {
        "margin": 50
    }
}


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge overrides into a copy of base"""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Union[str, Path]] = None,
                overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Load configuration, layering a YAML file and explicit overrides on the defaults

    Args:
        path: Optional path to a YAML file
        overrides: Optional nested dict applied last

    Returns:
        Complete configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if path is not None:
        config_path = Path(path)
        try:
            with open(config_path, 'r') as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read config {config_path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config {config_path} must contain a mapping, got {type(loaded).__name__}")

        config = _merge(config, loaded)
        logging.info(f"Loaded config from {config_path}")

    if overrides:
        config = _merge(config, overrides)

    return config
