"""
Tests for configuration loading
"""

import os
import sys

import pytest

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from contour_sketch.config import DEFAULT_CONFIG, load_config
from contour_sketch.exceptions import ConfigError


def test_defaults():
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert config["scoring"]["threshold"] == 0.1
    assert config["scoring"]["epsilon"] == 0.0001
    assert config["preprocessing"]["smooth_window"] == 2


def test_defaults_are_copied():
    config = load_config()
    config["scoring"]["threshold"] = 0.5
    assert DEFAULT_CONFIG["scoring"]["threshold"] == 0.1


def test_yaml_overrides_merge(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("scoring:\n  threshold: 0.2\npreprocessing:\n  axis_extent: 800\n")
    config = load_config(config_file)
    assert config["scoring"]["threshold"] == 0.2
    assert config["scoring"]["epsilon"] == 0.0001
    assert config["preprocessing"]["axis_extent"] == 800
    assert config["preprocessing"]["flip_axis"] is True


def test_empty_yaml_file(tmp_path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")
    assert load_config(config_file) == DEFAULT_CONFIG


def test_explicit_overrides_win(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("scoring:\n  threshold: 0.2\n")
    config = load_config(config_file, overrides={"scoring": {"threshold": 0.3}})
    assert config["scoring"]["threshold"] == 0.3


def test_non_mapping_yaml(tmp_path):
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_config(config_file)


def test_invalid_yaml(tmp_path):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("scoring: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(config_file)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")
