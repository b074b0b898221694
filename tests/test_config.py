#!/usr/bin/env python3
"""
Tests for UnitAlgebraConfig loading and application.

Run with: python -m pytest tests/test_config.py -v
"""

import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unit_algebra import float_tolerance, quantity
from unit_algebra.config import UnitAlgebraConfig, get_default_config

REPO_ROOT = os.path.join(os.path.dirname(__file__), "..")

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def restore_digit_precision():
    previous = float_tolerance.get_digit_precision()
    yield
    float_tolerance.set_digit_precision(previous)


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a temporary file and return its path."""

    def _write(text: str) -> str:
        path = tmp_path / "unit_algebra.yaml"
        path.write_text(text)
        return str(path)

    return _write


# ============================================================================
# Construction and validation
# ============================================================================


class TestUnitAlgebraConfig:
    """Test defaults and validation."""

    def test_default(self):
        assert get_default_config().digit_precision == 10
        assert UnitAlgebraConfig() == get_default_config()

    @pytest.mark.parametrize("value", [-1, 1.5, "10", True], ids=["negative", "float", "str", "bool"])
    def test_invalid_precision_rejected(self, value):
        with pytest.raises(ValueError, match="digit_precision"):
            UnitAlgebraConfig(digit_precision=value)

    def test_from_dict(self):
        assert UnitAlgebraConfig.from_dict({"digit_precision": 6}).digit_precision == 6
        assert UnitAlgebraConfig.from_dict({}).digit_precision == 10

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="Unknown configuration keys: precision"):
            UnitAlgebraConfig.from_dict({"precision": 6})

    def test_from_dict_rejects_non_dict(self):
        with pytest.raises(ValueError, match="must be a dictionary"):
            UnitAlgebraConfig.from_dict([("digit_precision", 6)])

    def test_to_dict_round_trip(self):
        config = UnitAlgebraConfig(digit_precision=7)
        assert UnitAlgebraConfig.from_dict(config.to_dict()) == config


# ============================================================================
# YAML loading
# ============================================================================


class TestFromYaml:
    """Test loading the 'unit_algebra' section of a YAML file."""

    def test_example_file_loads(self):
        config = UnitAlgebraConfig.from_yaml(os.path.join(REPO_ROOT, "config", "unit_algebra.yaml"))
        assert config.digit_precision == 10

    def test_loads_section(self, write_config):
        path = write_config("unit_algebra:\n  digit_precision: 4\n")
        assert UnitAlgebraConfig.from_yaml(path).digit_precision == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            UnitAlgebraConfig.from_yaml(str(tmp_path / "missing.yaml"))

    def test_empty_file(self, write_config):
        with pytest.raises(ValueError, match="empty"):
            UnitAlgebraConfig.from_yaml(write_config(""))

    def test_missing_section(self, write_config):
        with pytest.raises(ValueError, match="missing 'unit_algebra' section"):
            UnitAlgebraConfig.from_yaml(write_config("other:\n  digit_precision: 4\n"))

    def test_malformed_yaml(self, write_config):
        with pytest.raises(ValueError, match="Failed to parse YAML"):
            UnitAlgebraConfig.from_yaml(write_config("unit_algebra: [unclosed\n"))

    def test_invalid_value(self, write_config):
        with pytest.raises(ValueError, match="digit_precision"):
            UnitAlgebraConfig.from_yaml(write_config("unit_algebra:\n  digit_precision: -3\n"))


# ============================================================================
# Applying configuration
# ============================================================================


class TestApply:
    """Test pushing configuration into the tolerance kernel."""

    def test_apply_changes_equality(self):
        assert quantity.unitless(1.0) != quantity.unitless(1.001)
        UnitAlgebraConfig(digit_precision=2).apply()
        assert float_tolerance.get_digit_precision() == 2
        assert quantity.unitless(1.0) == quantity.unitless(1.001)

    def test_current_snapshots_kernel(self):
        float_tolerance.set_digit_precision(8)
        assert UnitAlgebraConfig.current().digit_precision == 8

    def test_apply_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="unit_algebra.config"):
            UnitAlgebraConfig(digit_precision=12).apply()
        assert "digit_precision=12" in caplog.text
