"""
Configuration for the global float tolerance.

The only setting is the number of decimal digits that quantity equality,
hashing and rounding work to. It can be given in code, in a dict, or in the
'unit_algebra' section of a YAML file, and is pushed into float_tolerance
with apply().
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict
import logging

import yaml

from unit_algebra import float_tolerance

logger = logging.getLogger(__name__)

_KNOWN_KEYS = ('digit_precision',)


@dataclass
class UnitAlgebraConfig:
    """Configuration for quantity comparison.

    Attributes:
        digit_precision: Decimal digits used for tolerant equality, hashing
            and rounding. Epsilon is 10 ** -digit_precision.
    """
    digit_precision: int = float_tolerance.DEFAULT_DIGIT_PRECISION

    def __post_init__(self):
        if isinstance(self.digit_precision, bool) or not isinstance(self.digit_precision, int):
            raise ValueError(
                f"digit_precision must be an integer, got {type(self.digit_precision).__name__}"
            )
        if self.digit_precision < 0:
            raise ValueError(f"digit_precision must be non-negative, got {self.digit_precision}")

    @classmethod
    def from_yaml(cls, path: str) -> 'UnitAlgebraConfig':
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            UnitAlgebraConfig loaded from the file's 'unit_algebra' section

        Raises:
            FileNotFoundError: If configuration file does not exist
            ValueError: If the file is malformed or contains invalid values

        Example:
            >>> config = UnitAlgebraConfig.from_yaml('config/unit_algebra.yaml')
            >>> config.digit_precision
            10
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}\n"
                f"Please create a configuration file or use get_default_config()"
            )

        try:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}") from e

        if not data:
            raise ValueError(
                f"Configuration file is empty: {path}\n"
                f"Expected a 'unit_algebra' section"
            )

        if not isinstance(data, dict) or 'unit_algebra' not in data:
            raise ValueError(
                f"Configuration file missing 'unit_algebra' section: {path}\n"
                f"Expected structure: unit_algebra:\n  digit_precision: ..."
            )

        logger.debug(f"Loaded unit_algebra configuration from {config_path}")
        return cls.from_dict(data['unit_algebra'])

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'UnitAlgebraConfig':
        """Create configuration from a dictionary.

        Missing keys take their defaults; unknown keys are rejected.

        Raises:
            ValueError: If the dictionary has unknown keys or invalid values
        """
        if not isinstance(config, dict):
            raise ValueError(f"Configuration must be a dictionary, got {type(config)}")

        unknown = sorted(set(config) - set(_KNOWN_KEYS))
        if unknown:
            raise ValueError(
                f"Unknown configuration keys: {', '.join(unknown)}. "
                f"Must be one of: {', '.join(_KNOWN_KEYS)}"
            )

        return cls(**config)

    @classmethod
    def current(cls) -> 'UnitAlgebraConfig':
        """Snapshot of the settings float_tolerance is using right now."""
        return cls(digit_precision=float_tolerance.get_digit_precision())

    def to_dict(self) -> dict:
        return {'digit_precision': self.digit_precision}

    def apply(self) -> None:
        """Make this configuration the process-wide setting."""
        float_tolerance.set_digit_precision(self.digit_precision)
        logger.info(f"Applied unit_algebra configuration: digit_precision={self.digit_precision}")


def get_default_config() -> UnitAlgebraConfig:
    """Return the default configuration (10 digits of precision)."""
    return UnitAlgebraConfig()
