"""Analysis configuration parsing and validation."""

import os
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Dict, Any

import yaml

from datamind.core.exceptions import (
    ConfigError,
    YAMLSizeError,
    ConfigValidationError
)
from datamind.core.constants import (
    VARIANCE_MULTIPLIER,
    MIN_VALUES_FOR_VARIANCE,
    CARDINALITY_THRESHOLD,
    CORRELATION_THRESHOLD,
    MIN_ROWS_FOR_VOLUME_INSIGHT,
    MIN_CORRELATION_PAIRS,
    DISPLAY_DECIMALS,
    DEFAULT_MODE_TIE_BREAK,
    MODE_TIE_BREAKS,
    MAX_YAML_FILE_SIZE,
)


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Detection policy for the analysis engine.

    All thresholds can be customized per-use-case; defaults come from
    the constants module.

    Attributes:
        variance_multiplier: Range must exceed mean times this to flag variance
        min_values_for_variance: Numeric values required before variance is checked
        cardinality_threshold: Unique/row ratio above which a column looks like a key
        correlation_threshold: |r| above which a pair is strongly correlated
        min_rows_for_volume: Volume summary fires when row count exceeds this
        min_correlation_pairs: Complete-case pairs needed for a non-zero r
        display_decimals: Decimal places for rendered statistics
        mode_tie_break: 'last_seen' or 'smallest'
    """
    variance_multiplier: float = VARIANCE_MULTIPLIER
    min_values_for_variance: int = MIN_VALUES_FOR_VARIANCE
    cardinality_threshold: float = CARDINALITY_THRESHOLD
    correlation_threshold: float = CORRELATION_THRESHOLD
    min_rows_for_volume: int = MIN_ROWS_FOR_VOLUME_INSIGHT
    min_correlation_pairs: int = MIN_CORRELATION_PAIRS
    display_decimals: int = DISPLAY_DECIMALS
    mode_tie_break: str = DEFAULT_MODE_TIE_BREAK

    MAX_YAML_FILE_SIZE = MAX_YAML_FILE_SIZE

    def __post_init__(self):
        if self.mode_tie_break not in MODE_TIE_BREAKS:
            raise ConfigValidationError(
                f"Unknown mode tie-break: '{self.mode_tie_break}'",
                field="mode_tie_break",
                expected=", ".join(MODE_TIE_BREAKS),
                actual=str(self.mode_tie_break)
            )
        if self.display_decimals < 0:
            raise ConfigValidationError(
                "display_decimals must be >= 0",
                field="display_decimals",
                expected=">= 0",
                actual=str(self.display_decimals)
            )

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "AnalysisConfig":
        """
        Build a config from a mapping, validating keys and value types.

        Args:
            config_dict: Mapping of field name to value

        Returns:
            AnalysisConfig instance

        Raises:
            ConfigValidationError: On unknown keys or values of the wrong type
        """
        if config_dict is None:
            return cls()
        if not isinstance(config_dict, dict):
            raise ConfigValidationError(
                "Analysis configuration must be a mapping",
                field="analysis",
                expected="mapping",
                actual=type(config_dict).__name__
            )

        known = {f.name: f for f in fields(cls)}
        values = {}
        for key, value in config_dict.items():
            if key not in known:
                raise ConfigValidationError(
                    f"Unknown configuration field: '{key}'",
                    field=key,
                    expected=", ".join(known),
                    actual=key
                )
            values[key] = cls._coerce(key, known[key].type, value)

        return cls(**values)

    @staticmethod
    def _coerce(key: str, declared, value: Any) -> Any:
        """Coerce a YAML scalar to the declared field type."""
        type_name = declared if isinstance(declared, str) else declared.__name__
        # bool is an int subclass, reject it explicitly
        if isinstance(value, bool):
            raise ConfigValidationError(
                f"Invalid value for '{key}': {value!r}",
                field=key, expected=type_name, actual=repr(value)
            )
        if type_name == "float" and isinstance(value, (int, float)):
            return float(value)
        if type_name == "int" and isinstance(value, int):
            return value
        if type_name == "str" and isinstance(value, str):
            return value
        raise ConfigValidationError(
            f"Invalid value for '{key}': {value!r}",
            field=key, expected=type_name, actual=repr(value)
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AnalysisConfig":
        """
        Load configuration from a YAML file.

        The document holds an ``analysis:`` mapping of field overrides.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            AnalysisConfig instance

        Raises:
            ConfigError: If file not found or invalid
            YAMLSizeError: If file exceeds size limit
            ConfigValidationError: If values don't match the schema
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        file_size = os.path.getsize(config_file)
        if file_size > cls.MAX_YAML_FILE_SIZE:
            raise YAMLSizeError(
                f"Configuration file too large: {file_size:,} bytes. "
                f"Maximum allowed: {cls.MAX_YAML_FILE_SIZE:,} bytes",
                file_size=file_size,
                max_size=cls.MAX_YAML_FILE_SIZE
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML file: {str(e)}")
        except UnicodeDecodeError as e:
            raise ConfigError(f"Invalid file encoding (expected UTF-8): {str(e)}")

        if config_dict is None:
            return cls()
        if not isinstance(config_dict, dict):
            raise ConfigValidationError(
                "Configuration root must be a mapping",
                expected="mapping",
                actual=type(config_dict).__name__
            )

        return cls.from_dict(config_dict.get("analysis"))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return asdict(self)
