"""
Configuration for the vitals checker.

Values are resolved in order of precedence: environment variables
(VITALS_ prefix), then a JSON or YAML file, then dataclass defaults.
"""

import os
import json
import math
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .services.age_ranges import OutputWriter
from .services.display import VitalSignDisplay

logger = logging.getLogger(__name__)

ENV_PREFIX = "VITALS_"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
TRUTHY_VALUES = ("true", "1", "yes", "on")
FALSY_VALUES = ("false", "0", "no", "off")


class ConfigurationError(ValueError):
    """Raised when configuration cannot be loaded or fails validation"""
    pass


@dataclass
class CheckerConfig:
    """Runtime settings for validation defaults, alert display and logging."""

    default_age: int = 25

    # Critical alert animation
    blink_cycles: int = 6
    frame_delay_seconds: float = 1.0

    log_level: str = "INFO"
    metrics_enabled: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CheckerConfig':
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)


class ConfigValidator:
    """Per-field type and range checks for CheckerConfig."""

    def __init__(self):
        self.validation_rules = {
            'default_age': {
                'type': int,
                'min': 0,
                'max': 150
            },
            'blink_cycles': {
                'type': int,
                'min': 0,
                'max': 60
            },
            'frame_delay_seconds': {
                'type': (int, float),
                'min': 0.0,
                'max': 10.0
            },
            'log_level': {
                'type': str,
                'allowed_values': ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
            },
            'metrics_enabled': {
                'type': bool
            }
        }

    def validate_config(self, config: CheckerConfig) -> List[str]:
        """
        Validate configuration against rules.

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        for key, value in config.to_dict().items():
            if key in self.validation_rules:
                errors.extend(self._validate_field(key, value, self.validation_rules[key]))
        return errors

    def _validate_field(self, field_name: str, value: Any, rules: Dict[str, Any]) -> List[str]:
        errors = []

        expected_type = rules.get('type')
        # bool is an int subclass; only accept it where bool is expected
        if expected_type is not bool and isinstance(value, bool):
            return [f"{field_name}: Expected number, got bool"]
        if expected_type and not isinstance(value, expected_type):
            type_name = getattr(expected_type, '__name__', 'number')
            errors.append(f"{field_name}: Expected {type_name}, got {type(value).__name__}")
            return errors

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if not math.isfinite(value):
                return [f"{field_name}: Value {value} is not a finite number"]

            min_val = rules.get('min')
            max_val = rules.get('max')

            if min_val is not None and value < min_val:
                errors.append(f"{field_name}: Value {value} below minimum {min_val}")

            if max_val is not None and value > max_val:
                errors.append(f"{field_name}: Value {value} above maximum {max_val}")

        allowed_values = rules.get('allowed_values')
        if allowed_values and value not in allowed_values:
            errors.append(f"{field_name}: Value '{value}' not in allowed values: {allowed_values}")

        return errors


def _load_file_config(file_path: str) -> Dict[str, Any]:
    path = Path(file_path)
    if not path.exists():
        logger.warning(f"Configuration file {file_path} does not exist")
        return {}

    suffix = path.suffix.lower()
    if suffix not in ('.json', '.yml', '.yaml'):
        raise ConfigurationError(f"Unsupported configuration file format: {path.suffix}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            if suffix == '.json':
                file_config = json.load(f)
            else:
                file_config = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError, OSError) as e:
        raise ConfigurationError(f"Failed to parse configuration file {file_path}: {e}") from e

    if file_config is None:
        return {}
    if not isinstance(file_config, dict):
        raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")

    logger.info(f"Configuration loaded from file: {file_path}")
    return file_config


def _parse_env_value(env_var: str, env_value: str, target_type: type) -> Any:
    if target_type == bool:
        normalized = env_value.strip().lower()
        if normalized in TRUTHY_VALUES:
            return True
        if normalized in FALSY_VALUES:
            return False
        raise ConfigurationError(f"Invalid boolean for {env_var}: {env_value!r}")
    try:
        if target_type == int:
            return int(env_value)
        if target_type == float:
            return float(env_value)
    except ValueError as e:
        raise ConfigurationError(f"Invalid value for {env_var}: {env_value!r}") from e
    return env_value


def _load_environment_config(defaults: CheckerConfig) -> Dict[str, Any]:
    env_config = {}
    for key, default_value in defaults.to_dict().items():
        env_var = f"{ENV_PREFIX}{key.upper()}"
        env_value = os.getenv(env_var)
        if env_value is not None:
            env_config[key] = _parse_env_value(env_var, env_value, type(default_value))
    return env_config


def load_config(config_file_path: Optional[str] = None) -> CheckerConfig:
    """
    Build a validated CheckerConfig from defaults, an optional file and the environment.

    Raises:
        ConfigurationError: If a source is malformed or the result fails validation
    """
    defaults = CheckerConfig()
    config_dict = defaults.to_dict()

    if config_file_path:
        config_dict.update(_load_file_config(config_file_path))
    config_dict.update(_load_environment_config(defaults))

    config = CheckerConfig.from_dict(config_dict)

    validation_errors = ConfigValidator().validate_config(config)
    if validation_errors:
        logger.error(f"Configuration validation failed: {validation_errors}")
        raise ConfigurationError(f"Configuration validation errors: {validation_errors}")

    return config


def configure_logging(config: CheckerConfig):
    logging.basicConfig(level=getattr(logging, config.log_level), format=LOG_FORMAT)


def build_display(config: CheckerConfig, output_writer: Optional[OutputWriter] = None) -> VitalSignDisplay:
    return VitalSignDisplay(
        output_writer=output_writer,
        blink_cycles=config.blink_cycles,
        frame_delay_seconds=config.frame_delay_seconds
    )
