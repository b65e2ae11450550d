"""
Validator settings.

Settings come from, in increasing priority: model defaults, an optional
YAML file, and INPUTGUARD_* environment variables.

Expected YAML format:
```yaml
validator:
  stop_on_first_failure: true
  log_level: DEBUG
  log_format: text
  metrics_enabled: false
```
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import ConfigurationError
from .observability.logger import ROOT_LOGGER_NAME, setup_logger

ENV_PREFIX = "INPUTGUARD_"


class ValidatorSettings(BaseModel):
    """
    Runtime settings shared by validators.

    Attributes:
        stop_on_first_failure: Halt a run at the first failing attribute
        log_level: Level for the inputguard logger
        log_format: "json" or "text" log output
        metrics_enabled: Record Prometheus metrics for validation runs
    """

    model_config = ConfigDict(extra="forbid")

    stop_on_first_failure: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "text"] = "json"
    metrics_enabled: bool = Field(default=True)


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for field_name in ValidatorSettings.model_fields:
        value = environ.get(ENV_PREFIX + field_name.upper())
        if value is not None:
            overrides[field_name] = value.upper() if field_name == "log_level" else value
    return overrides


def load_settings(
    config_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ValidatorSettings:
    """
    Load validator settings.

    Args:
        config_path: Optional YAML file with a ``validator`` section
        environ: Environment mapping (defaults to os.environ)

    Returns:
        ValidatorSettings instance

    Raises:
        FileNotFoundError: If config_path does not exist
        ConfigurationError: If the file or environment holds invalid settings
    """
    values: dict[str, Any] = {}

    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Validator configuration file not found: {config_path}")

        with open(path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(config, dict) or "validator" not in config:
            raise ConfigurationError("Configuration file must contain 'validator' section")

        section = config["validator"] or {}
        if not isinstance(section, dict):
            raise ConfigurationError("The 'validator' section must be a mapping")
        values.update(section)

    values.update(_env_overrides(os.environ if environ is None else environ))

    try:
        return ValidatorSettings(**values)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid validator settings: {e}") from e


def configure_logging(settings: ValidatorSettings) -> logging.Logger:
    """
    Apply the logging settings to the inputguard package logger.

    Args:
        settings: Settings whose log_level and log_format should be used

    Returns:
        The configured package logger
    """
    return setup_logger(ROOT_LOGGER_NAME, level=settings.log_level, format_type=settings.log_format)
