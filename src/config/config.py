"""Helius library configuration from YAML file.

Loads the ``helius:`` section of config/config.yaml:
- Log level and format
- Stdout-only or rotating file output

Environment variables ARE supported using ${VAR_NAME} syntax in YAML files.
HELIUS_LOG_LEVEL and HELIUS_LOG_JSON override the file.
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from helius_core.logging.setup import setup_logging

# Configure module logger
logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Default config file: config/config.yaml in src/ directory
DEFAULT_CONFIG_FILE = Path(__file__).parent / "config.yaml"


def load_yaml(path: Path) -> Dict[str, Any]:
    """Load YAML file and return dict."""
    if not path.exists():
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def _expand_env_vars(data: Any) -> Any:
    """Recursively expand ${VAR_NAME} and ${VAR_NAME:-default} environment variables in config data."""
    if isinstance(data, dict):
        return {key: _expand_env_vars(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        # Support both ${VAR} and ${VAR:-default} syntax
        pattern = r"\$\{([^}:]+)(?::-(([^}]*))?)?\}"

        def replacer(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else match.group(0)
            return os.getenv(var_name, default_value)

        return re.sub(pattern, replacer, data)
    else:
        return data


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge overlay into base dict."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


@dataclass
class HeliusConfig:
    """Helius library configuration.

    Configuration structure:
        helius:
          logging:
            level: INFO
            json_format: false
            log_to_stdout: true
            log_dir: logs
            suppress_noisy: true
    """

    log_level: str = "INFO"
    json_format: bool = False
    log_to_stdout: bool = True
    log_dir: str = "logs"
    suppress_noisy: bool = True

    def validate(self) -> None:
        """Validate configuration values."""
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level!r} "
                f"(expected one of {', '.join(VALID_LOG_LEVELS)})"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> HeliusConfig:
    """Load Helius configuration from config.yaml.

    A missing file yields the defaults. A file without a ``helius:`` section
    is rejected.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_FILE

    helius_config: Dict[str, Any] = {}
    if config_path.exists():
        logger.info(f"Loading configuration from file: {config_path}")
        yaml_data = _expand_env_vars(load_yaml(config_path))
        if "helius" not in yaml_data:
            raise ValueError(
                f"Invalid config file: missing 'helius:' section in {config_path}"
            )
        helius_config = yaml_data["helius"] or {}
    else:
        logger.debug(f"No configuration file at {config_path}, using defaults")

    if overrides:
        logger.debug(f"Applying overrides: {list(overrides.keys())}")
        helius_config = _deep_merge(helius_config, overrides)

    log_settings = helius_config.get("logging", {}) or {}

    config = HeliusConfig(
        log_level=str(os.getenv("HELIUS_LOG_LEVEL") or log_settings.get("level", "INFO")),
        json_format=_as_bool(os.getenv("HELIUS_LOG_JSON") or log_settings.get("json_format", False)),
        log_to_stdout=_as_bool(log_settings.get("log_to_stdout", True)),
        log_dir=str(log_settings.get("log_dir", "logs")),
        suppress_noisy=_as_bool(log_settings.get("suppress_noisy", True)),
    )

    config.validate()
    return config


def configure_logging(config: HeliusConfig) -> logging.Logger:
    """Apply logging settings through setup_logging()."""
    return setup_logging(
        name="helius",
        log_dir=Path(config.log_dir),
        json_format=config.json_format,
        console_level=config.log_level_number,
        suppress_noisy=config.suppress_noisy,
        log_to_stdout=config.log_to_stdout,
    )


_helius_config: Optional[HeliusConfig] = None


def get_config() -> HeliusConfig:
    """Get or load the singleton Helius config instance."""
    global _helius_config
    if _helius_config is None:
        _helius_config = load_config()
    return _helius_config


def set_config(config: HeliusConfig) -> None:
    """Set the singleton Helius config instance (useful for testing)."""
    global _helius_config
    _helius_config = config


def reset_config() -> None:
    """Reset the singleton config instance (forces reload on next get_config() call)."""
    global _helius_config
    _helius_config = None
