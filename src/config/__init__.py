"""Configuration loading for the Helius error library.

Configuration is read from the ``helius:`` section of config/config.yaml.

Example config.yaml
-------------------

helius:
  logging:
    level: ${HELIUS_LOG_LEVEL:-INFO}
    json_format: true
    log_to_stdout: false
    log_dir: /var/log/helius

Usage
-----

    >>> from config import get_config, configure_logging
    >>> config = get_config()
    >>> configure_logging(config)
"""

from config.config import (
    DEFAULT_CONFIG_FILE,
    HeliusConfig,
    configure_logging,
    get_config,
    load_config,
    reset_config,
    set_config,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "HeliusConfig",
    "configure_logging",
    "get_config",
    "load_config",
    "reset_config",
    "set_config",
]
