"""Configuration management"""

from .config_loader import (
    ConfigError,
    ConfigLoader,
    ConfigMissingError,
    IncompleteFieldError,
    MalformedConfigError,
    load_config,
)
from .run_config import DirectoryConfig, RunConfig

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "ConfigMissingError",
    "IncompleteFieldError",
    "MalformedConfigError",
    "load_config",
    "DirectoryConfig",
    "RunConfig",
]
