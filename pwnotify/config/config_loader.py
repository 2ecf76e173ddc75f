"""Configuration loader for run settings."""

import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .run_config import RunConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigMissingError(ConfigError):
    """Raised when the configuration file does not exist."""

    pass


class MalformedConfigError(ConfigError):
    """Raised when the configuration file cannot be parsed."""

    pass


class IncompleteFieldError(ConfigError):
    """Raised when a required setting is absent, empty or invalid."""

    def __init__(self, field_name: str, details: str = ""):
        self.field_name = field_name
        message = f"Configuration field '{field_name}' is missing or empty"
        if details:
            message = f"{message}: {details}"
        super().__init__(message)


# model field -> key in the settings file
FIELD_SOURCES = {
    "smtp_host": "smtp",
    "admin_email": "adminemail",
    "password_policy_days": "policy",
    "upper_threshold_days": "upperthreshold",
    "lower_threshold_days": "lowerthreshold",
    "email_from": "email.from",
    "email_subject": "email.subject",
    "email_body_template": "email.body",
    "exclusions": "exclusions.exclusion",
    "smtp_port": "smtpport",
    "report_path": "reportpath",
    "admin_subject": "adminsubject",
    "directory": "directory",
}

DIRECTORY_SOURCES = {
    "uri": "uri",
    "base_dn": "basedn",
    "bind_dn": "binddn",
    "bind_password": "bindpassword",
    "search_filter": "filter",
    "timeout": "timeout",
}


def _lookup(data: dict, dotted_key: str):
    value = data
    for part in dotted_key.split("."):
        if not isinstance(value, dict) or part not in value:
            return None
        value = value[part]
    return value


def _xml_to_dict(element: ET.Element):
    """Convert an element into nested dicts; repeated tags become lists."""
    children = list(element)
    if not children:
        return element.text
    result: dict = {}
    for child in children:
        value = _xml_to_dict(child)
        if child.tag in result:
            existing = result[child.tag]
            if not isinstance(existing, list):
                result[child.tag] = [existing]
            result[child.tag].append(value)
        else:
            result[child.tag] = value
    return result


def _clean(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def settings_to_fields(data: dict) -> dict:
    """
    Map raw settings file content onto RunConfig field names.

    Absent and empty values are left out so validation reports them as
    missing.
    """
    fields = {}
    for field_name, source in FIELD_SOURCES.items():
        if field_name == "exclusions":
            value = _lookup(data, "exclusions")
            if isinstance(value, dict):
                value = value.get("exclusion")
            if value is None:
                continue
            if not isinstance(value, list):
                value = [value]
            fields[field_name] = [v for v in (_clean(x) for x in value) if v]
            continue

        if field_name == "directory":
            value = _lookup(data, "directory")
            if value is None:
                continue
            if not isinstance(value, dict):
                value = {}
            fields[field_name] = {
                name: _clean(value.get(key))
                for name, key in DIRECTORY_SOURCES.items()
                if _clean(value.get(key)) is not None
            }
            continue

        value = _lookup(data, source)
        if field_name == "email_body_template":
            # keep inner indentation and line breaks of the template
            if isinstance(value, str) and value.strip():
                fields[field_name] = value.strip("\r\n")
            continue

        value = _clean(value)
        if value is not None:
            fields[field_name] = value
    return fields


class ConfigLoader:
    """Load and validate run configuration."""

    DEFAULT_CONFIG_PATHS = [
        Path("~/.pwnotify/settings.xml"),
        Path("config/settings.xml"),
    ]

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Optional custom config file path
        """
        self.config_path = config_path
        self._config: Optional[RunConfig] = None

    def resolve_path(self) -> Path:
        """
        Find the settings file to read.

        Raises:
            ConfigMissingError: If no config file found
        """
        config_paths = [self.config_path] if self.config_path else self.DEFAULT_CONFIG_PATHS

        for config_path in config_paths:
            if config_path and config_path.expanduser().is_file():
                return config_path.expanduser()

        searched = ", ".join(str(p) for p in config_paths)
        raise ConfigMissingError(f"Configuration file not found (searched: {searched})")

    def load(self) -> RunConfig:
        """
        Load run configuration from file.

        Returns:
            RunConfig instance

        Raises:
            ConfigMissingError: If no config file found
            MalformedConfigError: If the file cannot be parsed
            IncompleteFieldError: If a required field is absent or invalid
        """
        if self._config is not None:
            return self._config

        path = self.resolve_path()
        data = self._read(path)
        fields = settings_to_fields(data)

        try:
            self._config = RunConfig(**fields)
        except ValidationError as e:
            error = e.errors()[0]
            raise IncompleteFieldError(_source_name(error["loc"]), error["msg"]) from e

        logger.info("Loaded configuration from %s", path)
        return self._config

    @staticmethod
    def _read(path: Path) -> dict:
        if path.suffix.lower() == ".json":
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise MalformedConfigError(f"Invalid JSON in {path}: {e}") from e
            except OSError as e:
                raise MalformedConfigError(f"Cannot read {path}: {e}") from e
            if not isinstance(data, dict):
                raise MalformedConfigError(f"Invalid config in {path}: expected an object")
            return data

        try:
            root = ET.parse(path).getroot()
        except ET.ParseError as e:
            raise MalformedConfigError(f"Invalid XML in {path}: {e}") from e
        except OSError as e:
            raise MalformedConfigError(f"Cannot read {path}: {e}") from e
        data = _xml_to_dict(root)
        # an empty <settings/> parses fine; its fields are reported as missing
        return data if isinstance(data, dict) else {}


def _source_name(loc: tuple) -> str:
    if not loc:
        return "settings"
    field_name = str(loc[0])
    if field_name == "directory" and len(loc) > 1:
        return f"directory.{DIRECTORY_SOURCES.get(str(loc[1]), loc[1])}"
    return FIELD_SOURCES.get(field_name, field_name)


def load_config(config_path: Optional[Path] = None) -> RunConfig:
    """Load a RunConfig from file."""
    return ConfigLoader(config_path).load()
