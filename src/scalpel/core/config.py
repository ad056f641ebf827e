"""Configuration loading and validation for Scalpel."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from scalpel.core.types import Severity

CONFIG_NAMES = (".scalpel.yaml", ".scalpel.yml")

VALID_FORMATS = {"text", "json", "sarif"}


class ConfigError(Exception):
    """Error in configuration."""

    pass


@dataclass
class CheckConfig:
    """Configuration for a single check."""

    enabled: bool = True
    severity_threshold: Severity = Severity.WARNING


@dataclass
class Config:
    """Full application configuration."""

    checks: dict[str, CheckConfig] = field(default_factory=dict)
    output_format: str = "text"
    fail_on: Optional[Severity] = Severity.ERROR
    max_fix_passes: int = 10
    ignore_paths: list[str] = field(default_factory=list)
    ignore_rules: dict[str, list[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        validate_config(self)

    def get_check_config(self, check_name: str) -> CheckConfig:
        """Get config for a check, returning defaults if not specified."""
        return self.checks.get(check_name, CheckConfig())

    def is_check_enabled(self, check_name: str) -> bool:
        """Check if a check is enabled."""
        return self.get_check_config(check_name).enabled


def validate_config(config: Config) -> None:
    """Validate configuration values.

    Raises:
        ConfigError: If any values are invalid.
    """
    if config.output_format not in VALID_FORMATS:
        raise ConfigError(
            f"output_format must be one of {sorted(VALID_FORMATS)}, got {config.output_format}"
        )

    if not isinstance(config.max_fix_passes, int) or config.max_fix_passes < 1:
        raise ConfigError(
            f"max_fix_passes must be a positive integer, got {config.max_fix_passes}"
        )


def find_config_file(start_path: Optional[str] = None) -> Optional[str]:
    """Find .scalpel.yaml in current directory or parents.

    Args:
        start_path: Starting directory (defaults to cwd).

    Returns:
        Path to config file if found, None otherwise.
    """
    if start_path:
        current = Path(start_path).resolve()
    else:
        current = Path.cwd()

    while True:
        for name in CONFIG_NAMES:
            config_path = current / name
            if config_path.exists():
                return str(config_path)

        # Stop at git root
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Optional[str] = None) -> Config:
    """Load configuration from file.

    Args:
        path: Path to config file. If None, searches for .scalpel.yaml.

    Returns:
        Config object with loaded or default values.

    Raises:
        ConfigError: If the config file is invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        return Config()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}") from e

    if raw is None:
        return Config()

    if not isinstance(raw, dict):
        raise ConfigError("Config file must contain a mapping at the top level")

    return _parse_config(raw)


def _parse_severity(value: Any, setting: str) -> Severity:
    try:
        return Severity(value)
    except ValueError:
        raise ConfigError(f"Invalid severity for {setting}: {value}")


def _parse_config(raw: dict) -> Config:
    """Parse raw YAML dict into Config object."""
    checks: dict[str, CheckConfig] = {}

    if "checks" in raw and isinstance(raw["checks"], dict):
        for check_name, check_raw in raw["checks"].items():
            if check_raw is None:
                check_raw = {}
            checks[check_name] = _parse_check_config(check_raw)

    settings = raw.get("settings", {})
    if settings is None:
        settings = {}

    output_format = settings.get("output_format", "text")
    max_fix_passes = settings.get("max_fix_passes", 10)

    fail_on: Optional[Severity] = Severity.ERROR
    if "fail_on" in settings:
        if settings["fail_on"] in (None, "none"):
            fail_on = None
        else:
            fail_on = _parse_severity(settings["fail_on"], "fail_on")

    ignore = raw.get("ignore", {})
    if ignore is None:
        ignore = {}

    ignore_paths = ignore.get("paths", [])
    if ignore_paths is None:
        ignore_paths = []

    ignore_rules = ignore.get("rules", {})
    if ignore_rules is None:
        ignore_rules = {}

    # Convert ignore_rules list format to dict format if needed
    if isinstance(ignore_rules, list):
        # Format: ["UnmatchedDisable:legacy/*", ...]
        parsed_rules: dict[str, list[str]] = {}
        for rule_pattern in ignore_rules:
            if ":" in rule_pattern:
                rule, pattern = rule_pattern.split(":", 1)
            else:
                # No pattern means ignore everywhere
                rule, pattern = rule_pattern, "*"
            parsed_rules.setdefault(rule, []).append(pattern)
        ignore_rules = parsed_rules

    return Config(
        checks=checks,
        output_format=output_format,
        fail_on=fail_on,
        max_fix_passes=max_fix_passes,
        ignore_paths=ignore_paths,
        ignore_rules=ignore_rules,
    )


def _parse_check_config(raw: dict) -> CheckConfig:
    """Parse check configuration."""
    enabled = raw.get("enabled", True)

    severity_threshold = Severity.WARNING
    if "severity_threshold" in raw:
        severity_threshold = _parse_severity(raw["severity_threshold"], "severity_threshold")

    return CheckConfig(enabled=enabled, severity_threshold=severity_threshold)


def merge_cli_args(config: Config, **kwargs: Any) -> Config:
    """Merge CLI arguments into configuration.

    CLI args take precedence over config file values.

    Args:
        config: Base configuration.
        **kwargs: CLI arguments (output_format, fail_on, max_fix_passes).

    Returns:
        New Config with merged values.
    """
    output_format = config.output_format
    fail_on = config.fail_on
    max_fix_passes = config.max_fix_passes

    if kwargs.get("output_format") is not None:
        output_format = kwargs["output_format"]

    if kwargs.get("fail_on") is not None:
        fail_on = kwargs["fail_on"]

    if kwargs.get("max_fix_passes") is not None:
        max_fix_passes = kwargs["max_fix_passes"]

    return Config(
        checks=dict(config.checks),
        output_format=output_format,
        fail_on=fail_on,
        max_fix_passes=max_fix_passes,
        ignore_paths=list(config.ignore_paths),
        ignore_rules=dict(config.ignore_rules),
    )
