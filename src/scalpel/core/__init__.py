"""Core module for Scalpel."""

from scalpel.core.config import (
    CheckConfig,
    Config,
    ConfigError,
    find_config_file,
    load_config,
    merge_cli_args,
)
from scalpel.core.types import AnalysisResult, Diagnostic, Fix, Location, Severity

__all__ = [
    "Severity",
    "Location",
    "Fix",
    "Diagnostic",
    "AnalysisResult",
    "Config",
    "ConfigError",
    "CheckConfig",
    "load_config",
    "find_config_file",
    "merge_cli_args",
]
