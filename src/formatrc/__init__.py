"""
formatrc - Formatter configuration for the project

This package provides:
- Typed, immutable models for formatter options and override rules
- The project's formatter configuration (PROJECT_CONFIG)
- Loading and discovery of configuration files on disk
- Per-file option resolution
"""

__version__ = "0.1.0"

from .config import find_config, load_config, resolve_config_file
from .errors import ConfigError
from .models import FormatConfig, FormatOptions, OverrideRule
from .project import PROJECT_CONFIG
from .resolver import resolve_options

__all__ = [
    "ConfigError",
    "FormatConfig",
    "FormatOptions",
    "OverrideRule",
    "PROJECT_CONFIG",
    "find_config",
    "load_config",
    "resolve_config_file",
    "resolve_options",
]
