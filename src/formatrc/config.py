import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ConfigError
from .models import FormatConfig

logger = logging.getLogger(__name__)

# Checked in this order within each directory while walking upward.
CONFIG_FILENAMES = (
    "package.json",
    ".prettierrc",
    ".prettierrc.json",
    ".prettierrc.toml",
    "pyproject.toml",
)


def load_config(path: Path) -> FormatConfig:
    """Load and validate a configuration file.

    TOML files hold the config at the top level, except ``pyproject.toml``
    which keeps it under ``[tool.prettier]``. ``package.json`` keeps it
    under the ``"prettier"`` key. Everything else is read as JSON.
    """
    path = Path(path)
    data = _read_section(path)
    if data is None:
        raise ConfigError("no formatter configuration section found", path)
    if not isinstance(data, dict):
        raise ConfigError("configuration must be an object", path)

    try:
        config = FormatConfig.from_mapping(data)
    except ValidationError as e:
        raise ConfigError(_describe(e), path) from e

    logger.info("Loaded formatter config from %s (%d overrides)", path, len(config.overrides))
    return config


def find_config(start: Path) -> Path | None:
    """Walk from ``start`` up to the filesystem root looking for a config file"""
    start = Path(start).resolve()
    directory = start if start.is_dir() else start.parent

    for candidate_dir in (directory, *directory.parents):
        for name in CONFIG_FILENAMES:
            candidate = candidate_dir / name
            if not candidate.is_file():
                continue
            if name in ("package.json", "pyproject.toml") and not _has_section(candidate):
                logger.debug("Skipping %s: no formatter section", candidate)
                continue
            logger.debug("Found formatter config at %s", candidate)
            return candidate

    return None


def resolve_config_file(file_path: Path) -> FormatConfig | None:
    """Load the configuration governing ``file_path``, if any"""
    config_path = find_config(Path(file_path))
    if config_path is None:
        logger.debug("No formatter config found for %s", file_path)
        return None
    return load_config(config_path)


def _read_section(path: Path) -> Any:
    try:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError("file not found", path) from e
    except OSError as e:
        raise ConfigError(f"cannot read file: {e.strerror}", path) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}", path) from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON: {e.msg} (line {e.lineno})", path) from e

    if path.name == "pyproject.toml":
        tool = data.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table", path)
        return tool.get("prettier")
    if path.name == "package.json":
        return data.get("prettier") if isinstance(data, dict) else None
    return data


def _has_section(path: Path) -> bool:
    try:
        return _read_section(path) is not None
    except ConfigError:
        logger.debug("Skipping unreadable %s", path)
        return False


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)
