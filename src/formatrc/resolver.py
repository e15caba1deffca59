import logging
from fnmatch import fnmatchcase
from pathlib import Path, PurePath
from typing import Any

from .models import FORMATTER_DEFAULTS, FormatConfig, OverrideRule

logger = logging.getLogger(__name__)


def _pattern_matches(pattern: str, file_path: PurePath, root: Path | None) -> bool:
    # Patterns without a slash match the basename anywhere in the tree
    if "/" not in pattern:
        return fnmatchcase(file_path.name, pattern)

    relative = file_path
    if root is not None:
        try:
            relative = Path(file_path).resolve().relative_to(Path(root).resolve())
        except ValueError:
            return False
    pattern = pattern.lstrip("/")
    if pattern.startswith("**/") and _pattern_matches(pattern[3:], relative, None):
        return True
    return fnmatchcase(relative.as_posix(), pattern)


def matches(rule: OverrideRule, file_path: str | PurePath, root: Path | None = None) -> bool:
    """Check whether an override rule covers ``file_path``"""
    path = PurePath(file_path)
    if not _pattern_matches(rule.files, path, root):
        return False
    return not any(_pattern_matches(p, path, root) for p in rule.exclude_files or ())


def resolve_options(
    config: FormatConfig,
    file_path: str | PurePath,
    root: Path | None = None,
    with_defaults: bool = False,
) -> dict[str, Any]:
    """Effective options for one file.

    Top-level options come first; each matching override is then applied
    in order, so a later rule wins over an earlier one key by key.
    """
    options = config.global_options()
    if with_defaults:
        options = FORMATTER_DEFAULTS.merged(options)

    for index, rule in enumerate(config.overrides):
        if matches(rule, file_path, root):
            logger.debug("Override %d (%s) applies to %s", index, rule.files, file_path)
            options = options.merged(rule.options)

    return options.options_dict()
