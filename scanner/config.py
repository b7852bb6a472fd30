"""Scanner configuration and YAML config file loading."""

import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Set

import yaml


logger = logging.getLogger(__name__)

# Resolution tries extensions in this order, so it doubles as the priority order.
DEFAULT_EXTENSIONS = [".js", ".jsx", ".ts", ".tsx", ".vue", ".svelte"]
DEFAULT_IGNORE_DIRS = {"node_modules"}

CONFIG_FILENAMES = (".projectmap.yml", ".projectmap.yaml")
KNOWN_KEYS = {"extensions", "ignore_dirs"}


class ProjectMapperError(Exception):
    """Base exception for project mapping errors."""


class ConfigError(ProjectMapperError):
    """Raised when a configuration file is missing or malformed."""


def normalize_extensions(extensions: Iterable[str]) -> List[str]:
    """
    Normalize extensions to lower-case with a leading dot.

    Duplicates are dropped and first-seen order is kept.
    """
    result: List[str] = []
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        if ext not in result:
            result.append(ext)
    return result


class MapperConfig:
    """
    Settings for one analysis run.

    Attributes:
        extensions: Analyzable file extensions in resolution priority order.
        ignore_dirs: Directory names that are never traversed. Directories
            starting with a dot are always skipped as well.
    """

    def __init__(
        self,
        extensions: Optional[Iterable[str]] = None,
        ignore_dirs: Optional[Iterable[str]] = None,
    ):
        self.extensions = normalize_extensions(
            DEFAULT_EXTENSIONS if extensions is None else extensions
        )
        self.ignore_dirs: Set[str] = set(DEFAULT_IGNORE_DIRS if ignore_dirs is None else ignore_dirs)

    def is_analyzable(self, path: Path) -> bool:
        """Check whether a file's extension is in the analyzable set."""
        return path.suffix.lower() in self.extensions

    def is_ignored_dir(self, name: str) -> bool:
        """Check whether a directory name should be skipped."""
        return name.startswith(".") or name in self.ignore_dirs

    def __repr__(self) -> str:
        return f"MapperConfig(extensions={self.extensions!r}, ignore_dirs={sorted(self.ignore_dirs)!r})"


def find_config_file(root: Path) -> Optional[Path]:
    """Return the first config file present in ``root``, if any."""
    for filename in CONFIG_FILENAMES:
        candidate = root / filename
        if candidate.is_file():
            return candidate
    return None


def load_config(root: Path, config_file: Optional[Path] = None) -> MapperConfig:
    """
    Load configuration from YAML.

    Args:
        root: Project root, searched for ``.projectmap.yml`` when no explicit
            file is given.
        config_file: Explicit config file path.

    Returns:
        The loaded configuration, or defaults when no file exists.

    Raises:
        ConfigError: If an explicit file is missing, or the file cannot be
            parsed or holds values of the wrong type.
    """
    if config_file is None:
        config_file = find_config_file(root)
        if config_file is None:
            return MapperConfig()
    elif not config_file.is_file():
        raise ConfigError(f"Config file not found: {config_file}")

    try:
        data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {config_file}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")

    for key in sorted(set(data) - KNOWN_KEYS):
        logger.warning("Ignoring unknown config key %r in %s", key, config_file)

    extensions = _string_list(data, "extensions", config_file)
    ignore_dirs = _string_list(data, "ignore_dirs", config_file)

    logger.debug("Loaded config from %s", config_file)
    return MapperConfig(
        extensions=extensions,
        ignore_dirs=DEFAULT_IGNORE_DIRS | set(ignore_dirs or ()),
    )


def _string_list(data: dict, key: str, source: Path) -> Optional[List[str]]:
    value: Any = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"'{key}' in {source} must be a list of strings")
    return value
