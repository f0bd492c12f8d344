"""Discovery and loading of the project's commit lint configuration."""

import json
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .errors import ConfigValidationError, MalformedConfig
from .models import LintConfiguration
from .validator import ConfigValidator
from ..utils.logging import get_logger

logger = get_logger("config.loader")

# Searched in this order in the project root
CONFIG_FILENAMES = (
    ".commitlintrc.yaml",
    ".commitlintrc.yml",
    ".commitlintrc.json",
    ".commitlintrc",
)


def find_config_file(root: Union[str, Path, None] = None) -> Optional[Path]:
    """
    Find the configuration file in a project root.

    Args:
        root: Directory to search (defaults to the current directory)

    Returns:
        Path to the first matching file, or None
    """
    root_path = Path(root) if root is not None else Path.cwd()
    for filename in CONFIG_FILENAMES:
        candidate = root_path / filename
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: Union[str, Path]) -> Any:
    """
    Parse a configuration file.

    ``.json`` files are read as JSON, everything else as YAML.

    Raises:
        FileNotFoundError: If the file doesn't exist
        MalformedConfig: If the file cannot be read as UTF-8 YAML/JSON
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedConfig(str(path), f"file is not valid UTF-8: {e}") from e
    except OSError as e:
        raise MalformedConfig(str(path), f"could not read file: {e}") from e

    try:
        if path.suffix == ".json":
            return json.loads(text)
        return yaml.safe_load(text) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise MalformedConfig(str(path), f"could not parse file: {e}") from e


def load_config(
    config_path: Union[str, Path, None] = None,
    root: Union[str, Path, None] = None,
    allow_unknown_rules: bool = False,
) -> LintConfiguration:
    """
    Load and validate the configuration, raising on errors.

    Args:
        config_path: Explicit path to the configuration file
        root: Project root searched when no path is given
        allow_unknown_rules: Pass unknown rules through instead of rejecting them

    Returns:
        Validated LintConfiguration

    Raises:
        ConfigValidationError: If validation fails
        FileNotFoundError: If no configuration file exists
    """
    if config_path is None:
        config_path = find_config_file(root)
        if config_path is None:
            raise FileNotFoundError(
                f"No configuration file found in {Path(root) if root else Path.cwd()} "
                f"(looked for {', '.join(CONFIG_FILENAMES)})"
            )

    logger.debug(f"Loading commit lint configuration from {config_path}")
    try:
        data = read_config_file(config_path)
    except MalformedConfig as e:
        raise ConfigValidationError([e]) from e

    validator = ConfigValidator(allow_unknown_rules=allow_unknown_rules)
    result = validator.validate(data)

    if not result.valid:
        raise ConfigValidationError(result.errors)

    for warning in result.warnings:
        logger.warning(f"Config warning: {warning}")

    return result.config
