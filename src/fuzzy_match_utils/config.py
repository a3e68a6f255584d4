"""YAML configuration loader for substitution tables and option lists."""

import logging
from pathlib import Path
from typing import Any

import yaml

from fuzzy_match_utils.models.pydantic_models import Option, SubstitutionConfig

logger = logging.getLogger(__name__)


def _get_default_config_path() -> Path:
    """Get the default substitutions path relative to project root."""
    return Path(__file__).parent.parent.parent / "config" / "substitutions.yaml"


def _load_yaml(path: Path) -> Any:
    """Load raw YAML from path.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If YAML parsing fails.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_substitutions(path: Path | None = None) -> dict[str, str]:
    """Load and validate a substitution table from YAML.

    The file holds a top-level ``substitutions`` mapping of regular
    expression -> replacement. Entries keep their file order, which is the
    order they are applied in.

    Args:
        path: Path to YAML config file. If None, uses default config/substitutions.yaml.

    Returns:
        Ordered pattern -> replacement dict.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If YAML parsing fails.
        ValidationError: If a pattern doesn't compile or a value isn't a string.
    """
    if path is None:
        path = _get_default_config_path()

    raw_config = _load_yaml(path)

    # Handle empty config file
    if raw_config is None:
        raw_config = {}

    config = SubstitutionConfig(substitutions=raw_config.get("substitutions") or {})
    logger.debug("Loaded %d substitutions from %s", len(config.substitutions), path)

    return dict(config.substitutions)


def load_options(path: Path) -> list[Option[Any]]:
    """Load options from a YAML or JSON file.

    The file holds either a list of ``{label, value}`` mappings or a mapping
    with such a list under ``options``.

    Args:
        path: Path to the options file.

    Returns:
        List of validated Option instances, in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If parsing fails.
        ValidationError: If an entry is missing its label or value.
    """
    raw_options = _load_yaml(path)

    if raw_options is None:
        raw_options = []
    elif isinstance(raw_options, dict):
        raw_options = raw_options.get("options") or []

    options = [Option[Any].model_validate(opt) for opt in raw_options]
    logger.debug("Loaded %d options from %s", len(options), path)

    return options
