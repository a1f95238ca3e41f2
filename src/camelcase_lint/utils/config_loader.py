import logging
from pathlib import Path
from typing import Any

from camelcase_lint.naming_analysis.options import RuleOptions

from .file_loader import load_yaml

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve(strict=True).parent.parent.parent.parent / "config"
DEFAULT_CONFIG = "camelcase.yaml"
RULE_SECTION = "camelcase"


def load_config(filename: str | Path = DEFAULT_CONFIG) -> dict[str, Any]:
    """Load a YAML configuration file.

    Args:
        filename (str | Path): Name of a file in the config directory
            (e.g. 'camelcase.yaml') or a path to a YAML file elsewhere.

    Returns:
        Dict[str, Any]: Parsed configuration as a dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the YAML file cannot be parsed.
    """
    path = Path(filename)
    if not path.is_absolute() and not path.exists():
        path = CONFIG_DIR / path
    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    logger.debug("Loading configuration from %s", path)
    return load_yaml(path)


def load_rule_options(filename: str | Path | None = None) -> RuleOptions:
    """Load the ``camelcase`` section of a config file as ``RuleOptions``.

    Without a filename the bundled default config is used when present, and
    built-in defaults otherwise.
    """
    if filename is None and not (CONFIG_DIR / DEFAULT_CONFIG).exists():
        return RuleOptions()

    config = load_config(filename or DEFAULT_CONFIG)
    section = config.get(RULE_SECTION) or {}
    if not isinstance(section, dict):
        msg = f"'{RULE_SECTION}' section must be a mapping"
        raise ValueError(msg)
    return RuleOptions.from_mapping(section)
