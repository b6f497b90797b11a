"""
needless config loading.

The config only sets defaults for the command line shell (output format and
diff mode). Nothing in it changes how the naming rules behave.

Example needless.yaml:

    format: xcode
    diff: false
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import yaml
from yaml.composer import ComposerError

from .formatters import DEFAULT_FORMAT, FORMATTERS

logger = logging.getLogger(__name__)

CONFIG_NAME = "needless.yaml"
MAX_CONFIG_BYTES = 1_000_000
MAX_YAML_ALIASES = 100

DEFAULT_CONFIG = {
    "format": DEFAULT_FORMAT,
    "diff": False,
}


class _AliasLimitLoader(yaml.SafeLoader):
    """SafeLoader that refuses documents with too many alias references."""

    def __init__(self, stream):
        super().__init__(stream)
        self.aliases_seen = 0

    def compose_node(self, parent, index):
        if self.check_event(yaml.AliasEvent):
            self.aliases_seen += 1
            if self.aliases_seen > MAX_YAML_ALIASES:
                raise ComposerError(
                    None, None,
                    f"more than {MAX_YAML_ALIASES} alias references",
                    self.peek_event().start_mark,
                )
        return super().compose_node(parent, index)


def safe_yaml_load(stream):
    """Load one YAML document like yaml.safe_load, with the alias cap."""
    loader = _AliasLimitLoader(stream)
    try:
        return loader.get_single_data()
    finally:
        loader.dispose()


def find_config() -> Path | None:
    """Find needless.yaml in the project or the user's config directory."""
    candidates = [
        Path(CONFIG_NAME),
        Path(".config") / CONFIG_NAME,
        Path.home() / ".config" / "needless" / CONFIG_NAME,
    ]
    for path in candidates:
        if path.is_file():
            return path
    return None


def load_config(config_path: Path | str | None = None) -> dict:
    """Load needless.yaml merged over the built-in defaults.

    Args:
        config_path: Explicit config file. If None, default locations are
            searched and a missing file simply means defaults.
    """
    if config_path is None:
        config_path = find_config()
        if config_path is None:
            return dict(DEFAULT_CONFIG)

    config_path = Path(config_path)
    if not config_path.exists():
        logger.error("Config file not found: %s", config_path)
        sys.exit(1)

    if config_path.stat().st_size > MAX_CONFIG_BYTES:
        logger.error("Config file too large (max 1MB): %s", config_path)
        sys.exit(1)

    try:
        with open(config_path, encoding="utf-8") as f:
            loaded = safe_yaml_load(f)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        if mark:
            logger.error(
                "Error: %s is malformed (line %d, column %d)",
                config_path, mark.line + 1, mark.column + 1,
            )
        else:
            logger.error("Error: %s is malformed: %s", config_path, e)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error: cannot read %s: %s", config_path, e)
        sys.exit(1)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        logger.error("Error: %s must contain a mapping", config_path)
        sys.exit(1)

    logger.debug("Loaded config from %s", config_path)
    return {**DEFAULT_CONFIG, **loaded}


def validate_config(config: dict) -> bool:
    """Check config values; log every problem found."""
    errors = []

    unknown = sorted(set(config) - set(DEFAULT_CONFIG), key=str)
    if unknown:
        errors.append(f"Unknown keys: {', '.join(map(str, unknown))}")

    fmt = config.get("format", DEFAULT_FORMAT)
    if not isinstance(fmt, str) or fmt.lower() not in FORMATTERS:
        errors.append(
            f"'format' must be one of {', '.join(FORMATTERS)} (got {fmt!r})"
        )

    if not isinstance(config.get("diff", False), bool):
        errors.append(f"'diff' must be true or false (got {config['diff']!r})")

    if errors:
        logger.error("Config validation errors:")
        for e in errors:
            logger.error("  - %s", e)
        return False
    return True
