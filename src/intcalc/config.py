"""
REPL configuration for intcalc.

Configuration is loaded from the [repl] section of intcalc.toml.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style

from intcalc.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "intcalc.toml"
CONFIG_ENV_VAR = "INTCALC_CONFIG"


class ReplConfig(BaseModel):
    """Interactive read loop settings."""

    prompt: str = "> "
    show_tree: bool = False
    color: bool = True
    tree_style: str = "bright_black"
    error_style: str = "red"

    @field_validator("tree_style", "error_style")
    @classmethod
    def validate_style(cls, v: str) -> str:
        """Validate that the value is a rich style definition."""
        try:
            Style.parse(v)
        except StyleSyntaxError as e:
            raise ValueError(f"Invalid style '{v}': {e}") from e
        return v


def find_config_file(start: Path | None = None) -> Path | None:
    """
    Locate the configuration file.

    ``INTCALC_CONFIG`` wins when set; otherwise walk up from ``start``
    (default: the working directory) looking for intcalc.toml.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_repl_config(toml_path: Path | None) -> ReplConfig:
    """
    Load REPL configuration from intcalc.toml.

    Args:
        toml_path: Path to intcalc.toml, or None for defaults

    Returns:
        ReplConfig with values from file or defaults

    Raises:
        ConfigError: If the [repl] section holds invalid values
    """
    if toml_path is None or not toml_path.exists():
        return ReplConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to read %s: %s", toml_path, e)
        return ReplConfig()

    repl_section = data.get("repl", {})
    if not repl_section:
        return ReplConfig()

    return _parse_config(repl_section, toml_path)


def _parse_config(data: dict[str, Any], source: Path) -> ReplConfig:
    """Parse config dict into ReplConfig."""
    unknown = sorted(set(data) - set(ReplConfig.model_fields))
    if unknown:
        logger.warning("Ignoring unknown [repl] keys in %s: %s", source, ", ".join(unknown))

    try:
        return ReplConfig.model_validate({k: v for k, v in data.items() if k not in unknown})
    except ValidationError as e:
        raise ConfigError(f"Invalid [repl] section in {source}: {e}") from e
