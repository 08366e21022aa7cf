"""
Render settings, optionally loaded from pyproject.toml [tool.hyperhtml].

Usage:
    from hyperhtml.config import configure, load_settings

    configure(indent=2, max_workers=8)
    load_settings(Path("."))  # reads [tool.hyperhtml]
"""

from __future__ import annotations

import logging
from pathlib import Path

import tomlkit
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

TOOL_TABLE = "hyperhtml"


class Settings(BaseModel):
    """Process-wide rendering options, read at render time."""

    indent: int = Field(default=4, ge=0)
    max_workers: int | None = Field(default=None, ge=1)
    doctype: str = "<!DOCTYPE html>"
    html_attributes: dict[str, str] = Field(
        default_factory=lambda: {"lang": "en", "dir": "ltr"}
    )


settings = Settings()


def configure(**overrides) -> Settings:
    """Validate overrides against the current settings and install the result."""
    global settings
    settings = Settings.model_validate({**settings.model_dump(), **overrides})
    logger.debug(f"settings updated: {overrides}")
    return settings


def reset() -> Settings:
    """Restore the defaults."""
    global settings
    settings = Settings()
    return settings


def load_settings(project_root: Path) -> Settings:
    """Install settings from project_root/pyproject.toml, if it has any."""
    pyproject = project_root / "pyproject.toml"
    if not pyproject.exists():
        logger.debug(f"no pyproject.toml in {project_root}, using defaults")
        return reset()

    doc = tomlkit.parse(pyproject.read_text())
    tool_config = doc.get("tool", {}).get(TOOL_TABLE, {})
    logger.info(f"loaded [tool.{TOOL_TABLE}] from {pyproject}")

    global settings
    settings = Settings.model_validate(tool_config.unwrap() if tool_config else {})
    return settings
