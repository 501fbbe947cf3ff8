"""Helpers for creating and loading the project ``config.json``."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_CONFIG_NAME = "config.json"

# Index and error pages cover the basics for serving a static bucket.
DEFAULT_CONFIG: Dict[str, Any] = {
    "template": {
        "base": "template/layout/base.html",
        "header": "template/layout/header.html",
        "footer": "template/layout/footer.html",
    },
    "manifest": {
        "html/index.html": "index.html",
        "html/error.html": "error.html",
    },
}


class ConfigError(Exception):
    """Raised when project configuration cannot be created or loaded."""


class ConfigAlreadyExists(ConfigError):
    """Raised by ``init_project`` when ``config.json`` is already present."""


class MissingConfig(ConfigError):
    """Raised when ``config.json`` is absent from the project root."""


@dataclass(slots=True)
class ProjectConfig:
    """Template locations and the source → destination manifest.

    Paths are kept exactly as written in ``config.json``; they are relative
    to the project root and only checked when a build needs them.
    """

    template: Dict[str, str] = field(default_factory=dict)
    manifest: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "ProjectConfig":
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object.")
        template = data.get("template", {})
        manifest = data.get("manifest", {})
        if not isinstance(template, dict):
            raise ConfigError("'template' must be a JSON object.")
        if not isinstance(manifest, dict):
            raise ConfigError("'manifest' must be a JSON object.")
        return cls(template=dict(template), manifest=dict(manifest))

    def to_dict(self) -> Dict[str, Any]:
        return {"template": dict(self.template), "manifest": dict(self.manifest)}

    def template_path(self, name: str, *, required: bool = False) -> Optional[str]:
        """Return the configured path for template part ``name``.

        Optional parts that are not configured yield ``None``; a missing
        required part raises ``ConfigError``.
        """
        value = self.template.get(name)
        if value is None and required:
            raise ConfigError(f"Missing template.{name} configuration.")
        return value


def config_file(root: Path | str) -> Path:
    return Path(root) / DEFAULT_CONFIG_NAME


def write_config(path: Path, config: ProjectConfig) -> None:
    """Persist the config to disk with pretty formatting."""
    with path.open("w", encoding="utf-8") as handle:
        json.dump(config.to_dict(), handle, indent=4)
        handle.write("\n")


def init_project(root: Path | str) -> Path:
    """Write the default ``config.json`` under ``root`` and return its path."""
    path = config_file(root)
    if path.exists():
        raise ConfigAlreadyExists(f"Configuration already exists: {path}")
    write_config(path, ProjectConfig.from_dict(DEFAULT_CONFIG))
    return path


def load_config(root: Path | str) -> ProjectConfig:
    """Load ``config.json`` from ``root``."""
    path = config_file(root)
    if not path.is_file():
        raise MissingConfig(
            f"Missing project {DEFAULT_CONFIG_NAME} in {Path(root)}."
            " Run `sitegen init` to create a basic configuration."
        )
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    return ProjectConfig.from_dict(data)
