"""Render source pages into the base template and write them to public/."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from config_loader import ProjectConfig, load_config

from .body import extract_body
from .compose import compose
from .paths import public_dir, resolve


class BuildError(Exception):
    """Raised when a page cannot be generated."""


class MissingBaseTemplate(BuildError):
    """Raised when the configured base template file does not exist."""


class MissingSourceFile(BuildError):
    """Raised when the source HTML for a page does not exist."""


class MissingPublicDir(BuildError):
    """Raised when the project has no public/ output directory."""


@dataclass(slots=True)
class TemplateParts:
    """Raw template text loaded for a single build."""

    base: str
    header: str = ""
    footer: str = ""


def _read_optional(path: Optional[Path]) -> str:
    if path is None or not path.is_file():
        return ""
    return path.read_text(encoding="utf-8")


def load_template_parts(root: Path, config: ProjectConfig) -> TemplateParts:
    """Read the base template plus optional header and footer partials."""

    base_path = resolve(root, config.template_path("base", required=True))
    if not base_path.is_file():
        raise MissingBaseTemplate(
            f"Base template is missing in template directory: {base_path}"
        )

    header = config.template_path("header")
    footer = config.template_path("footer")
    return TemplateParts(
        base=base_path.read_text(encoding="utf-8"),
        header=_read_optional(resolve(root, header) if header else None),
        footer=_read_optional(resolve(root, footer) if footer else None),
    )


def destination_path(root: Path, dest: str) -> Path:
    """Map a manifest destination onto the project's public directory."""

    public = public_dir(root)
    if not public.is_dir():
        raise MissingPublicDir(f"Public directory is missing in project root: {public}")
    output_path = public / dest.lstrip("/\\")
    if not output_path.resolve().is_relative_to(public.resolve()):
        raise BuildError(f"Destination {dest} is outside {public}.")
    return output_path


def build_page(root: Path, source: str, dest: str) -> Path:
    """Generate ``dest`` under public/ from ``source`` and return its path."""

    root = Path(root)
    config = load_config(root)
    parts = load_template_parts(root, config)

    source_path = resolve(root, source)
    if not source_path.is_file():
        raise MissingSourceFile(f"File {source_path} does not exist.")
    body = extract_body(source_path.read_bytes())

    generated = compose(parts.base, parts.header, parts.footer, body)

    output_path = destination_path(root, dest)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generated, encoding="utf-8")
    print(f"✅ Page written: {output_path}")
    return output_path


def build_all(root: Path) -> List[Path]:
    """Build every manifest entry in order, stopping at the first failure."""

    root = Path(root)
    config = load_config(root)
    return [
        build_page(root, source, dest)
        for source, dest in config.manifest.items()
    ]
