"""Project path helpers shared by the build steps."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

ROOT_ENV_VAR = "SITEGEN_ROOT"
PUBLIC_DIR_NAME = "public"


def project_root(override: Optional[Path | str] = None) -> Path:
    """Return the project root, preferring ``override`` then the env var."""
    candidate = override or os.getenv(ROOT_ENV_VAR)
    if candidate:
        return Path(candidate).expanduser().resolve()
    return Path.cwd().resolve()


def resolve(root: Path, relative: str) -> Path:
    return root / relative


def public_dir(root: Path) -> Path:
    return root / PUBLIC_DIR_NAME
