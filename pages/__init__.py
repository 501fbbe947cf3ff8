"""Page generation: body extraction, template composition and builds."""

from .body import extract_body
from .builder import (
    BuildError,
    MissingBaseTemplate,
    MissingPublicDir,
    MissingSourceFile,
    TemplateParts,
    build_all,
    build_page,
)
from .compose import compose

__all__ = [
    "BuildError",
    "MissingBaseTemplate",
    "MissingPublicDir",
    "MissingSourceFile",
    "TemplateParts",
    "build_all",
    "build_page",
    "compose",
    "extract_body",
]
