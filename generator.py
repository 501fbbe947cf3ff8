"""Generate static pages from editor-exported HTML using config.json."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from config_loader import ConfigError, init_project
from pages import BuildError, build_all, build_page
from pages.paths import project_root

USAGE = """
Usage:

Initialize project config: `sitegen init`
Generate from source file: `sitegen source-file destination-file`
Generate all from config.manifest list: `sitegen generate`
"""


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments for the page generator."""

    parser = argparse.ArgumentParser(
        prog="sitegen",
        description=(
            "Wrap exported HTML pages in a base template with a shared"
            " header and footer."
        ),
    )
    parser.add_argument(
        "--root",
        help="Project root holding config.json (defaults to $SITEGEN_ROOT or cwd).",
    )
    parser.add_argument(
        "command",
        nargs="*",
        help="`init`, `generate`, or a source file and destination file.",
    )
    return parser.parse_args(argv)


def run(command: List[str], root_override: Optional[str] = None) -> None:
    """Dispatch a command; core errors propagate to the caller."""

    root = project_root(root_override)
    if command == ["init"]:
        path = init_project(root)
        print(f"config.json created at {path}")
    elif command == ["generate"]:
        written = build_all(root)
        print(f"\n✓ Built {len(written)} page(s)")
    elif len(command) == 2:
        build_page(root, command[0], command[1])
    else:
        print(USAGE)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the ``sitegen`` CLI."""

    args = parse_args(argv)
    try:
        run(args.command, args.root)
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc
    except (BuildError, OSError, UnicodeDecodeError) as exc:
        raise SystemExit(f"Build error: {exc}") from exc


if __name__ == "__main__":
    main()
