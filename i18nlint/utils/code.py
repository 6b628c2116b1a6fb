"""Template file discovery helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Generator, Iterable

TEMPLATE_EXTENSIONS = (".vue", ".html")
SKIPPED_DIRECTORIES = {"node_modules", ".git", "dist"}


def iter_template_files(
    root_paths: Iterable[str], extensions: tuple[str, ...] = TEMPLATE_EXTENSIONS
) -> Generator[Path, None, None]:
    """Yield template files for the provided files and directories."""

    for root in root_paths:
        root_path = Path(root)
        if root_path.is_file():
            if root_path.suffix in extensions:
                yield root_path
            continue
        for path in sorted(root_path.rglob("*")):
            if SKIPPED_DIRECTORIES.intersection(path.relative_to(root_path).parts):
                continue
            if path.suffix in extensions and path.is_file():
                yield path
