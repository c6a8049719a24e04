"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import shutil
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    return ensure_directory(path.parent)


def copy_file(source: Path, target: Path) -> Path:
    """Copy ``source`` to ``target``, overwriting any existing file."""

    _ = ensure_parent_directory(target)
    return Path(shutil.copyfile(source, target))


def sorted_files(root: Path, suffixes: frozenset[str] | set[str]) -> list[Path]:
    """Return files under ``root`` whose lowercased suffix is in ``suffixes``.

    Results are sorted so repeated scans of the same tree agree on order.
    """

    return sorted(
        path
        for path in root.rglob("*")
        if path.suffix.lower() in suffixes and path.is_file()
    )


__all__ = ["copy_file", "ensure_directory", "ensure_parent_directory", "sorted_files"]
