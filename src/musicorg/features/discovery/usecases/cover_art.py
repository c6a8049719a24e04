"""src/musicorg/features/discovery/usecases/cover_art.py
Where: Discovery feature usecases layer.
What: Locate album art in a source directory and copy it next to output tracks.
Why: Both restructuring strategies place the same cover file in every album they produce.
"""

from __future__ import annotations

from pathlib import Path

from musicorg.config.settings import IMAGE_EXTENSIONS
from musicorg.platform.filesystem import copy_file, sorted_files

_PREFERRED_STEMS: tuple[str, ...] = ("cover", "folder")


def find_cover(directory: Path) -> Path | None:
    """Return the best cover candidate under ``directory``, searched recursively.

    Images whose stem contains ``cover`` or ``folder`` win; otherwise the
    first image in traversal order is used.
    """
    images = sorted_files(directory, IMAGE_EXTENSIONS)
    for image in images:
        stem = image.stem.lower()
        if any(preferred in stem for preferred in _PREFERRED_STEMS):
            return image
    return images[0] if images else None


def cover_target(cover_path: Path, album_dir: Path) -> Path:
    """Destination of ``cover_path`` inside ``album_dir``."""
    return album_dir / f"cover{cover_path.suffix.lower()}"


def copy_cover(cover_path: Path | None, album_dir: Path) -> Path | None:
    """Copy ``cover_path`` into ``album_dir`` as ``cover.<ext>``.

    Returns:
        The copied file, or None when the album has no cover.

    Raises:
        OSError: If the copy fails.
    """
    if cover_path is None:
        return None
    return copy_file(cover_path, cover_target(cover_path, album_dir))


__all__ = ["copy_cover", "cover_target", "find_cover"]
