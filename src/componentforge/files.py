"""Filesystem helpers used to materialise the template tree."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

__all__ = ["VCS_METADATA_DIR", "copy", "copy_dir", "empty_dir", "is_empty"]


LOGGER = logging.getLogger(__name__)

VCS_METADATA_DIR = ".git"


def copy(source: str | Path, destination: str | Path) -> None:
    """Copy ``source`` to ``destination``, recursing into directories.

    Regular files are copied byte for byte. Filesystem errors propagate to the
    caller untouched.
    """

    source = Path(source)
    destination = Path(destination)
    if source.is_dir():
        copy_dir(source, destination)
        return

    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, destination)
    LOGGER.debug("copied %s -> %s", source, destination)


def copy_dir(source_dir: str | Path, destination_dir: str | Path) -> None:
    source_dir = Path(source_dir)
    destination_dir = Path(destination_dir)
    destination_dir.mkdir(parents=True, exist_ok=True)
    for child in source_dir.iterdir():
        copy(child, destination_dir / child.name)


def empty_dir(directory: str | Path) -> None:
    """Remove every entry inside ``directory`` while keeping the directory itself."""

    directory = Path(directory)
    if not directory.exists():
        return

    for entry in directory.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()
        LOGGER.debug("removed %s", entry)


def is_empty(directory: str | Path) -> bool:
    """Return ``True`` when ``directory`` has no entries besides VCS metadata."""

    entries = [entry.name for entry in Path(directory).iterdir()]
    return not entries or entries == [VCS_METADATA_DIR]
