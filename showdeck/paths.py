#!/usr/bin/env python3
"""Helpers for locating deck files on disk.

Everything here takes an explicit ``slides_root``; there is no process-wide
notion of a current deck.  Section directories are listed in name order and
subdirectories are ignored.  Files ending in ``.md`` are slide sources, every
other file is an image asset addressed by its basename.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from .errors import ManifestError, SectionNotFoundError
from .manifest import MANIFEST_NAME


__all__ = ["validate_slides_root", "list_section", "MARKDOWN_SUFFIX"]

MARKDOWN_SUFFIX = ".md"


def validate_slides_root(slides_root: str | Path) -> Path:
    """Check that *slides_root* holds a ``showoff.json`` file.

    Returns
    -------
    The resolved slides root as an absolute :class:`pathlib.Path`.

    Raises
    ------
    ManifestError
        If the manifest is missing or is a directory.
    """
    root = Path(slides_root).expanduser().resolve()
    manifest_path = root / MANIFEST_NAME
    if not manifest_path.is_file():
        raise ManifestError(f"Invalid slide dir {root}: no {MANIFEST_NAME}")
    return root


def list_section(slides_root: str | Path, section: str) -> Tuple[List[Path], List[Path]]:
    """Split a section directory into markdown files and image assets.

    Parameters
    ----------
    slides_root
        Directory holding ``showoff.json``.
    section
        Section path relative to *slides_root*, as written in the manifest.

    Returns
    -------
    ``(markdown_files, image_files)``, each sorted by file name.
    """
    section_dir = Path(slides_root) / section
    if not section_dir.is_dir():
        raise SectionNotFoundError(f"error reading section: {section_dir} is not a directory")

    markdown_files = []
    image_files = []
    for entry in sorted(section_dir.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            continue
        if entry.name.endswith(MARKDOWN_SUFFIX):
            markdown_files.append(entry)
        else:
            image_files.append(entry)

    return markdown_files, image_files
