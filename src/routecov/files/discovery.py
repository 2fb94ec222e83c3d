"""Recursive discovery of route source files under project roots."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def _walk(
    directory: Path,
    extensions: tuple[str, ...],
    found: dict[Path, None],
    visited: set[Path],
) -> None:
    # symlinked directories may alias a visited directory or loop back to an ancestor
    real = directory.resolve()
    if real in visited:
        return
    visited.add(real)

    try:
        entries = sorted(directory.iterdir())
    except OSError:
        return
    for entry in entries:
        if entry.is_dir():
            _walk(entry, extensions, found, visited)
        elif entry.is_file() and entry.name.endswith(extensions):
            found.setdefault(entry.resolve(), None)


def discover_files(roots: Iterable[Path], extensions: Iterable[str]) -> list[Path]:
    """Find files with the given extensions below each root.

    Roots are scanned in order and directory entries in sorted order, so the
    result is stable. A file reachable from several roots, or through
    symlinked directories, is listed once under its resolved path, at its
    first position. Missing roots are ignored.

    Args:
        roots: Directories to scan recursively.
        extensions: File name suffixes to collect (e.g. ``(".yaml", ".yml")``).

    Returns:
        Absolute, resolved paths of the discovered files.
    """
    suffixes = tuple(extensions)
    found: dict[Path, None] = {}
    visited: set[Path] = set()
    for root in roots:
        root = Path(root).resolve()
        if root.is_dir():
            _walk(root, suffixes, found, visited)
    return list(found)
