"""Include/exclude filtering of candidate route source files.

Excludes take precedence over includes. Each pattern is tried against three
projections of the file:

1. the path relative to the project base directory
2. that relative path with any declared source/resource root prefix removed
3. the bare file name

so ``com/foo/MyRoute.yaml``, ``src/main/resources/com/foo/*`` and
``MyRoute.yaml`` all select the same file.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from routecov.files.matcher import match_pattern


def _split_patterns(value: str | None) -> tuple[str, ...]:
    if value is None:
        return ()
    return tuple(p.strip() for p in value.split(",") if p.strip())


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Include and exclude pattern lists. Empty means "not configured"."""

    includes: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()

    @classmethod
    def parse(cls, includes: str | None = None, excludes: str | None = None) -> FilterSpec:
        """Build a spec from comma-separated pattern strings."""
        return cls(includes=_split_patterns(includes), excludes=_split_patterns(excludes))

    @property
    def is_empty(self) -> bool:
        return not self.includes and not self.excludes


def as_relative(path: Path | str, basedir: Path | str) -> str:
    """Path relative to basedir in POSIX form; paths outside basedir are kept as-is."""
    name = Path(path).as_posix()
    base = Path(basedir).as_posix().rstrip("/")
    if base and (name == base or name.startswith(base + "/")):
        return name[len(base) + 1 :]
    return name


def strip_root_path(relative: str, basedir: Path | str, roots: Iterable[Path | str]) -> str:
    """Remove the first declared root that prefixes ``relative``."""
    for root in roots:
        prefix = as_relative(root, basedir).rstrip("/")
        if prefix and relative.startswith(prefix + "/"):
            return relative[len(prefix) + 1 :]
    return relative


def _candidates(path: Path, basedir: Path, roots: Iterable[Path | str]) -> tuple[str, ...]:
    relative = as_relative(path, basedir)
    return relative, strip_root_path(relative, basedir, roots), path.name


def _any_match(candidates: tuple[str, ...], patterns: tuple[str, ...]) -> bool:
    return any(match_pattern(c, p) for p in patterns for c in candidates)


def matches(
    path: Path | str,
    basedir: Path | str,
    declared_roots: Iterable[Path | str],
    spec: FilterSpec,
) -> bool:
    """Decide whether a discovered file takes part in the coverage analysis.

    Args:
        path: Absolute path of the candidate file.
        basedir: Absolute project base directory.
        declared_roots: Source and resource roots (absolute or basedir-relative).
        spec: Configured include/exclude patterns.

    Returns:
        True if the file is accepted.
    """
    if spec.is_empty:
        return True

    candidates = _candidates(Path(path), Path(basedir), list(declared_roots))

    # exclude take precedence
    if spec.excludes and _any_match(candidates, spec.excludes):
        return False

    if spec.includes:
        return _any_match(candidates, spec.includes)

    # was not excluded nor failed include so its accepted
    return True
