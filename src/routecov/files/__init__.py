"""Source file discovery and include/exclude filtering."""

from routecov.files.discovery import discover_files
from routecov.files.filter import FilterSpec, as_relative, matches, strip_root_path
from routecov.files.matcher import match_pattern

__all__ = [
    "FilterSpec",
    "as_relative",
    "discover_files",
    "match_pattern",
    "matches",
    "strip_root_path",
]
