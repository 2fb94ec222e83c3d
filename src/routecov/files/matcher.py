"""Pattern matching for include/exclude filters.

A pattern matches a name when any of these holds:
- the pattern equals the name
- the pattern is a shell-style wildcard (``*``, ``?``, ``[...]``) matching the name
- the pattern is a regular expression matching the whole name

Invalid regular expressions simply do not match.
"""

import fnmatch
import re


def match_wildcard(name: str, pattern: str) -> bool:
    return fnmatch.fnmatchcase(name, pattern)


def match_regex(name: str, pattern: str) -> bool:
    try:
        return re.fullmatch(pattern, name) is not None
    except re.error:
        return False


def match_pattern(name: str | None, pattern: str | None) -> bool:
    """Check if name matches pattern (exact, wildcard, or regular expression)."""
    if name is None or pattern is None:
        return False
    if name == pattern:
        return True
    return match_wildcard(name, pattern) or match_regex(name, pattern)
