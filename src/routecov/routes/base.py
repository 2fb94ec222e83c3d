"""Route tree provider protocol."""

from pathlib import Path
from typing import Protocol

from routecov.routes.models import RouteNode


class RouteTreeProvider(Protocol):
    """Protocol for route source parsers.

    Each provider handles one artifact kind (a family of file extensions)
    and turns a source file into zero or more route trees.
    """

    @property
    def kind(self) -> str:
        """Artifact kind identifier (e.g., 'yaml', 'xml')."""
        ...

    @property
    def extensions(self) -> tuple[str, ...]:
        """File name suffixes handled by this provider."""
        ...

    def parse(self, path: Path) -> list[RouteNode]:
        """Parse a source file into route trees.

        Returns:
            Route trees found in the file, in source order. Trees without a
            route id are anonymous routes.

        Raises:
            RouteParseError: If the file cannot be parsed.
        """
        ...
