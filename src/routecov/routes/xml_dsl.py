"""XML route parser placeholder.

XML route files are discovered and filtered like any other route source, but
no XML route analysis exists yet: every file yields no route trees.
"""

from pathlib import Path

from routecov.core.logging import get_logger
from routecov.routes.models import RouteNode

log = get_logger(__name__)


class XmlRouteParser:
    """Route tree provider for XML route files (not implemented)."""

    @property
    def kind(self) -> str:
        return "xml"

    @property
    def extensions(self) -> tuple[str, ...]:
        return (".xml",)

    def parse(self, path: Path) -> list[RouteNode]:
        log.debug("xml_route_analysis_unsupported", path=str(path))
        return []
