"""Route coverage data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any


def format_percentage(percentage: float) -> str:
    """One decimal place, rounding halves up (6.25 -> '6.3')."""
    return str(Decimal(repr(percentage)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True, slots=True)
class CoverageNode:
    """Coverage of one route step, in route pre-order.

    ``trace_position`` is the index of the trace record that supplied the
    count, or None when the step was not matched.
    """

    name: str
    line_number: int | None
    level: int
    count: int = 0
    trace_position: int | None = None

    @property
    def covered(self) -> bool:
        return self.count > 0


@dataclass(frozen=True, slots=True)
class RenderedCoverage:
    """Text block and counters produced for one route."""

    text: str
    covered: int
    total: int
    percentage: float
    fully_covered: bool


@dataclass(frozen=True, slots=True)
class RouteCoverageReport:
    """Coverage of a single route."""

    route_id: str
    file_name: str
    nodes: tuple[CoverageNode, ...]
    rendered: RenderedCoverage

    @property
    def covered(self) -> int:
        return self.rendered.covered

    @property
    def total(self) -> int:
        return self.rendered.total

    @property
    def percentage(self) -> float:
        return self.rendered.percentage

    @property
    def fully_covered(self) -> bool:
        return self.rendered.fully_covered

    @property
    def text(self) -> str:
        return self.rendered.text

    def to_dict(self) -> dict[str, Any]:
        return {
            "route_id": self.route_id,
            "file": self.file_name,
            "covered": self.covered,
            "total": self.total,
            "coverage_percent": float(format_percentage(self.percentage)),
            "fully_covered": self.fully_covered,
            "nodes": [
                {
                    "name": n.name,
                    "line": n.line_number,
                    "level": n.level,
                    "count": n.count,
                }
                for n in self.nodes
            ],
        }


@dataclass(slots=True)
class CoverageRunResult:
    """Outcome of one coverage run across all discovered routes."""

    reports: list[RouteCoverageReport] = field(default_factory=list)
    discovered_routes: int = 0
    anonymous_routes: int = 0
    missing_trace_routes: list[str] = field(default_factory=list)
    failed_files: list[str] = field(default_factory=list)

    @property
    def not_covered(self) -> int:
        """Number of analyzed routes that are not fully covered."""
        return sum(1 for r in self.reports if not r.fully_covered)
