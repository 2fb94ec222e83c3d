"""Route coverage text reports.

Output for one route:

    File: src/main/resources/routes.yaml
    Route: greetings

      Line #      Count   Route
      ------      -----   -----
           4          3   from
           7          3     setBody
           9          0     to

    Coverage: 2 out of 3 (66.7%)
"""

from collections.abc import Sequence
from typing import Any

from routecov.coverage.models import (
    CoverageNode,
    RenderedCoverage,
    RouteCoverageReport,
    format_percentage,
)

_ROW = "{:>8}   {:>8}   {}"
_INDENT = "  "


def compute_percentage(covered: int, total: int) -> float:
    """Percentage of covered steps (0.0 for an empty route)."""
    if total == 0:
        return 0.0
    return covered / total * 100.0


def render(file_name: str, route_id: str, nodes: Sequence[CoverageNode]) -> RenderedCoverage:
    """Format the coverage of one route as a text table.

    Args:
        file_name: Source file label (usually relative to the project basedir).
        route_id: Route identifier.
        nodes: Coverage nodes in pre-order.

    Returns:
        RenderedCoverage with the text block and the covered/total counters.
    """
    lines = [
        f"File: {file_name}",
        f"Route: {route_id}",
        "",
        _ROW.format("Line #", "Count", "Route"),
        _ROW.format("------", "-----", "-----"),
    ]

    covered = 0
    for node in nodes:
        if node.covered:
            covered += 1
        line_number = "" if node.line_number is None else node.line_number
        lines.append(_ROW.format(line_number, node.count, _INDENT * node.level + node.name))

    total = len(nodes)
    percentage = compute_percentage(covered, total)
    lines.append("")
    lines.append(f"Coverage: {covered} out of {total} ({format_percentage(percentage)}%)")
    lines.append("")

    return RenderedCoverage(
        text="\n".join(lines),
        covered=covered,
        total=total,
        percentage=percentage,
        fully_covered=covered == total,
    )


def build_summary(reports: Sequence[RouteCoverageReport]) -> dict[str, Any]:
    """Build a structured summary across routes, suitable for JSON output."""
    total_nodes = sum(r.total for r in reports)
    covered_nodes = sum(r.covered for r in reports)
    return {
        "summary": {
            "total_routes": len(reports),
            "fully_covered_routes": sum(1 for r in reports if r.fully_covered),
            "total_nodes": total_nodes,
            "covered_nodes": covered_nodes,
            "coverage_percent": float(
                format_percentage(compute_percentage(covered_nodes, total_nodes))
            ),
        },
        "routes": [r.to_dict() for r in reports],
    }
