"""Route coverage aggregation, reporting and runs.

Usage:
    from routecov.coverage import aggregate, render

    nodes = aggregate(route_tree, trace_records)
    rendered = render("routes.yaml", "greetings", nodes)
    print(rendered.text)
"""

from routecov.coverage.aggregate import aggregate
from routecov.coverage.models import (
    CoverageNode,
    CoverageRunResult,
    RenderedCoverage,
    RouteCoverageReport,
    format_percentage,
)
from routecov.coverage.ops import check_coverage_gate, run_route_coverage
from routecov.coverage.report import (
    build_summary,
    compute_percentage,
    render,
)

__all__ = [
    # Models
    "CoverageNode",
    "CoverageRunResult",
    "RenderedCoverage",
    "RouteCoverageReport",
    # Aggregation
    "aggregate",
    # Report
    "build_summary",
    "compute_percentage",
    "format_percentage",
    "render",
    # Runs
    "check_coverage_gate",
    "run_route_coverage",
]
