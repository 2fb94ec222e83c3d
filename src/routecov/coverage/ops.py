"""Route coverage run: discovery -> filtering -> parsing -> per-route coverage.

Failure policy:
- a file that fails to parse is logged and skipped
- a route without id is counted as anonymous and skipped
- a route without trace data is logged and skipped (not counted as uncovered)
- any other trace retrieval failure aborts the run with TraceRetrievalError
- incomplete coverage only fails the run through check_coverage_gate()
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from routecov.config.models import ProjectConfig, RouteCovConfig
from routecov.core.errors import CoverageGateError, TraceRetrievalError
from routecov.core.logging import get_logger
from routecov.coverage.aggregate import aggregate
from routecov.coverage.models import CoverageRunResult, RouteCoverageReport, format_percentage
from routecov.coverage.report import render
from routecov.files.discovery import discover_files
from routecov.files.filter import FilterSpec, as_relative, matches
from routecov.routes.base import RouteTreeProvider
from routecov.routes.models import RouteNode
from routecov.routes.xml_dsl import XmlRouteParser
from routecov.routes.yaml_dsl import YamlRouteParser
from routecov.trace.base import TraceProvider
from routecov.trace.dump import DumpTraceProvider
from routecov.trace.models import TraceRecord

log = get_logger(__name__)

# Artifact kinds only looked up in resource roots
RESOURCE_ONLY_KINDS = frozenset({"xml"})


def default_providers() -> list[RouteTreeProvider]:
    return [YamlRouteParser(), XmlRouteParser()]


def scan_roots(
    kind: str, project: ProjectConfig, basedir: Path, *, include_test: bool
) -> list[Path]:
    """Directories to scan for one artifact kind."""
    source_roots = [] if kind in RESOURCE_ONLY_KINDS else list(project.source_roots)
    roots = source_roots + list(project.resource_roots)
    if include_test:
        if kind not in RESOURCE_ONLY_KINDS:
            roots += project.test_source_roots
        roots += project.test_resource_roots
    return [basedir / root for root in roots]


def declared_roots(project: ProjectConfig, basedir: Path) -> list[Path]:
    """All source and resource roots, used to shorten paths for pattern matching."""
    roots = [
        *project.source_roots,
        *project.test_source_roots,
        *project.resource_roots,
        *project.test_resource_roots,
    ]
    return [basedir / root for root in roots]


def collect_route_trees(
    config: RouteCovConfig,
    basedir: Path,
    providers: Sequence[RouteTreeProvider],
    result: CoverageRunResult,
) -> list[RouteNode]:
    """Parse every accepted source file, skipping files that fail to parse."""
    spec = FilterSpec.parse(config.coverage.includes, config.coverage.excludes)
    roots = declared_roots(config.project, basedir)

    trees: list[RouteNode] = []
    for provider in providers:
        scan = scan_roots(
            provider.kind, config.project, basedir, include_test=config.coverage.include_test
        )
        for path in discover_files(scan, provider.extensions):
            if not matches(path, basedir, roots, spec):
                log.debug("file_excluded", path=as_relative(path, basedir))
                continue
            try:
                parsed = provider.parse(path)
            except Exception as e:
                log.warning(
                    "route_parse_failed",
                    kind=provider.kind,
                    path=as_relative(path, basedir),
                    error=str(e),
                    exc_info=True,
                )
                result.failed_files.append(as_relative(path, basedir))
                continue
            for tree in parsed:
                log.debug(
                    "route_parsed",
                    route_id=tree.route_id,
                    path=as_relative(path, basedir),
                    steps=tree.size,
                )
            trees.extend(parsed)
    return trees


def load_trace(trace_provider: TraceProvider, route_id: str) -> list[TraceRecord]:
    """Load a route trace, turning any failure into TraceRetrievalError."""
    try:
        return list(trace_provider.load(route_id))
    except TraceRetrievalError:
        raise
    except Exception as e:
        raise TraceRetrievalError.load_failed(route_id, str(e)) from e


def cover_route(
    tree: RouteNode, route_id: str, basedir: Path, trace_provider: TraceProvider
) -> RouteCoverageReport | None:
    """Coverage report of one route, or None when the route has no trace data."""
    trace = load_trace(trace_provider, route_id)
    if not trace:
        log.warning(
            "route_coverage_missing",
            route_id=route_id,
            hint="Make sure to enable route coverage in your unit tests and assign unique "
            "route ids to your routes. Also remember to run unit tests first.",
        )
        return None

    nodes = aggregate(tree, trace)
    file_name = as_relative(tree.file_name, basedir) if tree.file_name else ""
    rendered = render(file_name, route_id, nodes)
    log.info(
        "route_coverage_summary",
        route_id=route_id,
        file=file_name,
        covered=rendered.covered,
        total=rendered.total,
        percent=format_percentage(rendered.percentage),
    )
    return RouteCoverageReport(
        route_id=route_id,
        file_name=file_name,
        nodes=tuple(nodes),
        rendered=rendered,
    )


def run_route_coverage(
    config: RouteCovConfig,
    basedir: Path,
    *,
    providers: Sequence[RouteTreeProvider] | None = None,
    trace_provider: TraceProvider | None = None,
) -> CoverageRunResult:
    """Produce coverage reports for every identified route of a project.

    Args:
        config: Resolved configuration.
        basedir: Project base directory; roots and trace_dir are relative to it.
        providers: Route tree providers (default: YAML DSL and XML stub).
        trace_provider: Trace source (default: dump files under trace_dir).

    Returns:
        CoverageRunResult with one report per route that has trace data.

    Raises:
        TraceRetrievalError: If the trace of a route cannot be retrieved.
    """
    basedir = basedir.resolve()
    if providers is None:
        providers = default_providers()
    if trace_provider is None:
        trace_provider = DumpTraceProvider(basedir / config.coverage.trace_dir)

    result = CoverageRunResult()
    trees = collect_route_trees(config, basedir, providers, result)
    result.discovered_routes = len(trees)
    log.info("routes_discovered", count=len(trees))

    # skip any routes which has no route id assigned
    result.anonymous_routes = sum(1 for t in trees if t.route_id is None)
    if result.anonymous_routes > 0:
        log.warning(
            "anonymous_routes",
            count=result.anonymous_routes,
            hint="Add route ids to these routes for route coverage support",
        )

    for tree in trees:
        route_id = tree.route_id
        if route_id is None:
            continue
        report = cover_route(tree, route_id, basedir, trace_provider)
        if report is None:
            result.missing_trace_routes.append(route_id)
        else:
            result.reports.append(report)

    return result


def check_coverage_gate(result: CoverageRunResult, *, fail_on_error: bool) -> None:
    """Fail the run when routes are not fully covered and the gate is on.

    Raises:
        CoverageGateError: With the number of routes not fully covered.
    """
    if fail_on_error and result.not_covered > 0:
        raise CoverageGateError.not_fully_covered(result.not_covered)
