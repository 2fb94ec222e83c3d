"""routecov report command - print route coverage of a project."""

import json
from pathlib import Path
from typing import Any

import click

from routecov.config.loader import load_config
from routecov.core.errors import ConfigError, CoverageGateError, TraceRetrievalError
from routecov.core.logging import configure_logging, start_run
from routecov.coverage.ops import check_coverage_gate, run_route_coverage
from routecov.coverage.report import build_summary


def _coverage_overrides(**options: Any) -> dict[str, Any]:
    """Keep only the options given on the command line."""
    return {key: value for key, value in options.items() if value is not None}


@click.command()
@click.argument(
    "basedir", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option(
    "--fail-on-error/--no-fail-on-error",
    default=None,
    help="Fail if a route was not fully covered",
)
@click.option(
    "--include-test/--no-include-test",
    default=None,
    help="Also analyze test source and resource roots",
)
@click.option("--includes", default=None, help="Comma-separated patterns of files to include")
@click.option("--excludes", default=None, help="Comma-separated patterns of files to exclude")
@click.option("--trace-dir", default=None, help="Coverage dump directory, relative to BASEDIR")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def report_command(
    ctx: click.Context,
    basedir: Path,
    fail_on_error: bool | None,
    include_test: bool | None,
    includes: str | None,
    excludes: str | None,
    trace_dir: str | None,
    as_json: bool,
) -> None:
    """Report route coverage after running the tests.

    BASEDIR is the project base directory (default: current directory).
    """
    basedir = basedir.resolve()
    overrides = _coverage_overrides(
        fail_on_error=fail_on_error,
        include_test=include_test,
        includes=includes,
        excludes=excludes,
        trace_dir=trace_dir,
    )
    try:
        config = load_config(basedir, coverage=overrides) if overrides else load_config(basedir)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(config.logging, verbose=bool(ctx.obj and ctx.obj.get("verbose")))
    start_run()

    try:
        result = run_route_coverage(config, basedir)
    except TraceRetrievalError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        summary = build_summary(result.reports)
        summary["summary"]["anonymous_routes"] = result.anonymous_routes
        summary["summary"]["missing_trace_routes"] = result.missing_trace_routes
        summary["summary"]["failed_files"] = result.failed_files
        click.echo(json.dumps(summary, indent=2))
    else:
        for route_report in result.reports:
            click.echo("Route coverage summary:\n")
            click.echo(route_report.text)

    try:
        check_coverage_gate(result, fail_on_error=config.coverage.fail_on_error)
    except CoverageGateError as e:
        raise click.ClickException(e.message) from e
