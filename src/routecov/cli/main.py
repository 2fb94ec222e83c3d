"""routecov CLI - routecov command."""

import click

from routecov import __version__
from routecov.cli.report import report_command


@click.group()
@click.version_option(version=__version__, prog_name="routecov")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """routecov - route coverage reports from route sources and test trace dumps."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


cli.add_command(report_command, name="report")


if __name__ == "__main__":
    cli()
