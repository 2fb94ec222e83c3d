"""Tests for routecov report command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from routecov.cli.main import cli

runner = CliRunner()

pytestmark = pytest.mark.integration

ROUTES = """\
- route:
    id: greetings
    from:
      uri: "timer:tick"
      steps:
        - setBody:
            constant: "Hello"
        - to: "mock:result"
- route:
    id: orders
    from:
      uri: "direct:orders"
      steps:
        - choice:
            when:
              - simple: "${header.vip}"
                steps:
                  - to: "direct:vip"
            otherwise:
              steps:
                - to: "direct:normal"
- from:
    uri: "direct:anonymous"
"""

DUMP = """\
<test>
  <route id="greetings" exchangesTotal="2">
    <from exchangesTotal="2"/>
    <setBody exchangesTotal="2"/>
    <to exchangesTotal="2"/>
  </route>
  <route id="orders" exchangesTotal="1">
    <from exchangesTotal="1"/>
    <choice exchangesTotal="1">
      <when exchangesTotal="1">
        <to exchangesTotal="1"/>
      </when>
      <otherwise exchangesTotal="0">
        <to exchangesTotal="0"/>
      </otherwise>
    </choice>
  </route>
</test>
"""

QUIET = {"ROUTECOV__LOGGING__LEVEL": "ERROR"}


@pytest.fixture
def project(tmp_path: Path) -> Path:
    resources = tmp_path / "src" / "main" / "resources" / "camel"
    resources.mkdir(parents=True)
    (resources / "routes.yaml").write_text(ROUTES)
    dump_dir = tmp_path / "target" / "camel-route-coverage"
    dump_dir.mkdir(parents=True)
    (dump_dir / "RoutesTest.xml").write_text(DUMP)
    return tmp_path


class TestReportCommand:
    """routecov report command tests."""

    def test_given_project_when_report_then_prints_route_tables(self, project: Path) -> None:
        result = runner.invoke(cli, ["report", str(project)], env=QUIET)

        assert result.exit_code == 0, result.output
        assert "File: src/main/resources/camel/routes.yaml" in result.output
        assert "Route: greetings" in result.output
        assert "Coverage: 3 out of 3 (100.0%)" in result.output
        assert "Route: orders" in result.output
        assert "Coverage: 4 out of 6 (66.7%)" in result.output

    def test_given_uncovered_route_when_fail_on_error_then_exits_1(self, project: Path) -> None:
        result = runner.invoke(cli, ["report", str(project), "--fail-on-error"], env=QUIET)

        assert result.exit_code == 1
        assert "There are 1 route(s) not fully covered!" in result.output

    def test_given_excluded_file_when_fail_on_error_then_passes(self, project: Path) -> None:
        result = runner.invoke(
            cli,
            ["report", str(project), "--fail-on-error", "--excludes", "camel/*"],
            env=QUIET,
        )

        assert result.exit_code == 0
        assert "Route:" not in result.output

    def test_given_no_dumps_when_report_then_skips_routes(self, project: Path) -> None:
        result = runner.invoke(
            cli,
            ["report", str(project), "--fail-on-error", "--trace-dir", "target/none"],
            env=QUIET,
        )

        assert result.exit_code == 0
        assert "Route:" not in result.output

    def test_given_broken_dump_when_report_then_fatal(self, project: Path) -> None:
        (project / "target" / "camel-route-coverage" / "Broken.xml").write_text("<test>")

        result = runner.invoke(cli, ["report", str(project)], env=QUIET)

        assert result.exit_code == 1
        assert "greetings" in result.output

    def test_given_json_flag_when_report_then_outputs_summary(self, project: Path) -> None:
        result = runner.invoke(cli, ["report", str(project), "--json"], env=QUIET)

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["summary"]["total_routes"] == 2
        assert data["summary"]["fully_covered_routes"] == 1
        assert data["summary"]["anonymous_routes"] == 1
        assert [r["route_id"] for r in data["routes"]] == ["greetings", "orders"]
        orders = data["routes"][1]
        assert [(n["name"], n["level"], n["count"]) for n in orders["nodes"]] == [
            ("from", 0, 1),
            ("choice", 1, 1),
            ("when", 2, 1),
            ("to", 3, 1),
            ("otherwise", 2, 0),
            ("to", 3, 0),
        ]

    def test_given_config_file_when_report_then_applied(self, project: Path) -> None:
        (project / "routecov.yaml").write_text("coverage:\n  includes: 'nothing*'\n")

        result = runner.invoke(cli, ["report", str(project)], env=QUIET)

        assert result.exit_code == 0
        assert "Route:" not in result.output

    def test_given_missing_basedir_when_report_then_usage_error(self, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["report", str(tmp_path / "missing")])
        assert result.exit_code == 2

    def test_given_verbose_when_report_then_debug_events_logged(self, project: Path) -> None:
        result = runner.invoke(cli, ["-v", "report", str(project)], env=QUIET)

        assert result.exit_code == 0, result.output
        assert "route_parsed" in result.output
        assert "run_id=" in result.output
