"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config() (CLI flags)
2. Environment variables (ROUTECOV__SECTION__KEY)
3. Project YAML (<basedir>/routecov.yaml)
4. Global YAML (~/.config/routecov/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    ROUTECOV__<SECTION>__<KEY>=<VALUE>

Examples:
    ROUTECOV__LOGGING__LEVEL=DEBUG
    ROUTECOV__COVERAGE__FAIL_ON_ERROR=true
    ROUTECOV__COVERAGE__EXCLUDES=*Test*,legacy/*
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_TRACE_DIR = "target/camel-route-coverage"


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        ROUTECOV__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class CoverageConfig(BaseModel):
    """Route coverage options.

    Env vars:
        ROUTECOV__COVERAGE__FAIL_ON_ERROR: Fail the run if a route is not fully covered
        ROUTECOV__COVERAGE__INCLUDE_TEST: Also scan test source/resource roots
        ROUTECOV__COVERAGE__INCLUDES: Comma-separated include patterns
        ROUTECOV__COVERAGE__EXCLUDES: Comma-separated exclude patterns
        ROUTECOV__COVERAGE__TRACE_DIR: Trace dump directory (relative to basedir)
    """

    fail_on_error: bool = Field(
        default=False,
        description="Whether to fail if a route was not fully covered.",
    )
    include_test: bool = Field(
        default=False,
        description="Whether to include test source code.",
    )
    includes: str | None = Field(
        default=None,
        description="Only analyze files matching any of these patterns "
        "(wildcard and regular expression). Multiple values separated by comma.",
    )
    excludes: str | None = Field(
        default=None,
        description="Skip files matching any of these patterns "
        "(wildcard and regular expression). Multiple values separated by comma. "
        "Excludes take precedence over includes.",
    )
    trace_dir: str = Field(
        default=DEFAULT_TRACE_DIR,
        description="Directory holding the route coverage dump files written by the tests.",
    )


class ProjectConfig(BaseModel):
    """Source and resource roots of the analyzed project, relative to basedir.

    Env vars:
        ROUTECOV__PROJECT__SOURCE_ROOTS: JSON list, e.g. '["src/main/java"]'
    """

    source_roots: list[str] = Field(default_factory=lambda: ["src/main/java"])
    resource_roots: list[str] = Field(default_factory=lambda: ["src/main/resources"])
    test_source_roots: list[str] = Field(default_factory=lambda: ["src/test/java"])
    test_resource_roots: list[str] = Field(default_factory=lambda: ["src/test/resources"])


class RouteCovConfig(BaseModel):
    """Root configuration for routecov.

    All settings can be configured via:
    1. Environment variables: ROUTECOV__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    coverage: CoverageConfig = Field(default_factory=CoverageConfig)
    project: ProjectConfig = Field(default_factory=ProjectConfig)
