"""Config module exports."""

from routecov.config.loader import load_config
from routecov.config.models import (
    CoverageConfig,
    LoggingConfig,
    LogOutputConfig,
    ProjectConfig,
    RouteCovConfig,
)

__all__ = [
    "load_config",
    "RouteCovConfig",
    "CoverageConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ProjectConfig",
]
