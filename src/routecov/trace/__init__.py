"""Execution traces recorded while running tests against routes."""

from routecov.trace.base import TraceProvider
from routecov.trace.dump import DumpTraceProvider
from routecov.trace.models import TraceRecord

__all__ = [
    "DumpTraceProvider",
    "TraceProvider",
    "TraceRecord",
]
