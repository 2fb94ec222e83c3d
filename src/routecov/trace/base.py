"""Trace provider protocol."""

from typing import Protocol

from routecov.trace.models import TraceRecord


class TraceProvider(Protocol):
    """Protocol for execution trace sources."""

    def load(self, route_id: str) -> list[TraceRecord]:
        """Load the ordered trace of a route.

        Returns:
            Records in runtime visitation order. An empty list means no trace
            data exists for the route.

        Raises:
            TraceRetrievalError: If trace data exists but cannot be read.
        """
        ...
