"""Merge a route tree with its execution trace.

The trace is a flat log ordered by runtime visitation, not keyed by tree
position, and step names repeat within a route. Steps are therefore matched
sequentially: the tree is walked in pre-order and each step takes the next
record with its name from a single forward-only cursor over the trace.

- records passed over while scanning for a name are forfeited
- once the trace is exhausted every remaining step gets a count of 0
- records left over after the walk are ignored

A single missing visit in the trace thus leaves all later steps of the route
unmatched; the cursor never rewinds.
"""

from collections.abc import Iterator, Sequence

from routecov.coverage.models import CoverageNode
from routecov.routes.models import RouteNode
from routecov.trace.models import TraceRecord

_Cursor = Iterator[tuple[int, TraceRecord]]


def aggregate(route: RouteNode, trace: Sequence[TraceRecord]) -> list[CoverageNode]:
    """Decorate every step of a route with its hit count.

    Args:
        route: Root of the route tree.
        trace: Trace records in runtime visitation order.

    Returns:
        One CoverageNode per route step, in pre-order, with nesting levels
        starting at 0 for the root.
    """
    answer: list[CoverageNode] = []
    _gather(route, enumerate(trace), 0, answer)
    return answer


def _next_match(name: str, cursor: _Cursor) -> tuple[int, int] | None:
    for position, record in cursor:
        if record.name == name:
            return position, record.count
    return None


def _gather(node: RouteNode, cursor: _Cursor, level: int, answer: list[CoverageNode]) -> None:
    match = _next_match(node.name, cursor)
    if match is None:
        answer.append(CoverageNode(name=node.name, line_number=node.line_number, level=level))
    else:
        position, count = match
        answer.append(
            CoverageNode(
                name=node.name,
                line_number=node.line_number,
                level=level,
                count=count,
                trace_position=position,
            )
        )

    for child in node.children:
        _gather(child, cursor, level + 1, answer)
