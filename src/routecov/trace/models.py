"""Execution trace records."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TraceRecord:
    """How many times a step fired, at its position in runtime visitation order."""

    name: str
    count: int
