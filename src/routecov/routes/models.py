"""Route tree model.

A route is a tree of named processing steps. Names are not unique within a
tree (a route may contain many ``to`` or ``log`` steps). The route id and the
source file are carried by the root only.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class RouteNode:
    """One processing step and its nested sub-steps."""

    name: str
    line_number: int | None = None
    children: tuple[RouteNode, ...] = field(default_factory=tuple)
    route_id: str | None = None
    file_name: str | None = None

    @property
    def size(self) -> int:
        """Total number of nodes in this subtree, including self."""
        return sum(1 for _ in self.walk())

    def walk(self) -> Iterator[RouteNode]:
        """Iterate the subtree in pre-order (node before its children)."""
        yield self
        for child in self.children:
            yield from child.walk()
