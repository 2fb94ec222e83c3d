"""YAML DSL route parser.

Reads route definitions written in the YAML DSL:

    - route:
        id: greetings
        from:
          uri: "timer:tick"
          steps:
            - setBody:
                constant: "Hello"
            - choice:
                when:
                  - simple: "${body} contains 'Hello'"
                    steps:
                      - to: "log:hello"
                otherwise:
                  steps:
                    - to: "log:other"
            - to: "mock:result"

The tree root is the ``from`` step; its children are the route steps. A step
is a single-key mapping whose key is the step name. Nested ``steps`` and the
branch clauses (``when``, ``otherwise``, ``doCatch``, ``doFinally``) become
child nodes. Line numbers are 1-based and taken from the composed YAML nodes,
so no line information is lost to plain ``safe_load``.

Items keyed ``from`` at top level are routes without an id (anonymous).
Other top-level items (beans, rest, error handlers) are ignored.
"""

from pathlib import Path

import yaml

from routecov.core.errors import RouteParseError
from routecov.routes.models import RouteNode

BRANCH_KEYS = frozenset({"when", "otherwise", "doCatch", "doFinally"})


def _line(node: yaml.Node) -> int:
    return node.start_mark.line + 1


class YamlRouteParser:
    """Parser for YAML DSL route files."""

    @property
    def kind(self) -> str:
        return "yaml"

    @property
    def extensions(self) -> tuple[str, ...]:
        return (".yaml", ".yml")

    def parse(self, path: Path) -> list[RouteNode]:
        """Parse a YAML DSL file into route trees."""
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RouteParseError.invalid_source(str(path), f"failed to read file: {e}") from e

        try:
            documents = list(yaml.compose_all(content, Loader=yaml.SafeLoader))
        except yaml.YAMLError as e:
            raise RouteParseError.invalid_source(str(path), str(e)) from e

        routes: list[RouteNode] = []
        for document in documents:
            if document is None:
                continue
            if not isinstance(document, yaml.SequenceNode):
                raise RouteParseError.invalid_source(
                    str(path), f"expected a list of routes at line {_line(document)}"
                )
            for item in document.value:
                routes.extend(self._parse_item(item, path))
        return routes

    def _parse_item(self, item: yaml.Node, path: Path) -> list[RouteNode]:
        if not isinstance(item, yaml.MappingNode):
            raise RouteParseError.invalid_source(
                str(path), f"expected a mapping at line {_line(item)}"
            )
        routes = []
        for key, value in item.value:
            if key.value == "route":
                routes.append(self._parse_route(key, value, path))
            elif key.value == "from":
                routes.append(self._parse_from(key, value, [], None, path))
        return routes

    def _parse_route(self, key: yaml.Node, value: yaml.Node, path: Path) -> RouteNode:
        if not isinstance(value, yaml.MappingNode):
            raise RouteParseError.invalid_source(
                str(path), f"route at line {_line(key)} must be a mapping"
            )

        route_id: str | None = None
        from_entry: tuple[yaml.Node, yaml.Node] | None = None
        route_steps: list[RouteNode] = []
        for k, v in value.value:
            if k.value == "id":
                if not isinstance(v, yaml.ScalarNode):
                    raise RouteParseError.invalid_source(
                        str(path), f"route id at line {_line(k)} must be a scalar"
                    )
                route_id = v.value or None
            elif k.value == "from":
                from_entry = (k, v)
            elif k.value == "steps":
                route_steps.extend(self._parse_steps(v, path))

        if from_entry is None:
            raise RouteParseError.invalid_source(
                str(path), f"route at line {_line(key)} has no 'from'"
            )
        return self._parse_from(*from_entry, route_steps, route_id, path)

    def _parse_from(
        self,
        key: yaml.Node,
        value: yaml.Node,
        route_steps: list[RouteNode],
        route_id: str | None,
        path: Path,
    ) -> RouteNode:
        children = self._parse_children(value, path) + route_steps
        return RouteNode(
            name="from",
            line_number=_line(key),
            children=tuple(children),
            route_id=route_id,
            file_name=str(path),
        )

    def _parse_steps(self, node: yaml.Node, path: Path) -> list[RouteNode]:
        if not isinstance(node, yaml.SequenceNode):
            raise RouteParseError.invalid_source(
                str(path), f"steps at line {_line(node)} must be a list"
            )
        steps = []
        for item in node.value:
            if not isinstance(item, yaml.MappingNode):
                raise RouteParseError.invalid_source(
                    str(path), f"step at line {_line(item)} must be a mapping"
                )
            for key, value in item.value:
                steps.append(
                    RouteNode(
                        name=key.value,
                        line_number=_line(key),
                        children=tuple(self._parse_children(value, path)),
                    )
                )
        return steps

    def _parse_children(self, node: yaml.Node, path: Path) -> list[RouteNode]:
        """Nested steps and branch clauses of a step, in document order."""
        if not isinstance(node, yaml.MappingNode):
            return []
        children: list[RouteNode] = []
        for key, value in node.value:
            if key.value == "steps":
                children.extend(self._parse_steps(value, path))
            elif key.value in BRANCH_KEYS:
                if isinstance(value, yaml.SequenceNode):
                    for clause in value.value:
                        children.append(
                            RouteNode(
                                name=key.value,
                                line_number=_line(clause),
                                children=tuple(self._parse_children(clause, path)),
                            )
                        )
                else:
                    children.append(
                        RouteNode(
                            name=key.value,
                            line_number=_line(key),
                            children=tuple(self._parse_children(value, path)),
                        )
                    )
        return children
