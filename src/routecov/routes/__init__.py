"""Route trees and the providers that build them from source files.

Usage:
    from routecov.routes import YamlRouteParser

    for tree in YamlRouteParser().parse(Path("src/main/resources/routes.yaml")):
        print(tree.route_id, tree.size)
"""

from routecov.routes.base import RouteTreeProvider
from routecov.routes.models import RouteNode
from routecov.routes.xml_dsl import XmlRouteParser
from routecov.routes.yaml_dsl import YamlRouteParser

__all__ = [
    "RouteNode",
    "RouteTreeProvider",
    "XmlRouteParser",
    "YamlRouteParser",
]
