"""Tests for the route tree model."""

from routecov.routes.models import RouteNode


def test_size_counts_every_node() -> None:
    tree = RouteNode("from", children=(RouteNode("a", children=(RouteNode("b"),)), RouteNode("c")))
    assert tree.size == 4


def test_walk_is_pre_order() -> None:
    tree = RouteNode("from", children=(RouteNode("a", children=(RouteNode("b"),)), RouteNode("c")))
    assert [n.name for n in tree.walk()] == ["from", "a", "b", "c"]


def test_single_node() -> None:
    assert RouteNode("from", route_id="r").size == 1
