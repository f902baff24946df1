import math

import pytest

from graphsolve.algorithms.spf import shortest_path
from graphsolve.errors import EmptyGraphError, MissingEndpointError, UnknownNodeError
from graphsolve.types.base import ResultStatus
from graphsolve.types.dto import PathSegment


class TestShortestPath:
    def test_road_map(self, road_map):
        nodes, edges = road_map
        result = shortest_path(nodes, edges, "1", "5")
        assert result.distance == 20
        assert result.path == ("1", "3", "6", "5")
        assert result.path_exists
        assert result.status is ResultStatus.OK

    def test_road_map_segments(self, road_map):
        nodes, edges = road_map
        result = shortest_path(nodes, edges, "1", "5")
        assert result.segments == (
            PathSegment("1", "3", 9),
            PathSegment("3", "6", 2),
            PathSegment("6", "5", 9),
        )
        assert sum(s.distance for s in result.segments) == result.distance

    def test_edges_are_undirected(self):
        result = shortest_path(["A", "B"], [("B", "A", 4)], "A", "B")
        assert result.distance == 4
        assert result.path == ("A", "B")

    @pytest.mark.parametrize(
        "nodes,expected",
        [
            (["A", "B", "C", "D"], ("A", "B", "D")),
            (["A", "C", "B", "D"], ("A", "C", "D")),
        ],
    )
    def test_ties_go_to_first_declared_node(self, nodes, expected):
        edges = [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)]
        result = shortest_path(nodes, edges, "A", "D")
        assert result.distance == 2
        assert result.path == expected

    def test_zero_distance_edge(self):
        edges = [("A", "B", 0), ("B", "C", 1)]
        result = shortest_path(["A", "B", "C"], edges, "A", "C")
        assert result.distance == 1
        assert result.path == ("A", "B", "C")

    def test_falsy_looking_node_identifier(self):
        result = shortest_path(["0", "1"], [("0", "1", 3)], "1", "0")
        assert result.path == ("1", "0")

    def test_later_edge_overwrites_pair(self):
        edges = [("A", "B", 5), ("B", "A", 2)]
        result = shortest_path(["A", "B"], edges, "A", "B")
        assert result.distance == 2

    def test_repeat_calls_are_identical(self, road_map):
        nodes, edges = road_map
        assert shortest_path(nodes, edges, "1", "5") == shortest_path(nodes, edges, "1", "5")


class TestShortestPathBoundaries:
    def test_source_is_target(self, road_map):
        nodes, edges = road_map
        result = shortest_path(nodes, edges, "4", "4")
        assert result.distance == 0
        assert result.path == ("4",)
        assert result.path_exists
        assert result.segments == ()

    def test_single_node(self):
        result = shortest_path(["A"], [], "A", "A")
        assert result.distance == 0
        assert result.path == ("A",)

    def test_unreachable_target(self, two_islands):
        nodes, edges = two_islands
        result = shortest_path(nodes, edges, "A", "D")
        assert math.isinf(result.distance)
        assert result.path == ()
        assert not result.path_exists
        assert result.status is ResultStatus.DISCONNECTED

    def test_isolated_target(self):
        result = shortest_path(["A", "B", "C"], [("A", "B", 1)], "A", "C")
        assert not result.path_exists


class TestShortestPathValidation:
    def test_empty_nodes(self):
        with pytest.raises(EmptyGraphError):
            shortest_path([], [], "A", "B")

    def test_missing_target(self):
        with pytest.raises(MissingEndpointError, match="target"):
            shortest_path(["A"], [], "A", "")

    def test_unknown_source(self):
        with pytest.raises(UnknownNodeError, match="Source node 'Q'"):
            shortest_path(["A"], [], "Q", "A")

    def test_edge_to_undeclared_node(self):
        with pytest.raises(UnknownNodeError):
            shortest_path(["A", "B"], [("A", "X", 1)], "A", "B")
