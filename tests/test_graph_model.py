"""
Unit tests for the scene graph model.
"""

import pytest

from graphwalk.graph import Edge, Graph, Vertex


class TestNaming:
    """Test ordinal name assignment."""

    def test_unnamed_vertices_get_ordinals(self):
        """Blank, whitespace and missing names get 'Vertex N'."""
        graph = Graph([Vertex(None), Vertex("Hub"), Vertex("   "), Vertex("")])
        graph.assign_names()
        assert [v.name for v in graph] == ["Vertex 1", "Hub", "Vertex 3", "Vertex 4"]

    def test_every_vertex_named_after_initialize(self, branching_graph):
        """After initialize() every vertex has a non-blank name."""
        branching_graph.vertices.append(Vertex())
        branching_graph.initialize()
        assert all(v.has_name for v in branching_graph)

    def test_name_of_falls_back_before_initialize(self):
        """name_of() works even before names are assigned."""
        graph = Graph([Vertex(), Vertex()])
        assert graph.name_of(1) == "Vertex 2"

    def test_rename_ignores_blank(self, path_graph):
        """Blank renames leave the name unchanged."""
        path_graph.rename(0, "  ")
        assert path_graph[0].name == "A"
        path_graph.rename(0, "Alpha")
        assert path_graph[0].name == "Alpha"


class TestEdgeSynthesis:
    """Test edge creation from adjacency lists."""

    def test_symmetric_declaration_gives_one_edge(self, path_graph):
        """A pair declared from both sides produces a single edge."""
        edges = path_graph.build_edges()
        assert len(edges) == 3
        assert {e.pair for e in edges} == {
            frozenset({0, 1}),
            frozenset({1, 2}),
            frozenset({2, 3}),
        }

    def test_one_sided_declaration_gives_one_edge(self, branching_graph):
        """A pair declared from one side still produces an edge."""
        edges = branching_graph.build_edges()
        assert {e.pair for e in edges} == {
            frozenset({0, 1}),
            frozenset({0, 2}),
            frozenset({1, 3}),
        }

    def test_edge_named_from_declaring_side(self, path_graph):
        """Edges are named after the first side that declares them."""
        path_graph.initialize()
        assert [e.name for e in path_graph.edges] == [
            "Edge A-B",
            "Edge B-C",
            "Edge C-D",
        ]

    def test_self_reference_skipped(self):
        """A vertex listing itself produces no edge."""
        graph = Graph([Vertex("A", neighbors=[0, 1]), Vertex("B")])
        assert [e.pair for e in graph.build_edges()] == [frozenset({0, 1})]

    def test_rebuild_is_idempotent(self, path_graph):
        """Initializing twice does not duplicate edges."""
        path_graph.initialize()
        path_graph.initialize()
        assert len(path_graph.edges) == 3

    def test_edge_endpoints_are_frozen(self):
        """Edge endpoints cannot be reassigned."""
        edge = Edge("Edge A-B", 0, 1)
        with pytest.raises(AttributeError):
            edge.first = 2


class TestQueries:
    """Test graph accessors."""

    def test_missing_adjacency_means_no_neighbors(self):
        """None adjacency lists are treated as empty."""
        graph = Graph([Vertex("A", neighbors=None)])
        assert graph.neighbors(0) == []
        assert graph.build_edges() == []

    def test_find(self, path_graph):
        assert path_graph.find("C") == 2
        assert path_graph.find("Z") is None

    def test_distance(self, path_graph):
        assert path_graph.distance(0, 3) == pytest.approx(30.0)
        assert path_graph.distance(2, 2) == 0.0

    def test_asymmetric_links(self, branching_graph):
        """One-sided declarations are reported."""
        assert branching_graph.asymmetric_links() == [(0, 1), (0, 2), (1, 3)]

    def test_validate_passes_after_initialize(self, goal_graph):
        goal_graph.initialize()
        assert all(goal_graph.validate().values())

    def test_validate_flags_bad_goal(self, path_graph):
        path_graph.goal = 99
        assert path_graph.validate()["goal_in_range"] is False

    def test_stats(self, branching_graph):
        branching_graph.initialize()
        stats = branching_graph.stats()
        assert stats["vertices"] == 4
        assert stats["edges"] == 3
        assert stats["prioritized_vertices"] == 0
