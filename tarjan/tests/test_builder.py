"""Graph builder tests

Covers node count validation, lenient per-line edge parsing, direction-aware
deduplication, and the empty-graph error.
"""

import pytest

from tarjan import (
    EmptyGraphError,
    GraphEdge,
    GraphValidationError,
    InvalidNodeCountError,
    SAMPLE_EDGES,
    build_graph,
    build_graph_with_report,
    dedupe_edges,
    format_edge_lines,
    parse_edge_lines,
    parse_node_count,
)


class TestNodeCount:
    """parse_node_count() accepts positive integers only."""

    @pytest.mark.parametrize("value, expected", [(3, 3), ("8", 8), ("  12 ", 12)])
    def test_valid(self, value, expected):
        assert parse_node_count(value) == expected

    @pytest.mark.parametrize("value", [0, -2, "", "abc", "3.5", "-1", "3 4", "\u0663", "\uff13"])
    def test_invalid(self, value):
        with pytest.raises(InvalidNodeCountError, match="positive integer"):
            parse_node_count(value)

    def test_limit(self):
        assert parse_node_count(10, max_nodes=10) == 10
        with pytest.raises(InvalidNodeCountError, match="must not exceed 10"):
            parse_node_count(11, max_nodes=10)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_node_count("nope")


class TestEdgeLines:
    """parse_edge_lines() skips bad lines and reports them."""

    def test_parses_lines_in_order(self):
        edges, skipped = parse_edge_lines("0 1\n1 2\n2 0", 3)

        assert [e.as_pair() for e in edges] == [(0, 1), (1, 2), (2, 0)]
        assert skipped == []

    def test_whitespace_and_crlf(self):
        edges, _ = parse_edge_lines("  0\t1 \r\n1    2\r\n", 3)

        assert [e.as_pair() for e in edges] == [(0, 1), (1, 2)]

    def test_blank_lines_ignored_silently(self):
        edges, skipped = parse_edge_lines("\n0 1\n\n   \n", 2)

        assert len(edges) == 1
        assert skipped == []

    def test_malformed_lines_skipped(self):
        edges, skipped = parse_edge_lines("0 1\nfoo\n1\n1 2 3\n-1 0\n1,2", 3)

        assert [e.as_pair() for e in edges] == [(0, 1)]
        assert skipped == ["foo", "1", "1 2 3", "-1 0", "1,2"]

    def test_out_of_range_skipped(self):
        edges, skipped = parse_edge_lines("0 1\n1 3\n3 0", 3)

        assert [e.as_pair() for e in edges] == [(0, 1)]
        assert skipped == ["1 3", "3 0"]

    def test_directed_keeps_both_directions(self):
        edges, skipped = parse_edge_lines("0 1\n1 0\n0 1", 2, directed=True)

        assert [e.as_pair() for e in edges] == [(0, 1), (1, 0)]
        assert skipped == ["0 1"]

    def test_undirected_dedups_on_min_max(self):
        edges, skipped = parse_edge_lines("1 0\n0 1", 2, directed=False)

        assert [e.as_pair() for e in edges] == [(1, 0)]
        assert skipped == ["0 1"]

    def test_non_ascii_digits_skipped(self):
        edges, skipped = parse_edge_lines("0 1\n\u0660 \u0661\n\uff10 \uff11", 2)

        assert [e.as_pair() for e in edges] == [(0, 1)]
        assert skipped == ["\u0660 \u0661", "\uff10 \uff11"]


class TestDedupeEdges:
    """dedupe_edges() keeps the first copy of each edge."""

    def test_directed_keeps_reverse_edges(self):
        edges = [GraphEdge(source=0, target=1), GraphEdge(source=1, target=0), GraphEdge(source=0, target=1)]

        assert [e.id for e in dedupe_edges(edges)] == ["0-1", "1-0"]

    def test_undirected_compares_min_max(self):
        edges = [GraphEdge(source=1, target=0), GraphEdge(source=0, target=1), GraphEdge(source=2, target=2)]

        assert [e.id for e in dedupe_edges(edges, directed=False)] == ["1-0", "2-2"]


class TestBuildGraph:
    """build_graph() produces nodes 0..n-1 and validated edges."""

    def test_builds_nodes_and_edges(self):
        graph = build_graph("4", "0 1\n2 3", directed=False)

        assert graph.nodes == [0, 1, 2, 3]
        assert graph.edges == [GraphEdge(source=0, target=1), GraphEdge(source=2, target=3)]
        assert graph.directed is False

    def test_empty_edge_list(self):
        with pytest.raises(EmptyGraphError, match="at least one valid edge"):
            build_graph(3, "")

    def test_only_invalid_edges(self):
        with pytest.raises(GraphValidationError):
            build_graph(2, "5 6\nhello")

    def test_bad_count_reported_before_edges(self):
        with pytest.raises(InvalidNodeCountError):
            build_graph("zero", "")

    def test_report_lists_skipped_lines(self):
        graph, skipped = build_graph_with_report(3, "0 1\n0 9\nx y")

        assert len(graph.edges) == 1
        assert skipped == ["0 9", "x y"]


class TestFormatEdgeLines:
    """format_edge_lines() is the inverse text rendering."""

    def test_sample_text_rebuilds_sample_edges(self):
        text = format_edge_lines(SAMPLE_EDGES)
        graph = build_graph(8, text)

        assert text.splitlines()[0] == "0 1"
        assert [e.as_pair() for e in graph.edges] == SAMPLE_EDGES

    def test_accepts_graph_edges(self):
        assert format_edge_lines([GraphEdge(source=3, target=1)]) == "3 1"

    def test_edge_id_serialized(self):
        assert GraphEdge(source=3, target=1).model_dump() == {"source": 3, "target": 1, "id": "3-1"}
