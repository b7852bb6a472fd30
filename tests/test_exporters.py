"""Tests for exporters."""

import json

import pytest

from exporters import GraphFormatError
from exporters.json_exporter import (
    from_json,
    graph_from_dict,
    graph_to_dict,
    to_json,
)
from exporters.mermaid_exporter import to_mermaid
from graph.model import EdgeKind, ProjectGraph


def sample_graph() -> ProjectGraph:
    """a.js imports src/b.js; both declare a component."""
    graph = ProjectGraph()
    a = graph.add_file_node("a.js", "a.js")
    comp_a = graph.add_component_node("a", "a.js")
    graph.add_edge(a.id, comp_a.id, EdgeKind.DEFINES)
    b = graph.add_file_node("src/b.js", "b.js")
    comp_b = graph.add_component_node("b", "src/b.js")
    graph.add_edge(b.id, comp_b.id, EdgeKind.DEFINES)
    graph.add_edge(a.id, b.id, EdgeKind.IMPORTS)
    graph.add_edge(a.id, comp_b.id, EdgeKind.USES)
    a.component_names.append("a")
    b.component_names.append("b")
    graph.add_group("src", "src", "")
    return graph


class TestMermaidExporter:
    """Tests for Mermaid exporter."""

    def test_empty_graph(self):
        """Test exporting empty graph."""
        assert to_mermaid(ProjectGraph()) == "graph TD;\n"

    def test_full_output(self):
        """Test the exact diagram for a small graph."""
        output = to_mermaid(sample_graph())

        assert output == (
            "graph TD;\n"
            '  F0["\U0001F4C4 a.js"];\n'
            '  C1["\U0001F9E9 a"];\n'
            '  F2["\U0001F4C4 b.js"];\n'
            '  C3["\U0001F9E9 b"];\n'
            "  F0 -->|defines| C1;\n"
            "  F2 -->|defines| C3;\n"
            "  F0 -->|imports| F2;\n"
            "  F0 -->|uses| C3;\n"
            '  subgraph "src"\n'
            "    F2\n"
            "  end\n"
        )

    def test_orientation(self):
        """Test different orientations."""
        for orientation in ["LR", "TD", "TB", "RL", "BT"]:
            output = to_mermaid(ProjectGraph(), orientation=orientation)
            assert output.startswith(f"graph {orientation};")

    def test_invalid_orientation(self):
        """Test that unknown orientations are rejected."""
        with pytest.raises(ValueError):
            to_mermaid(ProjectGraph(), orientation="XY")

    def test_prefix_follows_endpoint_type(self):
        """Test that endpoint prefixes come from the nodes, not the edge kind."""
        graph = ProjectGraph()
        first = graph.add_component_node("x", "x.js")
        second = graph.add_component_node("y", "y.js")
        graph.add_edge(first.id, second.id, EdgeKind.IMPORTS)

        assert "  C0 -->|imports| C1;\n" in to_mermaid(graph)

    def test_groups_in_first_seen_order(self):
        """Test that directories keep first-encountered order and skip the root."""
        graph = ProjectGraph()
        graph.add_file_node("zeta/one.js", "one.js")
        graph.add_file_node("root.js", "root.js")
        graph.add_file_node("alpha/two.js", "two.js")
        graph.add_file_node("zeta/three.js", "three.js")

        output = to_mermaid(graph)
        blocks = output.split("  subgraph ")[1:]

        assert blocks[0] == '"zeta"\n    F0\n    F3\n  end\n'
        assert blocks[1] == '"alpha"\n    F2\n  end\n'

    def test_label_quotes_escaped(self):
        """Test that quotes in names cannot break labels."""
        graph = ProjectGraph()
        graph.add_file_node('we"ird.js', 'we"ird.js')

        assert '["\U0001F4C4 we#quot;ird.js"]' in to_mermaid(graph)


class TestJSONExporter:
    """Tests for JSON exporter."""

    def test_empty_graph(self):
        """Test exporting empty graph."""
        data = json.loads(to_json(ProjectGraph()))

        assert data == {"nodes": [], "edges": [], "groups": []}

    def test_field_layout(self):
        """Test serialized field names and order."""
        data = graph_to_dict(sample_graph())

        assert list(data) == ["nodes", "edges", "groups"]
        assert data["nodes"][0] == {
            "id": 0, "type": "file", "name": "a.js", "path": "a.js", "components": ["a"],
        }
        assert data["nodes"][3] == {"id": 3, "type": "component", "name": "b", "defined_in": "src/b.js"}
        assert data["edges"][2] == {"source": 0, "target": 2, "type": "imports"}
        assert data["groups"] == [{"id": 0, "name": "src", "path": "src", "parent_path": ""}]

    def test_round_trip(self):
        """Test that a loaded graph serializes and renders identically."""
        graph = sample_graph()

        loaded = from_json(to_json(graph))

        assert graph_to_dict(loaded) == graph_to_dict(graph)
        assert to_mermaid(loaded) == to_mermaid(graph)

    def test_non_dense_ids_rejected(self):
        """Test that gaps in node ids are rejected."""
        data = {"nodes": [{"id": 1, "type": "component", "name": "x", "defined_in": "x.js"}], "edges": []}

        with pytest.raises(GraphFormatError):
            graph_from_dict(data)

    def test_dangling_edge_rejected(self):
        """Test that edges to unknown nodes are rejected."""
        data = {"nodes": [], "edges": [{"source": 0, "target": 1, "type": "imports"}]}

        with pytest.raises(GraphFormatError):
            graph_from_dict(data)

    def test_invalid_json(self):
        """Test that malformed JSON is rejected."""
        with pytest.raises(GraphFormatError):
            from_json("{not json")
