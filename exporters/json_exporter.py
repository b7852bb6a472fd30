"""JSON exporter for project graphs (machine-friendly format)."""

import json
from typing import Any, Dict, List

from graph.model import EdgeKind, NodeType, ProjectGraph


class GraphFormatError(ValueError):
    """Raised when serialized graph data cannot be loaded."""


def graph_to_dict(graph: ProjectGraph) -> Dict[str, Any]:
    """
    Convert a graph to plain data.

    Field names and ordering are fixed so serialized graphs can be compared
    directly. Raw import targets are not included.

    Args:
        graph: The graph to convert.

    Returns:
        A dict with ``nodes``, ``edges`` and ``groups`` lists.
    """
    nodes: List[Dict[str, Any]] = []
    for node in graph.nodes:
        if node.type == NodeType.FILE:
            nodes.append({
                "id": node.id,
                "type": NodeType.FILE,
                "name": node.name,
                "path": node.path,
                "components": list(node.component_names),
            })
        else:
            nodes.append({
                "id": node.id,
                "type": NodeType.COMPONENT,
                "name": node.name,
                "defined_in": node.defined_in,
            })

    edges = [
        {"source": edge.source, "target": edge.target, "type": edge.kind}
        for edge in graph.edges
    ]
    groups = [
        {"id": group.id, "name": group.name, "path": group.path, "parent_path": group.parent_path}
        for group in graph.groups
    ]

    return {"nodes": nodes, "edges": edges, "groups": groups}


def to_json(graph: ProjectGraph, indent: int = 2) -> str:
    """
    Convert a graph to JSON format.

    Args:
        graph: The graph to export.
        indent: JSON indentation level.

    Returns:
        JSON string representation of the graph.
    """
    return json.dumps(graph_to_dict(graph), indent=indent, ensure_ascii=False)


def graph_from_dict(data: Dict[str, Any]) -> ProjectGraph:
    """
    Rebuild a graph from the output of :func:`graph_to_dict`.

    Raises:
        GraphFormatError: If the data is not a well-formed serialized graph.
    """
    graph = ProjectGraph()
    try:
        for position, item in enumerate(data["nodes"]):
            if item["id"] != position:
                raise GraphFormatError(f"Node ids must be dense, got {item['id']} at position {position}")
            if item["type"] == NodeType.FILE:
                node = graph.add_file_node(item["path"], item["name"])
                node.component_names.extend(item.get("components", []))
            elif item["type"] == NodeType.COMPONENT:
                graph.add_component_node(item["name"], item["defined_in"])
            else:
                raise GraphFormatError(f"Unknown node type: {item['type']!r}")

        for item in data["edges"]:
            if item["type"] not in EdgeKind.ALL:
                raise GraphFormatError(f"Unknown edge type: {item['type']!r}")
            graph.add_edge(item["source"], item["target"], item["type"])

        for item in data.get("groups", []):
            graph.add_group(item["name"], item["path"], item["parent_path"])
    except GraphFormatError:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise GraphFormatError(f"Malformed graph data: {e!r}") from e

    return graph


def from_json(text: str) -> ProjectGraph:
    """Load a graph from JSON produced by :func:`to_json`."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GraphFormatError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise GraphFormatError("Graph JSON must be an object")
    return graph_from_dict(data)
