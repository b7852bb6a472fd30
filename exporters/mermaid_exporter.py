"""Mermaid flowchart exporter for project graphs."""

from pathlib import PurePosixPath
from typing import Dict, List

from graph.model import Node, NodeType, ProjectGraph


FILE_ICON = "\U0001F4C4"  # page facing up
COMPONENT_ICON = "\U0001F9E9"  # puzzle piece

ORIENTATIONS = ("TD", "TB", "LR", "RL", "BT")


def to_mermaid(graph: ProjectGraph, orientation: str = "TD") -> str:
    """
    Convert a project graph to Mermaid flowchart syntax.

    The output depends only on the graph: nodes and edges are written in
    insertion order, and directory subgraphs in the order their first file
    appears. Files at the project root are not placed in a subgraph.

    Args:
        graph: The graph to export.
        orientation: Flowchart orientation (TD, TB, LR, RL, BT).

    Returns:
        Mermaid diagram text, one statement per line.
    """
    if orientation not in ORIENTATIONS:
        raise ValueError(f"Unknown orientation: {orientation!r}")

    nodes = graph.nodes
    lines = [f"graph {orientation};"]

    for node in nodes:
        icon = FILE_ICON if node.type == NodeType.FILE else COMPONENT_ICON
        lines.append(f'  {node_id(node)}["{icon} {_escape_label(node.name)}"];')

    for edge in graph.edges:
        source = node_id(nodes[edge.source])
        target = node_id(nodes[edge.target])
        lines.append(f"  {source} -->|{edge.kind}| {target};")

    for directory, ids in _directory_groups(graph).items():
        lines.append(f'  subgraph "{_escape_label(directory)}"')
        for member in ids:
            lines.append(f"    {member}")
        lines.append("  end")

    return "\n".join(lines) + "\n"


def node_id(node: Node) -> str:
    """Mermaid identifier of a node, prefixed by the node's own variant."""
    prefix = "F" if node.type == NodeType.FILE else "C"
    return f"{prefix}{node.id}"


def _directory_groups(graph: ProjectGraph) -> Dict[str, List[str]]:
    # dicts keep insertion order, which gives first-encountered ordering
    groups: Dict[str, List[str]] = {}
    for node in graph.file_nodes():
        directory = str(PurePosixPath(node.path).parent)
        if directory == ".":
            continue
        groups.setdefault(directory, []).append(node_id(node))
    return groups


def _escape_label(value: str) -> str:
    """Escape characters that would end a quoted Mermaid label."""
    return value.replace('"', "#quot;")
