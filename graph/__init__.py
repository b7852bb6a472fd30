"""Graph data model."""

from .model import (
    ComponentNode,
    Edge,
    EdgeKind,
    FileNode,
    Group,
    ImportBinding,
    NodeType,
    ProjectGraph,
    RawImport,
)

__all__ = [
    "ComponentNode",
    "Edge",
    "EdgeKind",
    "FileNode",
    "Group",
    "ImportBinding",
    "NodeType",
    "ProjectGraph",
    "RawImport",
]
