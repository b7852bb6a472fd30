"""Exporters for converting graph to various output formats."""

from .mermaid_exporter import to_mermaid
from .json_exporter import GraphFormatError, from_json, graph_from_dict, graph_to_dict, to_json

__all__ = ["to_mermaid", "to_json", "from_json", "graph_to_dict", "graph_from_dict", "GraphFormatError"]
