"""Persistent project memory storage."""

from .store import STRUCTURE_DIAGRAM, STRUCTURE_GRAPH, MemoryFile, MemoryStore

__all__ = ["MemoryStore", "MemoryFile", "STRUCTURE_DIAGRAM", "STRUCTURE_GRAPH"]
