"""Per-run state shared by the traverser, extractor and resolver."""

import logging
import time
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional

from graph.model import ComponentNode, EdgeKind, FileNode, ProjectGraph
from .config import MapperConfig


logger = logging.getLogger(__name__)


class IssueKind:
    """Non-fatal problem categories collected during a run."""

    TRAVERSAL = "traversal"
    READ = "read"
    DEADLINE = "deadline"


class AnalysisIssue(NamedTuple):
    """A recoverable problem met while building the graph."""

    kind: str
    path: str
    message: str


class BuildContext:
    """
    Owns the graph being built and its lookup tables for one run.

    The file index maps project-relative paths to file nodes and the
    component index maps component names to component nodes. Nothing here is
    shared between runs.
    """

    def __init__(self, root: Path, config: MapperConfig, deadline: Optional[float] = None):
        self.root = root
        self.config = config
        self.deadline = deadline
        self.graph = ProjectGraph()
        self.file_index: Dict[str, FileNode] = {}
        self.component_index: Dict[str, ComponentNode] = {}
        self.issues: List[AnalysisIssue] = []
        self.stopped = False

    def get_or_add_file(self, path: str, name: str) -> FileNode:
        """Return the file node for ``path``, creating it on first sight."""
        node = self.file_index.get(path)
        if node is None:
            node = self.graph.add_file_node(path, name)
            self.file_index[path] = node
        return node

    def register_component(self, name: str, file_node: FileNode) -> None:
        """
        Record that ``file_node`` declares the component ``name``.

        A component node is created the first time the name is seen anywhere;
        a ``defines`` edge is added the first time this file declares it.
        """
        if name in file_node.component_names:
            return
        file_node.component_names.append(name)

        component = self.component_index.get(name)
        if component is None:
            component = self.graph.add_component_node(name, file_node.path)
            self.component_index[name] = component

        self.graph.add_edge(file_node.id, component.id, EdgeKind.DEFINES)

    def record_issue(self, kind: str, path: str, message: str) -> None:
        """Collect a non-fatal issue and log it as a warning."""
        self.issues.append(AnalysisIssue(kind, path, message))
        logger.warning("%s: %s", path or ".", message)

    def deadline_reached(self) -> bool:
        """
        Check the caller's deadline.

        The first time it has passed a ``deadline`` issue is recorded and the
        context is marked as stopped.
        """
        if self.stopped:
            return True
        if self.deadline is not None and time.monotonic() >= self.deadline:
            self.stopped = True
            self.record_issue(IssueKind.DEADLINE, "", "Deadline reached, traversal stopped early")
        return self.stopped
