"""Graph builder that orchestrates scanning and graph construction."""

import logging
from pathlib import Path
from typing import List, Optional

from graph.model import EdgeKind, ProjectGraph
from .config import MapperConfig, ProjectMapperError
from .context import AnalysisIssue, BuildContext
from .discovery import walk
from .resolver import resolve_all


logger = logging.getLogger(__name__)


class InvalidRootError(ProjectMapperError):
    """Raised when the root path does not exist or is not a directory."""


class AnalysisResult:
    """
    The outcome of one analysis run.

    Attributes:
        graph: The best-effort graph.
        issues: Non-fatal problems met while building it.
    """

    def __init__(self, root: Path, graph: ProjectGraph, issues: List[AnalysisIssue]):
        self.root = root
        self.graph = graph
        self.issues = issues

    @property
    def partial(self) -> bool:
        """True if any part of the tree could not be analyzed."""
        return bool(self.issues)

    def summary(self) -> str:
        """One-line description of the graph's contents."""
        files = len(self.graph.file_nodes())
        components = len(self.graph.component_nodes())
        imports = sum(1 for _ in self.graph.iter_edges(EdgeKind.IMPORTS))
        return f"{files} files, {components} components, {imports} imports"

    def __repr__(self) -> str:
        return f"AnalysisResult(root={str(self.root)!r}, graph={self.graph!r}, issues={len(self.issues)})"


def analyze(
    root: Path,
    config: Optional[MapperConfig] = None,
    deadline: Optional[float] = None,
) -> AnalysisResult:
    """
    Scan a project and build its dependency graph.

    Extraction of every file completes before any import is resolved.

    Args:
        root: Project root directory. Relative paths are taken from the
            current working directory.
        config: Scanner settings (default: ``MapperConfig()``).
        deadline: Optional ``time.monotonic()`` value after which traversal
            stops; the graph built so far is still resolved and returned.

    Returns:
        The graph together with any non-fatal issues.

    Raises:
        InvalidRootError: If ``root`` does not exist or is not a directory.
    """
    root = Path(root).resolve()
    if not root.is_dir():
        raise InvalidRootError(f"'{root}' is not a directory")

    if config is None:
        config = MapperConfig()

    ctx = BuildContext(root, config, deadline=deadline)
    walk(ctx)
    resolve_all(ctx)

    result = AnalysisResult(root, ctx.graph, ctx.issues)
    logger.info("Mapped %s: %s", root, result.summary())
    return result
