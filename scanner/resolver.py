"""Path resolution for mapping import targets to project files."""

import logging
import posixpath
from pathlib import Path
from typing import Iterator, List, Optional

from graph.model import EdgeKind, FileNode, RawImport
from .context import BuildContext


logger = logging.getLogger(__name__)


def import_base_path(source_path: str, target: str) -> Optional[str]:
    """
    Compute the project-relative path an import target points at.

    Relative targets are joined to the importing file's directory; targets
    starting with ``/`` are taken from the project root.

    Args:
        source_path: Project-relative POSIX path of the importing file.
        target: The import target as written.

    Returns:
        Normalized POSIX path, or None for bare specifiers and targets that
        escape the project root.
    """
    if target.startswith("."):
        base = posixpath.normpath(posixpath.join(posixpath.dirname(source_path), target))
    elif target.startswith("/"):
        base = posixpath.normpath(target.lstrip("/") or ".")
    else:
        return None

    if base == ".." or base.startswith("../"):
        return None
    return base


def candidate_paths(base: str, extensions: List[str]) -> Iterator[str]:
    """
    Yield resolution candidates in priority order.

    The exact path comes first, then the path with each extension appended,
    then an index file inside the path for each extension.
    """
    yield base
    for ext in extensions:
        yield base + ext
    for ext in extensions:
        yield posixpath.normpath(posixpath.join(base, "index" + ext))


def resolve_import_path(root: Path, source_path: str, target: str, extensions: List[str]) -> Optional[str]:
    """
    Resolve an import target to an existing file.

    Args:
        root: Project root directory.
        source_path: Project-relative path of the importing file.
        target: The import target as written.
        extensions: Extensions to try, in priority order.

    Returns:
        Project-relative POSIX path of the first candidate that is an
        existing file, or None.
    """
    base = import_base_path(source_path, target)
    if base is None:
        return None

    for candidate in candidate_paths(base, extensions):
        if _is_file(root / candidate):
            return candidate
    return None


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def resolve_import(ctx: BuildContext, node: FileNode, raw_import: RawImport) -> Optional[FileNode]:
    """
    Resolve one import of ``node`` and add the resulting edges.

    On success one ``imports`` edge is added, followed by one ``uses`` edge
    per component the target file declares. Unresolved imports, and those
    that land on files outside the file index, add nothing.

    Returns:
        The imported file node, or None if the import was dropped.
    """
    resolved = resolve_import_path(ctx.root, node.path, raw_import.path, ctx.config.extensions)
    target = ctx.file_index.get(resolved) if resolved is not None else None
    if target is None:
        logger.debug("Dropping unresolved import %r in %s", raw_import.path, node.path)
        return None

    ctx.graph.add_edge(node.id, target.id, EdgeKind.IMPORTS)
    for name in target.component_names:
        component = ctx.component_index.get(name)
        if component is not None:
            ctx.graph.add_edge(node.id, component.id, EdgeKind.USES)
    return target


def resolve_all(ctx: BuildContext) -> None:
    """
    Resolve every recorded import of every file node.

    Must run after traversal has finished, since targets are looked up in
    the complete file index.
    """
    for node in ctx.graph.file_nodes():
        for raw_import in node.imports:
            resolve_import(ctx, node, raw_import)
