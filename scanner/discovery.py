"""Directory traversal for collecting analyzable source files."""

import logging
from pathlib import Path, PurePosixPath
from typing import List

from .context import BuildContext, IssueKind
from .extractor import extract_file


logger = logging.getLogger(__name__)


def walk(ctx: BuildContext, relative_subpath: str = "") -> None:
    """
    Traverse ``ctx.root / relative_subpath`` depth-first.

    Entries are visited in sorted name order. Each visited directory is
    recorded as a group before it is descended into, and each analyzable file
    is handed to the extractor before traversal moves on.

    Symlinked directories are not followed; symlinked files are extracted.
    A directory that cannot be listed is recorded as a traversal issue and
    only that subtree is abandoned.

    Args:
        ctx: The build context of the current run.
        relative_subpath: POSIX path of the directory relative to the root,
            ``""`` for the root itself.
    """
    current = ctx.root / relative_subpath if relative_subpath else ctx.root

    try:
        entries = _list_directory(current)
    except OSError as e:
        ctx.record_issue(IssueKind.TRAVERSAL, relative_subpath, f"Cannot list directory: {e}")
        return

    for entry in entries:
        if ctx.deadline_reached():
            return

        relative = _join(relative_subpath, entry.name)

        if entry.is_dir():
            # linked directories would revisit files under an alias, or loop
            if entry.is_symlink():
                logger.debug("Skipping linked directory %s", relative)
                continue
            if ctx.config.is_ignored_dir(entry.name):
                logger.debug("Skipping directory %s", relative)
                continue
            ctx.graph.add_group(entry.name, relative, relative_subpath)
            walk(ctx, relative)
        elif entry.is_file() and ctx.config.is_analyzable(entry):
            extract_file(ctx, relative)


def _list_directory(directory: Path) -> List[Path]:
    return sorted(directory.iterdir())


def _join(parent: str, name: str) -> str:
    return str(PurePosixPath(parent, name)) if parent else name
