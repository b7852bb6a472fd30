"""Lexical extraction of components and import targets from source files."""

import logging
import re
from pathlib import PurePosixPath
from typing import List, NamedTuple, Optional, Pattern

from graph.model import FileNode, ImportBinding, RawImport
from .context import BuildContext, IssueKind


logger = logging.getLogger(__name__)


class ImportPattern(NamedTuple):
    """
    A kind-tagged regular expression recognizing one import statement style.

    The pattern must define the named groups ``default``, ``named`` and
    ``target``; either binding group may be absent from a match.
    """

    kind: str
    regex: Pattern[str]


# import Default from "x" / import {a, b} from "x" / import Default, {a} from "x"
# A leading TypeScript "type" modifier is not a binding.
ESM_IMPORT = ImportPattern(
    "esm",
    re.compile(
        r"""\bimport\s+"""
        r"""(?:type\s+(?!from\b))?"""
        r"""(?:(?P<default>[\w$]+)\s*(?:,\s*)?)?"""
        r"""(?:\{(?P<named>[^}]*)\}\s*)?"""
        r"""from\s+['"](?P<target>[^'"]+)['"]"""
    ),
)

# const x = require("x") / let {a, b} = require("x")
COMMONJS_REQUIRE = ImportPattern(
    "commonjs",
    re.compile(
        r"""\b(?:const|let|var)\s+"""
        r"""(?:\{(?P<named>[^}]*)\}|(?P<default>[\w$]+))\s*=\s*"""
        r"""require\s*\(\s*['"](?P<target>[^'"]+)['"]\s*\)"""
    ),
)

IMPORT_PATTERNS: List[ImportPattern] = [ESM_IMPORT, COMMONJS_REQUIRE]


def component_name_for(path: str) -> str:
    """Derive a component name from a file path: its base name without extension."""
    return PurePosixPath(path).stem


def is_project_target(target: str) -> bool:
    """Only relative (``.``) and root-absolute (``/``) targets can name project files."""
    return target.startswith((".", "/"))


def extract_imports(text: str, patterns: Optional[List[ImportPattern]] = None) -> List[RawImport]:
    """
    Extract project import targets from source text.

    Each pattern is applied to the whole text in turn, so all matches of the
    first pattern come before any match of the second. Bare module specifiers
    such as ``"react"`` are discarded.

    Args:
        text: Full file content.
        patterns: Patterns to apply, defaulting to ``IMPORT_PATTERNS``.

    Returns:
        One entry per matching statement, in pattern then source order.
    """
    if patterns is None:
        patterns = IMPORT_PATTERNS

    imports: List[RawImport] = []
    for pattern in patterns:
        for match in pattern.regex.finditer(text):
            target = match.group("target")
            if not is_project_target(target):
                continue
            imports.append(RawImport(target, _bindings(match.group("default"), match.group("named"))))
    return imports


def _bindings(default: Optional[str], named: Optional[str]) -> tuple:
    bindings = []
    if default:
        bindings.append(ImportBinding("default", default))
    if named:
        for name in named.split(","):
            name = name.strip()
            if name:
                bindings.append(ImportBinding("named", name))
    return tuple(bindings)


def extract_file(ctx: BuildContext, path: str) -> FileNode:
    """
    Create the file node for ``path`` and fill in its component and imports.

    A path that already has a node is returned untouched. If the file cannot
    be read, a read issue is recorded and the node is left empty.

    Args:
        ctx: The build context of the current run.
        path: Project-relative POSIX path of the file.

    Returns:
        The file node for ``path``.
    """
    existing = ctx.file_index.get(path)
    if existing is not None:
        return existing

    node = ctx.get_or_add_file(path, PurePosixPath(path).name)

    try:
        content = (ctx.root / path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        ctx.record_issue(IssueKind.READ, path, f"Cannot read file: {e}")
        return node

    ctx.register_component(component_name_for(path), node)
    node.imports.extend(extract_imports(content))
    logger.debug("Extracted %d import(s) from %s", len(node.imports), path)
    return node
