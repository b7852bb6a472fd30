"""File-backed store for persisted project memory (diagrams, notes, logs)."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional, Tuple


logger = logging.getLogger(__name__)

STRUCTURE_DIAGRAM = "structure.mmd"
STRUCTURE_GRAPH = "structure.json"

# Markdown headers written when an append creates one of these files
DEFAULT_HEADERS: Dict[str, str] = {
    "memory.md": "# Project Memory\n\n",
    "decisions.md": "# Design Decisions\n\n",
    "changelog.md": "# Changelog\n\n",
    "todos.md": "# To-Do List\n\n",
    "development-guidelines.md": "# Development Guidelines\n\n",
}


class MemoryFile(NamedTuple):
    """Metadata about one stored file."""

    name: str
    path: Path
    size: int
    last_modified: datetime


class MemoryStore:
    """
    A directory of plain files addressed by name.

    Names are keys, not paths: they may not contain separators or refer to
    parent directories. The directory is created on first write.
    """

    def __init__(self, memory_dir: Path):
        self.memory_dir = Path(memory_dir)

    def _path_for(self, name: str) -> Path:
        if not name or name in (".", "..") or "/" in name or "\\" in name:
            raise ValueError(f"Invalid memory file name: {name!r}")
        return self.memory_dir / name

    def read(self, name: str) -> Optional[str]:
        """
        Read a stored file.

        Returns:
            The file content, or None if it does not exist.
        """
        path = self._path_for(name)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, name: str, content: str) -> Path:
        """Replace a stored file's content."""
        path = self._path_for(name)
        self.memory_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", path)
        return path

    def append(self, name: str, content: str) -> Path:
        """
        Append to a stored file.

        A file that does not exist yet is created, starting with its default
        header when it has one.
        """
        path = self._path_for(name)
        self.memory_dir.mkdir(parents=True, exist_ok=True)
        if not path.exists():
            content = DEFAULT_HEADERS.get(name, "") + content
        with path.open("a", encoding="utf-8") as f:
            f.write(content)
        logger.debug("Appended to %s", path)
        return path

    def list_files(self) -> List[MemoryFile]:
        """List stored files sorted by name. A missing directory is empty."""
        if not self.memory_dir.is_dir():
            return []

        files: List[MemoryFile] = []
        for entry in sorted(self.memory_dir.iterdir()):
            if not entry.is_file():
                continue
            stat = entry.stat()
            files.append(MemoryFile(
                name=entry.name,
                path=entry,
                size=stat.st_size,
                last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            ))
        return files

    def save_structure(self, diagram: str, graph_json: str) -> Tuple[Path, Path]:
        """
        Store a rendered diagram and serialized graph in their fixed slots.

        Returns:
            Paths of the diagram and graph files.
        """
        diagram_path = self.write(STRUCTURE_DIAGRAM, diagram)
        graph_path = self.write(STRUCTURE_GRAPH, graph_json)
        return diagram_path, graph_path

    def __repr__(self) -> str:
        return f"MemoryStore({str(self.memory_dir)!r})"
