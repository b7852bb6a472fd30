"""Tests for the command line interface."""

import json
import tempfile
from pathlib import Path

from cli import main


def write(root: Path, rel_path: str, content: str) -> None:
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class TestCLI:
    """Tests for the projectmap entry point."""

    def test_mermaid_to_stdout(self, capsys):
        """Test the default Mermaid output."""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            write(root, "a.js", "import {b} from './b'")
            write(root, "b.js", "")

            assert main([str(root), "-q"]) == 0

            out = capsys.readouterr().out
            assert out.startswith("graph TD;\n")
            assert "  F0 -->|imports| F2;\n" in out

    def test_json_to_file(self, capsys):
        """Test writing JSON output to a file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            write(root, "src/a.js", "")
            output = root / "graph.json"

            assert main([str(root), "-f", "json", "-o", str(output), "-q"]) == 0

            data = json.loads(output.read_text(encoding="utf-8"))
            assert [n["name"] for n in data["nodes"]] == ["a.js", "a"]
            assert capsys.readouterr().out == ""

    def test_memory_dir(self):
        """Test saving both structure slots."""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir) / "project"
            write(root, "a.js", "")
            memory_dir = Path(tmpdir) / "memory"

            assert main([str(root), "--memory-dir", str(memory_dir), "-q"]) == 0

            assert (memory_dir / "structure.mmd").read_text(encoding="utf-8").startswith("graph TD;")
            assert json.loads((memory_dir / "structure.json").read_text(encoding="utf-8"))["nodes"]

    def test_include_ext_and_exclude_dir(self, capsys):
        """Test scanning options."""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            write(root, "a.js", "")
            write(root, "b.mjs", "")
            write(root, "vendor/c.mjs", "")

            assert main([str(root), "--include-ext", "mjs", "--exclude-dir", "vendor", "-q"]) == 0

            out = capsys.readouterr().out
            assert "b.mjs" in out
            assert "a.js" not in out
            assert "c.mjs" not in out

    def test_not_a_directory(self, capsys):
        """Test that a missing root exits with an error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            assert main([str(Path(tmpdir) / "missing"), "-q"]) == 1

            assert "is not a directory" in capsys.readouterr().err

    def test_bad_config(self, capsys):
        """Test that an invalid config file exits with an error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            write(root, ".projectmap.yml", "- not a mapping\n")

            assert main([str(root), "-q"]) == 1

            assert "must contain a mapping" in capsys.readouterr().err
