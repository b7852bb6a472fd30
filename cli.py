#!/usr/bin/env python3
"""
Project Mapper CLI

A tool for mapping import relationships between JavaScript-family source
files and rendering them as Mermaid diagrams or JSON graphs.
"""

import argparse
import logging
import sys
from pathlib import Path

from exporters import to_json, to_mermaid
from exporters.mermaid_exporter import ORIENTATIONS
from memory import MemoryStore
from scanner.builder import analyze
from scanner.config import ProjectMapperError, load_config, normalize_extensions


logger = logging.getLogger("projectmap")


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="projectmap",
        description="Map import relationships between project source files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  projectmap .                           # Mermaid diagram of the current directory
  projectmap ./web -f json -o graph.json # JSON graph written to a file
  projectmap . --include-ext .js .mjs    # Only scan these extensions
  projectmap . --memory-dir memory       # Also save structure.mmd and structure.json
        """,
    )

    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Project root directory (default: current directory)",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=["mermaid", "json"],
        default="mermaid",
        help="Output format (default: mermaid)",
    )

    parser.add_argument(
        "--orientation",
        choices=list(ORIENTATIONS),
        default="TD",
        help="Mermaid graph orientation (default: TD)",
    )

    parser.add_argument(
        "--memory-dir",
        type=str,
        default=None,
        help="Save the diagram and graph to this memory directory",
    )

    # Scanning options
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config file (default: <root>/.projectmap.yml if present)",
    )

    parser.add_argument(
        "--include-ext",
        nargs="+",
        default=None,
        help="File extensions to analyze, in resolution priority order",
    )

    parser.add_argument(
        "--exclude-dir",
        nargs="+",
        default=None,
        help="Additional directory names to skip",
    )

    # Logging options
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug output",
    )
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only show errors",
    )

    return parser.parse_args(args)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging for command line use."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)
    setup_logging(parsed.verbose, parsed.quiet)

    root = Path(parsed.root).resolve()
    if not root.is_dir():
        print(f"Error: '{parsed.root}' is not a directory", file=sys.stderr)
        return 1

    try:
        config = load_config(root, Path(parsed.config) if parsed.config else None)
    except ProjectMapperError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if parsed.include_ext:
        config.extensions = normalize_extensions(parsed.include_ext)
    if parsed.exclude_dir:
        config.ignore_dirs |= set(parsed.exclude_dir)

    try:
        result = analyze(root, config)
    except ProjectMapperError as e:
        print(f"Error scanning project: {e}", file=sys.stderr)
        return 1

    if result.partial:
        logger.warning("Graph is partial: %d issue(s) during analysis", len(result.issues))

    diagram = to_mermaid(result.graph, orientation=parsed.orientation)
    graph_json = to_json(result.graph)
    output = diagram if parsed.format == "mermaid" else graph_json + "\n"

    if parsed.memory_dir:
        try:
            diagram_path, graph_path = MemoryStore(Path(parsed.memory_dir)).save_structure(diagram, graph_json)
        except OSError as e:
            print(f"Error saving to memory directory: {e}", file=sys.stderr)
            return 1
        logger.info("Diagram saved to: %s", diagram_path)
        logger.info("Graph saved to: %s", graph_path)

    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output, encoding="utf-8")
            logger.info("Output written to: %s", output_path)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(output)

    logger.info("Summary: %s", result.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
