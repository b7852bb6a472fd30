"""Scanner module for file discovery, import extraction and resolution."""

from .config import ConfigError, MapperConfig, ProjectMapperError, load_config
from .context import AnalysisIssue, BuildContext, IssueKind
from .discovery import walk
from .extractor import extract_file, extract_imports
from .resolver import resolve_all, resolve_import_path
from .builder import AnalysisResult, InvalidRootError, analyze

__all__ = [
    "AnalysisIssue",
    "AnalysisResult",
    "BuildContext",
    "ConfigError",
    "InvalidRootError",
    "IssueKind",
    "MapperConfig",
    "ProjectMapperError",
    "analyze",
    "extract_file",
    "extract_imports",
    "load_config",
    "resolve_all",
    "resolve_import_path",
    "walk",
]
