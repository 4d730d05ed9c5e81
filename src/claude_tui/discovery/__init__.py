"""Project discovery and enrichment for claude-tui."""

from .documents import DocumentLinker, obsidian_uri
from .git import GitInfo, GitInspector, is_repository
from .naming import normalize
from .probes import (
    ClaudeDocProbe,
    ConfigProbe,
    McpProbe,
    ProbeRegistry,
    SkillsProbe,
)
from .scanner import ProjectScanner, latest_child_mtime, scan_projects

__all__ = [
    "ClaudeDocProbe",
    "ConfigProbe",
    "DocumentLinker",
    "GitInfo",
    "GitInspector",
    "McpProbe",
    "ProbeRegistry",
    "ProjectScanner",
    "SkillsProbe",
    "is_repository",
    "latest_child_mtime",
    "normalize",
    "obsidian_uri",
    "scan_projects",
]
