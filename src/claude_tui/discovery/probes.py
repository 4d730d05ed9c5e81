"""Probes that detect per-project assistant configuration."""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class ConfigProbe(ABC):
    """Abstract base class for configuration probes."""

    @property
    @abstractmethod
    def marker(self) -> str:
        """Path, relative to the project, that this probe looks at."""
        pass

    @abstractmethod
    def label(self, project_path: Path) -> Optional[str]:
        """Return a short label if the configuration is present."""
        pass


class ClaudeDocProbe(ConfigProbe):
    """Project documentation file for the assistant."""

    @property
    def marker(self) -> str:
        return "CLAUDE.md"

    def label(self, project_path: Path) -> Optional[str]:
        if (project_path / self.marker).exists():
            return "claude.md"
        return None


class SkillsProbe(ConfigProbe):
    """Custom command/skill definitions."""

    @property
    def marker(self) -> str:
        return ".claude/commands"

    def label(self, project_path: Path) -> Optional[str]:
        try:
            count = sum(1 for _ in (project_path / self.marker).iterdir())
        except OSError:
            return None
        return f"{count}skills" if count > 0 else None


class McpProbe(ConfigProbe):
    """Configured MCP integration servers.

    An existing file that can't be read, or lacks an mcpServers mapping,
    still counts as one server.
    """

    SERVERS_KEY = "mcpServers"

    @property
    def marker(self) -> str:
        return ".mcp.json"

    def server_count(self, config_file: Path) -> int:
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.debug("Unreadable %s: %s", config_file, e)
            return 1
        servers = data.get(self.SERVERS_KEY) if isinstance(data, dict) else None
        if not isinstance(servers, dict):
            return 1
        return len(servers)

    def label(self, project_path: Path) -> Optional[str]:
        config_file = project_path / self.marker
        if not config_file.exists():
            return None
        return f"{self.server_count(config_file)}mcp"


class ProbeRegistry:
    """Ordered collection of probes; order is the label display order."""

    def __init__(self) -> None:
        self._probes: list[ConfigProbe] = []

    def register(self, probe: ConfigProbe) -> None:
        """Register a probe."""
        self._probes.append(probe)

    def labels(self, project_path: Path) -> tuple[str, ...]:
        """Run every probe in order and collect the labels that apply."""
        found = []
        for probe in self._probes:
            label = probe.label(project_path)
            if label is not None:
                found.append(label)
        return tuple(found)

    @classmethod
    def default(cls) -> "ProbeRegistry":
        """Create registry with the default probes."""
        registry = cls()
        registry.register(ClaudeDocProbe())
        registry.register(SkillsProbe())
        registry.register(McpProbe())
        return registry
