"""Project discovery across the configured root directories."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from claude_tui.config import ClaudeTuiConfig, resolve_home
from claude_tui.models import Project, sort_by_recency, utc_from_timestamp

from .documents import DocumentLinker
from .git import GitInfo, GitInspector, is_repository
from .probes import ProbeRegistry

logger = logging.getLogger(__name__)

# OS metadata files that never count as project activity
IGNORED_CHILDREN = {".DS_Store"}


def latest_child_mtime(path: Path) -> Optional[datetime]:
    """Newest modification time among the direct children of path.

    Hidden entries are skipped and nothing is walked recursively.
    """
    try:
        children = list(path.iterdir())
    except OSError as e:
        logger.debug("Cannot list %s: %s", path, e)
        return None

    newest: Optional[float] = None
    for child in children:
        if child.name.startswith(".") or child.name in IGNORED_CHILDREN:
            continue
        try:
            mtime = child.lstat().st_mtime
        except OSError:
            continue
        if newest is None or mtime > newest:
            newest = mtime
    return utc_from_timestamp(newest) if newest is not None else None


class ProjectScanner:
    """Builds the sorted Project collection for the dashboard.

    Nothing here raises: unreadable roots are skipped and every other
    failure leaves the affected field at its default.
    """

    def __init__(
        self,
        config: Optional[ClaudeTuiConfig] = None,
        git: Optional[GitInspector] = None,
        linker: Optional[DocumentLinker] = None,
        probes: Optional[ProbeRegistry] = None,
        home: Optional[Path] = None,
    ) -> None:
        self.config = config or ClaudeTuiConfig()
        self.home = home if home is not None else resolve_home()
        self.git = git or GitInspector()
        self.linker = linker or DocumentLinker(self.config.docs_path(self.home))
        self.probes = probes or ProbeRegistry.default()

    def _is_candidate(self, entry: Path) -> bool:
        if entry.name.startswith(".") or entry.name == self.config.reserved_name:
            return False
        try:
            return entry.is_dir()
        except OSError:
            return False

    def build_project(self, entry: Path, source_group: str) -> Project:
        """Enrich a single project directory."""
        name = entry.name
        has_doc = self.linker.find_document(name) is not None

        if is_repository(entry):
            info = self.git.inspect(entry)
            last_modified = info.last_commit
        else:
            info = GitInfo()
            last_modified = latest_child_mtime(entry)

        return Project(
            name=name,
            path=entry.absolute(),
            source_group=source_group,
            last_modified=last_modified,
            has_linked_document=has_doc,
            vcs_branch=info.branch,
            vcs_dirty=info.dirty,
            config_labels=self.probes.labels(entry),
        )

    def scan_root(self, root: Path) -> list[Project]:
        """Projects directly under one root, in directory order."""
        try:
            entries = list(root.iterdir())
        except OSError as e:
            logger.debug("Skipping root %s: %s", root, e)
            return []

        source_group = root.name
        projects = [
            self.build_project(entry, source_group)
            for entry in entries
            if self._is_candidate(entry)
        ]
        logger.debug("Found %d projects in %s", len(projects), root)
        return projects

    def scan(self, roots: Optional[Iterable[Path]] = None) -> list[Project]:
        """Scan every root and return projects newest first."""
        if roots is None:
            roots = self.config.root_paths(self.home)

        projects: list[Project] = []
        for root in roots:
            projects.extend(self.scan_root(Path(root)))
        return sort_by_recency(projects)


def scan_projects(config: Optional[ClaudeTuiConfig] = None) -> list[Project]:
    """Scan the configured roots with default collaborators."""
    return ProjectScanner(config).scan()
