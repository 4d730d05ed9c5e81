"""Project record produced by a scan."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional


def utc_from_timestamp(seconds: float) -> datetime:
    """Convert Unix epoch seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


@dataclass(frozen=True)
class Project:
    """A discovered project directory with its enrichment metadata."""

    name: str
    path: Path  # Absolute, unique within a scan
    source_group: str  # Final segment of the root that produced it
    last_modified: Optional[datetime] = None  # None means unknown
    has_linked_document: bool = False
    vcs_branch: Optional[str] = None
    vcs_dirty: bool = False
    config_labels: tuple[str, ...] = field(default_factory=tuple)

    @property
    def branch_label(self) -> Optional[str]:
        """Branch name with a trailing '*' when the tree is dirty."""
        if self.vcs_branch is None:
            return None
        return f"{self.vcs_branch}*" if self.vcs_dirty else self.vcs_branch


_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _recency_key(project: Project) -> tuple[bool, datetime]:
    return (project.last_modified is not None, project.last_modified or _OLDEST)


def sort_by_recency(projects: Iterable[Project]) -> list[Project]:
    """Sort newest first; projects without a timestamp go last."""
    return sorted(projects, key=_recency_key, reverse=True)
