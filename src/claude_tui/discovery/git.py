"""Git metadata for project directories.

Every query degrades instead of raising: a broken or locked repository
must not keep the other projects off the dashboard.
"""

import logging
import subprocess
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from claude_tui.models import utc_from_timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitInfo:
    """Result of inspecting one working tree."""

    branch: Optional[str] = None
    dirty: bool = False
    last_commit: Optional[datetime] = None


def is_repository(path: Path) -> bool:
    """True when the directory carries a .git marker."""
    return (path / ".git").exists()


class GitInspector:
    """Runs git queries against a working directory."""

    def __init__(self, git: str = "git") -> None:
        self.git = git

    def _run(self, path: Path, *args: str) -> Optional[str]:
        """Run git -C <path> <args> and return stdout, or None on any failure."""
        cmd = [self.git, "-C", str(path), *args]
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                stdin=subprocess.DEVNULL,
                text=True,
                errors="replace",
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("git %s failed in %s: %s", args[0], path, e)
            return None
        if result.returncode != 0:
            logger.debug("git %s exited %d in %s", args[0], result.returncode, path)
            return None
        return result.stdout

    def branch(self, path: Path) -> Optional[str]:
        """Current branch, or None for detached HEAD or failure."""
        output = self._run(path, "branch", "--show-current")
        if output is None:
            return None
        return output.strip() or None

    def is_dirty(self, path: Path) -> bool:
        """True if `git status --porcelain` reports anything."""
        output = self._run(path, "status", "--porcelain")
        return bool(output)

    def last_commit_time(self, path: Path) -> Optional[datetime]:
        """Committer time of HEAD."""
        output = self._run(path, "log", "-1", "--format=%ct")
        if output is None:
            return None
        try:
            return utc_from_timestamp(int(output.strip()))
        except (ValueError, OverflowError, OSError):
            logger.debug("Unparsable commit time %r in %s", output, path)
            return None

    def inspect(self, path: Path) -> GitInfo:
        """Collect branch, dirty state and last commit time."""
        return GitInfo(
            branch=self.branch(path),
            dirty=self.is_dirty(path),
            last_commit=self.last_commit_time(path),
        )
