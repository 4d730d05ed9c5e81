"""External actions on the selected project.

Two process policies live here: openers are spawned detached and never
awaited, while the assistant session runs in the foreground with the
terminal handed over to it.
"""

import logging
import subprocess
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Callable, Optional, Sequence

from claude_tui.config import ClaudeTuiConfig, resolve_home
from claude_tui.discovery import DocumentLinker, obsidian_uri
from claude_tui.models import Project

logger = logging.getLogger(__name__)

SuspendFactory = Callable[[], AbstractContextManager]


def spawn_detached(args: Sequence[str]) -> None:
    """Start a process and forget about it; failures are ignored."""
    try:
        subprocess.Popen(
            list(args),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Could not spawn %s: %s", args[0], e)


def run_blocking(args: Sequence[str], cwd: Path) -> int:
    """Run a process in the foreground and return its exit status."""
    return subprocess.run(list(args), cwd=cwd).returncode


class ActionDispatcher:
    """Runs the dashboard's actions against a project."""

    def __init__(
        self,
        config: Optional[ClaudeTuiConfig] = None,
        linker: Optional[DocumentLinker] = None,
    ) -> None:
        self.config = config or ClaudeTuiConfig()
        self.linker = linker or DocumentLinker(self.config.docs_path(resolve_home()))

    def open_in_file_browser(self, project: Optional[Project]) -> None:
        if project is None:
            return
        spawn_detached([self.config.opener_command, str(project.path)])

    def open_linked_document(self, project: Optional[Project]) -> Optional[str]:
        """Open the project's note in Obsidian.

        The note is looked up again rather than trusting the scan result.
        Returns the URI that was opened, or None.
        """
        if project is None:
            return None
        document = self.linker.find_document(project.name)
        if document is None:
            return None
        uri = obsidian_uri(document, self.config.vault_name, self.config.vault_subpath)
        spawn_detached([self.config.opener_command, uri])
        return uri

    def assistant_args(self) -> list[str]:
        return [self.config.assistant_command, *self.config.assistant_args]

    def launch_assistant(
        self, project: Optional[Project], suspend: SuspendFactory
    ) -> Optional[str]:
        """Hand the terminal to the assistant until it exits.

        `suspend` must return a context manager that releases the terminal on
        entry and restores it on exit. Errors from it propagate. Returns a
        warning message when the assistant fails, otherwise None.
        """
        if project is None:
            return None

        args = self.assistant_args()
        with suspend():
            try:
                status = run_blocking(args, project.path)
            except (OSError, subprocess.SubprocessError) as e:
                logger.info("Failed to launch %s in %s: %s", args[0], project.path, e)
                return f"Failed to launch {args[0]}: {e}"

        if status != 0:
            logger.info("%s exited with %d in %s", args[0], status, project.path)
            return f"{args[0]} exited with status {status}"
        return None
