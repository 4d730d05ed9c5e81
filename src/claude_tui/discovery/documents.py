"""Resolve Obsidian notes that belong to a project."""

import logging
from pathlib import Path
from typing import Optional

from .naming import normalize

logger = logging.getLogger(__name__)

NOTE_SUFFIX = ".md"


class DocumentLinker:
    """Finds the note in the document store whose name matches a project.

    Matching compares normalized names, so project "daily-digest" links to
    "Daily Digest.md". There is no substring or edit-distance matching.
    """

    def __init__(self, docs_dir: Optional[Path]) -> None:
        # None when the home directory could not be resolved
        self.docs_dir = docs_dir

    def find_document(self, project_name: str) -> Optional[Path]:
        """Return the first note matching project_name, or None."""
        if self.docs_dir is None:
            return None

        target = normalize(project_name)
        try:
            entries = list(self.docs_dir.iterdir())
        except OSError as e:
            logger.debug("Cannot list document store %s: %s", self.docs_dir, e)
            return None

        for entry in entries:
            if not entry.name.endswith(NOTE_SUFFIX):
                continue
            stem = entry.name[: -len(NOTE_SUFFIX)]
            if normalize(stem) == target:
                return entry
        return None


def _encode(text: str) -> str:
    return text.replace(" ", "%20")


def obsidian_uri(document: Path, vault: str, subpath: str) -> str:
    """Build the obsidian:// deep link for a note inside the vault subpath.

    Only spaces are percent-encoded in the note name; path separators in the
    subpath become %2F.
    """
    folder = "%2F".join(_encode(part) for part in subpath.strip("/").split("/") if part)
    stem = _encode(document.stem)
    file_ref = f"{folder}%2F{stem}" if folder else stem
    return f"obsidian://open?vault={vault}&file={file_ref}"
