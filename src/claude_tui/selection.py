"""Selection and filter state for the project list.

The model has two modes. While browsing, letter keys are commands; while
searching, printable keys extend the filter text. The cursor always
indexes the filtered view, never the backing collection.
"""

from enum import Enum
from typing import Optional, Sequence

from claude_tui.models import Project

FORWARD = 1
BACKWARD = -1


class Command(str, Enum):
    """Outcome of a key press that needs the outside world."""

    NONE = "none"
    QUIT = "quit"
    OPEN_FILE_BROWSER = "open_file_browser"
    OPEN_DOCUMENT = "open_document"
    LAUNCH_ASSISTANT = "launch_assistant"


class SelectionModel:
    """Owns the scanned projects, the filter text and the cursor."""

    def __init__(self, projects: Sequence[Project]) -> None:
        self.projects: tuple[Project, ...] = tuple(projects)
        self.filter_text = ""
        self.search_mode = False
        self.cursor_index: Optional[int] = 0 if self.projects else None

    def filtered_view(self) -> list[int]:
        """Indices of projects whose name contains the filter, case-insensitively."""
        query = self.filter_text.lower()
        return [
            i for i, project in enumerate(self.projects)
            if not query or query in project.name.lower()
        ]

    def visible_projects(self) -> list[Project]:
        """Projects in the filtered view, in recency order."""
        return [self.projects[i] for i in self.filtered_view()]

    def move_cursor(self, direction: int) -> None:
        """Move one row forward or backward, clamped at both ends."""
        count = len(self.filtered_view())
        if count == 0:
            self.cursor_index = None
            return
        current = self.cursor_index if self.cursor_index is not None else 0
        if direction > 0:
            self.cursor_index = min(current + 1, count - 1)
        else:
            self.cursor_index = max(current - 1, 0)

    def selected_project(self) -> Optional[Project]:
        """The project under the cursor, if any."""
        if self.cursor_index is None:
            return None
        view = self.filtered_view()
        if not 0 <= self.cursor_index < len(view):
            return None
        return self.projects[view[self.cursor_index]]

    def _reset_cursor(self) -> None:
        self.cursor_index = 0 if self.filtered_view() else None

    def enter_search(self) -> None:
        """Switch to searching; the current filter text is kept."""
        self.search_mode = True
        self._reset_cursor()

    def append_char(self, character: str) -> None:
        self.filter_text += character
        self._reset_cursor()

    def delete_char(self) -> None:
        """Drop the last filter character; an empty filter ends the search."""
        self.filter_text = self.filter_text[:-1]
        if not self.filter_text:
            self.search_mode = False
        self._reset_cursor()

    def cancel_search(self) -> None:
        """Leave search mode and clear the filter."""
        self.search_mode = False
        self.filter_text = ""
        self._reset_cursor()


# Browsing-mode keys, by typed character
BROWSE_COMMANDS = {
    "q": Command.QUIT,
    "f": Command.OPEN_FILE_BROWSER,
    "d": Command.OPEN_DOCUMENT,
}
BROWSE_MOVES = {
    "up": BACKWARD,
    "k": BACKWARD,
    "down": FORWARD,
    "j": FORWARD,
}
SEARCH_MOVES = {
    "up": BACKWARD,
    "down": FORWARD,
}


def handle_key(model: SelectionModel, key: str, character: Optional[str] = None) -> Command:
    """Apply a key press to the model.

    `key` is the terminal key name ("up", "enter", "j"); `character` is the
    printable text for the key, if any. Navigation and filter edits are
    applied in place; anything else is returned as a Command.
    """
    if key == "enter":
        return Command.LAUNCH_ASSISTANT

    if model.search_mode:
        if key == "escape":
            model.cancel_search()
        elif key == "backspace":
            model.delete_char()
        elif key in SEARCH_MOVES:
            model.move_cursor(SEARCH_MOVES[key])
        elif character and character.isprintable():
            model.append_char(character)
        return Command.NONE

    if character == "/":
        model.enter_search()
    elif key in BROWSE_MOVES:
        model.move_cursor(BROWSE_MOVES[key])
    elif character in BROWSE_COMMANDS:
        return BROWSE_COMMANDS[character]
    return Command.NONE
