"""Main claude-tui TUI application."""

from datetime import datetime
from typing import Optional, Sequence

from rich.text import Text
from textual import events, on
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Label, ListItem, ListView, Static

from claude_tui.actions import ActionDispatcher
from claude_tui.config import AVAILABLE_THEMES, ClaudeTuiConfig
from claude_tui.discovery import ProjectScanner
from claude_tui.models import Project
from claude_tui.selection import Command, SelectionModel, handle_key
from claude_tui.timefmt import format_relative_time


SOURCE_WIDTH = 10  # Right-aligned width of the source column

BROWSE_HELP = [
    ("↑↓/jk", "navigate"),
    ("enter", "open claude"),
    ("f", "finder"),
    ("d", "docs"),
    ("/", "search"),
    ("q", "quit"),
]

SEARCH_HELP = [
    ("esc", "clear"),
    ("enter", "open"),
    ("↑↓", "navigate"),
]


def project_row_text(project: Project) -> Text:
    """Left-hand part of a project row: source, name, branch, labels, doc."""
    text = Text.assemble(
        (f" {project.source_group:>{SOURCE_WIDTH}} ", "bright_black"),
        (project.name, "white"),
    )
    if project.branch_label:
        text.append(f"  {project.branch_label}", style="magenta")
    if project.config_labels:
        text.append(f"  {' '.join(project.config_labels)}", style="bright_black")
    if project.has_linked_document:
        text.append(" doc", style="green")
    return text


def help_text(searching: bool) -> Text:
    """Footer line listing the keys of the current mode."""
    text = Text()
    for key, description in SEARCH_HELP if searching else BROWSE_HELP:
        text.append(f" {key} ", style="cyan")
        text.append(f"{description} ", style="bright_black")
    return text


class ProjectListItem(ListItem):
    """A project row in the list view."""

    def __init__(self, project: Project, now: Optional[datetime] = None) -> None:
        super().__init__()
        self.project = project
        self.now = now

    def age_label(self) -> str:
        return format_relative_time(self.project.last_modified, self.now)

    def compose(self) -> ComposeResult:
        with Horizontal(classes="project-row"):
            yield Label(project_row_text(self.project), classes="project-main")
            yield Label(self.age_label(), classes="project-age")


class ProjectList(ListView, can_focus=False):
    """Project list driven entirely by the app's SelectionModel."""


class ClaudeTuiApp(App):
    """Dashboard for browsing local projects and launching Claude in them."""

    TITLE = "claude-tui"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        layout: vertical;
    }

    #header-bar {
        height: 3;
        width: 100%;
        padding: 1 1 0 1;
        border-bottom: solid $surface-lighten-2;
    }

    #project-list {
        height: 1fr;
        padding: 1 1 0 1;
        background: $background;
    }

    #project-list > ListItem.-highlight {
        background: $surface-lighten-2;
        color: $accent;
        text-style: bold;
    }

    .project-row {
        height: 1;
        width: 100%;
    }

    .project-main {
        width: 1fr;
    }

    .project-age {
        width: auto;
        padding: 0 2 0 1;
        color: $text-muted;
    }

    #empty-message {
        height: 1fr;
        padding: 1 2;
        color: $text-muted;
        display: none;
    }

    #empty-message.visible {
        display: block;
    }

    #help-bar {
        dock: bottom;
        height: 2;
        width: 100%;
        border-top: solid $surface-lighten-2;
    }
    """

    def __init__(
        self,
        projects: Optional[Sequence[Project]] = None,
        config: Optional[ClaudeTuiConfig] = None,
        dispatcher: Optional[ActionDispatcher] = None,
    ):
        super().__init__()
        self._config = config or ClaudeTuiConfig.load()
        if projects is None:
            projects = ProjectScanner(self._config).scan()
        self.model = SelectionModel(projects)
        self.dispatcher = dispatcher or ActionDispatcher(self._config)
        self._rendered_filter: Optional[str] = None

        if self._config.theme in dict(AVAILABLE_THEMES):
            self.theme = self._config.theme

    def compose(self) -> ComposeResult:
        yield Static(id="header-bar")
        yield ProjectList(id="project-list")
        yield Static(id="empty-message")
        yield Static(id="help-bar")

    async def on_mount(self) -> None:
        await self.refresh_view()

    def _header_text(self) -> Text:
        if self.model.search_mode:
            return Text.assemble(
                (" / ", "bold yellow"),
                (self.model.filter_text, "white"),
                ("▌", "yellow"),
            )
        return Text.assemble(
            (" claude-tui ", "bold cyan"),
            (f" {len(self.model.filtered_view())} projects", "bright_black"),
        )

    def _empty_text(self) -> str:
        if self.model.filter_text:
            return f"No projects match '{self.model.filter_text}'"
        return "No projects found in " + ", ".join(self._config.scan_dirs)

    async def refresh_view(self) -> None:
        """Repaint header, list and footer from the SelectionModel."""
        self.query_one("#header-bar", Static).update(self._header_text())
        self.query_one("#help-bar", Static).update(help_text(self.model.search_mode))

        project_list = self.query_one("#project-list", ProjectList)
        if self._rendered_filter != self.model.filter_text:
            await project_list.clear()
            await project_list.extend(
                ProjectListItem(project) for project in self.model.visible_projects()
            )
            self._rendered_filter = self.model.filter_text
        project_list.index = self.model.cursor_index

        empty = self.query_one("#empty-message", Static)
        empty.update(self._empty_text())
        empty.set_class(self.model.cursor_index is None, "visible")

    async def on_key(self, event: events.Key) -> None:
        """Route every key through the selection state machine."""
        event.stop()
        command = handle_key(self.model, event.key, event.character)

        if command is Command.QUIT:
            self.exit()
            return
        if command is Command.OPEN_FILE_BROWSER:
            self.action_open_file_browser()
        elif command is Command.OPEN_DOCUMENT:
            self.action_open_document()
        elif command is Command.LAUNCH_ASSISTANT:
            self.action_launch_assistant()

        await self.refresh_view()

    @on(ListView.Highlighted, "#project-list")
    def on_row_highlighted(self, event: ListView.Highlighted) -> None:
        """Keep the model cursor in step with mouse selection."""
        index = event.list_view.index
        if index is not None and index != self.model.cursor_index:
            self.model.cursor_index = index

    def action_open_file_browser(self) -> None:
        """Open the selected project in the system file browser."""
        self.dispatcher.open_in_file_browser(self.model.selected_project())

    def action_open_document(self) -> None:
        """Open the selected project's linked note."""
        self.dispatcher.open_linked_document(self.model.selected_project())

    def action_launch_assistant(self) -> None:
        """Suspend the dashboard and run the assistant in the selected project."""
        project = self.model.selected_project()
        warning = self.dispatcher.launch_assistant(project, self.suspend)
        if warning:
            self.notify(warning, title=project.name if project else "", severity="warning", timeout=5)


def run_tui(config: Optional[ClaudeTuiConfig] = None) -> None:
    """Run the claude-tui application."""
    app = ClaudeTuiApp(config=config)
    app.run()


if __name__ == "__main__":
    run_tui()
