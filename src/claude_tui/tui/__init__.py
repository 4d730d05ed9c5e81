"""Textual dashboard for claude-tui."""

from .app import ClaudeTuiApp, ProjectListItem, run_tui

__all__ = ["ClaudeTuiApp", "ProjectListItem", "run_tui"]
