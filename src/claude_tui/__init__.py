"""claude-tui - a terminal dashboard for local projects."""

__version__ = "0.1.0"
