"""Data models for claude-tui."""

from .project import Project, sort_by_recency, utc_from_timestamp

__all__ = [
    "Project",
    "sort_by_recency",
    "utc_from_timestamp",
]
