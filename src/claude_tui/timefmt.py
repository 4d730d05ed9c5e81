"""Relative-age labels for timestamps."""

from datetime import datetime, timezone
from typing import Optional

UNKNOWN = "—"

MINUTE = 60
HOUR = 3600
DAY = 86400
MONTH = 30 * DAY  # 2592000
YEAR = 365 * DAY  # 31536000


def format_relative_time(when: Optional[datetime], now: Optional[datetime] = None) -> str:
    """Render how long ago `when` was, e.g. "5m ago" or "2mo ago".

    Unknown timestamps and ones in the future render as an em dash.
    Units are truncated, never rounded.
    """
    if when is None:
        return UNKNOWN
    if now is None:
        now = datetime.now(timezone.utc)

    elapsed = (now - when).total_seconds()
    if elapsed < 0:
        return UNKNOWN
    secs = int(elapsed)

    if secs < MINUTE:
        return "just now"
    if secs < HOUR:
        return f"{secs // MINUTE}m ago"
    if secs < DAY:
        return f"{secs // HOUR}h ago"
    if secs < MONTH:
        return f"{secs // DAY}d ago"
    if secs < YEAR:
        return f"{secs // MONTH}mo ago"
    return f"{secs // YEAR}y ago"
