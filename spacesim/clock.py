"""Wall-clock helpers."""

from datetime import datetime


def current_time() -> str:
    """Return the current local date and time as ``YYYY-MM-DD HH:MM``."""
    return datetime.now().strftime("%Y-%m-%d %H:%M")