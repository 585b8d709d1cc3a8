"""Priority levels and their human-readable labels.

Levels are bit flags so a logger can subscribe to any combination of them.
"""

from enum import IntEnum


class Priority(IntEnum):
    EMERGENCY = 1
    ALERT = 2
    CRITICAL = 4
    ERROR = 8
    WARNING = 16
    NOTICE = 32
    INFO = 64
    DEBUG = 128


PRIORITY_LABELS: dict[int, str] = {p.value: p.name for p in Priority}


def priority_label(level) -> str | None:
    """Return the label for *level*, or None when the level is unknown."""
    try:
        return PRIORITY_LABELS.get(int(level))
    except (TypeError, ValueError):
        return None


def parse_priority(name: str) -> Priority:
    """Look up a Priority by name, case-insensitively (e.g. ``"error"``)."""
    try:
        return Priority[name.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown priority: {name!r}") from None
