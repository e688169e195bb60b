from enum import Enum


class ChangeType(str, Enum):
    """Enum for git raw diff statuses."""

    ADDED = "A"
    DELETED = "D"
    MODIFIED = "M"
    RENAMED = "R"
    COPIED = "C"
    TYPE_CHANGED = "T"
