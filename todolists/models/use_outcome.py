"""Outcome of the `use` command."""

import enum


class UseOutcome(str, enum.Enum):
    """Terminal state reached while resolving a tag."""

    NO_TAGS = "no_tags"
    NEEDS_SELECTION = "needs_selection"
    TAG_REMOVED = "tag_removed"
    TAG_KEPT = "tag_kept"
    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"
