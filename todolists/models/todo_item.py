"""TodoItem model: one task of a list."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class TodoItem:
    """
    One task: free-form text plus an ordered list of path tags.

    Теги уникальны по значению внутри одной задачи:
    повторное добавление тега переносит его в конец списка.
    """

    text: str
    tags: list[Path] = field(default_factory=list)

    def add_tag(self, tag: str | Path) -> None:
        """Append a tag, moving it to the end if it is already present."""
        new_tag = Path(tag)
        self.tags = [t for t in self.tags if t != new_tag]
        self.tags.append(new_tag)

    def remove_tag(self, tag: str | Path) -> bool:
        """
        Remove a tag.

        Returns:
            True если тег был удалён, False если его не было
        """
        old_tag = Path(tag)
        before = len(self.tags)
        self.tags = [t for t in self.tags if t != old_tag]
        return len(self.tags) != before
