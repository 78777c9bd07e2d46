"""Record codec: one TodoItem <-> one line of a list file.

Line format:
    buy milk
    fix bug [TAGS:/home/me/project|/home/me/project/src/main.py]

Tags follow the marker " [TAGS:", are joined with "|" and closed by the
last "]" of the line. A line without a well-formed tag section is plain text.
"""

from collections.abc import Iterable
from pathlib import Path

from ..core.logging import get_logger
from ..models import TodoItem

logger = get_logger(__name__)

TAG_MARKER = " [TAGS:"
TAG_SEPARATOR = "|"
TAG_CLOSE = "]"


class RecordCodec:
    """Encoder/decoder for the single-line task format."""

    def encode_item(self, item: TodoItem) -> str:
        """Convert a TodoItem to exactly one line (no trailing newline).

        Args:
            item: The task to encode

        Returns:
            Encoded line
        """
        # Newlines would split one record into two
        text = item.text.replace("\r", " ").replace("\n", " ")
        if TAG_MARKER in text:
            logger.warning(
                "Task text contains the tag marker and will not decode back unchanged",
                extra={"text": text},
            )

        if not item.tags:
            return text

        body = TAG_SEPARATOR.join(str(tag) for tag in item.tags)
        return f"{text}{TAG_MARKER}{body}{TAG_CLOSE}"

    def decode_line(self, line: str) -> TodoItem:
        """Parse one line into a TodoItem.

        Never raises: a line with a missing or misplaced closing bracket
        is returned as plain text without tags.

        Args:
            line: A line of a list file, without the newline

        Returns:
            Decoded TodoItem
        """
        marker_start = line.find(TAG_MARKER)
        if marker_start == -1:
            return TodoItem(text=line)

        body_start = marker_start + len(TAG_MARKER)
        body_end = line.rfind(TAG_CLOSE)
        if body_end < body_start:
            return TodoItem(text=line)

        body = line[body_start:body_end]
        tags = [Path(piece.strip()) for piece in body.split(TAG_SEPARATOR) if piece.strip()]

        return TodoItem(text=line[:marker_start], tags=tags)

    def decode_lines(self, lines: Iterable[str]) -> list[TodoItem]:
        """Decode every line of a list."""
        return [self.decode_line(line) for line in lines]

    def encode_items(self, items: Iterable[TodoItem]) -> list[str]:
        """Encode every item of a list."""
        return [self.encode_item(item) for item in items]
