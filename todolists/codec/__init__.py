"""Line codec for list files."""

from .record import TAG_CLOSE, TAG_MARKER, TAG_SEPARATOR, RecordCodec

__all__ = ["RecordCodec", "TAG_MARKER", "TAG_SEPARATOR", "TAG_CLOSE"]
