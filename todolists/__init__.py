"""Todo Lists: file-backed todo lists with path tags."""

__version__ = "1.0.0"
