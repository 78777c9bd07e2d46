"""Core application components."""

from .config import EVAL_FLAG, AppContext, Settings, build_context
from .errors import (
    InvalidListNameError,
    InvalidTagNumberError,
    InvalidTaskNumberError,
    ListNotFoundError,
    TodoError,
    UsageError,
)

__all__ = [
    "Settings",
    "AppContext",
    "EVAL_FLAG",
    "build_context",
    "TodoError",
    "UsageError",
    "InvalidTaskNumberError",
    "InvalidTagNumberError",
    "ListNotFoundError",
    "InvalidListNameError",
]
