"""Repository layer for data access."""

from .base import FileRepository
from .todo_list import TodoListRepository

__all__ = [
    "FileRepository",
    "TodoListRepository",
]
