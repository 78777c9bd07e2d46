"""Domain models for Todo Lists."""

from .todo_item import TodoItem
from .use_outcome import UseOutcome

__all__ = ["TodoItem", "UseOutcome"]
