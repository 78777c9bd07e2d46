"""Service layer for business logic."""

from .clipboard import ClipboardService
from .prompts import ConsolePrompt, DecisionProvider, confirm
from .todo import TodoService

__all__ = ["TodoService", "ClipboardService", "ConsolePrompt", "DecisionProvider", "confirm"]
