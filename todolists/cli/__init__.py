"""Command-line layer: argument grammar and dispatch."""

from .router import USAGE, CommandRouter, route, strip_eval_flag
from .schemas import (
    AddCommand,
    CleanupCommand,
    Command,
    EditCommand,
    ListCommand,
    RemoveCommand,
    TagCommand,
    UseCommand,
)

__all__ = [
    "CommandRouter",
    "route",
    "strip_eval_flag",
    "USAGE",
    "Command",
    "AddCommand",
    "ListCommand",
    "RemoveCommand",
    "EditCommand",
    "TagCommand",
    "UseCommand",
    "CleanupCommand",
]
