"""Command router: argv -> typed command -> TodoService call.

Grammar (tokens after the program name, `--eval` already removed):

    add <task...> to <list>              "to" second to last, >= 4 tokens
    add <task...>                        no "to" before the last token
    list [all | <list>]
    remove <num> ... from <list>         "from" second to last, >= 4 tokens
    edit <num> in <list> <text...>       "in" at position 2, >= 5 tokens
    tag [<file>] <num> in <list>         "in" second to last, >= 4 tokens
    use <num> [<tag_num>] in <list>      "in" second to last, >= 4 tokens
    cleanup <list>

Keywords are matched from the end of the token list so that task text of
any length can sit in the middle.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ValidationError

from ..core.config import EVAL_FLAG
from ..core.errors import InvalidListNameError, InvalidTaskNumberError, TodoError, UsageError
from ..core.logging import command_var, get_logger
from ..services import TodoService
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

logger = get_logger(__name__)

USAGE = "\n".join(
    [
        "Usage:",
        "  todo add <task> to <list>     - Add a task to a specific list",
        "  todo add <task>               - Add a task, choosing the list interactively",
        "  todo list                     - Show all available lists",
        "  todo list all                 - Show all lists and their tasks",
        "  todo list <list>              - List all tasks in a specific list",
        "  todo remove <num> from <list> - Remove task by number from a list",
        "  todo edit <num> in <list> <new_text> - Edit a task in a list",
        "  todo tag <num> in <list>            - Tag current directory to task",
        "  todo tag <file> <num> in <list>     - Tag specific file to task",
        "  todo use <num> in <list>           - Use first/only tag of task",
        "  todo use <num> <tag_num> in <list> - Use specific tag of task",
        "  todo cleanup <list>               - Reset a specific list",
    ]
)

ADD_USAGE = "Usage: todo add <task> [to <list>]"
ADD_TO_USAGE = "Usage: todo add <task> to <list>"
LIST_USAGE = "Usage: todo list [all | <list>]"
REMOVE_USAGE = "Usage: todo remove <num> from <list>"
EDIT_USAGE = "Usage: todo edit <num> in <list> <new_text>"
TAG_USAGE = "Usage: todo tag [<file>] <num> in <list>"
USE_USAGE = "Usage: todo use <num> [tag_num] in <list>"
CLEANUP_USAGE = "Usage: todo cleanup <list>"


# =============================================================================
# TOKEN HELPERS
# =============================================================================


def strip_eval_flag(argv: list[str]) -> list[str]:
    """Drop every `--eval` marker; it may appear anywhere."""
    return [arg for arg in argv if arg != EVAL_FLAG]


def has_trailing_keyword(tokens: list[str], keyword: str, min_tokens: int) -> bool:
    """True if there are enough tokens and the second to last one is `keyword`."""
    return len(tokens) >= min_tokens and tokens[-2] == keyword


def parse_number(token: str) -> int | None:
    """Positive decimal integer, or None."""
    if not (token.isascii() and token.isdigit()):
        return None
    value = int(token)
    return value if value > 0 else None


def parse_task_number(token: str) -> int:
    """
    Номер задачи из токена.

    Raises:
        InvalidTaskNumberError: Если токен не положительное целое число
    """
    value = parse_number(token)
    if value is None:
        raise InvalidTaskNumberError(token)
    return value


def build(model: type[BaseModel], usage: str, **fields: Any) -> Any:
    """
    Construct a command model, turning validation errors into user errors.

    Raises:
        InvalidListNameError: If the list name is rejected
        UsageError: For any other invalid field
    """
    try:
        return model(**fields)
    except ValidationError as exc:
        if any(error["loc"] and error["loc"][0] == "list_name" for error in exc.errors()):
            raise InvalidListNameError(fields.get("list_name") or "") from exc
        raise UsageError(usage) from exc


# =============================================================================
# GRAMMAR
# =============================================================================


def parse_add(tokens: list[str]) -> AddCommand:
    if len(tokens) < 2:
        raise UsageError(ADD_USAGE)

    # "to" где-то до последнего токена -> ожидаем форму "... to <list>"
    if "to" in tokens[1:-1]:
        if not has_trailing_keyword(tokens, "to", 4):
            raise UsageError(ADD_TO_USAGE)
        return build(AddCommand, ADD_TO_USAGE, task=" ".join(tokens[1:-2]), list_name=tokens[-1])

    return build(AddCommand, ADD_USAGE, task=" ".join(tokens[1:]))


def parse_list(tokens: list[str]) -> ListCommand:
    if len(tokens) > 2:
        raise UsageError(LIST_USAGE)
    return ListCommand(target=tokens[1] if len(tokens) == 2 else None)


def parse_remove(tokens: list[str]) -> RemoveCommand:
    if not has_trailing_keyword(tokens, "from", 4):
        raise UsageError(REMOVE_USAGE)
    return build(
        RemoveCommand, REMOVE_USAGE, task_number=parse_task_number(tokens[1]), list_name=tokens[-1]
    )


def parse_edit(tokens: list[str]) -> EditCommand:
    if len(tokens) < 5 or tokens[2] != "in":
        raise UsageError(EDIT_USAGE)
    return build(
        EditCommand,
        EDIT_USAGE,
        task_number=parse_task_number(tokens[1]),
        list_name=tokens[3],
        new_text=" ".join(tokens[4:]),
    )


def parse_tag(tokens: list[str]) -> TagCommand:
    if not has_trailing_keyword(tokens, "in", 4):
        raise UsageError(TAG_USAGE)
    return build(
        TagCommand,
        TAG_USAGE,
        task_number=parse_task_number(tokens[-3]),
        list_name=tokens[-1],
        file=tokens[1] if len(tokens) > 4 else None,
    )


def parse_use(tokens: list[str]) -> UseCommand:
    if not has_trailing_keyword(tokens, "in", 4):
        raise UsageError(USE_USAGE)

    tag_number: int | None = None
    if len(tokens) > 4:
        # Нечисловой номер тега -> 0, сервис покажет список тегов
        tag_number = parse_number(tokens[2]) or 0

    return build(
        UseCommand,
        USE_USAGE,
        task_number=parse_task_number(tokens[1]),
        list_name=tokens[-1],
        tag_number=tag_number,
    )


def parse_cleanup(tokens: list[str]) -> CleanupCommand:
    if len(tokens) != 2:
        raise UsageError(CLEANUP_USAGE)
    return build(CleanupCommand, CLEANUP_USAGE, list_name=tokens[1])


PARSERS: dict[str, Callable[[list[str]], Command]] = {
    "add": parse_add,
    "list": parse_list,
    "remove": parse_remove,
    "edit": parse_edit,
    "tag": parse_tag,
    "use": parse_use,
    "cleanup": parse_cleanup,
}


def route(tokens: list[str]) -> Command:
    """
    Разобрать токены в команду.

    Args:
        tokens: Аргументы без имени программы и без `--eval`

    Returns:
        Одна из моделей из schemas

    Raises:
        UsageError: Неизвестная команда или неверная форма
        InvalidTaskNumberError: Номер задачи не положительное целое
        InvalidListNameError: Пустое имя списка
    """
    if not tokens or tokens[0] not in PARSERS:
        raise UsageError(USAGE)
    return PARSERS[tokens[0]](tokens)


# =============================================================================
# DISPATCH
# =============================================================================


class CommandRouter:
    """Routes one invocation to the TodoService."""

    def __init__(self, service: TodoService):
        self.service = service

    def dispatch(self, command: Command) -> Any:
        """Invoke the service operation for a parsed command."""
        service = self.service

        if isinstance(command, AddCommand):
            if command.list_name is None:
                return service.add_task_interactive(command.task)
            return service.add_task(command.task, command.list_name)

        if isinstance(command, ListCommand):
            if command.target is None:
                return service.show_list_names()
            if command.target == "all":
                return service.show_all()
            return service.show_list(command.target)

        if isinstance(command, RemoveCommand):
            return service.remove_task(command.task_number, command.list_name)

        if isinstance(command, EditCommand):
            return service.edit_task(command.task_number, command.list_name, command.new_text)

        if isinstance(command, TagCommand):
            return service.tag_task(command.task_number, command.list_name, command.file)

        if isinstance(command, UseCommand):
            return service.use_tag(command.task_number, command.list_name, command.tag_number)

        if isinstance(command, CleanupCommand):
            return service.cleanup_list(command.list_name)

        raise UsageError(USAGE)

    def run(self, argv: list[str]) -> int:
        """
        Выполнить одну команду.

        Ошибки ввода печатаются и не меняют код выхода.
        OSError пробрасывается наружу (в main).

        Returns:
            Код выхода (всегда 0)
        """
        tokens = strip_eval_flag(argv)
        token = command_var.set(tokens[0] if tokens else "")

        try:
            command = route(tokens)
            logger.debug("Routed command", extra={"parsed": command.model_dump()})
            self.dispatch(command)
        except TodoError as exc:
            logger.info("Command rejected", extra={"code": exc.code})
            print(exc.message)
        finally:
            command_var.reset(token)

        return 0
