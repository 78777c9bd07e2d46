"""
Pydantic схемы команд.

Router разбирает argv в одну из этих моделей; сервис получает
уже проверенные значения (номера >= 1, непустые имена списков).
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class CommandBase(BaseModel):
    """Общие настройки: команды неизменяемые."""

    model_config = ConfigDict(frozen=True)


class AddCommand(CommandBase):
    """
    add <task...> to <list>  /  add <task...>

    list_name=None означает интерактивный выбор списка.
    """

    name: Literal["add"] = "add"
    task: str = Field(..., min_length=1, description="Текст задачи")
    list_name: str | None = Field(None, min_length=1, description="Имя списка")


class ListCommand(CommandBase):
    """list  /  list all  /  list <list>"""

    name: Literal["list"] = "list"
    target: str | None = Field(None, description="None - имена списков, 'all' - всё")


class RemoveCommand(CommandBase):
    """remove <num> from <list>"""

    name: Literal["remove"] = "remove"
    task_number: PositiveInt
    list_name: str = Field(..., min_length=1)


class EditCommand(CommandBase):
    """edit <num> in <list> <new_text...>"""

    name: Literal["edit"] = "edit"
    task_number: PositiveInt
    list_name: str = Field(..., min_length=1)
    new_text: str


class TagCommand(CommandBase):
    """tag <num> in <list>  /  tag <file> <num> in <list>"""

    name: Literal["tag"] = "tag"
    task_number: PositiveInt
    list_name: str = Field(..., min_length=1)
    file: str | None = Field(None, description="None - текущая директория")


class UseCommand(CommandBase):
    """
    use <num> in <list>  /  use <num> <tag_num> in <list>

    tag_number=0 - номер тега указан, но не число (будет показан список тегов).
    """

    name: Literal["use"] = "use"
    task_number: PositiveInt
    list_name: str = Field(..., min_length=1)
    tag_number: int | None = Field(None, ge=0)


class CleanupCommand(CommandBase):
    """cleanup <list>"""

    name: Literal["cleanup"] = "cleanup"
    list_name: str = Field(..., min_length=1)


Command = (
    AddCommand
    | ListCommand
    | RemoveCommand
    | EditCommand
    | TagCommand
    | UseCommand
    | CleanupCommand
)
