"""Todo service with list operations."""

import shlex
from pathlib import Path

from ..core.config import EVAL_FLAG, AppContext
from ..core.errors import InvalidTagNumberError, InvalidTaskNumberError, ListNotFoundError
from ..core.logging import get_logger
from ..models import TodoItem, UseOutcome
from ..repositories import TodoListRepository
from .clipboard import ClipboardService
from .prompts import ConsolePrompt, DecisionProvider, confirm

logger = get_logger(__name__)

CANCEL_ANSWER = "!q"


class TodoService:
    """
    Сервис для работы со списками задач.

    Каждый вызов читает файл списка заново, меняет задачи в памяти
    и перезаписывает файл целиком. Всё, что видит пользователь, печатается здесь;
    ошибки ввода поднимаются как TodoError и печатаются на границе (router).
    """

    def __init__(
        self,
        context: AppContext,
        repo: TodoListRepository | None = None,
        prompt: DecisionProvider | None = None,
        clipboard: ClipboardService | None = None,
    ):
        """Инициализация сервиса с репозиторием и внешними зависимостями."""
        self.context = context
        self.repo = repo or TodoListRepository(context.base_dir)
        self.prompt = prompt or ConsolePrompt()
        self.clipboard = clipboard or ClipboardService()

    # =========================================================================
    # add
    # =========================================================================

    def add_task(self, task: str, list_name: str) -> TodoItem:
        """
        Добавить задачу в конец списка (список создаётся при первом добавлении).

        Args:
            task: Текст задачи
            list_name: Имя списка

        Returns:
            Добавленная задача
        """
        item = TodoItem(text=task)
        self.repo.append_item(list_name, item)
        print(f"Task added to list '{list_name}': {task}")
        return item

    def choose_list(self) -> str | None:
        """
        Спросить у пользователя, в какой список добавить задачу.

        Номер из меню выбирает список, пустой ответ - список по умолчанию,
        "!q" (или конец ввода) - отмена, любой другой ответ - имя списка.

        Returns:
            Имя списка или None при отмене
        """
        lists = self.repo.list_names() or [self.context.default_list]

        menu = ["", "Available lists:"]
        menu += [f"{i}. {name}" for i, name in enumerate(lists, start=1)]
        menu += [
            "",
            f"Enter list number or name (press Enter for '{self.context.default_list}', "
            f"{CANCEL_ANSWER} to cancel):",
        ]
        answer = self.prompt.ask("\n".join(menu))

        if answer is None:
            return None
        answer = answer.strip()
        if answer == CANCEL_ANSWER:
            return None
        if not answer:
            return self.context.default_list
        if answer.isdigit() and 1 <= int(answer) <= len(lists):
            return lists[int(answer) - 1]
        return answer

    def add_task_interactive(self, task: str) -> TodoItem | None:
        """Add a task to a list chosen at the prompt."""
        list_name = self.choose_list()
        if list_name is None:
            print("Operation cancelled")
            return None
        return self.add_task(task, list_name)

    # =========================================================================
    # list
    # =========================================================================

    def show_list_names(self) -> list[str]:
        """Print the names of all lists."""
        names = self.repo.list_names()
        print("Available todo lists:")
        for name in names:
            print(f"- {name}")
        return names

    def show_list(self, list_name: str) -> list[TodoItem]:
        """Print the tasks of one list, numbered from 1."""
        if not self.repo.exists(list_name):
            print(f"No tasks found in list '{list_name}'.")
            return []

        items = self.repo.load_items(list_name)
        print(f"Tasks in list '{list_name}':")
        for index, item in enumerate(items, start=1):
            print(f"{index}. {self.repo.codec.encode_item(item)}")
        return items

    def show_all(self) -> dict[str, list[str]]:
        """
        Напечатать все списки и все задачи в них.

        Returns:
            Словарь {имя списка: сырые строки}
        """
        names = self.repo.list_names()
        if not names:
            print("No todo lists found.")
            return {}

        result: dict[str, list[str]] = {}
        print("\n=== All Todo Lists ===")
        for name in names:
            print(f"\n📋 {name}")
            print("-------------------")

            lines = self.repo.read_raw(name)
            result[name] = lines
            if not lines:
                print("  (empty)")
                continue
            for index, line in enumerate(lines, start=1):
                print(f"  {index}. {line}")
        return result

    # =========================================================================
    # remove / edit
    # =========================================================================

    def remove_task(self, task_number: int, list_name: str) -> str:
        """
        Удалить задачу по номеру (1-based).

        Returns:
            Удалённая строка в том виде, в каком она была в файле

        Raises:
            ListNotFoundError: Если списка нет
            InvalidTaskNumberError: Если номер вне диапазона
        """
        self._require_list(list_name)
        lines = self.repo.read_raw(list_name)
        self._check_task_number(task_number, len(lines))

        removed = lines.pop(task_number - 1)
        self.repo.save_raw(list_name, lines)

        print(f"Task {task_number} removed from list '{list_name}'")
        return removed

    def edit_task(self, task_number: int, list_name: str, new_text: str) -> str:
        """
        Заменить строку задачи новым текстом.

        Строка заменяется целиком: теги, которые были у задачи, теряются.

        Returns:
            Новая строка
        """
        self._require_list(list_name)
        lines = self.repo.read_raw(list_name)
        self._check_task_number(task_number, len(lines))

        new_line = self.repo.codec.encode_item(TodoItem(text=new_text))
        lines[task_number - 1] = new_line
        self.repo.save_raw(list_name, lines)

        print(f"Task {task_number} updated in list '{list_name}'")
        return new_line

    # =========================================================================
    # tag
    # =========================================================================
    def resolve_tag_path(self, file_arg: str | None) -> Path:
        """
        Путь, который будет прикреплён к задаче.

        Без аргумента - текущая директория. Кавычки вокруг аргумента снимаются,
        относительный путь считается от текущей директории.

        Raises:
            FileNotFoundError: Текущая директория нужна, но удалена
        """
        if file_arg is None:
            return self._working_dir()

        path = Path(file_arg.strip('"'))
        if path.is_absolute():
            return path

        cwd = self._working_dir()
        resolved = cwd / path
        logger.debug(
            "Resolved tag path",
            extra={"argument": file_arg, "cwd": str(cwd), "path": str(resolved)},
        )
        return resolved

    def _working_dir(self) -> Path:
        if self.context.cwd is not None:
            return self.context.cwd
        return Path.cwd()

    def tag_task(self, task_number: int, list_name: str, file_arg: str | None = None) -> TodoItem:
        """
        Прикрепить путь к задаче.

        Если путь уже был среди тегов задачи, он переносится в конец.

        Returns:
            Обновлённая задача
        """
        self._require_list(list_name)
        path = self.resolve_tag_path(file_arg)

        items = self.repo.load_items(list_name)
        self._check_task_number(task_number, len(items))

        item = items[task_number - 1]
        item.add_tag(path)
        self.repo.save_items(list_name, items)

        print(f"Tagged task {task_number} in list '{list_name}' with '{path}'")
        return item

    # =========================================================================
    # use
    # =========================================================================

    def use_tag(self, task_number: int, list_name: str, tag_number: int | None = None) -> UseOutcome:
        """
        Воспользоваться тегом задачи.

        Состояния:
        - у задачи нет тегов -> сообщение
        - один тег и номер не указан -> берём его
        - несколько тегов и номер не указан -> печатаем список тегов
        - номер вне [1, len(tags)] -> InvalidTagNumberError со списком тегов
        - путь не существует -> предлагаем удалить тег
        - директория -> команда `cd` (в --eval режиме только она, в stdout)
        - файл -> путь к файлу

        Returns:
            UseOutcome - в каком состоянии закончилась команда
        """
        self._require_list(list_name)
        items = self.repo.load_items(list_name)
        self._check_task_number(task_number, len(items))

        item = items[task_number - 1]
        if not item.tags:
            print(f"No tags found for task {task_number}.")
            return UseOutcome.NO_TAGS

        if tag_number is None:
            if len(item.tags) > 1:
                print("Multiple tags available. Please specify tag number:")
                for i, tag in enumerate(item.tags, start=1):
                    print(f"{i}. {tag}")
                return UseOutcome.NEEDS_SELECTION
            tag_number = 1

        if not 1 <= tag_number <= len(item.tags):
            raise InvalidTagNumberError(
                "Invalid tag number. Available tags:", [str(tag) for tag in item.tags]
            )

        selected = item.tags[tag_number - 1]

        if not selected.exists():
            print(f"Warning: Path does not exist: {selected}")
            if not confirm(self.prompt, "Would you like to remove this tag? (y/N)"):
                return UseOutcome.TAG_KEPT
            item.remove_tag(selected)
            self.repo.save_items(list_name, items)
            print("Tag removed.")
            return UseOutcome.TAG_REMOVED

        if selected.is_dir():
            self._use_directory(selected, task_number, list_name, tag_number, len(item.tags))
            return UseOutcome.DIRECTORY

        if selected.is_file():
            self._use_file(selected)
            return UseOutcome.FILE

        # FIFO, сокет, устройство: ни cd, ни копирование пути не подходят
        print(f"Selected path is neither a file nor a directory: {selected}")
        return UseOutcome.OTHER

    def _use_directory(
        self, path: Path, task_number: int, list_name: str, tag_number: int, tag_count: int
    ) -> None:
        cd_command = f"cd {shlex.quote(str(path))}"

        # В eval режиме stdout читает shell: печатаем только команду
        if self.context.eval_mode:
            print(cd_command, end="")
            return

        copied = self.clipboard.copy(cd_command)
        tag_part = f" {tag_number}" if tag_count > 1 else ""

        print("\nTo change directory, either:")
        print(f"1. Copy and paste this command{' (already copied to clipboard)' if copied else ''}:")
        print(f"   {cd_command}")
        print(f'2. Or use: eval "$(todo use {EVAL_FLAG} {task_number}{tag_part} in {list_name})"')

    def _use_file(self, path: Path) -> None:
        file_path = str(path)
        copied = self.clipboard.copy(file_path)

        print(f"Selected path is a file: {file_path}")
        if copied:
            print("File path copied to clipboard!")

    # =========================================================================
    # cleanup
    # =========================================================================

    def cleanup_list(self, list_name: str) -> None:
        """
        Удалить список целиком (файл на диске).

        Raises:
            ListNotFoundError: Если списка нет
        """
        if not self.repo.delete_list(list_name):
            raise ListNotFoundError(list_name)
        print(f"List '{list_name}' has been reset.")

    # =========================================================================
    # helpers
    # =========================================================================

    def _require_list(self, list_name: str) -> None:
        if not self.repo.exists(list_name):
            raise ListNotFoundError(list_name)

    @staticmethod
    def _check_task_number(task_number: int, count: int) -> None:
        if not 1 <= task_number <= count:
            raise InvalidTaskNumberError(task_number)
