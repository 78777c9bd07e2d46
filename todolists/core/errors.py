"""
Ошибки пользовательского ввода.

Все они "восстановимые": команда прерывается без изменений на диске,
сообщение печатается, процесс завершается с кодом 0.
Ошибки файловой системы (OSError) сюда не относятся и обрабатываются в main.
"""


class TodoError(Exception):
    """
    Базовый класс для всех ошибок ввода.

    Использование:
        raise TodoError(code="USAGE", message="Usage: todo cleanup <list>")
    """

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class UsageError(TodoError):
    """Команда не совпала ни с одной формой грамматики."""

    def __init__(self, usage: str):
        super().__init__(code="USAGE", message=usage)


class InvalidTaskNumberError(TodoError):
    """Номер задачи не число, 0 или больше длины списка."""

    def __init__(self, value: object = None):
        self.value = value
        super().__init__(code="INVALID_TASK_NUMBER", message="Error: Invalid task number")


class InvalidTagNumberError(TodoError):
    """
    Номер тега вне диапазона [1, len(tags)].

    Сообщение уже содержит пронумерованный список доступных тегов.
    """

    def __init__(self, header: str, tags: list[str]):
        self.tags = tags
        lines = [header] + [f"{i}. {tag}" for i, tag in enumerate(tags, start=1)]
        super().__init__(code="INVALID_TAG_NUMBER", message="\n".join(lines))


class ListNotFoundError(TodoError):
    """
    Список не найден.

    Использование:
        raise ListNotFoundError("groceries")
        # Сообщение: "List 'groceries' not found."
    """

    def __init__(self, list_name: str):
        self.list_name = list_name
        super().__init__(code="LIST_NOT_FOUND", message=f"List '{list_name}' not found.")


class InvalidListNameError(TodoError):
    """Имя списка не может быть использовано как имя файла."""

    def __init__(self, list_name: str):
        self.list_name = list_name
        super().__init__(code="INVALID_LIST_NAME", message=f"Error: Invalid list name '{list_name}'")
