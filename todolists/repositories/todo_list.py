"""Todo list repository: one `<name>.txt` file per list."""

from pathlib import Path

from ..codec import RecordCodec
from ..core.errors import InvalidListNameError
from ..models import TodoItem
from .base import FileRepository


class TodoListRepository(FileRepository):
    """
    Репозиторий для работы со списками задач.

    Поверх построчного FileRepository добавляет кодек записей:
    load_items / save_items работают с TodoItem, read_raw / save_raw - с сырыми строками
    (edit и remove переписывают строки, не разбирая теги).
    """

    def __init__(self, base_dir: Path, codec: RecordCodec | None = None):
        super().__init__(base_dir, suffix=".txt")
        self.codec = codec or RecordCodec()

    def list_path(self, list_name: str) -> Path:
        """
        Путь к файлу списка.

        Args:
            list_name: Имя списка (например, "groceries")

        Raises:
            InvalidListNameError: Если имя пустое или содержит разделитель пути
        """
        if not list_name or list_name in (".", "..") or "/" in list_name or "\\" in list_name:
            raise InvalidListNameError(list_name)
        return self.path_for(list_name)

    def exists(self, list_name: str) -> bool:
        """Check whether the list has a backing file."""
        return self.list_path(list_name).is_file()

    def list_names(self) -> list[str]:
        """Names of all existing lists, sorted."""
        return self.list_stems()

    def read_raw(self, list_name: str) -> list[str]:
        """Raw lines of a list, as stored."""
        return self.read_lines(self.list_path(list_name))

    def save_raw(self, list_name: str, lines: list[str]) -> None:
        """Rewrite a list from raw lines."""
        self.write_lines(self.list_path(list_name), lines)

    def load_items(self, list_name: str) -> list[TodoItem]:
        """
        Прочитать и декодировать все задачи списка.

        Returns:
            Задачи в порядке строк файла
        """
        return self.codec.decode_lines(self.read_raw(list_name))

    def save_items(self, list_name: str, items: list[TodoItem]) -> None:
        """Encode all items and rewrite the list file."""
        self.save_raw(list_name, self.codec.encode_items(items))

    def append_item(self, list_name: str, item: TodoItem) -> None:
        """Append one item, creating the list on first use."""
        self.append_line(self.list_path(list_name), self.codec.encode_item(item))

    def delete_list(self, list_name: str) -> bool:
        """
        Удалить файл списка целиком.

        Returns:
            True если список существовал
        """
        return self.delete(self.list_path(list_name))
