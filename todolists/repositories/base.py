"""Base repository with line-oriented file operations."""

import contextlib
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from ..core.logging import get_logger

logger = get_logger(__name__)


class FileRepository:
    """
    Базовый репозиторий поверх директории с текстовыми файлами.

    Одна запись = одна строка. Файл читается целиком и целиком перезаписывается,
    кэша между вызовами нет: источник истины всегда файл на диске.

    Пример использования:
        repo = FileRepository(Path("~/.todo_lists").expanduser(), suffix=".txt")
        lines = repo.read_lines(repo.path_for("groceries"))
    """

    def __init__(self, base_dir: Path, suffix: str = ".txt"):
        """
        Инициализация репозитория.

        Args:
            base_dir: Директория с файлами (должна существовать)
            suffix: Расширение файлов записей
        """
        self.base_dir = Path(base_dir)
        self.suffix = suffix

    def path_for(self, stem: str) -> Path:
        """Path of the file with the given stem."""
        return self.base_dir / f"{stem}{self.suffix}"

    def list_stems(self) -> list[str]:
        """
        Имена (stem) всех файлов с нужным расширением, отсортированные.

        Returns:
            Список имён без расширения
        """
        return sorted(
            path.stem
            for path in self.base_dir.iterdir()
            if path.is_file() and path.suffix == self.suffix
        )

    def read_lines(self, path: Path) -> list[str]:
        """
        Прочитать файл построчно.

        Args:
            path: Путь к файлу

        Returns:
            Строки без символов перевода строки ("\\n" и "\\r\\n").
            Байты не из UTF-8 заменяются на U+FFFD, файл всё равно читается.
        """
        content = path.read_text(encoding="utf-8", errors="replace")
        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return [line[:-1] if line.endswith("\r") else line for line in lines]

    def write_lines(self, path: Path, lines: Iterable[str]) -> None:
        """
        Перезаписать файл целиком.

        Пишем во временный файл рядом и подменяем через os.replace:
        читатель видит либо старую, либо новую версию файла целиком.

        Args:
            path: Путь к файлу
            lines: Новые строки файла
        """
        content = "".join(f"{line}\n" for line in lines)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise
        logger.debug("File rewritten", extra={"path": str(path), "lines": content.count("\n")})

    def append_line(self, path: Path, line: str) -> None:
        """Append one line, creating the file if needed."""
        with path.open("a", encoding="utf-8") as f:
            f.write(f"{line}\n")

    def delete(self, path: Path) -> bool:
        """
        Удалить файл.

        Returns:
            True если удалён, False если файла не было
        """
        if not path.exists():
            return False
        path.unlink()
        return True
