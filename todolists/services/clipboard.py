"""Best-effort clipboard access through external helpers."""

import subprocess
from collections.abc import Sequence

from ..core.logging import get_logger

logger = get_logger(__name__)

# Порядок важен: xsel, затем xclip как запасной вариант
CLIPBOARD_HELPERS: tuple[tuple[str, ...], ...] = (
    ("xsel", "--clipboard", "--input"),
    ("xclip", "-selection", "clipboard"),
)


class ClipboardService:
    """
    Копирование текста в системный буфер обмена.

    Любая ошибка (helper не установлен, нет X-сервера, ненулевой код выхода)
    означает просто "не скопировано" и наружу не пробрасывается.
    """

    def __init__(self, helpers: Sequence[Sequence[str]] = CLIPBOARD_HELPERS):
        self.helpers = helpers

    def copy(self, text: str) -> bool:
        """
        Скопировать текст.

        Args:
            text: Текст для буфера обмена

        Returns:
            True если один из helper-ов отработал успешно
        """
        for helper in self.helpers:
            try:
                result = subprocess.run(
                    list(helper),
                    input=text,
                    text=True,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    check=False,
                )
            except OSError as exc:
                logger.debug("Clipboard helper unavailable", extra={"helper": helper[0], "error": str(exc)})
                continue

            if result.returncode == 0:
                logger.debug("Copied to clipboard", extra={"helper": helper[0]})
                return True
            logger.debug(
                "Clipboard helper failed",
                extra={"helper": helper[0], "returncode": result.returncode},
            )

        return False
