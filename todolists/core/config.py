"""Application configuration."""

import contextlib
from dataclasses import dataclass
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

EVAL_FLAG = "--eval"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Все настройки можно переопределить через переменные окружения с префиксом TODO_.
    Пример: TODO_LOG_LEVEL=DEBUG todo list all
    """

    # =========================================================================
    # Storage
    # =========================================================================
    # DIR_NAME - имя директории со списками внутри домашней директории
    DIR_NAME: str = ".todo_lists"

    # HOME - переопределить домашнюю директорию (по умолчанию Path.home())
    HOME: Path | None = None

    # DEFAULT_LIST - список, который выбирается пустым ответом в интерактивном add
    DEFAULT_LIST: str = "default"

    # =========================================================================
    # Logging
    # =========================================================================
    # LOG_LEVEL - уровень логирования: DEBUG, INFO, WARNING, ERROR, CRITICAL
    # По умолчанию WARNING: вывод команды не должен смешиваться с логами
    LOG_LEVEL: str = "WARNING"

    # LOG_FORMAT - формат логов:
    # "json" - структурированный JSON
    # "simple" - человекочитаемый текст
    LOG_FORMAT: str = "simple"

    model_config = SettingsConfigDict(env_prefix="TODO_", case_sensitive=True, extra="ignore")

    def resolve_base_dir(self) -> Path:
        """
        Resolve the storage directory.

        Raises:
            RuntimeError: If the home directory cannot be determined
        """
        home = self.HOME if self.HOME is not None else Path.home()
        return home / self.DIR_NAME


@dataclass(frozen=True)
class AppContext:
    """
    Immutable startup context shared by the router and the services.

    Собирается один раз при запуске процесса (build_context) и дальше
    только передаётся по ссылке: никто не читает os.environ / sys.argv повторно.
    """

    base_dir: Path
    cwd: Path | None = None
    eval_mode: bool = False
    default_list: str = "default"


def build_context(argv: list[str], settings: Settings, cwd: Path | None = None) -> AppContext:
    """
    Build the startup context and make sure the storage directory exists.

    Args:
        argv: Command arguments (without the program name)
        settings: Loaded settings
        cwd: Working directory override (defaults to the process cwd,
            None if that directory no longer exists)

    Returns:
        AppContext for this invocation

    Raises:
        OSError: If the storage directory cannot be created
    """
    base_dir = settings.resolve_base_dir()
    base_dir.mkdir(parents=True, exist_ok=True)

    # Рабочая директория может быть удалена: тогда cwd=None, она нужна только tag
    if cwd is None:
        with contextlib.suppress(FileNotFoundError):
            cwd = Path.cwd()

    return AppContext(
        base_dir=base_dir,
        cwd=cwd,
        eval_mode=EVAL_FLAG in argv,
        default_list=settings.DEFAULT_LIST,
    )
