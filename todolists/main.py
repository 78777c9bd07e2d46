"""
Точка входа в приложение Todo Lists.

Запуск:
    todo add buy milk to groceries
    python -m todolists list all

Порядок старта:
    1. Settings из переменных окружения (TODO_*)
    2. Логирование (stderr)
    3. AppContext: директория со списками, cwd, --eval
    4. CommandRouter выполняет одну команду
"""

import sys

from .cli import CommandRouter
from .core.config import Settings, build_context
from .core.logging import get_logger, setup_logging
from .services import TodoService

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """
    Run one command.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit status: 0, or 1 when the filesystem is unusable
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    settings = Settings()
    setup_logging(log_level=settings.LOG_LEVEL, log_format=settings.LOG_FORMAT)

    try:
        context = build_context(argv, settings)
        router = CommandRouter(TodoService(context))
        return router.run(argv)
    except (OSError, RuntimeError) as exc:
        # Home не найден / нет прав на запись: дальше работать нельзя
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
