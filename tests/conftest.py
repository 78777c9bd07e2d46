"""
Pytest fixtures для тестов.

Предоставляет:
- base_dir: временная директория со списками (вместо ~/.todo_lists)
- context: AppContext, смотрящий во временные директории
- prompt / clipboard: подставные "decision provider" и буфер обмена
- service / router: собранные поверх них TodoService и CommandRouter
"""

from pathlib import Path

import pytest

from todolists.cli import CommandRouter
from todolists.core.config import AppContext
from todolists.repositories import TodoListRepository
from todolists.services import TodoService


class ScriptedPrompt:
    """Отвечает заранее заданными ответами; None когда ответы кончились (как EOF)."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def ask(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if not self.answers:
            return None
        return self.answers.pop(0)


class FakeClipboard:
    """Запоминает скопированный текст вместо запуска xsel/xclip."""

    def __init__(self, result: bool = True):
        self.result = result
        self.copied: list[str] = []

    def copy(self, text: str) -> bool:
        self.copied.append(text)
        return self.result


@pytest.fixture
def base_dir(tmp_path) -> Path:
    """Директория со списками."""
    path = tmp_path / ".todo_lists"
    path.mkdir()
    return path


@pytest.fixture
def workdir(tmp_path) -> Path:
    """Текущая директория для команды tag."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def context(base_dir, workdir) -> AppContext:
    return AppContext(base_dir=base_dir, cwd=workdir)


@pytest.fixture
def prompt() -> ScriptedPrompt:
    return ScriptedPrompt()


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def repo(base_dir) -> TodoListRepository:
    return TodoListRepository(base_dir)


@pytest.fixture
def service(context, repo, prompt, clipboard) -> TodoService:
    return TodoService(context, repo=repo, prompt=prompt, clipboard=clipboard)


@pytest.fixture
def eval_service(base_dir, workdir, repo, prompt, clipboard) -> TodoService:
    """Сервис в режиме --eval."""
    context = AppContext(base_dir=base_dir, cwd=workdir, eval_mode=True)
    return TodoService(context, repo=repo, prompt=prompt, clipboard=clipboard)


@pytest.fixture
def router(service) -> CommandRouter:
    return CommandRouter(service)


@pytest.fixture
def write_list(base_dir):
    """Записать файл списка напрямую, в обход сервиса."""

    def _write(name: str, *lines: str) -> Path:
        path = base_dir / f"{name}.txt"
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write
