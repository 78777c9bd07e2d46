"""
Тесты для Repository Layer (файлы списков).

Проверяем:
- Путь к файлу и валидацию имени списка
- Чтение/запись строк (перевод строки, CRLF, перезапись целиком)
- Загрузку/сохранение задач через кодек
- Удаление списка
"""

from pathlib import Path

import pytest

from todolists.core.errors import InvalidListNameError
from todolists.models import TodoItem

# ============================================================================
# PATHS & NAMES
# ============================================================================


def test_list_path(repo, base_dir):
    """Test: <name>.txt внутри директории со списками."""
    assert repo.list_path("groceries") == base_dir / "groceries.txt"


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "..\\evil"])
def test_list_path_rejects_invalid_names(repo, name):
    """Test: имя списка должно быть одним компонентом пути."""
    with pytest.raises(InvalidListNameError):
        repo.list_path(name)


def test_list_names_sorted_and_filtered(repo, base_dir):
    """Test: только *.txt файлы, по алфавиту, без расширения."""
    (base_dir / "work.txt").write_text("", encoding="utf-8")
    (base_dir / "groceries.txt").write_text("", encoding="utf-8")
    (base_dir / "notes.md").write_text("", encoding="utf-8")
    (base_dir / "sub.txt").mkdir()

    assert repo.list_names() == ["groceries", "work"]


def test_exists(repo, write_list):
    """Test: exists только для существующего файла."""
    assert repo.exists("groceries") is False
    write_list("groceries", "milk")
    assert repo.exists("groceries") is True


# ============================================================================
# RAW LINES
# ============================================================================


def test_append_creates_file(repo, base_dir):
    """Test: append создаёт файл при первом добавлении."""
    repo.append_item("groceries", TodoItem("buy milk"))

    assert (base_dir / "groceries.txt").read_text(encoding="utf-8") == "buy milk\n"


def test_append_keeps_existing_lines(repo, write_list):
    """Test: append дописывает строку в конец."""
    path = write_list("groceries", "milk")
    repo.append_item("groceries", TodoItem("bread"))

    assert path.read_text(encoding="utf-8") == "milk\nbread\n"


def test_read_raw_strips_newlines(repo, base_dir):
    """Test: \\n и \\r\\n убираются, последняя строка без \\n тоже читается."""
    (base_dir / "mixed.txt").write_bytes(b"one\r\ntwo\nthree")

    assert repo.read_raw("mixed") == ["one", "two", "three"]


def test_read_raw_non_utf8_file(repo, base_dir):
    """Test: файл в Latin-1 читается, битые байты заменяются на U+FFFD."""
    (base_dir / "legacy.txt").write_bytes(b"caf\xe9 task\nsecond\n")

    assert repo.read_raw("legacy") == ["caf� task", "second"]


def test_read_raw_empty_file(repo, write_list):
    """Test: пустой файл: пустой список строк."""
    write_list("empty")
    assert repo.read_raw("empty") == []


def test_save_raw_rewrites_whole_file(repo, write_list):
    """Test: save_raw полностью заменяет содержимое."""
    path = write_list("groceries", "a", "b", "c")
    repo.save_raw("groceries", ["b"])

    assert path.read_text(encoding="utf-8") == "b\n"


def test_save_raw_leaves_no_temp_files(repo, write_list, base_dir):
    """Test: после перезаписи во временной директории только сам файл."""
    write_list("groceries", "a")
    repo.save_raw("groceries", ["b"])

    assert [p.name for p in base_dir.iterdir()] == ["groceries.txt"]


# ============================================================================
# ITEMS
# ============================================================================


def test_load_and_save_items(repo, write_list):
    """Test: задачи с тегами проходят через кодек."""
    path = write_list("work", "plain", "tagged [TAGS:/tmp/a|/tmp/b]")

    items = repo.load_items("work")
    assert items == [
        TodoItem("plain"),
        TodoItem("tagged", [Path("/tmp/a"), Path("/tmp/b")]),
    ]

    items[0].add_tag("/tmp/c")
    repo.save_items("work", items)

    assert path.read_text(encoding="utf-8") == (
        "plain [TAGS:/tmp/c]\ntagged [TAGS:/tmp/a|/tmp/b]\n"
    )


def test_delete_list(repo, write_list):
    """Test: delete_list удаляет файл и сообщает, был ли он."""
    path = write_list("groceries", "milk")

    assert repo.delete_list("groceries") is True
    assert not path.exists()
    assert repo.delete_list("groceries") is False
