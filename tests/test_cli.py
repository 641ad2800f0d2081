"""
Tests for the todo command line (cli.py).

Runs main() against temp files and checks stdout, stderr and exit codes.
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from todo.cli import main, select_tasks
from todo.parsers.task_parser import from_lines


TODO_CONTENT = (
    "x Pay rent 2024-3-1 +bills\n"
    "Buy milk @home +shopping\n"
    "Call mom @work +family 2024-3-10\n"
    "Fix bike @home 2024-3-5 s:2024-3-2\n"
)


@pytest.fixture
def todo_file(tmp_path):
    path = tmp_path / "todo.txt"
    path.write_text(TODO_CONTENT, encoding="utf-8")
    return path


def _titles(output: str):
    return [line.split("\t")[2] for line in output.splitlines()]


class TestList:
    def test_sorted_by_default(self, todo_file, capsys):
        assert main(["--file", str(todo_file), "list"]) == 0
        out = capsys.readouterr().out
        assert _titles(out) == ["Fix bike", "Call mom", "Buy milk", "Pay rent"]

    def test_unsorted(self, todo_file, capsys):
        assert main(["--file", str(todo_file), "list", "--unsorted"]) == 0
        out = capsys.readouterr().out
        assert _titles(out) == ["Pay rent", "Buy milk", "Call mom", "Fix bike"]

    def test_query(self, todo_file, capsys):
        assert main(["--file", str(todo_file), "list", "@home"]) == 0
        assert _titles(capsys.readouterr().out) == ["Fix bike", "Buy milk"]

    def test_query_and_not(self, todo_file, capsys):
        assert main(["--file", str(todo_file), "list", "@home", "--not", "+shopping"]) == 0
        assert _titles(capsys.readouterr().out) == ["Fix bike"]

    def test_rows_carry_line_numbers(self, todo_file, capsys):
        main(["--file", str(todo_file), "list", "+family"])
        assert capsys.readouterr().out == "3\t\tCall mom\t2024-3-10\t\twork\tfamily\t\n"

    def test_json(self, todo_file, capsys):
        assert main(["--file", str(todo_file), "list", "--json", "+bills"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [{
            "line_number": 1,
            "done": True,
            "title": "Pay rent",
            "due": "2024-03-01",
            "start": None,
            "contexts": [],
            "tags": ["bills"],
            "raw": "x Pay rent 2024-3-1 +bills",
        }]

    def test_file_from_environment(self, todo_file, capsys, monkeypatch):
        monkeypatch.setenv("TODO_FILE", str(todo_file))
        assert main(["list", "+bills"]) == 0
        assert _titles(capsys.readouterr().out) == ["Pay rent"]


class TestFormat:
    def test_prints_canonical_lines(self, todo_file, capsys):
        assert main(["--file", str(todo_file), "format"]) == 0
        assert capsys.readouterr().out == (
            "x Pay rent 2024-3-1 +bills\n"
            "Buy milk @home +shopping\n"
            "Call mom 2024-3-10 @work +family\n"
            "Fix bike 2024-3-5 s:2024-3-2 @home\n"
        )
        assert todo_file.read_text(encoding="utf-8") == TODO_CONTENT

    def test_write(self, todo_file, capsys):
        assert main(["--file", str(todo_file), "format", "--write"]) == 0
        assert "Formatted 4 task(s)" in capsys.readouterr().out
        assert todo_file.read_text(encoding="utf-8").splitlines()[2] == \
            "Call mom 2024-3-10 @work +family"


    def test_write_keeps_invalid_bytes(self, tmp_path, capsys):
        path = tmp_path / "todo.txt"
        path.write_bytes(b"+cafe Buy caf\xe9\n")
        assert main(["--file", str(path), "format", "--write"]) == 0
        assert path.read_bytes() == b"Buy caf\xe9 +cafe\n"


class TestCheck:
    def test_ok(self, todo_file, capsys):
        assert main(["--file", str(todo_file), "check"]) == 0
        assert "4 task(s), 1 done" in capsys.readouterr().out

    def test_latin1_file(self, tmp_path, capsys):
        path = tmp_path / "todo.txt"
        path.write_bytes(b"Buy caf\xe9 @home\nx Pay rent\n")
        assert main(["--file", str(path), "check"]) == 0
        assert "2 task(s), 1 done" in capsys.readouterr().out

    def test_bad_line(self, tmp_path, capsys):
        path = tmp_path / "todo.txt"
        path.write_text("Buy milk\n\nCall mom\n", encoding="utf-8")
        assert main(["--file", str(path), "check"]) == 1
        err = capsys.readouterr().err
        assert "Error: todo: parse empty string on line 2" in err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["--file", str(tmp_path / "nope.txt"), "check"]) == 1
        assert "Todo file not found" in capsys.readouterr().err

    def test_no_command(self, todo_file, capsys):
        assert main(["--file", str(todo_file)]) == 1


def test_select_tasks():
    tasks = from_lines(["Buy milk @home +shopping", "Fix bike @home", "Call mom @work"])
    result = select_tasks(tasks, ["@home"], ["+shopping"])
    assert [t.title for t in result] == ["Fix bike"]
    assert select_tasks(tasks, [], []) == tasks
