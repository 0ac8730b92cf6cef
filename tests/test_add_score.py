"""Tests for tools/add_score.py."""

import importlib.util
import os

import pytest

from leaderboard.storage.sqlite import ScoreRecord, ScoreStore

_TOOL_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "tools", "add_score.py")
spec = importlib.util.spec_from_file_location("add_score", _TOOL_PATH)
add_score = importlib.util.module_from_spec(spec)
spec.loader.exec_module(add_score)


def test_inserts_record(db_path, capsys):
    assert add_score.main(["--db", db_path, "snake", "o'brien", "42"]) == 0
    assert "snake/o'brien/42" in capsys.readouterr().out

    store = ScoreStore(db_path)
    store.open()
    try:
        assert store.query_by_game("snake") == [ScoreRecord("snake", "o'brien", 42)]
    finally:
        store.close()


def test_storage_error_exit_code(tmp_path, capsys):
    db = str(tmp_path / "missing" / "scores.lite")
    assert add_score.main(["--db", db, "snake", "austin", "1"]) == 1
    assert "error:" in capsys.readouterr().err


def test_score_must_be_integer(db_path):
    with pytest.raises(SystemExit):
        add_score.main(["--db", db_path, "snake", "austin", "lots"])


def test_undecodable_argv_text_exit_code(db_path, capsys):
    # Non-UTF-8 argv bytes arrive as lone surrogates.
    assert add_score.main(["--db", db_path, "snake", "bad\udcff", "1"]) == 1
    assert "error:" in capsys.readouterr().err
