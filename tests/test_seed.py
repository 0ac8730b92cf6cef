import pytest

from leaderboard.seed import SEED_RECORDS, seed_store
from leaderboard.storage.sqlite import ALL_GAMES, ScoreRecord


def test_seed_set_is_fixed():
    assert len(SEED_RECORDS) == 8
    assert {r.game for r in SEED_RECORDS} == {"snake", "breakout"}


def test_empty_mode_seeds_once(store):
    assert seed_store(store, "empty") == 8
    assert seed_store(store, "empty") == 0
    assert store.count() == 8


def test_empty_mode_skips_populated_store(store):
    store.insert(ScoreRecord("tetris", "austin", 1))
    assert seed_store(store) == 0
    assert store.query_by_game(ALL_GAMES) == [ScoreRecord("tetris", "austin", 1)]


def test_always_mode_duplicates(store):
    seed_store(store, "always")
    seed_store(store, "always")
    assert store.count() == 16


def test_never_mode(store):
    assert seed_store(store, "never") == 0
    assert store.count() == 0


def test_unknown_mode(store):
    with pytest.raises(ValueError):
        seed_store(store, "sometimes")
