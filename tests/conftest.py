import pytest

from leaderboard.config import ServerConfig
from leaderboard.storage.sqlite import ScoreStore


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "scores.lite")


@pytest.fixture
def store(db_path):
    s = ScoreStore(db_path)
    s.open()
    yield s
    s.close()


@pytest.fixture
def config(db_path):
    return ServerConfig(db_path=db_path)
