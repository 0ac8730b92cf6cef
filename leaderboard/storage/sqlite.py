"""SQLite persistence for per-game scores."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import asdict, dataclass
from typing import Any

logger = logging.getLogger("leaderboard.storage")

# Filter value asking for every game.
ALL_GAMES = "*"

_U64 = 1 << 64


class StorageError(Exception):
    """Connection, schema or query failure in the score store."""


@dataclass(frozen=True)
class ScoreRecord:
    game: str
    player_name: str
    score: int

    @classmethod
    def from_row(cls, row: tuple) -> "ScoreRecord":
        game, score, player_name = row
        if not isinstance(game, str) or not isinstance(player_name, str):
            raise ValueError("game and player_name must be text")
        if isinstance(score, bool) or not isinstance(score, int):
            raise ValueError(f"score is not an integer: {score!r}")
        # Column is signed; reads are an unsigned 64-bit magnitude.
        return cls(game=game, player_name=player_name, score=score % _U64)

    def to_json(self) -> dict[str, Any]:
        return asdict(self)


class ScoreStore:
    def __init__(self, path: str):
        self.path = path
        self.conn: sqlite3.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self.conn is not None

    def open(self) -> None:
        try:
            # Queries run on executor threads; access is serialized by SharedScoreStore.
            self.conn = sqlite3.connect(self.path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise StorageError(f"cannot open {self.path}: {exc}") from exc
        try:
            self.initialize_schema()
        except StorageError:
            self.close()
            raise

    def close(self) -> None:
        if self.conn:
            self.conn.close()
            self.conn = None

    def _require_open(self) -> sqlite3.Connection:
        if not self.conn:
            raise StorageError("score store is not open")
        return self.conn

    def initialize_schema(self) -> None:
        conn = self._require_open()
        try:
            conn.execute("CREATE TABLE IF NOT EXISTS scores (game TEXT, score INTEGER, player_name TEXT)")
            conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(f"cannot create schema in {self.path}: {exc}") from exc

    def insert(self, record: ScoreRecord) -> None:
        conn = self._require_open()
        try:
            conn.execute(
                "INSERT INTO scores (game, score, player_name) VALUES (?, ?, ?)",
                (record.game, record.score, record.player_name),
            )
            conn.commit()
        except (sqlite3.Error, OverflowError, UnicodeEncodeError) as exc:
            raise StorageError(f"cannot insert {record!r}: {exc}") from exc

    def query_by_game(self, game_filter: str) -> list[ScoreRecord]:
        """Return records for *game_filter* ranked by score, highest first.

        ``ALL_GAMES`` returns every record in one global ranking. Rows that
        cannot be decoded are dropped instead of failing the whole query.
        """
        conn = self._require_open()
        try:
            cur = conn.execute(
                "SELECT game, score, player_name FROM scores WHERE ? = ? OR game = ? ORDER BY score DESC",
                (game_filter, ALL_GAMES, game_filter),
            )
            rows = cur.fetchall()
        except (sqlite3.Error, UnicodeEncodeError) as exc:
            raise StorageError(f"cannot query scores for {game_filter!r}: {exc}") from exc

        out = []
        for row in rows:
            try:
                out.append(ScoreRecord.from_row(row))
            except ValueError as exc:
                logger.debug("skipping undecodable row %r: %s", row, exc)
        return out

    def count(self) -> int:
        conn = self._require_open()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM scores").fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"cannot count scores: {exc}") from exc
        return int(n)
