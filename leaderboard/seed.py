"""Fixed startup records."""

from __future__ import annotations

import logging

from leaderboard.storage.sqlite import ScoreRecord, ScoreStore

logger = logging.getLogger("leaderboard.seed")

SEED_RECORDS = (
    ScoreRecord(game="snake", player_name="austin", score=10),
    ScoreRecord(game="snake", player_name="alec", score=19),
    ScoreRecord(game="snake", player_name="keith", score=15),
    ScoreRecord(game="snake", player_name="karen", score=16),
    ScoreRecord(game="breakout", player_name="austin", score=35),
    ScoreRecord(game="breakout", player_name="alec", score=30),
    ScoreRecord(game="breakout", player_name="keith", score=32),
    ScoreRecord(game="breakout", player_name="karen", score=33),
)


def seed_store(store: ScoreStore, mode: str = "empty") -> int:
    """Insert SEED_RECORDS according to *mode*; return how many were written.

    ``empty`` seeds only a table with no rows, ``always`` seeds on every call
    (rows accumulate), ``never`` does nothing.
    """
    if mode == "never":
        logger.info("seeding disabled")
        return 0
    if mode == "empty":
        existing = store.count()
        if existing:
            logger.info("store already holds %d records, not seeding", existing)
            return 0
    elif mode != "always":
        raise ValueError(f"unknown seed mode: {mode!r}")

    for record in SEED_RECORDS:
        store.insert(record)
    logger.info("seeded %d records", len(SEED_RECORDS))
    return len(SEED_RECORDS)
