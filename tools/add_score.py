"""Administrative insert of a single score record.

  python tools/add_score.py --db db.lite snake austin 42
"""

from __future__ import annotations

import argparse
import sys

from leaderboard.storage.sqlite import ScoreRecord, ScoreStore, StorageError


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--db", default="db.lite")
    ap.add_argument("game")
    ap.add_argument("player")
    ap.add_argument("score", type=int)
    args = ap.parse_args(argv)

    record = ScoreRecord(game=args.game, player_name=args.player, score=args.score)
    store = ScoreStore(args.db)
    try:
        store.open()
        store.insert(record)
    except StorageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        store.close()
    print(f"Inserted {record.game}/{record.player_name}/{record.score} into {args.db}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
