"""Listen address, database path, seeding and logging knobs."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

SEED_MODES = ("empty", "always", "never")


@dataclass
class ServerConfig:
    # Network
    host: str = "127.0.0.1"
    port: int = 3000
    cors_allow_all: bool = True
    cors_allowed_origins: list[str] = field(default_factory=list)

    # Persistence
    db_path: str = "db.lite"
    # empty | always | never
    seed_mode: str = "empty"

    log_level: str = "INFO"

    @staticmethod
    def _parse_bool(v: str | None, default: bool) -> bool:
        if v is None:
            return default
        return v.strip().lower() in ("1", "true", "yes", "on")

    @classmethod
    def from_env(cls) -> "ServerConfig":
        cfg = cls()
        cfg.host = os.environ.get("LEADERBOARD_HOST", cfg.host)
        if os.environ.get("LEADERBOARD_PORT"):
            try:
                cfg.port = int(os.environ["LEADERBOARD_PORT"])
            except ValueError:
                pass
        cfg.db_path = os.environ.get("LEADERBOARD_DB", cfg.db_path)

        seed_mode = os.environ.get("LEADERBOARD_SEED", "").strip().lower()
        if seed_mode in SEED_MODES:
            cfg.seed_mode = seed_mode

        cfg.log_level = os.environ.get("LEADERBOARD_LOG_LEVEL", cfg.log_level).upper()
        cfg.cors_allow_all = cls._parse_bool(os.environ.get("LEADERBOARD_CORS_ALLOW_ALL"), cfg.cors_allow_all)
        origins = os.environ.get("LEADERBOARD_CORS_ORIGINS")
        if origins:
            cfg.cors_allowed_origins = [o.strip() for o in origins.split(",") if o.strip()]
        return cfg
