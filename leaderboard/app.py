"""HTTP entrypoint: read-only JSON leaderboard."""

from __future__ import annotations

import logging

from aiohttp import web

from leaderboard.config import ServerConfig
from leaderboard.seed import seed_store
from leaderboard.storage.shared import SharedScoreStore
from leaderboard.storage.sqlite import ALL_GAMES, ScoreStore, StorageError

logger = logging.getLogger("leaderboard.app")


class LeaderboardService:
    def __init__(self, config: ServerConfig):
        self.config = config
        self.store = ScoreStore(self.config.db_path)
        self.shared = SharedScoreStore(self.store)

    async def start(self) -> None:
        # Runs before the listener accepts connections.
        self.store.open()
        seed_store(self.store, self.config.seed_mode)
        logger.info("score store ready at %s", self.config.db_path)

    async def stop(self) -> None:
        self.store.close()


def _cors_headers(config: ServerConfig, origin: str | None) -> dict[str, str]:
    if not origin:
        return {}
    if config.cors_allow_all:
        return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
    if origin in config.cors_allowed_origins:
        return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
    return {}


@web.middleware
async def cors_middleware(request: web.Request, handler):
    if request.method == "OPTIONS":
        origin = request.headers.get("Origin")
        headers = {
            **_cors_headers(request.app["config"], origin),
            "Access-Control-Allow-Methods": "GET,OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
            "Access-Control-Max-Age": "86400",
        }
        return web.Response(status=204, headers=headers)

    resp = await handler(request)
    resp.headers.update(_cors_headers(request.app["config"], request.headers.get("Origin")))
    return resp


@web.middleware
async def storage_error_middleware(request: web.Request, handler):
    try:
        return await handler(request)
    except StorageError:
        logger.exception("storage failure serving %s %s", request.method, request.path)
        return web.json_response({"error": "storage_unavailable"}, status=500)


def create_app(config: ServerConfig) -> web.Application:
    app = web.Application(middlewares=[cors_middleware, storage_error_middleware])
    svc = LeaderboardService(config)

    app["config"] = config
    app["svc"] = svc

    async def on_startup(_: web.Application):
        await svc.start()

    async def on_cleanup(_: web.Application):
        await svc.stop()

    app.on_startup.append(on_startup)
    app.on_cleanup.append(on_cleanup)

    async def ranked(game: str) -> web.Response:
        records = await svc.shared.query_by_game(game)
        return web.json_response([r.to_json() for r in records])

    async def all_games(_: web.Request):
        return await ranked(ALL_GAMES)

    async def game_by_name(request: web.Request):
        return await ranked(request.match_info["name"])

    async def health(_: web.Request):
        return web.json_response({"ok": True, "records": await svc.shared.count()})

    app.router.add_get("/games/", all_games)
    app.router.add_get("/games/{name}", game_by_name)
    app.router.add_get("/health", health)

    return app


def main() -> None:
    config = ServerConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(config)
    logger.info("listening on %s:%d", config.host, config.port)
    web.run_app(app, host=config.host, port=config.port, print=None)


if __name__ == "__main__":
    main()
