# now_playing_proxy/main.py
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from now_playing_proxy.config import settings
from now_playing_proxy.config.logging_config import configure_logging

# === Import Routers ===
from now_playing_proxy.api.spotify_auth_api import router as spotify_auth_router
from now_playing_proxy.api.spotify_player_api import router as spotify_player_router
from now_playing_proxy.services.spotify_session import SpotifySession

logger = logging.getLogger(__name__)


def create_app(session: SpotifySession | None = None) -> FastAPI:
    app = FastAPI(
        title="Spotify Now Playing Proxy",
        description=(
            "Backend for: "
            "• Spotify OAuth (Authorization Code) "
            "• Now playing + artist details "
            "• Raw playback state"
        ),
        version="1.0.0",
    )

    configure_logging()

    # 目前登入的 Spotify session（整個 app 共用一份）
    app.state.spotify_session = session or SpotifySession()

    # === CORS Middleware ===
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # === Spotify OAuth ===
    app.include_router(spotify_auth_router, tags=["Spotify OAuth"])

    # === Now playing / artist / playback state ===
    app.include_router(spotify_player_router, tags=["Spotify Player"])

    @app.get("/")
    def root():
        return {
            "status": "ok",
            "authenticated": app.state.spotify_session.is_authenticated,
            "message": "Spotify now-playing proxy running, visit /login to authenticate",
        }

    return app


app = create_app()


def run():
    if not settings.CLIENT_ID or not settings.CLIENT_SECRET:
        logger.warning("CLIENT_ID / CLIENT_SECRET are not set, /login will not work")
    logger.info(f"Server listening on port {settings.PORT}")
    logger.info(f"Please visit http://localhost:{settings.PORT}/login to authenticate")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
