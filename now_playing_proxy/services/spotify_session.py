# now_playing_proxy/services/spotify_session.py
import logging
from enum import Enum
from typing import Optional

from fastapi import Request

from now_playing_proxy.config.logging_config import mask_token
from now_playing_proxy.models.token_model import SpotifyToken

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"
    EXPIRED = "expired"


class SpotifySession:
    """
    保存目前的 Spotify access / refresh token。

    One instance lives on ``app.state.spotify_session`` for the lifetime of
    the application and reaches the routes through ``get_spotify_session``.
    A new login overwrites whatever was stored before. There is no locking:
    concurrent refreshes may interleave and the last write wins.
    """

    def __init__(self):
        self.access_token: Optional[str] = None
        self.refresh_token: Optional[str] = None
        self.state = SessionState.UNAUTHENTICATED

    @property
    def is_authenticated(self) -> bool:
        return self.state == SessionState.AUTHENTICATED and bool(self.access_token)

    def store_tokens(self, token: SpotifyToken) -> None:
        """Replace the whole token pair (callback / re-login)."""
        self.access_token = token.access_token
        self.refresh_token = token.refresh_token
        self.state = SessionState.AUTHENTICATED
        logger.info(
            "Stored Spotify tokens (access=%s refresh=%s)",
            mask_token(token.access_token),
            mask_token(token.refresh_token),
        )

    def update_access_token(self, access_token: str, refresh_token: Optional[str] = None) -> None:
        self.access_token = access_token
        # Spotify 有時不會回 refresh token，要沿用舊的
        if refresh_token:
            self.refresh_token = refresh_token
        self.state = SessionState.AUTHENTICATED

    def mark_expired(self) -> None:
        if self.state != SessionState.UNAUTHENTICATED:
            self.state = SessionState.EXPIRED


def get_spotify_session(request: Request) -> SpotifySession:
    return request.app.state.spotify_session
