# now_playing_proxy/services/spotify_token_service.py
import logging
from typing import List, Optional
from urllib.parse import urlencode

import requests
from pydantic import ValidationError

from now_playing_proxy.config import settings
from now_playing_proxy.models.token_model import SpotifyToken
from now_playing_proxy.services.spotify_session import SpotifySession

logger = logging.getLogger(__name__)


def build_authorize_url(scopes: Optional[List[str]] = None) -> str:
    """
    組出 Spotify 授權 URL（Authorization Code Flow）。
    Scopes are joined with spaces as the accounts service expects.
    """
    scopes = settings.SPOTIFY_SCOPES if scopes is None else scopes
    params = {
        "client_id": settings.CLIENT_ID or "",
        "response_type": "code",
        "redirect_uri": settings.CALLBACK_URI,
        "scope": " ".join(scopes),
    }
    if settings.SPOTIFY_SHOW_DIALOG:
        params["show_dialog"] = "true"
    return f"{settings.SPOTIFY_AUTHORIZE_URL}?{urlencode(params)}"


def _post_token(payload: dict) -> Optional[SpotifyToken]:
    try:
        r = requests.post(
            settings.SPOTIFY_TOKEN_URL,
            data=payload,
            auth=(settings.CLIENT_ID or "", settings.CLIENT_SECRET or ""),
            timeout=settings.SPOTIFY_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error("Token request (%s) failed: %s", payload["grant_type"], e)
        return None

    if r.status_code != 200:
        logger.error("Token request (%s) rejected: %s %s", payload["grant_type"], r.status_code, r.text)
        return None

    try:
        token_data = r.json()
    except ValueError:
        logger.error("Token endpoint returned a non-JSON body")
        return None

    if "access_token" not in token_data:
        logger.error("Token endpoint reply has no access_token: %s", token_data)
        return None

    try:
        return SpotifyToken(**token_data)
    except ValidationError as e:
        logger.error("Unexpected token payload: %s", e)
        return None


def exchange_code_for_token(code: str) -> Optional[SpotifyToken]:
    """用 callback 拿到的 code 跟 Spotify 交換 access_token / refresh_token。"""
    payload = {
        "grant_type": "authorization_code",
        "code": code,
        "redirect_uri": settings.CALLBACK_URI,
    }
    return _post_token(payload)


def refresh_access_token(session: SpotifySession) -> bool:
    """
    Trade the stored refresh token for a new access token.

    On failure the session is left as it was and False is returned.
    """
    if not session.refresh_token:
        logger.warning("Cannot refresh access token: no refresh token stored")
        return False

    payload = {
        "grant_type": "refresh_token",
        "refresh_token": session.refresh_token,
    }
    token = _post_token(payload)
    if token is None:
        logger.error("Error refreshing access token")
        return False

    session.update_access_token(token.access_token, token.refresh_token)
    logger.info("Access token refreshed")
    return True
