# now_playing_proxy/services/spotify_client.py
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

import requests

from now_playing_proxy.config import settings
from now_playing_proxy.services.spotify_session import SpotifySession

logger = logging.getLogger(__name__)


class SpotifyStatus(str, Enum):
    OK = "ok"
    NO_CONTENT = "no_content"
    TOKEN_EXPIRED = "token_expired"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass
class SpotifyResult:
    """
    Outcome of one Web API call. Callers branch on ``status`` instead of
    catching exceptions:

    - OK：``data`` 是 Spotify 回傳的 JSON
    - NO_CONTENT：204 或空的 body
    - TOKEN_EXPIRED：401，或 session 裡根本沒有 access token
    - NOT_FOUND：404 / 400（例如不存在的 artist id）
    - ERROR：其它狀況（網路錯誤、5xx、不是 JSON）
    """
    status: SpotifyStatus
    data: Optional[Dict[str, Any]] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status in (SpotifyStatus.OK, SpotifyStatus.NO_CONTENT)


def spotify_get(session: SpotifySession, path: str, params: Optional[Dict] = None) -> SpotifyResult:
    """GET ``{SPOTIFY_API_BASE}/{path}`` with the session's bearer token."""
    if not session.access_token:
        return SpotifyResult(SpotifyStatus.TOKEN_EXPIRED)

    url = f"{settings.SPOTIFY_API_BASE}/{path}"
    headers = {"Authorization": f"Bearer {session.access_token}"}

    try:
        r = requests.get(url, headers=headers, params=params, timeout=settings.SPOTIFY_TIMEOUT)
    except requests.RequestException as e:
        logger.error("Spotify request failed: GET %s: %s", path, e)
        return SpotifyResult(SpotifyStatus.ERROR)

    logger.debug("Spotify GET %s -> %s", path, r.status_code)

    # 204 -> No Content
    if r.status_code == 204:
        return SpotifyResult(SpotifyStatus.NO_CONTENT, status_code=204)

    # 401 -> Token 過期
    if r.status_code == 401:
        session.mark_expired()
        return SpotifyResult(SpotifyStatus.TOKEN_EXPIRED, status_code=401)

    if r.status_code in (400, 404):
        return SpotifyResult(SpotifyStatus.NOT_FOUND, status_code=r.status_code)

    if r.status_code != 200:
        logger.warning("Spotify error on GET %s: %s %s", path, r.status_code, r.text)
        return SpotifyResult(SpotifyStatus.ERROR, status_code=r.status_code)

    # 沒內容 → 避免 json decode 錯誤
    if not r.text:
        return SpotifyResult(SpotifyStatus.NO_CONTENT, status_code=r.status_code)

    # Spotify 可能回 HTML（proxy / rate limit / blocking）
    if not r.headers.get("content-type", "").startswith("application/json"):
        logger.warning("Spotify returned non-JSON body on GET %s", path)
        return SpotifyResult(SpotifyStatus.ERROR, status_code=r.status_code)

    try:
        data = r.json()
    except ValueError:
        logger.warning("Spotify returned malformed JSON on GET %s", path)
        return SpotifyResult(SpotifyStatus.ERROR, status_code=r.status_code)

    # 只接受 JSON object（例如 `null` 或 list 都視為錯誤）
    if not isinstance(data, dict):
        logger.warning("Spotify returned a non-object JSON body on GET %s", path)
        return SpotifyResult(SpotifyStatus.ERROR, status_code=r.status_code)

    return SpotifyResult(SpotifyStatus.OK, data=data, status_code=r.status_code)
