# now_playing_proxy/api/spotify_auth_api.py
import logging
from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse
from now_playing_proxy.api.errors import error_response
from now_playing_proxy.models.now_playing_models import ErrorResponse
from now_playing_proxy.services.spotify_session import SpotifySession, get_spotify_session
from now_playing_proxy.services.spotify_token_service import (
    build_authorize_url,
    exchange_code_for_token,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/login",
    summary="Spotify Login",
    description="Redirect the browser to the Spotify authorization page.",
)
def login():
    url = build_authorize_url()
    return RedirectResponse(url=url, status_code=302)


@router.get(
    "/callback",
    summary="Spotify OAuth Callback",
    description=(
        "Spotify 授權完成後會 redirect 到此 endpoint 並附上 code，"
        "後端用 code 交換 access_token / refresh_token。"
    ),
    responses={400: {"model": ErrorResponse}},
)
def callback(
    code: str | None = Query(None, description="Spotify 回傳的授權 code"),
    error: str | None = Query(None, description="使用者拒絕授權時 Spotify 回傳的錯誤"),
    session: SpotifySession = Depends(get_spotify_session),
):
    if error or not code:
        logger.error("Error getting tokens: callback without code (error=%s)", error)
        return error_response(400, "Error getting tokens")

    token = exchange_code_for_token(code)
    if token is None:
        return error_response(400, "Error getting tokens")

    session.store_tokens(token)

    # 授權完成 → 直接看目前播放的歌
    return RedirectResponse(url="/now-playing", status_code=302)
