# now_playing_proxy/api/spotify_player_api.py
import logging
from fastapi import APIRouter, Depends
from now_playing_proxy.api.errors import auth_required, error_response
from now_playing_proxy.models.now_playing_models import (
    ArtistDetails,
    ErrorResponse,
    NowPlayingResponse,
)
from now_playing_proxy.services.spotify_artist_service import get_artist_details
from now_playing_proxy.services.spotify_client import SpotifyStatus
from now_playing_proxy.services.spotify_now_playing import fetch_playback_state, get_now_playing
from now_playing_proxy.services.spotify_session import SpotifySession, get_spotify_session

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/artist/{artist_id}",
    response_model=ArtistDetails,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def artist(artist_id: str, session: SpotifySession = Depends(get_spotify_session)):
    # 還沒登入 → 跟 /now-playing 一樣回 401，而不是 404
    if not session.access_token:
        return auth_required()

    try:
        details = get_artist_details(session, artist_id)
    except Exception as e:
        logger.error(f"Failed to fetch artist details for {artist_id}: {e}")
        return error_response(500, "Failed to fetch artist details")

    if details is None:
        return error_response(404, "Artist not found")
    return details


@router.get("/current-device-play", responses={500: {"model": ErrorResponse}})
def current_device_play(session: SpotifySession = Depends(get_spotify_session)):
    """Spotify playback state, passed through unmodified."""
    result = fetch_playback_state(session)
    if not result.ok:
        logger.error(f"Error getting current device play: {result.status.value}")
        return error_response(500, "Failed to fetch current device play")

    # 204 → 沒有任何裝置在播放
    if result.status == SpotifyStatus.NO_CONTENT:
        return None
    return result.data


@router.get(
    "/now-playing",
    responses={
        200: {"model": NowPlayingResponse},
        401: {"model": ErrorResponse},
    },
)
def now_playing(session: SpotifySession = Depends(get_spotify_session)):
    payload = get_now_playing(session)
    if payload is None:
        return auth_required()
    return payload
