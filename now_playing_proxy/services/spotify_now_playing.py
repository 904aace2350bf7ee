# now_playing_proxy/services/spotify_now_playing.py
import logging
from typing import Any, Dict, Optional, Union

from now_playing_proxy.models.now_playing_models import (
    ArtistDetails,
    NotPlayingResponse,
    NowPlayingAlbum,
    NowPlayingArtist,
    NowPlayingResponse,
)
from now_playing_proxy.services.spotify_artist_service import get_artist_details, parse_images
from now_playing_proxy.services.spotify_client import SpotifyResult, SpotifyStatus, spotify_get
from now_playing_proxy.services.spotify_session import SpotifySession
from now_playing_proxy.services.spotify_token_service import refresh_access_token

logger = logging.getLogger(__name__)

NowPlaying = Union[NowPlayingResponse, NotPlayingResponse]


def fetch_now_playing(session: SpotifySession) -> SpotifyResult:
    """呼叫 Spotify Currently Playing API。"""
    return spotify_get(session, "me/player/currently-playing")


def fetch_playback_state(session: SpotifySession) -> SpotifyResult:
    """Full playback state (device, shuffle, repeat, ...) as Spotify returns it."""
    return spotify_get(session, "me/player")


def _spotify_url(obj: Optional[Dict[str, Any]]) -> Optional[str]:
    return ((obj or {}).get("external_urls") or {}).get("spotify")


def build_now_playing(playing: Dict[str, Any], artist_details: Optional[ArtistDetails]) -> NowPlayingResponse:
    """
    Reshape a currently-playing payload into the client document.

    ``artist_details`` None means the lookup failed (or was skipped), in
    which case images/followers/genres fall back to []/0/[].
    """
    track = playing.get("item") or {}
    artists = track.get("artists") or []
    artist = artists[0] if artists else {}
    album = track.get("album") or {}

    return NowPlayingResponse(
        isPlaying=bool(playing.get("is_playing")),
        trackName=track.get("name"),
        artist=NowPlayingArtist(
            name=artist.get("name"),
            id=artist.get("id"),
            spotifyUrl=_spotify_url(artist),
            images=artist_details.images if artist_details else [],
            followers=artist_details.followers if artist_details else 0,
            genres=artist_details.genres if artist_details else [],
        ),
        album=NowPlayingAlbum(
            name=album.get("name"),
            images=parse_images(album.get("images")),
            spotifyUrl=_spotify_url(album),
        ),
        trackUrl=_spotify_url(track),
        duration=track.get("duration_ms"),
        progressMs=playing.get("progress_ms"),
    )


def _shape(session: SpotifySession, result: SpotifyResult) -> NowPlaying:
    playing = result.data or {}
    if result.status == SpotifyStatus.NO_CONTENT or not playing.get("item"):
        return NotPlayingResponse()

    artists = playing["item"].get("artists") or []
    artist_id = artists[0].get("id") if artists else None
    artist_details = get_artist_details(session, artist_id) if artist_id else None

    return build_now_playing(playing, artist_details)


def get_now_playing(session: SpotifySession) -> Optional[NowPlaying]:
    """
    Fetch and shape the current track.

    If the first fetch reports an expired token, the access token is
    refreshed and the fetch retried once. Returns None when the caller has
    to log in again.
    """
    result = fetch_now_playing(session)

    if result.status == SpotifyStatus.TOKEN_EXPIRED:
        logger.info("Spotify token expired, trying one refresh")
        if not refresh_access_token(session):
            return None
        result = fetch_now_playing(session)
        if not result.ok:
            logger.error("Error after token refresh: %s", result.status.value)

    if not result.ok:
        return None

    return _shape(session, result)
