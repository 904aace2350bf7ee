# now_playing_proxy/services/spotify_artist_service.py
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from pydantic import ValidationError

from now_playing_proxy.models.now_playing_models import ArtistDetails, SpotifyImage
from now_playing_proxy.services.spotify_client import SpotifyStatus, spotify_get
from now_playing_proxy.services.spotify_session import SpotifySession

logger = logging.getLogger(__name__)


def parse_images(raw: Optional[List[Dict[str, Any]]]) -> List[SpotifyImage]:
    """Spotify image objects → SpotifyImage, skipping entries that are not usable."""
    if not isinstance(raw, list):
        return []

    images = []
    for img in raw:
        if not isinstance(img, dict) or not img.get("url"):
            continue
        try:
            images.append(SpotifyImage(**img))
        except ValidationError as e:
            logger.debug("Skipping malformed image entry %s: %s", img, e)
    return images


def get_artist_details(session: SpotifySession, artist_id: str) -> Optional[ArtistDetails]:
    """
    取得 artist 詳細資料。

    Any upstream failure yields None so that the caller can fall back to
    empty artist metadata instead of failing the whole request.
    """
    result = spotify_get(session, f"artists/{quote(artist_id, safe='')}")
    if result.status != SpotifyStatus.OK:
        logger.warning("Error fetching artist details for %s: %s", artist_id, result.status.value)
        return None

    artist = result.data
    try:
        return ArtistDetails(
            name=artist.get("name"),
            images=parse_images(artist.get("images")),
            followers=(artist.get("followers") or {}).get("total") or 0,
            genres=artist.get("genres") or [],
            spotifyUrl=(artist.get("external_urls") or {}).get("spotify"),
        )
    except ValidationError as e:
        logger.warning("Unexpected artist payload for %s: %s", artist_id, e)
        return None
