# now_playing_proxy/models/now_playing_models.py
from typing import List
from pydantic import BaseModel

# Spotify image object (artist photos / album artwork in several sizes)
class SpotifyImage(BaseModel):
    url: str
    height: int | None = None
    width: int | None = None


# /artist/{id}
class ArtistDetails(BaseModel):
    name: str | None = None
    images: List[SpotifyImage] = []
    followers: int = 0
    genres: List[str] = []
    spotifyUrl: str | None = None


class NowPlayingArtist(BaseModel):
    name: str | None = None
    id: str | None = None
    spotifyUrl: str | None = None
    images: List[SpotifyImage] = []
    followers: int = 0
    genres: List[str] = []


class NowPlayingAlbum(BaseModel):
    name: str | None = None
    images: List[SpotifyImage] = []
    spotifyUrl: str | None = None


# /now-playing（有在播放）
class NowPlayingResponse(BaseModel):
    isPlaying: bool
    trackName: str | None = None
    artist: NowPlayingArtist
    album: NowPlayingAlbum
    trackUrl: str | None = None
    duration: int | None = None
    progressMs: int | None = None


# /now-playing（沒有在播放）
class NotPlayingResponse(BaseModel):
    isPlaying: bool = False
    message: str = "No track currently playing"


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
