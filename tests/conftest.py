import json

import pytest
import requests
from fastapi.testclient import TestClient

from now_playing_proxy.config import settings
from now_playing_proxy.main import create_app
from now_playing_proxy.models.token_model import SpotifyToken
from now_playing_proxy.services.spotify_session import SpotifySession


CURRENTLY_PLAYING = "me/player/currently-playing"

ARTIST_PAYLOAD = {
    "id": "artist-1",
    "name": "Radiohead",
    "images": [
        {"url": "https://i.scdn.co/image/artist-640", "height": 640, "width": 640},
        {"url": "https://i.scdn.co/image/artist-160", "height": 160, "width": 160},
    ],
    "followers": {"href": None, "total": 9876543},
    "genres": ["alternative rock", "art rock"],
    "external_urls": {"spotify": "https://open.spotify.com/artist/artist-1"},
}

PLAYING_PAYLOAD = {
    "is_playing": True,
    "progress_ms": 42000,
    "item": {
        "id": "track-1",
        "name": "Weird Fishes/Arpeggi",
        "duration_ms": 318000,
        "external_urls": {"spotify": "https://open.spotify.com/track/track-1"},
        "artists": [
            {
                "id": "artist-1",
                "name": "Radiohead",
                "external_urls": {"spotify": "https://open.spotify.com/artist/artist-1"},
            }
        ],
        "album": {
            "name": "In Rainbows",
            "images": [
                {"url": "https://i.scdn.co/image/album-640", "height": 640, "width": 640},
            ],
            "external_urls": {"spotify": "https://open.spotify.com/album/album-1"},
        },
    },
}


_NO_BODY = object()


class FakeResponse:
    def __init__(self, status_code=200, json_data=_NO_BODY, text=None, content_type="application/json; charset=utf-8"):
        self.status_code = status_code
        self._json = json_data
        if text is None:
            text = json.dumps(json_data) if json_data is not _NO_BODY else ""
        self.text = text
        self.headers = {"content-type": content_type} if text else {}

    def json(self):
        if self._json is _NO_BODY:
            raise ValueError("No JSON object could be decoded")
        return self._json


class FakeSpotify:
    """
    Stands in for requests.get / requests.post.

    Responses are queued per API path; the last queued response keeps being
    returned once the queue is down to one. Exceptions are raised instead of
    returned.
    """

    def __init__(self):
        self.get_routes = {}
        self.token_responses = []
        self.get_calls = []
        self.post_calls = []

    def on_get(self, path, *responses):
        self.get_routes.setdefault(path, []).extend(responses)

    def on_token(self, *responses):
        self.token_responses.extend(responses)

    def calls_to(self, path):
        return [c for c in self.get_calls if c["path"] == path]

    @staticmethod
    def _next(queue):
        resp = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(resp, Exception):
            raise resp
        return resp

    def get(self, url, headers=None, params=None, timeout=None):
        path = url[len(settings.SPOTIFY_API_BASE) + 1:]
        self.get_calls.append({"path": path, "headers": headers, "params": params})
        queue = self.get_routes.get(path)
        if not queue:
            return FakeResponse(404, {"error": {"status": 404, "message": "Not found."}})
        return self._next(queue)

    def post(self, url, data=None, auth=None, timeout=None):
        self.post_calls.append({"url": url, "data": data, "auth": auth})
        if not self.token_responses:
            return FakeResponse(400, {"error": "invalid_grant"})
        return self._next(self.token_responses)


@pytest.fixture(autouse=True)
def spotify_settings(monkeypatch):
    monkeypatch.setattr(settings, "CLIENT_ID", "test-client-id")
    monkeypatch.setattr(settings, "CLIENT_SECRET", "test-client-secret")
    monkeypatch.setattr(settings, "CALLBACK_URI", "http://localhost:8888/callback")
    monkeypatch.setattr(settings, "SPOTIFY_SHOW_DIALOG", False)
    return settings


@pytest.fixture
def fake_spotify(monkeypatch):
    fake = FakeSpotify()
    monkeypatch.setattr(requests, "get", fake.get)
    monkeypatch.setattr(requests, "post", fake.post)
    return fake


@pytest.fixture
def session():
    return SpotifySession()


@pytest.fixture
def authed_session(session):
    session.store_tokens(SpotifyToken(access_token="old-access", refresh_token="refresh-1"))
    return session


@pytest.fixture
def client(session, fake_spotify):
    return TestClient(create_app(session))
