# now_playing_proxy/models/token_model.py
from pydantic import BaseModel

class SpotifyToken(BaseModel):
    access_token: str
    refresh_token: str | None = None
    expires_in: int = 3600   # seconds
    token_type: str = "Bearer"
    scope: str | None = None
