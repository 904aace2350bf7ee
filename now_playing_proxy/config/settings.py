# now_playing_proxy/config/settings.py
import os
from dotenv import load_dotenv

def load_env():
    if os.getenv("ENVIRONMENT") == "production":
        return

    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    env_path = os.path.join(base_dir, ".env")

    if os.path.exists(env_path):
        load_dotenv(env_path)

# Load env now
load_env()

# Spotify app credentials
CLIENT_ID = os.getenv("CLIENT_ID")
CLIENT_SECRET = os.getenv("CLIENT_SECRET")
CALLBACK_URI = os.getenv("CALLBACK_URI", "http://localhost:8888/callback")

# Spotify endpoints
SPOTIFY_ACCOUNTS_BASE = "https://accounts.spotify.com"
SPOTIFY_AUTHORIZE_URL = SPOTIFY_ACCOUNTS_BASE + "/authorize"
SPOTIFY_TOKEN_URL = SPOTIFY_ACCOUNTS_BASE + "/api/token"
SPOTIFY_API_BASE = "https://api.spotify.com/v1"

SPOTIFY_SCOPES = ["user-read-currently-playing", "user-read-playback-state"]
SPOTIFY_TIMEOUT = float(os.getenv("SPOTIFY_TIMEOUT", "10"))
SPOTIFY_SHOW_DIALOG = os.getenv("SPOTIFY_SHOW_DIALOG", "false").lower() in ("1", "true", "yes")

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8888"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
