"""Configuration: env, data paths, Spotify credentials, default prefixes."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of spotshare package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so SPOTIFY_CLIENT_ID etc. are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.getenv("SPOTSHARE_DATA_DIR", str(BASE_DIR / "data")))
SETTINGS_PATH = DATA_DIR / "settings.json"
SPOTIFY_TOKEN_CACHE = DATA_DIR / ".spotify-token"

# API
API_HOST = os.getenv("SPOTSHARE_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("SPOTSHARE_API_PORT", "8000"))

# Spotify (OAuth; tokens stored on disk after first connect)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID", "")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET", "")
SPOTIFY_REDIRECT_URI = os.getenv("SPOTIFY_REDIRECT_URI", "http://localhost:8000/api/spotify/callback")
SPOTIFY_SCOPES = "user-read-playback-state user-read-currently-playing"
# After OAuth callback, redirect here (e.g. http://localhost:5173 for Vite dev)
SPOTSHARE_WEB_ORIGIN = os.getenv("SPOTSHARE_WEB_ORIGIN", "")

# Open web player base for track/album links
SPOTIFY_OPEN_URL = "https://open.spotify.com"

# Prefix defaults used until the settings file has been written
DEFAULT_TRACK_TEXT = os.getenv("SPOTSHARE_TRACK_TEXT", "")
DEFAULT_ALBUM_TEXT = os.getenv("SPOTSHARE_ALBUM_TEXT", "")
DEFAULT_ARTIST_TEXT = os.getenv("SPOTSHARE_ARTIST_TEXT", "")


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
