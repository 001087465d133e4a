"""Spotify API client via Spotipy; uses cached OAuth token."""
import logging
from typing import Any, Callable, Optional

from spotipy import Spotify
from spotipy.cache_handler import CacheFileHandler
from spotipy.oauth2 import SpotifyOAuth

from spotshare.config import (
    SPOTIFY_CLIENT_ID,
    SPOTIFY_CLIENT_SECRET,
    SPOTIFY_REDIRECT_URI,
    SPOTIFY_SCOPES,
    SPOTIFY_TOKEN_CACHE,
)
from spotshare.models.playback import PlaybackState

logger = logging.getLogger(__name__)


def _oauth() -> SpotifyOAuth:
    cache = CacheFileHandler(cache_path=str(SPOTIFY_TOKEN_CACHE))
    return SpotifyOAuth(
        client_id=SPOTIFY_CLIENT_ID,
        client_secret=SPOTIFY_CLIENT_SECRET,
        redirect_uri=SPOTIFY_REDIRECT_URI,
        scope=SPOTIFY_SCOPES,
        cache_handler=cache,
        open_browser=False,
    )


def get_spotify_client() -> Optional[Spotify]:
    """Return an authenticated Spotipy Spotify client, or None if not logged in."""
    if not SPOTIFY_CLIENT_ID or not SPOTIFY_CLIENT_SECRET:
        return None
    auth = _oauth()
    token_info = auth.validate_token(auth.cache_handler.get_cached_token())
    if token_info is None:
        return None
    return Spotify(auth_manager=auth)


def get_auth_url() -> str:
    return _oauth().get_authorize_url()


def exchange_code_and_save_token(code: str) -> bool:
    """Exchange OAuth code for tokens and save to cache. Returns True on success."""
    if not SPOTIFY_CLIENT_ID or not SPOTIFY_CLIENT_SECRET:
        return False
    try:
        _oauth().get_access_token(code=code, check_cache=False)
        return True
    except Exception as e:
        logger.warning("Spotify token exchange failed: %s", e)
        return False


def map_current_track(current: Optional[dict]) -> Optional[PlaybackState]:
    """Map a currently-playing response to PlaybackState.

    None when nothing is playing, the item is missing or not a track
    (podcast episodes, ads).
    """
    if not current or not current.get("is_playing", False):
        return None
    item = current.get("item") or {}
    if not item or item.get("type", "track") != "track" or not item.get("id"):
        return None
    album = item.get("album") or {}
    images = album.get("images") or []
    artists = item.get("artists") or []
    first_artist = artists[0] if artists else {}
    return PlaybackState(
        track_id=item["id"],
        album_id=album.get("id", ""),
        album_art_url=images[0]["url"] if images else None,
        artist_id=first_artist.get("id"),
        artist_profile_url=(first_artist.get("external_urls") or {}).get("spotify"),
        track_name=item.get("name", ""),
        album_name=album.get("name", ""),
        artist_names=[a.get("name", "") for a in artists],
    )


class SpotifyMediaProvider:
    """Media-state provider backed by the Spotify Web API."""

    def __init__(self, client_factory: Callable[[], Any] = get_spotify_client) -> None:
        self._client_factory = client_factory

    def get_current_track(self) -> Optional[PlaybackState]:
        sp = self._client_factory()
        if sp is None:
            logger.debug("Spotify not linked")
            return None
        try:
            current = sp.current_user_playing_track()
        except Exception as e:
            logger.warning("Spotify currently-playing failed: %s", e)
            return None
        return map_current_track(current)
