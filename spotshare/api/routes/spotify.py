"""Spotify OAuth (auth URL, callback, logout) and now-playing."""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from spotshare.api.state import AppState, get_state
from spotshare.config import SPOTIFY_CLIENT_ID, SPOTIFY_TOKEN_CACHE, SPOTSHARE_WEB_ORIGIN
from spotshare.core.spotify_client import (
    exchange_code_and_save_token,
    get_auth_url,
    get_spotify_client,
)

router = APIRouter()


@router.get("/auth-url")
def auth_url(state: AppState = Depends(get_state)):
    """Return Spotify OAuth authorization URL and whether the user is logged in."""
    if not SPOTIFY_CLIENT_ID:
        return {"auth_url": None, "error": "SPOTIFY_CLIENT_ID not set", "logged_in": False}
    return {"auth_url": get_auth_url(), "logged_in": get_spotify_client() is not None}


@router.get("/callback")
def spotify_callback(code: str | None = None, state: AppState = Depends(get_state)):
    """Exchange code for tokens, store on disk, then redirect to web app or show success."""
    if not code:
        return HTMLResponse(
            "<body><p>Missing authorization code. Try logging in again.</p></body>",
            status_code=400,
        )
    if not exchange_code_and_save_token(code):
        return HTMLResponse(
            "<body><p>Failed to link Spotify. Check backend logs and try again.</p></body>",
            status_code=500,
        )
    if SPOTSHARE_WEB_ORIGIN:
        redirect_url = f"{SPOTSHARE_WEB_ORIGIN.rstrip('/')}/connect?spotify=success"
        return RedirectResponse(url=redirect_url, status_code=302)
    return HTMLResponse(
        "<body><p>Spotify linked successfully. You can close this window.</p></body>"
    )


@router.post("/logout")
def logout(state: AppState = Depends(get_state)):
    """Clear the Spotify token so the user is logged out."""
    try:
        if SPOTIFY_TOKEN_CACHE.exists():
            SPOTIFY_TOKEN_CACHE.unlink()
    except OSError:
        pass
    return {"ok": True}


@router.get("/now-playing")
def now_playing(state: AppState = Depends(get_state)):
    """Return what the share commands would link to right now."""
    track = state.media.get_current_track()
    if track is None:
        return {"playing": False, "track": None}
    return {
        "playing": True,
        "track": {
            "track_id": track.track_id,
            "track_name": track.track_name,
            "album_id": track.album_id,
            "album_name": track.album_name,
            "album_art_url": track.album_art_url,
            "artist_id": track.artist_id,
            "artist_names": track.artist_names,
            "artist_profile_url": track.artist_profile_url,
        },
    }
