"""Default prefixes for the share commands (stored in JSON, no restart needed)."""
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from spotshare.api.state import AppState, get_state
from spotshare.core.settings_store import load_prefixes, update_prefixes
from spotshare.models.settings import PrefixConfig

router = APIRouter()


class UpdatePrefixesBody(BaseModel):
    track_text: Optional[str] = None
    album_text: Optional[str] = None
    artist_text: Optional[str] = None


def _prefixes_to_dict(p: PrefixConfig) -> dict:
    return {
        "track_text": p.track_text,
        "album_text": p.album_text,
        "artist_text": p.artist_text,
    }


@router.get("/prefixes")
def get_prefixes(state: AppState = Depends(get_state)):
    """Return the track, album and artist default prefixes."""
    return _prefixes_to_dict(load_prefixes())


@router.put("/prefixes")
def put_prefixes(body: UpdatePrefixesBody, state: AppState = Depends(get_state)):
    """Update any of the prefixes; omitted fields keep their value."""
    updated = update_prefixes(
        track_text=body.track_text,
        album_text=body.album_text,
        artist_text=body.artist_text,
    )
    return _prefixes_to_dict(updated)
