"""Playback state from Spotify."""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class PlaybackState:
    """Snapshot of the currently playing track. Read-only to the share commands."""
    track_id: str
    album_id: str
    album_art_url: Optional[str]
    artist_id: Optional[str]
    artist_profile_url: Optional[str]  # first artist only
    track_name: str
    album_name: str = ""
    artist_names: List[str] = field(default_factory=list)
