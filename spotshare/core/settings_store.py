"""Persist and load share prefixes (JSON)."""
import json
import logging
from pathlib import Path

from spotshare.config import (
    DEFAULT_ALBUM_TEXT,
    DEFAULT_ARTIST_TEXT,
    DEFAULT_TRACK_TEXT,
    SETTINGS_PATH,
    ensure_data_dir,
)
from spotshare.models.settings import PrefixConfig

logger = logging.getLogger(__name__)


def _path() -> Path:
    ensure_data_dir()
    return SETTINGS_PATH


def default_prefixes() -> PrefixConfig:
    return PrefixConfig(
        track_text=DEFAULT_TRACK_TEXT,
        album_text=DEFAULT_ALBUM_TEXT,
        artist_text=DEFAULT_ARTIST_TEXT,
    )


def load_prefixes() -> PrefixConfig:
    """Load prefixes from disk; defaults if the file is missing or unreadable."""
    p = _path()
    if not p.exists():
        return default_prefixes()
    try:
        data = json.loads(p.read_text())
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", p, e)
        return default_prefixes()
    defaults = default_prefixes()
    prefixes = data.get("prefixes") if isinstance(data, dict) else None
    if not isinstance(prefixes, dict):
        return defaults
    return PrefixConfig(
        track_text=str(prefixes.get("track_text", defaults.track_text)),
        album_text=str(prefixes.get("album_text", defaults.album_text)),
        artist_text=str(prefixes.get("artist_text", defaults.artist_text)),
    )


def save_prefixes(prefixes: PrefixConfig) -> None:
    """Save prefixes to disk."""
    p = _path()
    data = {
        "prefixes": {
            "track_text": prefixes.track_text,
            "album_text": prefixes.album_text,
            "artist_text": prefixes.artist_text,
        }
    }
    p.write_text(json.dumps(data, indent=2))


def update_prefixes(
    *,
    track_text: str | None = None,
    album_text: str | None = None,
    artist_text: str | None = None,
) -> PrefixConfig:
    """Change the given prefixes, keep the rest; save. Returns the new config."""
    current = load_prefixes()
    updated = PrefixConfig(
        track_text=track_text if track_text is not None else current.track_text,
        album_text=album_text if album_text is not None else current.album_text,
        artist_text=artist_text if artist_text is not None else current.artist_text,
    )
    save_prefixes(updated)
    return updated
