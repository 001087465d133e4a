"""Core services: share commands, Spotify provider, local host, settings."""
from spotshare.core.local_host import ChannelOutbox, EventDispatcher, PendingReplyStore
from spotshare.core.share_commands import ShareCommandDispatcher, UnknownCommandError
from spotshare.core.spotify_client import SpotifyMediaProvider

__all__ = [
    "ChannelOutbox",
    "EventDispatcher",
    "PendingReplyStore",
    "ShareCommandDispatcher",
    "SpotifyMediaProvider",
    "UnknownCommandError",
]
