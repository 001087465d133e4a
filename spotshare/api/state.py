"""Shared application state (injected into routes)."""
from spotshare.core.local_host import ChannelOutbox, EventDispatcher, PendingReplyStore
from spotshare.core.share_commands import ShareCommandDispatcher
from spotshare.core.spotify_client import SpotifyMediaProvider


class AppState:
    def __init__(self, media=None) -> None:
        self.events = EventDispatcher()
        self.pending_replies = PendingReplyStore(self.events)
        self.outbox = ChannelOutbox()
        self.media = media if media is not None else SpotifyMediaProvider()
        self.dispatcher = ShareCommandDispatcher(
            media=self.media,
            sender=self.outbox,
            pending_replies=self.pending_replies,
            events=self.events,
        )


_state = AppState()


def get_state() -> AppState:
    return _state
