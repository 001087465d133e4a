"""Interfaces of the host collaborators the share commands talk to."""
from typing import Any, Dict, Optional, Protocol

from spotshare.models.playback import PlaybackState

DELETE_PENDING_REPLY = "DELETE_PENDING_REPLY"


class MediaStateProvider(Protocol):
    def get_current_track(self) -> Optional[PlaybackState]:
        ...


class MessageSender(Protocol):
    async def send_message(
        self, channel_id: str, message: Dict[str, Any], reply_options: Dict[str, Any]
    ) -> Any:
        """Post `message` to the channel. Raises on failure."""
        ...

    def send_bot_message(self, channel_id: str, message: Dict[str, Any]) -> Any:
        """Show a notice to the local user only; nothing leaves the client."""
        ...

    def reply_options_for(self, reply: Optional[Any]) -> Dict[str, Any]:
        ...


class PendingReplySource(Protocol):
    def get_pending_reply(self, channel_id: str) -> Optional[Any]:
        ...


class EventSink(Protocol):
    def dispatch(self, event: Dict[str, Any]) -> None:
        ...
