"""In-process host: channel outbox, pending replies and event dispatch."""
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from spotshare.core.host import DELETE_PENDING_REPLY

logger = logging.getLogger(__name__)

EventHandler = Callable[[Dict[str, Any]], None]


class EventDispatcher:
    """Synchronous event bus. Events are dicts with a "type" key."""

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def dispatch(self, event: Dict[str, Any]) -> None:
        event_type = event["type"]
        logger.debug("Dispatch %s", event_type)
        for handler in list(self._handlers.get(event_type, [])):
            handler(event)


@dataclass
class PendingReply:
    """Message the user is currently replying to in a channel."""
    channel_id: str
    message_id: str
    should_mention: bool = True


class PendingReplyStore:
    def __init__(self, events: Optional[EventDispatcher] = None) -> None:
        self._replies: Dict[str, PendingReply] = {}
        if events is not None:
            events.subscribe(DELETE_PENDING_REPLY, self._on_delete)

    def get_pending_reply(self, channel_id: str) -> Optional[PendingReply]:
        return self._replies.get(channel_id)

    def set_pending_reply(self, reply: PendingReply) -> None:
        self._replies[reply.channel_id] = reply

    def delete_pending_reply(self, channel_id: str) -> bool:
        return self._replies.pop(channel_id, None) is not None

    def _on_delete(self, event: Dict[str, Any]) -> None:
        self.delete_pending_reply(event["channel_id"])


@dataclass
class ChannelMessage:
    """Entry in a channel's history. Local notices are never sent anywhere."""
    channel_id: str
    content: str
    local: bool
    created_at: str
    body: Dict[str, Any] = field(default_factory=dict)
    reply_to: Optional[str] = None


class ChannelOutbox:
    """Message sender that keeps each channel's history in memory."""

    def __init__(self) -> None:
        self._messages: Dict[str, List[ChannelMessage]] = defaultdict(list)

    def get_messages(self, channel_id: str) -> List[ChannelMessage]:
        return list(self._messages.get(channel_id, []))

    def reply_options_for(self, reply: Optional[PendingReply]) -> Dict[str, Any]:
        if reply is None:
            return {}
        return {
            "message_reference": {
                "channel_id": reply.channel_id,
                "message_id": reply.message_id,
            },
            "allowed_mentions": {"replied_user": reply.should_mention},
        }

    async def send_message(
        self, channel_id: str, message: Dict[str, Any], reply_options: Dict[str, Any]
    ) -> ChannelMessage:
        reference = reply_options.get("message_reference") or {}
        entry = ChannelMessage(
            channel_id=channel_id,
            content=message.get("content", ""),
            local=False,
            created_at=datetime.now(timezone.utc).isoformat(),
            body=dict(message),
            reply_to=reference.get("message_id"),
        )
        self._messages[channel_id].append(entry)
        return entry

    def send_bot_message(self, channel_id: str, message: Dict[str, Any]) -> ChannelMessage:
        entry = ChannelMessage(
            channel_id=channel_id,
            content=message.get("content", ""),
            local=True,
            created_at=datetime.now(timezone.utc).isoformat(),
            body=dict(message),
        )
        self._messages[channel_id].append(entry)
        return entry
