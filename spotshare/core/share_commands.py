"""/track, /album and /artist: post a link to what is playing right now."""
import logging
from typing import Any, Callable, Dict, List, Optional

from spotshare.config import SPOTIFY_OPEN_URL
from spotshare.core.host import (
    DELETE_PENDING_REPLY,
    EventSink,
    MediaStateProvider,
    MessageSender,
    PendingReplySource,
)
from spotshare.models.command import (
    OPTIONAL_MESSAGE_OPTION,
    CommandDefinition,
    CommandInvocation,
    CommandOutcome,
    InputType,
)
from spotshare.models.playback import PlaybackState
from spotshare.models.settings import PrefixConfig

logger = logging.getLogger(__name__)

NOT_LISTENING_NOTICE = "You're not listening to any music."

SHARE_COMMANDS: List[CommandDefinition] = [
    CommandDefinition(
        name="track",
        description="Send your current Spotify track to chat",
        input_type=InputType.BUILT_IN,
        options=[OPTIONAL_MESSAGE_OPTION],
    ),
    CommandDefinition(
        name="album",
        description="Send your current Spotify album to chat",
        input_type=InputType.BUILT_IN,
        options=[OPTIONAL_MESSAGE_OPTION],
    ),
    CommandDefinition(
        name="artist",
        description="Send your current Spotify artist to chat",
        input_type=InputType.BUILT_IN,
        options=[OPTIONAL_MESSAGE_OPTION],
    ),
]


class UnknownCommandError(KeyError):
    """Raised when an invocation names a command that is not registered."""


def track_url(state: PlaybackState) -> str:
    return f"{SPOTIFY_OPEN_URL}/track/{state.track_id}"


def album_url(state: PlaybackState) -> str:
    return f"{SPOTIFY_OPEN_URL}/album/{state.album_id}"


def artist_url(state: PlaybackState) -> Optional[str]:
    # Profile URL of the first artist, as given by Spotify; None if missing
    return state.artist_profile_url


URL_BUILDERS: Dict[str, Callable[[PlaybackState], Optional[str]]] = {
    "track": track_url,
    "album": album_url,
    "artist": artist_url,
}


def compose_message(prefix: str, message: Optional[str], url: str) -> str:
    """Explicit message text wins over the configured prefix. Both are used verbatim."""
    if not message:
        return f"{prefix} {url}"
    return f"{message} {url}"


def build_message_body(content: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Message body with the flags the host requires; caller keys win."""
    return {
        "invalid_emojis": [],
        "tts": False,
        "valid_non_shortcut_emojis": [],
        "content": content,
        **(overrides or {}),
    }


class ShareCommandDispatcher:
    """Routes share command invocations to the host collaborators.

    All collaborators are injected; the dispatcher keeps no state between
    invocations. Prefixes are passed per call so settings edits apply
    immediately.
    """

    def __init__(
        self,
        media: MediaStateProvider,
        sender: MessageSender,
        pending_replies: PendingReplySource,
        events: EventSink,
    ) -> None:
        self._media = media
        self._sender = sender
        self._pending_replies = pending_replies
        self._events = events
        self._commands: Dict[str, CommandDefinition] = {}
        for definition in SHARE_COMMANDS:
            self._commands[definition.name] = definition

    def list_commands(self) -> List[CommandDefinition]:
        return list(self._commands.values())

    def get_command(self, name: str) -> CommandDefinition:
        definition = self._commands.get(name.lower())
        if definition is None:
            raise UnknownCommandError(name)
        return definition

    async def execute(self, invocation: CommandInvocation, prefixes: PrefixConfig) -> CommandOutcome:
        """Run one share command.

        Without playback, or when there is nothing to link to (no artist
        profile URL), a local notice is shown and nothing is sent. A send
        failure propagates to the caller and the pending reply is kept.
        """
        name = self.get_command(invocation.command_name).name
        channel_id = invocation.channel_id

        state = self._media.get_current_track()
        url = URL_BUILDERS[name](state) if state is not None else None
        if not url:
            self._sender.send_bot_message(channel_id, {"content": NOT_LISTENING_NOTICE})
            logger.info("/%s in %s: no playback", name, channel_id)
            return CommandOutcome(
                command=name, channel_id=channel_id, sent=False, notice=NOT_LISTENING_NOTICE
            )

        content = compose_message(prefixes.for_command(name), invocation.message, url)
        await self.send_message(channel_id, build_message_body(content, invocation.message_overrides))
        return CommandOutcome(command=name, channel_id=channel_id, sent=True, content=content)

    async def send_message(self, channel_id: str, message: Dict[str, Any]) -> None:
        reply = self._pending_replies.get_pending_reply(channel_id)
        await self._sender.send_message(channel_id, message, self._sender.reply_options_for(reply))
        logger.info("Sent to %s: %s", channel_id, message.get("content"))
        if reply:
            self._events.dispatch({"type": DELETE_PENDING_REPLY, "channel_id": channel_id})
