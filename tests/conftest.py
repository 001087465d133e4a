import pytest

from spotshare.core import settings_store
from spotshare.models.playback import PlaybackState


class FakeMedia:
    def __init__(self, state=None):
        self.state = state
        self.calls = 0

    def get_current_track(self):
        self.calls += 1
        return self.state


class FakeSender:
    """Records sends and notices; set `fail` to make send_message raise."""

    def __init__(self, fail=None):
        self.fail = fail
        self.sent = []
        self.notices = []

    async def send_message(self, channel_id, message, reply_options):
        if self.fail is not None:
            raise self.fail
        self.sent.append((channel_id, message, reply_options))

    def send_bot_message(self, channel_id, message):
        self.notices.append((channel_id, message))

    def reply_options_for(self, reply):
        return {"reply": reply} if reply else {}


class FakeReplies:
    def __init__(self, replies=None):
        self.replies = dict(replies or {})

    def get_pending_reply(self, channel_id):
        return self.replies.get(channel_id)


class FakeEvents:
    def __init__(self):
        self.events = []

    def dispatch(self, event):
        self.events.append(event)


@pytest.fixture
def playback():
    return PlaybackState(
        track_id="abc123",
        album_id="alb456",
        album_art_url="https://i.scdn.co/image/cover",
        artist_id="xyz",
        artist_profile_url="https://open.spotify.com/artist/xyz",
        track_name="Song",
        album_name="Record",
        artist_names=["First", "Second"],
    )


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings_store, "SETTINGS_PATH", path)
    monkeypatch.setattr(settings_store, "ensure_data_dir", lambda: None)
    monkeypatch.setattr(settings_store, "DEFAULT_TRACK_TEXT", "")
    monkeypatch.setattr(settings_store, "DEFAULT_ALBUM_TEXT", "")
    monkeypatch.setattr(settings_store, "DEFAULT_ARTIST_TEXT", "")
    return path
