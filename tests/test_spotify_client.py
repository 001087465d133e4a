from spotshare.core.spotify_client import SpotifyMediaProvider, map_current_track


def _current(**item_overrides):
    item = {
        "type": "track",
        "id": "abc123",
        "name": "Song",
        "album": {
            "id": "alb456",
            "name": "Record",
            "images": [{"url": "https://i.scdn.co/image/big"}, {"url": "https://i.scdn.co/image/small"}],
        },
        "artists": [
            {"id": "xyz", "name": "First", "external_urls": {"spotify": "https://open.spotify.com/artist/xyz"}},
            {"id": "qqq", "name": "Second", "external_urls": {"spotify": "https://open.spotify.com/artist/qqq"}},
        ],
    }
    item.update(item_overrides)
    return {"is_playing": True, "currently_playing_type": item["type"], "item": item}


class FakeSpotify:
    def __init__(self, current=None, error=None):
        self.current = current
        self.error = error

    def current_user_playing_track(self):
        if self.error is not None:
            raise self.error
        return self.current


def test_maps_track():
    state = map_current_track(_current())
    assert state.track_id == "abc123"
    assert state.album_id == "alb456"
    assert state.album_art_url == "https://i.scdn.co/image/big"
    assert state.artist_id == "xyz"
    assert state.artist_profile_url == "https://open.spotify.com/artist/xyz"
    assert state.artist_names == ["First", "Second"]


def test_nothing_playing():
    assert map_current_track(None) is None
    assert map_current_track({"is_playing": False, "item": _current()["item"]}) is None
    assert map_current_track({"is_playing": True, "item": None}) is None


def test_episode_is_not_a_track():
    assert map_current_track(_current(type="episode")) is None


def test_no_images_or_artists():
    state = map_current_track(_current(artists=[], album={"id": "alb456"}))
    assert state.album_art_url is None
    assert state.artist_profile_url is None


def test_provider_not_linked():
    assert SpotifyMediaProvider(client_factory=lambda: None).get_current_track() is None


def test_provider_api_error_means_no_playback():
    provider = SpotifyMediaProvider(client_factory=lambda: FakeSpotify(error=RuntimeError("503")))
    assert provider.get_current_track() is None


def test_provider_returns_state():
    provider = SpotifyMediaProvider(client_factory=lambda: FakeSpotify(current=_current()))
    assert provider.get_current_track().track_name == "Song"


def test_no_artists_leaves_artist_url_empty_for_dispatcher():
    state = map_current_track(
        {"is_playing": True, "item": {"type": "track", "id": "abc", "album": {"id": "alb"}, "artists": []}}
    )
    assert state.track_id == "abc"
    assert state.artist_profile_url is None
