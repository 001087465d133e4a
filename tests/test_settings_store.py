import json

from spotshare.core import settings_store
from spotshare.models.settings import PrefixConfig


def test_missing_file_gives_defaults(settings_file):
    assert settings_store.load_prefixes() == PrefixConfig()


def test_save_and_load(settings_file):
    settings_store.save_prefixes(PrefixConfig(track_text="T", album_text="A", artist_text="R"))
    assert json.loads(settings_file.read_text()) == {
        "prefixes": {"track_text": "T", "album_text": "A", "artist_text": "R"}
    }
    assert settings_store.load_prefixes() == PrefixConfig("T", "A", "R")


def test_corrupt_file_gives_defaults(settings_file):
    settings_file.write_text("{not json")
    assert settings_store.load_prefixes() == PrefixConfig()


def test_env_defaults_fill_missing_keys(settings_file, monkeypatch):
    monkeypatch.setattr(settings_store, "DEFAULT_ALBUM_TEXT", "From env")
    settings_file.write_text(json.dumps({"prefixes": {"track_text": "T"}}))
    assert settings_store.load_prefixes() == PrefixConfig("T", "From env", "")


def test_update_is_partial(settings_file):
    settings_store.save_prefixes(PrefixConfig("T", "A", "R"))
    updated = settings_store.update_prefixes(album_text="")
    assert updated == PrefixConfig("T", "", "R")
    assert settings_store.load_prefixes() == updated


def test_for_command():
    prefixes = PrefixConfig("T", "A", "R")
    assert prefixes.for_command("track") == "T"
    assert prefixes.for_command("album") == "A"
    assert prefixes.for_command("artist") == "R"
