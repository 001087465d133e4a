"""Per-command default prefixes."""
from dataclasses import dataclass


@dataclass(frozen=True)
class PrefixConfig:
    """Text placed before the link when the user gives no message."""
    track_text: str = ""
    album_text: str = ""
    artist_text: str = ""

    def for_command(self, command_name: str) -> str:
        return getattr(self, f"{command_name}_text", "")
