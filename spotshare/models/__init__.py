"""Data models for playback, commands and prefix settings."""
from spotshare.models.command import (
    CommandDefinition,
    CommandInvocation,
    CommandOption,
    CommandOutcome,
    InputType,
    OptionType,
)
from spotshare.models.playback import PlaybackState
from spotshare.models.settings import PrefixConfig

__all__ = [
    "CommandDefinition",
    "CommandInvocation",
    "CommandOption",
    "CommandOutcome",
    "InputType",
    "OptionType",
    "PlaybackState",
    "PrefixConfig",
]
