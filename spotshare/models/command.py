"""Command declarations, invocations and outcomes."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class InputType(str, Enum):
    """Where a command is surfaced in the host's command picker."""
    BUILT_IN = "built_in"


class OptionType(str, Enum):
    STRING = "string"


@dataclass(frozen=True)
class CommandOption:
    name: str
    description: str
    type: OptionType = OptionType.STRING
    required: bool = False


@dataclass(frozen=True)
class CommandDefinition:
    """Registration entry: what the host shows in its command list."""
    name: str
    description: str
    input_type: InputType = InputType.BUILT_IN
    options: List[CommandOption] = field(default_factory=list)


# Same shape as the host's stock "message" option
OPTIONAL_MESSAGE_OPTION = CommandOption(
    name="message",
    description="Added text",
    type=OptionType.STRING,
    required=False,
)


@dataclass
class CommandInvocation:
    """One slash-command call. Created per call and discarded afterwards."""
    command_name: str
    channel_id: str
    message: Optional[str] = None
    message_overrides: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CommandOutcome:
    """What an invocation did: either sent `content` or showed `notice` locally."""
    command: str
    channel_id: str
    sent: bool
    content: Optional[str] = None
    notice: Optional[str] = None
