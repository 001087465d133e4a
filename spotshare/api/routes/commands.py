"""List share commands and run them against a channel."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from spotshare.api.state import AppState, get_state
from spotshare.core.settings_store import load_prefixes
from spotshare.core.share_commands import UnknownCommandError
from spotshare.models.command import CommandDefinition, CommandInvocation

router = APIRouter()


class RunCommandBody(BaseModel):
    channel_id: str
    message: Optional[str] = None
    # Extra message-body fields; they override the defaults
    overrides: Dict[str, Any] = {}


def _definition_to_dict(d: CommandDefinition) -> dict:
    return {
        "name": d.name,
        "description": d.description,
        "input_type": d.input_type.value,
        "options": [
            {
                "name": o.name,
                "description": o.description,
                "type": o.type.value,
                "required": o.required,
            }
            for o in d.options
        ],
    }


@router.get("")
def list_commands(state: AppState = Depends(get_state)):
    """Return the registered share commands."""
    return [_definition_to_dict(d) for d in state.dispatcher.list_commands()]


@router.post("/{name}")
async def run_command(
    name: str,
    body: RunCommandBody,
    state: AppState = Depends(get_state),
):
    """Run /track, /album or /artist in a channel with the saved prefixes."""
    invocation = CommandInvocation(
        command_name=name,
        channel_id=body.channel_id,
        message=body.message,
        message_overrides=dict(body.overrides),
    )
    try:
        outcome = await state.dispatcher.execute(invocation, load_prefixes())
    except UnknownCommandError:
        raise HTTPException(status_code=404, detail=f"Unknown command: {name}")
    return {
        "command": outcome.command,
        "channel_id": outcome.channel_id,
        "sent": outcome.sent,
        "content": outcome.content,
        "notice": outcome.notice,
    }
