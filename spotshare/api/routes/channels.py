"""Channel history and pending replies of the local host."""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from spotshare.api.state import AppState, get_state
from spotshare.core.local_host import ChannelMessage, PendingReply

router = APIRouter()


class PendingReplyBody(BaseModel):
    message_id: str
    should_mention: bool = True


def _message_to_dict(m: ChannelMessage) -> dict:
    return {
        "channel_id": m.channel_id,
        "content": m.content,
        "local": m.local,
        "created_at": m.created_at,
        "reply_to": m.reply_to,
    }


def _reply_to_dict(r: PendingReply) -> dict:
    return {
        "channel_id": r.channel_id,
        "message_id": r.message_id,
        "should_mention": r.should_mention,
    }


@router.get("/{channel_id}/messages")
def get_messages(channel_id: str, state: AppState = Depends(get_state)):
    """Messages sent to the channel plus local notices, oldest first."""
    return [_message_to_dict(m) for m in state.outbox.get_messages(channel_id)]


@router.get("/{channel_id}/pending-reply")
def get_pending_reply(channel_id: str, state: AppState = Depends(get_state)):
    reply = state.pending_replies.get_pending_reply(channel_id)
    return {"pending_reply": _reply_to_dict(reply) if reply else None}


@router.put("/{channel_id}/pending-reply")
def set_pending_reply(
    channel_id: str,
    body: PendingReplyBody,
    state: AppState = Depends(get_state),
):
    """Start replying to a message; the next share command answers it."""
    reply = PendingReply(
        channel_id=channel_id,
        message_id=body.message_id,
        should_mention=body.should_mention,
    )
    state.pending_replies.set_pending_reply(reply)
    return _reply_to_dict(reply)


@router.delete("/{channel_id}/pending-reply", status_code=204)
def delete_pending_reply(channel_id: str, state: AppState = Depends(get_state)):
    if not state.pending_replies.delete_pending_reply(channel_id):
        raise HTTPException(status_code=404, detail="No pending reply")
