"""
Chat Routes

Race coach conversation with the three-strike off-topic lockout.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_chat_store
from app.features.chat import (
    ChatBlockedError,
    ChatBusyError,
    ChatMessage,
    ChatSession,
    ChatSessionStore,
)
from app.features.chat.schemas import (
    ChatMessageSchema,
    ChatReplySchema,
    ChatSendRequest,
    ChatSessionSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def message_schema(msg: ChatMessage) -> ChatMessageSchema:
    return ChatMessageSchema(
        id=msg.id,
        role=msg.role.value,
        kind=msg.kind.value,
        content=msg.content,
        timestamp=msg.timestamp,
    )


def session_schema(session: ChatSession) -> ChatSessionSchema:
    return ChatSessionSchema(
        id=session.id,
        strikes=session.strikes,
        max_strikes=session.max_strikes,
        blocked=session.blocked,
        accepts_input=session.accepts_input,
        messages=[message_schema(m) for m in session.messages],
    )


def _get_session(store: ChatSessionStore, session_id: str) -> ChatSession:
    session = store.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail=f"Chat session not found: {session_id}")
    return session


@router.post("/sessions", response_model=ChatSessionSchema)
async def create_session(store: ChatSessionStore = Depends(get_chat_store)):
    """Open a chat session (starts with the coach greeting)."""
    session = store.create()
    logger.info(f"Chat session created: {session.id}")
    return session_schema(session)


@router.get("/sessions/{session_id}", response_model=ChatSessionSchema)
async def get_session(session_id: str, store: ChatSessionStore = Depends(get_chat_store)):
    """Get conversation and lockout state."""
    return session_schema(_get_session(store, session_id))


@router.post("/sessions/{session_id}/messages", response_model=ChatReplySchema)
async def send_message(
    session_id: str,
    request: ChatSendRequest,
    store: ChatSessionStore = Depends(get_chat_store),
):
    """
    Send a message to the coach.

    403 once the session is blocked, 409 while a previous message is still
    waiting for its reply.
    """
    session = _get_session(store, session_id)

    try:
        reply = await session.send(request.message)
    except ChatBlockedError:
        raise HTTPException(status_code=403, detail="Chat session is blocked")
    except ChatBusyError:
        raise HTTPException(status_code=409, detail="Previous message still in progress")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ChatReplySchema(
        reply=message_schema(reply),
        strikes=session.strikes,
        blocked=session.blocked,
    )
