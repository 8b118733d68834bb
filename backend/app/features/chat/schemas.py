"""
Chat schemas.

Pydantic schemas for API request/response serialization.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class ChatMessageSchema(BaseModel):
    id: str
    role: str  # "user" or "model"
    kind: str
    content: str
    timestamp: datetime


class ChatSendRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=2000)


class ChatSessionSchema(BaseModel):
    id: str
    strikes: int
    max_strikes: int
    blocked: bool
    accepts_input: bool
    messages: List[ChatMessageSchema] = []


class ChatReplySchema(BaseModel):
    reply: ChatMessageSchema
    strikes: int
    blocked: bool
