"""
Pydantic schemas for the forum HTTP API.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ═══════════════════════════════════════════════════════════════════════════════
# Requests
# ═══════════════════════════════════════════════════════════════════════════════

# Fields are optional here so that a missing field is reported as the forum's
# own 400 "Missing fields" instead of a 422 validation error.


class CredentialsRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class QuestionCreate(BaseModel):
    text: Optional[str] = None
    category: Optional[str] = None


class ReplyCreate(BaseModel):
    text: Optional[str] = None


# ═══════════════════════════════════════════════════════════════════════════════
# Responses
# ═══════════════════════════════════════════════════════════════════════════════


class _Out(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ReplyOut(_Out):
    id: uuid.UUID = Field(validation_alias="reply_id")
    author: str
    text: str
    created_at: datetime


class QuestionOut(_Out):
    id: uuid.UUID = Field(validation_alias="question_id")
    author: str
    text: str
    category: str
    replies: List[ReplyOut] = Field(default_factory=list)
    created_at: datetime


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    token: str
