"""
REST API routes — questions and replies.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_question_repository
from auth.dependencies import get_current_user
from auth.jwt import Identity
from database.questions import QuestionRepository
from utils.schemas import MessageResponse, QuestionCreate, QuestionOut, ReplyCreate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["questions"])


@router.get("/questions", response_model=List[QuestionOut])
async def list_questions(
    category: Optional[str] = None,
    questions: QuestionRepository = Depends(get_question_repository),
) -> List[QuestionOut]:
    """Newest questions first; ``?category=All`` is the same as no filter."""
    rows = await questions.list(category)
    return [QuestionOut.model_validate(q) for q in rows]


@router.get("/questions/{question_id}", response_model=QuestionOut)
async def get_question(
    question_id: str,
    questions: QuestionRepository = Depends(get_question_repository),
) -> QuestionOut:
    return QuestionOut.model_validate(await questions.get(question_id))


@router.post("/questions", response_model=QuestionOut)
async def create_question(
    body: QuestionCreate,
    user: Identity = Depends(get_current_user),
    questions: QuestionRepository = Depends(get_question_repository),
) -> QuestionOut:
    question = await questions.create(user.username, body.text, body.category)
    return QuestionOut.model_validate(question)


@router.post("/questions/{question_id}/reply", response_model=QuestionOut)
async def reply_to_question(
    question_id: str,
    body: ReplyCreate,
    user: Identity = Depends(get_current_user),
    questions: QuestionRepository = Depends(get_question_repository),
) -> QuestionOut:
    question = await questions.add_reply(question_id, user.username, body.text)
    return QuestionOut.model_validate(question)


@router.delete("/questions/{question_id}", response_model=MessageResponse)
async def delete_question(
    question_id: str,
    user: Identity = Depends(get_current_user),
    questions: QuestionRepository = Depends(get_question_repository),
) -> Dict[str, Any]:
    """Only the question's author may delete it; its replies go with it."""
    await questions.delete_question(question_id, user.username)
    return {"message": "Question deleted"}


@router.delete("/questions/{question_id}/replies/{reply_id}", response_model=MessageResponse)
async def delete_reply(
    question_id: str,
    reply_id: str,
    user: Identity = Depends(get_current_user),
    questions: QuestionRepository = Depends(get_question_repository),
) -> Dict[str, Any]:
    await questions.delete_reply(question_id, reply_id, user.username)
    return {"message": "Reply deleted"}
