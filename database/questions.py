"""
Question repository — questions and their ordered replies.

A reply is its own row keyed by ``reply_id`` and ordered by ``seq``, so
appending or removing one is a single statement.  Concurrent replies to the
same question therefore never overwrite each other.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from database.models import DEFAULT_CATEGORY, Question, Reply
from utils.errors import Forbidden, NotFound
from utils.validators import require_text

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"


def _parse_id(value: str | uuid.UUID) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError as exc:
        raise NotFound() from exc


class QuestionRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    def _select(self):
        # populate_existing: reply rows are added/removed with bulk statements,
        # so collections already in the identity map must be reloaded.
        return (
            select(Question)
            .options(selectinload(Question.replies))
            .execution_options(populate_existing=True)
        )

    async def _load(self, question_id: uuid.UUID) -> Optional[Question]:
        result = await self.session.execute(
            self._select().where(Question.question_id == question_id)
        )
        return result.scalar_one_or_none()

    async def list(self, category: Optional[str] = None) -> List[Question]:
        """All questions newest first, optionally restricted to one category."""
        stmt = self._select().order_by(Question.created_at.desc(), Question.seq.desc())
        if category and category != ALL_CATEGORIES:
            stmt = stmt.where(Question.category == category)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, question_id: str | uuid.UUID) -> Question:
        question = await self._load(_parse_id(question_id))
        if question is None:
            raise NotFound()
        return question

    async def create(
        self,
        author: str,
        text: Optional[str],
        category: Optional[str] = None,
    ) -> Question:
        require_text(text, "Question cannot be empty")

        question = Question(
            question_id=uuid.uuid4(),
            author=author,
            text=text,
            category=category or DEFAULT_CATEGORY,
        )
        self.session.add(question)
        await self.session.commit()
        logger.info("Question %s created by %s in %r", question.question_id, author, question.category)
        return await self._load(question.question_id)

    async def add_reply(self, question_id: str | uuid.UUID, author: str, text: Optional[str]) -> Question:
        """Append a reply to the end of the question's replies."""
        qid = _parse_id(question_id)
        if await self._load(qid) is None:
            raise NotFound()
        require_text(text, "Reply cannot be empty")

        reply = Reply(reply_id=uuid.uuid4(), question_id=qid, author=author, text=text)
        self.session.add(reply)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            # The question was deleted between the lookup and the insert.
            await self.session.rollback()
            raise NotFound() from exc

        logger.info("Reply %s added to question %s by %s", reply.reply_id, qid, author)
        return await self._load(qid)

    async def delete_question(self, question_id: str | uuid.UUID, requester: str) -> None:
        """Remove a question together with all of its replies."""
        question = await self.get(question_id)
        if question.author != requester:
            raise Forbidden()

        qid = question.question_id
        await self.session.execute(delete(Reply).where(Reply.question_id == qid))
        await self.session.execute(delete(Question).where(Question.question_id == qid))
        await self.session.commit()
        logger.info("Question %s deleted by %s", qid, requester)

    async def delete_reply(
        self,
        question_id: str | uuid.UUID,
        reply_id: str | uuid.UUID,
        requester: str,
    ) -> None:
        """Remove exactly one reply; the remaining replies keep their order."""
        qid = _parse_id(question_id)
        rid = _parse_id(reply_id)
        if await self._load(qid) is None:
            raise NotFound()

        result = await self.session.execute(
            select(Reply).where(Reply.question_id == qid, Reply.reply_id == rid)
        )
        reply = result.scalar_one_or_none()
        if reply is None:
            raise NotFound()
        if reply.author != requester:
            raise Forbidden()

        await self.session.execute(
            delete(Reply).where(Reply.question_id == qid, Reply.reply_id == rid)
        )
        await self.session.commit()
        logger.info("Reply %s removed from question %s by %s", rid, qid, requester)
