"""
SQLAlchemy ORM models for users, questions and replies.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, relationship

DEFAULT_CATEGORY = "General"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    user_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(Text, nullable=False)
    # Lower-cased copy of ``username``; the unique constraint lives here.
    username_key = Column(Text, unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow)


class Question(Base):
    __tablename__ = "questions"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    question_id = Column(Uuid, unique=True, nullable=False, default=uuid.uuid4)
    author = Column(Text, nullable=False)
    text = Column(Text, nullable=False)
    category = Column(Text, nullable=False, default=DEFAULT_CATEGORY)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    replies = relationship(
        "Reply",
        back_populates="question",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Reply.seq",
    )

    __table_args__ = (
        Index("ix_questions_category", "category"),
        Index("ix_questions_created_at", "created_at"),
    )


class Reply(Base):
    __tablename__ = "replies"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    reply_id = Column(Uuid, unique=True, nullable=False, default=uuid.uuid4)
    question_id = Column(
        Uuid,
        ForeignKey("questions.question_id", ondelete="CASCADE"),
        nullable=False,
    )
    author = Column(Text, nullable=False)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    question = relationship("Question", back_populates="replies")

    __table_args__ = (Index("ix_replies_question_id", "question_id"),)
