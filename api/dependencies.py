"""
FastAPI dependencies (shared across routes).
"""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.store import CredentialStore
from database.questions import QuestionRepository
from database.session import get_db_session


async def db_session(session: AsyncSession = Depends(get_db_session)) -> AsyncGenerator[AsyncSession, None]:
    """Re-export so routes import from a single place."""
    yield session


def get_credential_store(
    request: Request,
    session: AsyncSession = Depends(db_session),
) -> CredentialStore:
    return CredentialStore(session, rounds=request.app.state.settings.bcrypt_rounds)


def get_question_repository(session: AsyncSession = Depends(db_session)) -> QuestionRepository:
    return QuestionRepository(session)
