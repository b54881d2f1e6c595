"""
Credential store — username → password-hash records.

Usernames are unique under case-insensitive comparison.  The check is
enforced by the unique ``username_key`` column, so two concurrent
registrations of "Alice" and "alice" cannot both succeed.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth import password as passwords
from auth.models import User
from utils.errors import Conflict
from utils.validators import require_fields

logger = logging.getLogger(__name__)


def normalize_username(username: str) -> str:
    return username.lower()


class CredentialStore:
    def __init__(self, session: AsyncSession, rounds: int = passwords.DEFAULT_ROUNDS):
        self.session = session
        self.rounds = rounds

    async def find_by_username(self, username: Optional[str]) -> Optional[User]:
        """Case-insensitive exact match on the whole username."""
        if not username:
            return None
        result = await self.session.execute(
            select(User).where(User.username_key == normalize_username(username))
        )
        return result.scalar_one_or_none()

    async def register(self, username: Optional[str], password: Optional[str]) -> User:
        require_fields(username, password)

        if await self.find_by_username(username) is not None:
            raise Conflict()

        user = User(
            username=username,
            username_key=normalize_username(username),
            password_hash=passwords.hash_password(password, rounds=self.rounds),
        )
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise Conflict() from exc

        logger.info("Registered user %s (%s)", user.username, user.user_id)
        return user

    @staticmethod
    def verify_password(user: User, password: Optional[str]) -> bool:
        if not password:
            return False
        return passwords.verify_password(password, user.password_hash)
