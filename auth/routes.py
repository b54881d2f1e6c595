"""
Auth API routes — register, login.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.dependencies import get_credential_store
from auth.dependencies import get_token_service
from auth.jwt import TokenService
from auth.store import CredentialStore
from utils.errors import InvalidCredentials, UnknownUser
from utils.schemas import CredentialsRequest, MessageResponse, TokenResponse
from utils.validators import require_fields

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=MessageResponse)
async def register(
    req: CredentialsRequest,
    store: CredentialStore = Depends(get_credential_store),
) -> Dict[str, Any]:
    """Register a new user."""
    require_fields(req.username, req.password)
    await store.register(req.username, req.password)
    return {"message": "User registered"}


@router.post("/login", response_model=TokenResponse)
async def login(
    req: CredentialsRequest,
    store: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, Any]:
    """Login with username + password."""
    require_fields(req.username, req.password)

    user = await store.find_by_username(req.username)
    if user is None:
        raise UnknownUser()
    if not store.verify_password(user, req.password):
        logger.info("Failed login for %s", user.username)
        raise InvalidCredentials()

    logger.info("Login: %s (%s)", user.username, user.user_id)
    return {"token": tokens.issue(user.username)}